"""Verification of calls received by a ``unittest.mock`` substitute.

``received(service).use(is_equivalent_to(person))`` passes when ``service.use``
was called with matching arguments and otherwise raises ``ReceivedCallsError``
listing every non-matching call together with each matcher's description.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from mock_equivalency.argument_matching import (
    ArgumentMatcher,
    ArgumentMatcherQueue,
    ambient_matcher_queue,
)

_LOGGER = logging.getLogger(__name__)


class ReceivedCallsError(AssertionError):
    """Raised when a substitute did not receive the expected call."""


@dataclass(frozen=True)
class _ArgumentCheck:
    """Outcome of checking one received argument against its expectation."""

    label: str
    rendered: str
    matches: bool
    description: str


@dataclass(frozen=True)
class _ReceivedCall:
    """One received call and its per-argument checks; no checks on arity mismatch."""

    args: tuple[Any, ...]
    kwargs: Mapping[str, Any]
    checks: tuple[_ArgumentCheck, ...] | None


def received(substitute: Any, *, queue: ArgumentMatcherQueue | None = None) -> _ReceivedCallsProbe:
    """Start an expected-call check on ``substitute``."""
    return _ReceivedCallsProbe(substitute, queue if queue is not None else ambient_matcher_queue())


class _ReceivedCallsProbe:
    def __init__(self, substitute: Any, queue: ArgumentMatcherQueue) -> None:
        self._substitute = substitute
        self._queue = queue

    def __getattr__(self, name: str) -> _ExpectedCall:
        return _ExpectedCall(getattr(self._substitute, name), name, self._queue)


class _ExpectedCall:
    def __init__(self, method: Any, name: str, queue: ArgumentMatcherQueue) -> None:
        self._method = method
        self._name = name
        self._queue = queue

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        consumed = self._queue.drain()
        _LOGGER.debug("Consumed %d registered matcher(s) for %s.", len(consumed), self._name)

        received_calls: list[_ReceivedCall] = []
        for call in self._method.call_args_list:
            checks = _check_call(call.args, call.kwargs, args, kwargs)
            if checks is not None and all(check.matches for check in checks):
                return
            received_calls.append(_ReceivedCall(args=call.args, kwargs=call.kwargs, checks=checks))
        raise ReceivedCallsError(_render_report(self._name, args, kwargs, received_calls))


def _check_call(
    actual_args: Sequence[Any],
    actual_kwargs: Mapping[str, Any],
    expected_args: Sequence[Any],
    expected_kwargs: Mapping[str, Any],
) -> tuple[_ArgumentCheck, ...] | None:
    if len(actual_args) != len(expected_args) or set(actual_kwargs) != set(expected_kwargs):
        return None
    checks = [
        _check_argument(str(position), expected, actual)
        for position, (expected, actual) in enumerate(zip(expected_args, actual_args))
    ]
    checks.extend(
        _check_argument(name, expected_kwargs[name], actual_kwargs[name])
        for name in expected_kwargs
    )
    return tuple(checks)


def _check_argument(label: str, expected: Any, actual: Any) -> _ArgumentCheck:
    if isinstance(expected, ArgumentMatcher):
        if expected.is_satisfied_by(actual):
            return _ArgumentCheck(label=label, rendered=repr(actual), matches=True, description="")
        # Describe right away: the next check overwrites the matcher's description.
        return _ArgumentCheck(
            label=label,
            rendered=repr(actual),
            matches=False,
            description=expected.describe_for(actual),
        )
    return _ArgumentCheck(
        label=label, rendered=repr(actual), matches=bool(expected == actual), description=""
    )


def _render_report(
    name: str,
    expected_args: Sequence[Any],
    expected_kwargs: Mapping[str, Any],
    received_calls: Sequence[_ReceivedCall],
) -> str:
    lines = [
        "Expected to receive a call matching:",
        f"\t{name}({_render_arguments(expected_args, expected_kwargs)})",
        "Actually received no matching calls.",
    ]
    if received_calls:
        count = len(received_calls)
        noun = "call" if count == 1 else "calls"
        lines.append(
            f"Received {count} non-matching {noun} "
            "(non-matching arguments indicated with '*' characters):"
        )
        for received_call in received_calls:
            lines.extend(_render_received_call(name, received_call))
    return "\n".join(lines)


def _render_received_call(name: str, received_call: _ReceivedCall) -> list[str]:
    if received_call.checks is None:
        return [f"\t{name}({_render_arguments(received_call.args, received_call.kwargs)})"]

    rendered = []
    for check in received_call.checks:
        value = check.rendered if check.matches else f"*{check.rendered}*"
        rendered.append(value if check.label.isdigit() else f"{check.label}={value}")
    lines = [f"\t{name}({', '.join(rendered)})"]
    for check in received_call.checks:
        lines.extend(
            f"\t\targ[{check.label}]: {description_line}"
            for description_line in check.description.splitlines()
        )
    return lines


def _render_arguments(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    rendered = [repr(value) for value in args]
    rendered.extend(f"{name}={value!r}" for name, value in kwargs.items())
    return ", ".join(rendered)
