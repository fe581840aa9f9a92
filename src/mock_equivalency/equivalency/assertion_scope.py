"""Scoped collection of equivalency assertion failures."""

from __future__ import annotations

from types import TracebackType

from .equivalency_options import ConfigureOptions, keep_default_options, resolve_options
from .structural_comparator import EquivalencyResult, compare


class EquivalencyAssertionError(AssertionError):
    """Raised when an equivalency assertion fails outside a collecting scope."""


class AssertionScope:
    """Collects assertion failures instead of raising them one by one.

    Leaving the scope raises ``EquivalencyAssertionError`` for every failure that
    was not taken out with ``discard()``.
    """

    def __init__(self) -> None:
        self._failures: list[str] = []

    def __enter__(self) -> AssertionScope:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if exc_type is None and self._failures:
            failures = self.discard()
            raise EquivalencyAssertionError("\n".join(failures))

    @property
    def has_failures(self) -> bool:
        return bool(self._failures)

    def fail(self, message: str) -> None:
        self._failures.append(message)

    def discard(self) -> tuple[str, ...]:
        """Return the collected failures and forget them."""
        failures = tuple(self._failures)
        self._failures.clear()
        return failures


def assert_equivalent(
    actual: object,
    expected: object,
    configure: ConfigureOptions = keep_default_options,
    *,
    scope: AssertionScope | None = None,
) -> EquivalencyResult:
    """Assert that ``actual`` is structurally equivalent to ``expected``.

    Failures go to ``scope`` when one is given; otherwise the first failing
    comparison raises ``EquivalencyAssertionError`` listing every mismatch.
    Configuration errors always propagate.
    """
    result = compare(actual, expected, resolve_options(configure))
    if scope is not None:
        for message in result.messages:
            scope.fail(message)
    elif not result.is_equivalent:
        raise EquivalencyAssertionError("\n".join(result.messages))
    return result
