"""FIFO queue of argument matchers registered while building an expected call."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from .matcher_contracts import ArgumentMatcher

_AMBIENT_QUEUE_CAPACITY = 128


@dataclass(frozen=True)
class MatcherRecord:
    """A registered matcher and the argument type it stands in for."""

    matcher: ArgumentMatcher
    stands_in_for: type


class ArgumentMatcherQueue:
    """Matchers in registration order, which is left-to-right argument order.

    A matcher leaves the queue when the queue is drained or when the matcher is
    first compared with an argument through ``==``, which is how
    ``Mock.assert_called_with`` consumes it. With ``max_pending`` set, the
    oldest records are dropped once that many are waiting.
    """

    def __init__(self, max_pending: int | None = None) -> None:
        self._records: deque[MatcherRecord] = deque(maxlen=max_pending)

    def __len__(self) -> int:
        return len(self._records)

    def enqueue(self, matcher: ArgumentMatcher, stands_in_for: type) -> ArgumentMatcher:
        """Register ``matcher`` and return it for use as the argument value."""
        self._records.append(MatcherRecord(matcher=matcher, stands_in_for=stands_in_for))
        matcher.register_on(self)
        return matcher

    def release(self, matcher: ArgumentMatcher) -> None:
        """Forget the record of ``matcher`` if it is still waiting."""
        # Identity, not ==: matchers compare by satisfaction.
        kept = [record for record in self._records if record.matcher is not matcher]
        if len(kept) != len(self._records):
            self._records = deque(kept, maxlen=self._records.maxlen)

    def drain(self) -> tuple[MatcherRecord, ...]:
        """Consume every registered matcher, oldest first."""
        records = tuple(self._records)
        self._records.clear()
        for record in records:
            record.matcher.register_on(None)
        return records


_AMBIENT_QUEUE = ArgumentMatcherQueue(max_pending=_AMBIENT_QUEUE_CAPACITY)


def ambient_matcher_queue() -> ArgumentMatcherQueue:
    """Return the process-wide queue used when no explicit queue is passed."""
    return _AMBIENT_QUEUE
