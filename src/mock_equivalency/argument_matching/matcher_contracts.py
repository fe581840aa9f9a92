"""Argument matcher contract shared by every matcher."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .matcher_queue import ArgumentMatcherQueue


class ArgumentMatcher(ABC):
    """Stands in for one argument of an expected call.

    ``describe_for`` reports on the most recent ``is_satisfied_by`` call and is
    only meaningful right after it, for the same argument.

    Equality delegates to ``is_satisfied_by`` so a matcher can be passed to
    ``Mock.assert_called_with`` and friends like ``unittest.mock.ANY``. The
    first such comparison also takes the matcher off the queue it was
    registered on.
    """

    _registered_queue: ArgumentMatcherQueue | None = None

    @abstractmethod
    def is_satisfied_by(self, argument: object) -> bool:
        """Return True when ``argument`` meets the expectation."""

    @abstractmethod
    def describe_for(self, argument: object) -> str:
        """Describe why the last checked argument did not meet the expectation."""

    def register_on(self, queue: ArgumentMatcherQueue | None) -> None:
        self._registered_queue = queue

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArgumentMatcher):
            return other is self
        if self._registered_queue is not None:
            queue, self._registered_queue = self._registered_queue, None
            queue.release(self)
        return self.is_satisfied_by(other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore[assignment]
