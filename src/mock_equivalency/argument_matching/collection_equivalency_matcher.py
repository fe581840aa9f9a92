"""Matcher for a collection argument that is element-wise equivalent."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Set

from mock_equivalency.equivalency import AssertionScope, ConfigureOptions, assert_equivalent

from .matcher_contracts import ArgumentMatcher

_LOGGER = logging.getLogger(__name__)


class CollectionEquivalencyMatcher(ArgumentMatcher):
    """Matches any iterable whose items are equivalent to ``expected_items``.

    ``collection_type`` is the collection shape the matcher stands in for at the
    call site (``list``, ``Iterable``, ...). The real argument may have any shape
    as long as it can be iterated.
    """

    def __init__(
        self,
        expected_items: Iterable[object],
        configure: ConfigureOptions,
        collection_type: type = Iterable,  # type: ignore[assignment]
    ) -> None:
        self._expected_items = tuple(expected_items)
        self._configure = configure
        self._collection_type = collection_type
        self._failed_expectations = ""

    @property
    def expected_items(self) -> tuple[object, ...]:
        return self._expected_items

    @property
    def collection_type(self) -> type:
        return self._collection_type

    def is_satisfied_by(self, argument: object) -> bool:
        with AssertionScope() as scope:
            assert_equivalent(
                _materialize(argument), self._expected_items, self._configure, scope=scope
            )
            failures = scope.discard()
        self._failed_expectations = os.linesep.join(failures)
        if failures:
            _LOGGER.debug(
                "Collection %r differs from expectation in %d place(s).", argument, len(failures)
            )
        return not failures

    def describe_for(self, argument: object) -> str:
        return self._failed_expectations

    def __repr__(self) -> str:
        return f"<{self._collection_type.__name__} equivalent to {list(self._expected_items)!r}>"


def _materialize(argument: object) -> object:
    # One-shot iterators are read once; sets stay sets so their order is ignored.
    if isinstance(argument, Iterator) and not isinstance(argument, Set):
        return list(argument)
    return argument
