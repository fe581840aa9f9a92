"""Inline construction of equivalency matchers at expected-call sites.

Each entry point builds a matcher, registers it on a matcher queue and returns
the matcher itself, typed as the value it stands in for::

    service.use.assert_called_once_with(is_equivalent_to(Person("John", "Doe", birthday)))
    received(service).use_all(is_list_equivalent_to(alice, bob))
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar, cast

from mock_equivalency.equivalency import ConfigureOptions, keep_default_options

from .collection_equivalency_matcher import CollectionEquivalencyMatcher
from .matcher_queue import ArgumentMatcherQueue, ambient_matcher_queue
from .scalar_equivalency_matcher import ScalarEquivalencyMatcher

T = TypeVar("T")
C = TypeVar("C")


def is_equivalent_to(
    expected: T,
    configure: ConfigureOptions | None = None,
    *,
    queue: ArgumentMatcherQueue | None = None,
) -> T:
    """Expect an argument structurally equivalent to ``expected``."""
    matcher = ScalarEquivalencyMatcher(expected, configure or keep_default_options)
    _resolve_queue(queue).enqueue(matcher, type(expected))
    return cast(T, matcher)


def is_collection_equivalent_to(
    expected_items: Iterable[T],
    configure: ConfigureOptions | None = None,
    *,
    collection_type: type[C],
    queue: ArgumentMatcherQueue | None = None,
) -> C:
    """Expect a ``collection_type`` argument whose items are equivalent to ``expected_items``."""
    matcher = CollectionEquivalencyMatcher(
        expected_items, configure or keep_default_options, collection_type
    )
    _resolve_queue(queue).enqueue(matcher, collection_type)
    return cast(C, matcher)


def is_list_equivalent_to(
    *expected_items: T,
    configure: ConfigureOptions | None = None,
    queue: ArgumentMatcherQueue | None = None,
) -> list[T]:
    """Expect a list argument; items are given one by one or as a single list/tuple."""
    return is_collection_equivalent_to(
        _unpack_items(expected_items), configure, collection_type=list, queue=queue
    )


def is_iterable_equivalent_to(
    *expected_items: T,
    configure: ConfigureOptions | None = None,
    queue: ArgumentMatcherQueue | None = None,
) -> Iterable[T]:
    """Expect any iterable argument; items are given one by one or as a single list/tuple."""
    return is_collection_equivalent_to(
        _unpack_items(expected_items),
        configure,
        collection_type=Iterable,  # type: ignore[type-abstract]
        queue=queue,
    )


def _unpack_items(expected_items: tuple[object, ...]) -> tuple[object, ...]:
    # A lone plain list or tuple holds the items; wrap it once more to expect it as one item.
    # Named tuples and other subclasses stay single items.
    if len(expected_items) == 1:
        (only,) = expected_items
        if isinstance(only, list | tuple) and type(only) in (list, tuple):
            return tuple(only)
    return expected_items


def _resolve_queue(queue: ArgumentMatcherQueue | None) -> ArgumentMatcherQueue:
    return queue if queue is not None else ambient_matcher_queue()
