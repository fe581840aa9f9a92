"""Argument matching domain exports."""

from .collection_equivalency_matcher import CollectionEquivalencyMatcher
from .matcher_contracts import ArgumentMatcher
from .matcher_queue import ArgumentMatcherQueue, MatcherRecord, ambient_matcher_queue
from .registration_facade import (
    is_collection_equivalent_to,
    is_equivalent_to,
    is_iterable_equivalent_to,
    is_list_equivalent_to,
)
from .scalar_equivalency_matcher import ScalarEquivalencyMatcher

__all__ = [
    "ArgumentMatcher",
    "ArgumentMatcherQueue",
    "CollectionEquivalencyMatcher",
    "MatcherRecord",
    "ScalarEquivalencyMatcher",
    "ambient_matcher_queue",
    "is_collection_equivalent_to",
    "is_equivalent_to",
    "is_iterable_equivalent_to",
    "is_list_equivalent_to",
]
