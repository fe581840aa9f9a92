"""Structural equivalency argument matchers for ``unittest.mock`` substitutes."""

import logging

from .argument_matching import (
    ArgumentMatcher,
    ArgumentMatcherQueue,
    CollectionEquivalencyMatcher,
    ScalarEquivalencyMatcher,
    is_collection_equivalent_to,
    is_equivalent_to,
    is_iterable_equivalent_to,
    is_list_equivalent_to,
)
from .call_verification import ReceivedCallsError, received
from .equivalency import (
    AssertionScope,
    EquivalencyAssertionError,
    EquivalencyConfigurationError,
    EquivalencyOptions,
    assert_equivalent,
    compare,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArgumentMatcher",
    "ArgumentMatcherQueue",
    "AssertionScope",
    "CollectionEquivalencyMatcher",
    "EquivalencyAssertionError",
    "EquivalencyConfigurationError",
    "EquivalencyOptions",
    "ReceivedCallsError",
    "ScalarEquivalencyMatcher",
    "assert_equivalent",
    "compare",
    "is_collection_equivalent_to",
    "is_equivalent_to",
    "is_iterable_equivalent_to",
    "is_list_equivalent_to",
    "received",
]
