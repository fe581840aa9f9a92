"""Structural equivalency domain exports."""

from .assertion_scope import AssertionScope, EquivalencyAssertionError, assert_equivalent
from .equivalency_options import (
    ConfigureOptions,
    EquivalencyOptions,
    TypeComparer,
    keep_default_options,
    resolve_options,
)
from .member_paths import EquivalencyConfigurationError, MemberPath, member_names_from_selector
from .mismatch_records import Mismatch, MismatchKind, display_value
from .structural_comparator import EquivalencyResult, compare

__all__ = [
    "AssertionScope",
    "ConfigureOptions",
    "EquivalencyAssertionError",
    "EquivalencyConfigurationError",
    "EquivalencyOptions",
    "EquivalencyResult",
    "MemberPath",
    "Mismatch",
    "MismatchKind",
    "TypeComparer",
    "assert_equivalent",
    "compare",
    "display_value",
    "keep_default_options",
    "member_names_from_selector",
    "resolve_options",
]
