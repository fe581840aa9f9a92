"""Equivalency options tests."""

from __future__ import annotations

from datetime import datetime

import pytest
from mock_equivalency.equivalency import (
    EquivalencyConfigurationError,
    EquivalencyOptions,
    keep_default_options,
    resolve_options,
)


def test_defaults_use_strict_ordering_without_exclusions() -> None:
    options = EquivalencyOptions()

    assert options.strict_ordering is True
    assert options.excluded_members == ()
    assert options.type_comparers == ()


def test_fluent_methods_leave_the_original_untouched() -> None:
    defaults = EquivalencyOptions()

    configured = defaults.excluding("birthday").excluding(lambda p: p.address.city)

    assert defaults.excluded_members == ()
    assert configured.excluded_members == (("birthday",), ("address", "city"))
    assert configured.is_excluded(("address", "city"))
    assert not configured.is_excluded(("city",))


def test_ordering_can_be_toggled() -> None:
    relaxed = EquivalencyOptions().without_strict_ordering()

    assert relaxed.strict_ordering is False
    assert relaxed.with_strict_ordering().strict_ordering is True


def test_latest_comparer_for_a_type_wins() -> None:
    def first(actual: object, expected: object) -> bool:
        return True

    def second(actual: object, expected: object) -> bool:
        return False

    options = EquivalencyOptions().using(datetime, first).using(datetime, second)

    assert options.comparer_for(datetime(2024, 1, 1)) is second
    assert options.comparer_for("text") is None


def test_using_rejects_non_types_and_non_callables() -> None:
    with pytest.raises(EquivalencyConfigurationError):
        EquivalencyOptions().using("datetime", lambda a, e: True)  # type: ignore[arg-type]
    with pytest.raises(EquivalencyConfigurationError):
        EquivalencyOptions().using(datetime, "compare")  # type: ignore[arg-type]


def test_resolve_options_starts_from_fresh_defaults() -> None:
    assert resolve_options(keep_default_options) == EquivalencyOptions()
    assert resolve_options(lambda options: options.excluding("name")).excluded_members == (
        ("name",),
    )


def test_resolve_options_requires_options_from_transform() -> None:
    with pytest.raises(EquivalencyConfigurationError, match="must return EquivalencyOptions"):
        resolve_options(lambda options: None)  # type: ignore[arg-type,return-value]
