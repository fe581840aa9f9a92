"""Immutable options controlling a structural equivalency comparison."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from .member_paths import EquivalencyConfigurationError, member_names_from_selector

ValueComparer = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class TypeComparer:
    """Custom comparer used whenever the expectation is an instance of ``value_type``."""

    value_type: type
    comparer: ValueComparer


@dataclass(frozen=True)
class EquivalencyOptions:
    """How two object graphs are compared.

    Every method returns a new instance, so a configure transform such as
    ``lambda options: options.excluding("birthday")`` never mutates the defaults.
    """

    excluded_members: tuple[tuple[str, ...], ...] = ()
    type_comparers: tuple[TypeComparer, ...] = ()
    strict_ordering: bool = True

    def excluding(self, selector: str | Callable[[Any], Any]) -> EquivalencyOptions:
        """Leave the selected member out of the comparison."""
        names = member_names_from_selector(selector)
        return replace(self, excluded_members=self.excluded_members + (names,))

    def using(self, value_type: type, comparer: ValueComparer) -> EquivalencyOptions:
        """Compare values of ``value_type`` with ``comparer(actual, expected)``."""
        if not isinstance(value_type, type):
            raise EquivalencyConfigurationError(
                f"Comparer target must be a type, got {value_type!r}."
            )
        if not callable(comparer):
            raise EquivalencyConfigurationError(
                f"Comparer for {value_type.__name__} must be callable."
            )
        # Later registrations win, so they are looked up first.
        return replace(
            self, type_comparers=(TypeComparer(value_type, comparer),) + self.type_comparers
        )

    def with_strict_ordering(self) -> EquivalencyOptions:
        return replace(self, strict_ordering=True)

    def without_strict_ordering(self) -> EquivalencyOptions:
        return replace(self, strict_ordering=False)

    def is_excluded(self, member_names: tuple[str, ...]) -> bool:
        return member_names in self.excluded_members

    def comparer_for(self, expected: object) -> ValueComparer | None:
        for type_comparer in self.type_comparers:
            if isinstance(expected, type_comparer.value_type):
                return type_comparer.comparer
        return None


ConfigureOptions = Callable[[EquivalencyOptions], EquivalencyOptions]


def keep_default_options(options: EquivalencyOptions) -> EquivalencyOptions:
    """Identity configure transform."""
    return options


def resolve_options(configure: ConfigureOptions) -> EquivalencyOptions:
    """Apply ``configure`` to fresh default options."""
    options = configure(EquivalencyOptions())
    if not isinstance(options, EquivalencyOptions):
        raise EquivalencyConfigurationError(
            f"Configure transform must return EquivalencyOptions, got {type(options).__name__}."
        )
    return options
