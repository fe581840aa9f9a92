"""Structural equivalency comparison of object graphs."""

from __future__ import annotations

import dataclasses
import datetime as dt
import enum
import uuid
from collections.abc import Iterable, Iterator, Mapping, Set
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from pathlib import PurePath

from .equivalency_options import EquivalencyOptions
from .member_paths import EquivalencyConfigurationError, MemberPath
from .mismatch_records import Mismatch, MismatchKind, display_value

_LEAF_TYPES = (
    str,
    bytes,
    bytearray,
    bool,
    int,
    float,
    complex,
    Decimal,
    Fraction,
    dt.date,
    dt.time,
    dt.timedelta,
    uuid.UUID,
    enum.Enum,
    PurePath,
    type,
)


@dataclass(frozen=True)
class EquivalencyResult:
    """Outcome of one structural comparison."""

    mismatches: tuple[Mismatch, ...]

    @property
    def is_equivalent(self) -> bool:
        """Return True when no mismatches are present."""
        return not self.mismatches

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(mismatch.describe() for mismatch in self.mismatches)


def compare(
    actual: object,
    expected: object,
    options: EquivalencyOptions | None = None,
) -> EquivalencyResult:
    """Compare ``actual`` against ``expected`` member by member.

    Args:
      actual: The subject, e.g. the argument a mock received.
      expected: The expectation; its members drive the comparison.
      options: Exclusions, custom comparers and ordering. Defaults apply when omitted.

    Returns:
      The mismatches found, in expectation order.

    Raises:
      EquivalencyConfigurationError: If an excluded member does not exist on the expectation.
    """
    resolved_options = options or EquivalencyOptions()
    if isinstance(expected, Iterator):
        expected = tuple(expected)
    _validate_excluded_members(expected, resolved_options)
    return EquivalencyResult(
        mismatches=tuple(_compare_values(actual, expected, MemberPath(), resolved_options))
    )


def _compare_values(
    actual: object,
    expected: object,
    path: MemberPath,
    options: EquivalencyOptions,
) -> list[Mismatch]:
    comparer = options.comparer_for(expected)
    if comparer is not None:
        return [] if comparer(actual, expected) else [_value_mismatch(path, expected, actual)]

    if expected is None or _is_leaf(expected):
        if _leaf_values_equal(actual, expected):
            return []
        return [_value_mismatch(path, expected, actual)]

    if isinstance(expected, Mapping):
        if actual is None or _is_leaf(actual):
            return [_value_mismatch(path, expected, actual)]
        return _compare_members(
            actual,
            list(expected.items()),
            path,
            options,
            report_extra_keys=isinstance(actual, Mapping),
        )

    member_names = _member_names(expected)
    if member_names:
        if actual is None or _is_leaf(actual):
            return [_value_mismatch(path, expected, actual)]
        return _compare_members(
            actual,
            [(name, getattr(expected, name)) for name in member_names],
            path,
            options,
            report_extra_keys=False,
        )

    if _is_collection(expected):
        return _compare_collections(actual, expected, path, options)

    return [] if actual == expected else [_value_mismatch(path, expected, actual)]


def _compare_members(
    actual: object,
    expected_members: list[tuple[object, object]],
    path: MemberPath,
    options: EquivalencyOptions,
    *,
    report_extra_keys: bool,
) -> list[Mismatch]:
    mismatches: list[Mismatch] = []
    for key, expected_value in expected_members:
        member_path = path.key(key)
        if options.is_excluded(member_path.member_names()):
            continue
        found, actual_value = _lookup_member(actual, key)
        if not found:
            mismatches.append(Mismatch(path=member_path, kind=MismatchKind.MISSING_MEMBER))
            continue
        mismatches.extend(_compare_values(actual_value, expected_value, member_path, options))

    if report_extra_keys and isinstance(actual, Mapping):
        expected_keys = {key for key, _ in expected_members}
        for key in actual:
            member_path = path.key(key)
            if key in expected_keys or options.is_excluded(member_path.member_names()):
                continue
            mismatches.append(Mismatch(path=member_path, kind=MismatchKind.EXTRA_MEMBER))
    return mismatches


def _compare_collections(
    actual: object,
    expected: Iterable[object],
    path: MemberPath,
    options: EquivalencyOptions,
) -> list[Mismatch]:
    expected_items = list(expected)
    if not _is_collection(actual):
        return [
            Mismatch(
                path=path,
                kind=MismatchKind.NOT_A_COLLECTION,
                expected=str(len(expected_items)),
                actual=display_value(actual),
            )
        ]
    actual_items = list(actual)  # type: ignore[call-overload]
    if len(actual_items) != len(expected_items):
        return [
            Mismatch(
                path=path,
                kind=MismatchKind.COLLECTION_SIZE,
                expected=str(len(expected_items)),
                actual=str(len(actual_items)),
            )
        ]

    # Sets carry no order worth comparing.
    if options.strict_ordering and not isinstance(actual, Set) and not isinstance(expected, Set):
        mismatches: list[Mismatch] = []
        for index, (actual_item, expected_item) in enumerate(zip(actual_items, expected_items)):
            item_path = path.index(index)
            mismatches.extend(_compare_values(actual_item, expected_item, item_path, options))
        return mismatches
    return _compare_unordered(actual_items, expected_items, path, options)


def _compare_unordered(
    actual_items: list[object],
    expected_items: list[object],
    path: MemberPath,
    options: EquivalencyOptions,
) -> list[Mismatch]:
    remaining = list(range(len(actual_items)))
    mismatches: list[Mismatch] = []
    for index, expected_item in enumerate(expected_items):
        item_path = path.index(index)
        best_position = remaining[0]
        best_mismatches: list[Mismatch] | None = None
        for position in remaining:
            candidate = _compare_values(actual_items[position], expected_item, item_path, options)
            if best_mismatches is None or len(candidate) < len(best_mismatches):
                best_position, best_mismatches = position, candidate
            if not candidate:
                break
        remaining.remove(best_position)
        mismatches.extend(best_mismatches or ())
    return mismatches


def _validate_excluded_members(expected: object, options: EquivalencyOptions) -> None:
    for member_names in options.excluded_members:
        if not _can_resolve(expected, member_names):
            raise EquivalencyConfigurationError(
                f"Cannot exclude member '{'.'.join(member_names)}': "
                f"the expectation of type {type(expected).__name__} has no such member."
            )


def _can_resolve(value: object, member_names: tuple[str, ...]) -> bool:
    if not member_names:
        return True
    if value is None or _is_leaf(value):
        return True
    head, rest = member_names[0], member_names[1:]
    if isinstance(value, Mapping):
        return head in value and _can_resolve(value[head], rest)
    names = _member_names(value)
    if names:
        return head in names and _can_resolve(getattr(value, head), rest)
    if _is_collection(value) and not isinstance(value, Iterator):
        items = list(value)  # type: ignore[call-overload]
        return not items or any(_can_resolve(item, member_names) for item in items)
    return True


def _lookup_member(actual: object, key: object) -> tuple[bool, object]:
    if isinstance(actual, Mapping):
        if key in actual:
            return True, actual[key]
        return False, None
    if isinstance(key, str) and hasattr(actual, key):
        return True, getattr(actual, key)
    return False, None


def _member_names(value: object) -> tuple[str, ...]:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return tuple(field.name for field in dataclasses.fields(value))
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return tuple(value._fields)
    names: list[str] = []
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(slot for slot in slots if not slot.startswith("_") and hasattr(value, slot))
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        names.extend(name for name in instance_dict if not name.startswith("_"))
    for cls in type(value).__mro__:
        names.extend(
            name
            for name, attribute in vars(cls).items()
            if isinstance(attribute, property)
            and not name.startswith("_")
            and hasattr(value, name)
        )
    return tuple(dict.fromkeys(names))


def _is_leaf(value: object) -> bool:
    return isinstance(value, _LEAF_TYPES)


def _is_collection(value: object) -> bool:
    return (
        isinstance(value, Iterable)
        and not isinstance(value, Mapping)
        and not _is_leaf(value)
    )


def _leaf_values_equal(actual: object, expected: object) -> bool:
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected
    return bool(actual == expected)


def _value_mismatch(path: MemberPath, expected: object, actual: object) -> Mismatch:
    return Mismatch(
        path=path,
        kind=MismatchKind.VALUE,
        expected=display_value(expected),
        actual=display_value(actual),
    )
