"""Mismatch records produced by a structural comparison."""

from __future__ import annotations

import datetime as dt
import uuid
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .member_paths import MemberPath


class MismatchKind(str, Enum):
    """Supported mismatch kinds."""

    VALUE = "value"
    MISSING_MEMBER = "missing_member"
    EXTRA_MEMBER = "extra_member"
    COLLECTION_SIZE = "collection_size"
    NOT_A_COLLECTION = "not_a_collection"


@dataclass(frozen=True)
class Mismatch:
    """Difference between expected and actual value at one member path."""

    path: MemberPath
    kind: MismatchKind
    expected: str = ""
    actual: str = ""

    def describe(self) -> str:
        """Render the mismatch as one report line."""
        if self.kind == MismatchKind.MISSING_MEMBER:
            return f"Expectation has {_subject(self.path)} that the other object does not have."
        if self.kind == MismatchKind.EXTRA_MEMBER:
            return f"Subject has {_subject(self.path)} that the other object does not have."
        if self.kind == MismatchKind.COLLECTION_SIZE:
            return (
                f"Expected {_subject(self.path, root='collection')} to be a collection with "
                f"{self.expected} item(s), but found {self.actual} item(s)."
            )
        if self.kind == MismatchKind.NOT_A_COLLECTION:
            return (
                f"Expected {_subject(self.path, root='collection')} to be a collection with "
                f"{self.expected} item(s), but found {self.actual}."
            )
        return f"Expected {_subject(self.path)} to be {self.expected}, but found {self.actual}."


_ANGLE_BRACKETED_TYPES = (
    bool,
    int,
    float,
    complex,
    Decimal,
    dt.date,
    dt.time,
    dt.timedelta,
    uuid.UUID,
    Enum,
)


def display_value(value: object) -> str:
    """Render a compared value for a report line."""
    if value is None:
        return "<None>"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, _ANGLE_BRACKETED_TYPES):
        return f"<{value}>"
    return repr(value)


def _subject(path: MemberPath, *, root: str = "value") -> str:
    if path.is_root:
        return root
    if path.ends_with_member:
        return f"property {path}"
    return f"item {path}"
