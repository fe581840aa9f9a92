"""Member paths locating a value inside a compared object graph."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class EquivalencyConfigurationError(Exception):
    """Raised when equivalency options reference members in an invalid way."""


@dataclass(frozen=True)
class PathSegment:
    """One step of a member path: a member name or an index/key."""

    text: str
    is_member: bool

    def render(self, *, first: bool) -> str:
        if not self.is_member:
            return f"[{self.text}]"
        return self.text if first else f".{self.text}"


@dataclass(frozen=True)
class MemberPath:
    """Location of a compared value, rendered like ``[1].address.city``."""

    segments: tuple[PathSegment, ...] = ()

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def ends_with_member(self) -> bool:
        return bool(self.segments) and self.segments[-1].is_member

    def member(self, name: str) -> MemberPath:
        return MemberPath(self.segments + (PathSegment(name, is_member=True),))

    def index(self, position: int) -> MemberPath:
        return MemberPath(self.segments + (PathSegment(str(position), is_member=False),))

    def key(self, key: object) -> MemberPath:
        if isinstance(key, str) and key.isidentifier():
            return self.member(key)
        return MemberPath(self.segments + (PathSegment(repr(key), is_member=False),))

    def member_names(self) -> tuple[str, ...]:
        """Return the member names with index and key segments removed."""
        return tuple(segment.text for segment in self.segments if segment.is_member)

    def render(self) -> str:
        return "".join(
            segment.render(first=position == 0) for position, segment in enumerate(self.segments)
        )

    def __str__(self) -> str:
        return self.render()


class _MemberPathRecorder:
    """Proxy recording the members a selector lambda touches."""

    __slots__ = ("_names",)

    def __init__(self, names: tuple[str, ...] = ()) -> None:
        object.__setattr__(self, "_names", names)

    def __getattr__(self, name: str) -> _MemberPathRecorder:
        if name.startswith("__"):
            raise AttributeError(name)
        return _MemberPathRecorder(self._names + (name,))

    def __getitem__(self, key: object) -> _MemberPathRecorder:
        if not isinstance(key, str) or not key.isidentifier():
            raise EquivalencyConfigurationError(
                f"Selector keys must be member names, got {key!r}."
            )
        return _MemberPathRecorder(self._names + (key,))

    def __setattr__(self, name: str, value: Any) -> None:
        raise EquivalencyConfigurationError("Selectors must not assign members.")

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        raise EquivalencyConfigurationError(
            f"Selectors may only access members, but called {'.'.join(self._names)}()."
        )


def member_names_from_selector(selector: str | Callable[[Any], Any]) -> tuple[str, ...]:
    """Resolve a dotted path or a member-access lambda into member names.

    Args:
      selector: ``"address.city"`` or ``lambda person: person.address.city``.

    Returns:
      The selected member names, outermost first.

    Raises:
      EquivalencyConfigurationError: If the selector does not select a member.
    """
    if isinstance(selector, str):
        names = tuple(part.strip() for part in selector.split("."))
        if not all(name.isidentifier() for name in names):
            raise EquivalencyConfigurationError(
                f"Member path '{selector}' must be a dotted list of member names."
            )
        return names
    if not callable(selector):
        raise EquivalencyConfigurationError(
            f"Selector must be a member path or a callable, got {type(selector).__name__}."
        )
    selected = selector(_MemberPathRecorder())
    if not isinstance(selected, _MemberPathRecorder) or not selected._names:
        raise EquivalencyConfigurationError(
            "Selector must return a member of its argument, e.g. lambda item: item.name."
        )
    return selected._names
