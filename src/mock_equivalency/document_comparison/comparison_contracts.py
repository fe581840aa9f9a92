"""Document comparison entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComparisonRequest:
    """Input contract for comparing two documents."""

    expected_path: str
    actual_path: str
    config_path: str | None = None


@dataclass(frozen=True)
class ComparisonOutcome:
    """Output contract for one completed comparison."""

    messages: tuple[str, ...]

    @property
    def is_equivalent(self) -> bool:
        return not self.messages
