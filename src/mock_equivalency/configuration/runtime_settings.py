"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class EquivalencySettings:
    """Comparison settings read from an equivalency configuration file."""

    excluding: tuple[str, ...] = ()
    strict_ordering: bool = True


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    equivalency: EquivalencySettings
