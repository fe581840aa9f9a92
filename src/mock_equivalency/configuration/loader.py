"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from mock_equivalency.equivalency import (
    ConfigureOptions,
    EquivalencyConfigurationError,
    EquivalencyOptions,
    member_names_from_selector,
)

from .runtime_settings import Configuration, EquivalencySettings

_OPTIONAL_PLACEHOLDER = "<OPTIONAL>"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    equivalency = _parse_equivalency_section(parsed.get("equivalency"))
    return Configuration(path=path, equivalency=equivalency)


def settings_to_configure(settings: EquivalencySettings) -> ConfigureOptions:
    """Build the configure transform applying ``settings`` onto default options."""

    def configure(options: EquivalencyOptions) -> EquivalencyOptions:
        for member_path in settings.excluding:
            options = options.excluding(member_path)
        if settings.strict_ordering:
            return options.with_strict_ordering()
        return options.without_strict_ordering()

    return configure


def _parse_equivalency_section(value: Any) -> EquivalencySettings:
    if value is None:
        return EquivalencySettings()
    section = _require_mapping(value, "equivalency")
    excluding = _normalize_member_paths(section.get("excluding"))
    strict_ordering = _require_bool(
        section.get("strict_ordering", True), "equivalency.strict_ordering"
    )
    return EquivalencySettings(excluding=excluding, strict_ordering=strict_ordering)


def _normalize_member_paths(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ConfigurationError(
            "equivalency.excluding must be a member path or list of member paths."
        )
    member_paths: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError("equivalency.excluding entries must be strings.")
        stripped = item.strip()
        if not stripped or stripped == _OPTIONAL_PLACEHOLDER:
            continue
        try:
            member_names_from_selector(stripped)
        except EquivalencyConfigurationError as exc:
            raise ConfigurationError(f"equivalency.excluding: {exc}") from exc
        member_paths.append(stripped)
    return tuple(member_paths)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value
