"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from mock_equivalency.configuration.loader import (
    ConfigurationError,
    load_configuration,
    settings_to_configure,
)
from mock_equivalency.configuration.runtime_settings import EquivalencySettings
from mock_equivalency.equivalency import EquivalencyOptions


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "equivalency.yaml",
        """
equivalency:
  excluding:
    - birthday
    - "address.city"
  strict_ordering: false
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.equivalency.excluding == ("birthday", "address.city")
    assert configuration.equivalency.strict_ordering is False


def test_empty_file_yields_default_settings(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "equivalency.yaml", "")

    configuration = load_configuration(config_path)

    assert configuration.equivalency == EquivalencySettings()


def test_single_member_path_is_accepted_as_string(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "equivalency.yaml",
        "equivalency:\n  excluding: birthday\n",
    )

    configuration = load_configuration(config_path)

    assert configuration.equivalency.excluding == ("birthday",)
    assert configuration.equivalency.strict_ordering is True


def test_placeholders_and_blank_entries_are_skipped(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "equivalency.yaml",
        'equivalency:\n  excluding:\n    - "<OPTIONAL>"\n    - "  "\n    - " last_name "\n',
    )

    configuration = load_configuration(config_path)

    assert configuration.equivalency.excluding == ("last_name",)


def test_errors_when_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_errors_when_root_is_not_a_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "equivalency.yaml", "- birthday\n")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping."):
        load_configuration(config_path)


def test_errors_when_yaml_is_malformed(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "equivalency.yaml", "equivalency: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("equivalency: birthday\n", "Configuration section 'equivalency' must be a mapping."),
        (
            "equivalency:\n  strict_ordering: maybe\n",
            "equivalency.strict_ordering must be true or false.",
        ),
        (
            "equivalency:\n  excluding:\n    - 3\n",
            "equivalency.excluding entries must be strings.",
        ),
        (
            "equivalency:\n  excluding:\n    name: x\n",
            "equivalency.excluding must be a member path or list of member paths.",
        ),
        (
            "equivalency:\n  excluding:\n    - \"address..city\"\n",
            "equivalency.excluding: Member path 'address..city'",
        ),
    ],
)
def test_errors_when_equivalency_section_invalid(
    tmp_path: Path, contents: str, message: str
) -> None:
    config_path = _write_file(tmp_path / "equivalency.yaml", contents)

    with pytest.raises(ConfigurationError) as error:
        load_configuration(config_path)

    assert str(error.value).startswith(message)


def test_settings_to_configure_applies_exclusions_and_ordering() -> None:
    configure = settings_to_configure(
        EquivalencySettings(excluding=("birthday", "address.city"), strict_ordering=False)
    )

    options = configure(EquivalencyOptions())

    assert options.excluded_members == (("birthday",), ("address", "city"))
    assert options.strict_ordering is False


def test_settings_to_configure_defaults_keep_options_unchanged() -> None:
    configure = settings_to_configure(EquivalencySettings())

    assert configure(EquivalencyOptions()) == EquivalencyOptions()
