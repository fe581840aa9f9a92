"""Comparison of an expected and an actual YAML/JSON document."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from mock_equivalency.configuration import (
    ConfigurationError,
    load_configuration,
    settings_to_configure,
)
from mock_equivalency.equivalency import (
    EquivalencyConfigurationError,
    compare,
    keep_default_options,
    resolve_options,
)

from .comparison_contracts import ComparisonOutcome, ComparisonRequest


class DocumentComparisonError(Exception):
    """Raised when a document comparison cannot be completed."""


def execute_document_comparison(request: ComparisonRequest) -> ComparisonOutcome:
    """Compare the actual document against the expected one."""
    configure = keep_default_options
    if request.config_path:
        try:
            configure = settings_to_configure(load_configuration(request.config_path).equivalency)
        except ConfigurationError as exc:
            raise DocumentComparisonError(str(exc)) from exc

    expected = _load_document(request.expected_path)
    actual = _load_document(request.actual_path)
    try:
        result = compare(actual, expected, resolve_options(configure))
    except EquivalencyConfigurationError as exc:
        raise DocumentComparisonError(str(exc)) from exc
    return ComparisonOutcome(messages=result.messages)


def _load_document(document_path: str) -> Any:
    path = Path(document_path)
    if not path.exists():
        raise DocumentComparisonError(f"Document not found: {path}")
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
        raise DocumentComparisonError(f"Failed to read document {path}: {exc}") from exc
