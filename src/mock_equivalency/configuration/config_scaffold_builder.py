"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "equivalency.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Equivalency configuration template for mock-equivalency.
# Replace <OPTIONAL> placeholders only when your comparison needs them.

equivalency:
  # Member paths left out of the comparison, e.g. "birthday" or "address.city".
  # Paths apply to every item when a collection is compared.
  excluding:
    - "<OPTIONAL>"
  # Set to false to pair collection items regardless of their order.
  strict_ordering: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML equivalency configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder equivalency configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
