"""YAML layout parser for the rustdoc-js tester.

Parses an optional layout file that overrides where the generator,
the checker and the fixtures live.
"""

from pathlib import Path
from typing import Any, Union

import yaml

from .schema import LAYOUT_FIELDS, ToolLayout


def parse_layout(file_path: Union[str, Path]) -> ToolLayout:
    """Parse a YAML layout file into a ToolLayout.

    Args:
        file_path: Path to the YAML layout file.

    Returns:
        ToolLayout with the file's values over the defaults.

    Raises:
        FileNotFoundError: If the layout file doesn't exist.
        ValueError: If the YAML is malformed or has invalid keys or values.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Layout file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty layout file: {file_path}")

    return parse_layout_data(data, source=str(file_path))


def parse_layout_data(data: Any, source: str = "<inline>") -> ToolLayout:
    """Parse a layout from a dictionary (already loaded YAML).

    Args:
        data: Mapping of layout field names to path strings.
        source: Source identifier for error messages.

    Returns:
        Parsed ToolLayout.

    Raises:
        ValueError: If the mapping has unknown keys or non-string values.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Layout must be a YAML mapping, got {type(data).__name__}")

    unknown = sorted(str(k) for k in data if k not in LAYOUT_FIELDS)
    if unknown:
        raise ValueError(
            f"Unknown layout field(s) {', '.join(unknown)} in {source}"
        )

    for key, value in data.items():
        if not isinstance(value, str) or not value.strip():
            raise ValueError(
                f"Layout field '{key}' must be a non-empty string in {source}"
            )

    return ToolLayout(**data)
