"""Load materialize settings from JSON files."""

import dataclasses
from pathlib import Path
from typing import Any, Mapping, Optional

from .exceptions import ConfigurationError, FileSystemError
from .filesystem import DefaultFileSystem, FileSystem
from .models import MaterializeSettings


_FIELD_TYPES = {
    "shader_name": str,
    "materials_root": str,
    "material_extension": str,
    "require_shared_base_name": bool,
}


def settings_from_mapping(data: Mapping[str, Any]) -> MaterializeSettings:
    """Build settings from a mapping, keeping defaults for missing keys.

    Args:
        data: Mapping of setting names to values.

    Returns:
        MaterializeSettings: Validated settings.

    Raises:
        ConfigurationError: If a key is unknown or a value has the wrong type.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            "Settings must be a mapping",
            details={"type": type(data).__name__},
        )

    unknown = sorted(set(data) - set(_FIELD_TYPES))
    if unknown:
        raise ConfigurationError(
            "Unknown settings keys", details={"keys": unknown}
        )

    for key, value in data.items():
        expected = _FIELD_TYPES[key]
        if not isinstance(value, expected):
            raise ConfigurationError(
                f"Setting '{key}' must be {expected.__name__}",
                details={"key": key, "type": type(value).__name__},
            )

    if not data.get("shader_name", "x").strip():
        raise ConfigurationError("Setting 'shader_name' cannot be empty")

    return dataclasses.replace(MaterializeSettings(), **dict(data))


def load_settings(
    path: Path, fs: Optional[FileSystem] = None
) -> MaterializeSettings:
    """Read settings from a JSON file.

    Missing files fall back to the defaults.

    Args:
        path: Path to the JSON settings file.
        fs: Optional file system implementation.

    Returns:
        MaterializeSettings: Loaded settings.

    Raises:
        ConfigurationError: If the file cannot be parsed or is invalid.
    """
    fs = fs or DefaultFileSystem()
    if not fs.path_exists(path):
        return MaterializeSettings()

    try:
        data = fs.read_json(path)
    except FileSystemError as exc:
        raise ConfigurationError(
            f"Failed to load settings from {path}", details=exc.details
        ) from exc
    return settings_from_mapping(data)
