"""Version helpers for the materialize package."""
from __future__ import annotations

from importlib import metadata


DISTRIBUTION_NAME = "texture-materialize"


def get_version() -> str:
    """Return the installed package version, or ``"unknown"``."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


__all__ = ["get_version"]
