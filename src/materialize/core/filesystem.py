"""File system abstraction for the project-backed asset database."""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Protocol

from .exceptions import FileSystemError, ValidationError


class FileSystem(Protocol):
    """Protocol for file system operations.

    Keeps disk access of the asset database and the settings loader behind
    one seam so tests can substitute it.
    """

    def ensure_directory(self, path: Path) -> Path:
        """Create directory if it doesn't exist.

        Raises:
            FileSystemError: If directory creation fails.
        """
        ...

    def validate_path(self, path: Path, base_dir: Optional[Path] = None) -> Path:
        """Resolve a path, optionally requiring it to stay inside base_dir.

        Raises:
            ValidationError: If path is invalid or escapes base_dir.
        """
        ...

    def path_exists(self, path: Path) -> bool:
        ...

    def is_directory(self, path: Path) -> bool:
        ...

    def iter_files(self, root: Path, pattern: str = "*") -> Iterator[Path]:
        """Yield files below root matching a glob pattern, recursively."""
        ...

    def read_json(self, path: Path) -> Dict[str, Any]:
        """Read JSON file.

        Raises:
            FileSystemError: If read or parse fails.
        """
        ...

    def write_json(self, path: Path, data: Dict[str, Any]) -> None:
        """Write JSON file, creating parent directories.

        Raises:
            FileSystemError: If write fails.
        """
        ...


class DefaultFileSystem:
    """Default file system implementation with validation."""

    def ensure_directory(self, path: Path) -> Path:
        """Create directory if it doesn't exist."""
        try:
            path.mkdir(parents=True, exist_ok=True)
            return path
        except (OSError, ValueError) as exc:
            raise FileSystemError(
                f"Failed to create directory: {path}",
                details={"path": str(path), "error": str(exc)},
            ) from exc

    def validate_path(self, path: Path, base_dir: Optional[Path] = None) -> Path:
        """Validate and resolve a path."""
        try:
            resolved = path.resolve()
        except (OSError, RuntimeError, ValueError) as exc:
            raise ValidationError(
                f"Cannot resolve path: {path}",
                details={"path": str(path), "error": str(exc)},
            ) from exc

        if base_dir:
            base_resolved = base_dir.resolve()
            try:
                resolved.relative_to(base_resolved)
            except ValueError as exc:
                raise ValidationError(
                    f"Path escapes project directory: {path}",
                    details={
                        "path": str(path),
                        "base_dir": str(base_dir),
                        "resolved": str(resolved),
                    },
                ) from exc

        return resolved

    def path_exists(self, path: Path) -> bool:
        return path.exists()

    def is_directory(self, path: Path) -> bool:
        return path.is_dir()

    def iter_files(self, root: Path, pattern: str = "*") -> Iterator[Path]:
        if not root.is_dir():
            return
        for path in sorted(root.rglob(pattern)):
            if path.is_file():
                yield path

    def read_json(self, path: Path) -> Dict[str, Any]:
        """Read JSON file."""
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise FileSystemError(
                f"Failed to read JSON from {path}",
                details={
                    "path": str(path),
                    "error": str(exc),
                    "type": type(exc).__name__,
                },
            ) from exc

    def write_json(self, path: Path, data: Dict[str, Any]) -> None:
        """Write JSON file."""
        try:
            self.ensure_directory(path.parent)

            with path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
                f.write("\n")
        except (OSError, TypeError, ValueError) as exc:
            raise FileSystemError(
                f"Failed to write JSON to {path}",
                details={
                    "path": str(path),
                    "error": str(exc),
                    "type": type(exc).__name__,
                },
            ) from exc
