"""Serializers that turn in-memory materials into material files."""

from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from ..core.filesystem import DefaultFileSystem, FileSystem
from ..core.models import Material


MATERIAL_FORMAT_VERSION = 1
USD_EXTENSIONS = {".usd", ".usda", ".usdc"}


class MaterialWriter(Protocol):
    """Protocol for writers that persist a material file."""

    def write(self, material: Material, target: Path, project_root: Path) -> None:
        """Write a material to disk.

        Args:
            material: Material to serialize.
            target: Absolute output file path.
            project_root: Project directory that texture paths are relative to.

        Raises:
            FileSystemError: If the file cannot be written.
        """
        ...


def material_to_dict(material: Material) -> Dict[str, Any]:
    """Convert a material into the JSON document stored in ``.mat`` files."""
    shader: Dict[str, Optional[str]] = {"name": material.shader.name}
    if material.shader.source_path:
        shader["source_path"] = material.shader.source_path

    return {
        "version": MATERIAL_FORMAT_VERSION,
        "name": material.name,
        "shader": shader,
        "textures": {
            slot: {"path": texture.path, "guid": texture.guid}
            for slot, texture in material.textures.items()
        },
    }


class JsonMaterialWriter:
    """Write materials as JSON documents."""

    def __init__(self, fs: Optional[FileSystem] = None) -> None:
        self._fs = fs or DefaultFileSystem()

    def write(self, material: Material, target: Path, project_root: Path) -> None:
        self._fs.write_json(target, material_to_dict(material))
