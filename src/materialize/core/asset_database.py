"""Asset database abstraction over the host editor."""

from pathlib import PurePosixPath
from typing import Any, Optional, Protocol

from .models import Material, Shader, Texture


class TextureImporter(Protocol):
    """Protocol for per-texture import settings owned by the host.

    Attributes:
        alpha_source: Where the alpha channel comes from (``"from_input"`` or
            ``"none"``).
        srgb_texture: Whether color data is interpreted in sRGB space.
        texture_type: Semantic type of the texture (``"default"`` or
            ``"normal_map"``).
    """

    alpha_source: str
    srgb_texture: bool
    texture_type: str

    def save_and_reimport(self) -> None:
        """Persist the settings and reimport the texture."""
        ...


class AssetDatabase(Protocol):
    """Protocol for the host asset database.

    The materializer only talks to the host through this interface, so tests
    can supply a recording fake and editors can wrap their own API.
    """

    def directory_exists(self, path: PurePosixPath) -> bool:
        """Check if an asset directory exists.

        Args:
            path: Asset-relative directory path.

        Returns:
            bool: True if the directory exists.
        """
        ...

    def create_directory(self, path: PurePosixPath) -> None:
        """Create an asset directory and any missing ancestors.

        Args:
            path: Asset-relative directory path.

        Raises:
            FileSystemError: If directory creation fails.
        """
        ...

    def refresh(self) -> None:
        """Rescan the project so new files and directories are visible."""
        ...

    def find_shader(self, name: str) -> Optional[Shader]:
        """Look up a shader by name.

        Args:
            name: Shader name, e.g. ``Shader Graphs/s_Materialize``.

        Returns:
            Optional[Shader]: The shader, or None if it does not exist.
        """
        ...

    def get_texture_importer(self, path: str) -> Optional[TextureImporter]:
        """Return the texture importer for an asset.

        Args:
            path: Asset path of the texture.

        Returns:
            Optional[TextureImporter]: None if the asset is not a texture.
        """
        ...

    def import_asset(self, path: str, force_update: bool = False) -> None:
        """Import an asset, reapplying its import settings.

        Args:
            path: Asset path to import.
            force_update: Reimport even if the asset looks unchanged.
        """
        ...

    def load_texture(self, path: str) -> Optional[Texture]:
        """Load a texture handle from an asset path."""
        ...

    def create_asset(self, material: Material, path: PurePosixPath) -> None:
        """Register a new material asset at a path.

        Args:
            material: Material to store.
            path: Asset path of the material file.

        Raises:
            MaterialSaveError: If the asset cannot be created.
        """
        ...

    def save_assets(self) -> None:
        """Write all pending asset changes to disk."""
        ...

    def guid_to_asset_path(self, guid: str) -> str:
        """Resolve an asset GUID to its asset path (empty string if unknown)."""
        ...

    def is_texture(self, asset: Any) -> bool:
        """Check whether a selected object is a texture asset."""
        ...
