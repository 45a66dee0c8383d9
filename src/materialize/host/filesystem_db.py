"""Asset database backed by a project directory on disk.

Every asset ``<name>.<ext>`` gets a ``<name>.<ext>.meta`` JSON sidecar that
holds its GUID and, for textures, the importer settings. Materials are
staged by ``create_asset`` and written by ``save_assets``.
"""

import logging
import uuid
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Iterable, Optional

from ..core.exceptions import MaterializeError, MaterialSaveError
from ..core.filesystem import DefaultFileSystem, FileSystem
from ..core.models import Material, Shader, Texture
from ..core.texture_keys import ALPHA_SOURCE_FROM_INPUT, TEXTURE_TYPE_DEFAULT
from .material_writers import USD_EXTENSIONS, JsonMaterialWriter, MaterialWriter


logger = logging.getLogger(__name__)

META_SUFFIX = ".meta"
SHADER_GRAPH_PREFIX = "Shader Graphs/"
SHADER_GRAPH_SUFFIX = ".shadergraph"
TEXTURE_EXTENSIONS = {
    ".bmp",
    ".exr",
    ".hdr",
    ".jpeg",
    ".jpg",
    ".png",
    ".psd",
    ".tga",
    ".tif",
    ".tiff",
}


def default_importer_settings() -> Dict[str, Any]:
    return {
        "alpha_source": ALPHA_SOURCE_FROM_INPUT,
        "srgb_texture": True,
        "texture_type": TEXTURE_TYPE_DEFAULT,
    }


def _asset_key(path) -> str:
    return PurePosixPath(str(path).replace("\\", "/")).as_posix()


def is_texture_path(path: str) -> bool:
    return PurePosixPath(_asset_key(path)).suffix.lower() in TEXTURE_EXTENSIONS


class FileTextureImporter:
    """Texture importer whose settings live in the asset's meta file."""

    def __init__(
        self, database: "FileSystemAssetDatabase", path: str, settings: Dict[str, Any]
    ) -> None:
        self._database = database
        self.path = path
        self.alpha_source = settings.get("alpha_source", ALPHA_SOURCE_FROM_INPUT)
        self.srgb_texture = bool(settings.get("srgb_texture", True))
        self.texture_type = settings.get("texture_type", TEXTURE_TYPE_DEFAULT)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alpha_source": self.alpha_source,
            "srgb_texture": self.srgb_texture,
            "texture_type": self.texture_type,
        }

    def save_and_reimport(self) -> None:
        self._database.write_importer_settings(self.path, self.to_dict())
        self._database.import_asset(self.path, force_update=True)


class FileSystemAssetDatabase:
    """Asset database for a project directory.

    Args:
        project_root: Directory all asset paths are relative to.
        shaders: Shader names that always resolve, in addition to
            ``*.shadergraph`` files found in the project.
        fs: Optional file system implementation.
    """

    def __init__(
        self,
        project_root: Path,
        shaders: Iterable[str] = (),
        fs: Optional[FileSystem] = None,
    ) -> None:
        self._fs = fs or DefaultFileSystem()
        self.project_root = Path(project_root)
        self._shaders = set(shaders)
        self._guid_index: Dict[str, str] = {}
        self._pending: Dict[PurePosixPath, Material] = {}
        self._writers: Dict[str, MaterialWriter] = {}

    # Paths -----------------------------------------------------------------

    def _absolute(self, path) -> Path:
        relative = str(path).replace("\\", "/")
        return self._fs.validate_path(
            self.project_root / relative, base_dir=self.project_root
        )

    def _relative(self, path: Path) -> str:
        root = self.project_root.resolve()
        return path.resolve().relative_to(root).as_posix()

    def _meta_path(self, path) -> Path:
        absolute = self._absolute(path)
        return absolute.with_name(absolute.name + META_SUFFIX)

    # Meta files ------------------------------------------------------------

    def read_meta(self, path) -> Dict[str, Any]:
        """Return the meta document of an asset, creating it if missing."""
        meta_path = self._meta_path(path)
        if self._fs.path_exists(meta_path):
            return self._fs.read_json(meta_path)

        meta: Dict[str, Any] = {"guid": uuid.uuid4().hex}
        if is_texture_path(str(path)):
            meta["importer"] = default_importer_settings()
        self._fs.write_json(meta_path, meta)
        self._guid_index[meta["guid"]] = _asset_key(path)
        return meta

    def write_importer_settings(self, path: str, settings: Dict[str, Any]) -> None:
        meta = self.read_meta(path)
        meta["importer"] = dict(settings)
        self._fs.write_json(self._meta_path(path), meta)

    # AssetDatabase -----------------------------------------------------------

    def directory_exists(self, path: PurePosixPath) -> bool:
        return self._fs.is_directory(self._absolute(path))

    def create_directory(self, path: PurePosixPath) -> None:
        self._fs.ensure_directory(self._absolute(path))

    def refresh(self) -> None:
        """Rebuild the GUID index, creating meta files for new assets."""
        index: Dict[str, str] = {}
        for file_path in self._fs.iter_files(self.project_root):
            if file_path.name.endswith(META_SUFFIX):
                continue
            relative = self._relative(file_path)
            index[self.read_meta(relative)["guid"]] = relative
        self._guid_index = index
        logger.debug("Indexed %d assets under %s", len(index), self.project_root)

    def find_shader(self, name: str) -> Optional[Shader]:
        if name in self._shaders:
            return Shader(name=name)
        if not name.startswith(SHADER_GRAPH_PREFIX):
            return None

        stem = name[len(SHADER_GRAPH_PREFIX):]
        for file_path in self._fs.iter_files(
            self.project_root, f"{stem}{SHADER_GRAPH_SUFFIX}"
        ):
            return Shader(name=name, source_path=self._relative(file_path))
        return None

    def get_texture_importer(self, path: str) -> Optional[FileTextureImporter]:
        if not is_texture_path(path) or not self._fs.path_exists(self._absolute(path)):
            return None
        settings = self.read_meta(path).get("importer") or default_importer_settings()
        return FileTextureImporter(self, path, settings)

    def import_asset(self, path: str, force_update: bool = False) -> None:
        """Register an asset, creating its meta file on first import."""
        if not self._fs.path_exists(self._absolute(path)):
            logger.warning("Cannot import missing asset: %s", path)
            return
        meta = self.read_meta(path)
        if force_update and is_texture_path(path) and "importer" not in meta:
            meta["importer"] = default_importer_settings()
            self._fs.write_json(self._meta_path(path), meta)
        self._guid_index[meta["guid"]] = _asset_key(path)

    def load_texture(self, path: str) -> Optional[Texture]:
        if not is_texture_path(path) or not self._fs.path_exists(self._absolute(path)):
            return None
        meta = self.read_meta(path)
        return Texture(
            path=_asset_key(path),
            guid=meta["guid"],
            import_settings=dict(meta.get("importer") or {}),
        )

    def create_asset(self, material: Material, path: PurePosixPath) -> None:
        path = PurePosixPath(path)
        if not path.suffix:
            raise MaterialSaveError(
                "Material path has no file extension", details={"path": str(path)}
            )
        self._absolute(path)
        self._pending[path] = material

    def save_assets(self) -> None:
        """Write staged materials to disk, overwriting existing files."""
        pending, self._pending = self._pending, {}
        for path, material in pending.items():
            target = self._absolute(path)
            try:
                self._writer_for(path).write(material, target, self.project_root)
            except MaterializeError as exc:
                raise MaterialSaveError(
                    f"Failed to save material {material.name}",
                    details={"path": str(path), "error": exc.message},
                ) from exc
            self.read_meta(path)

    def guid_to_asset_path(self, guid: str) -> str:
        """Resolve a GUID, rescanning the project once on a miss."""
        if guid not in self._guid_index:
            self.refresh()
        return self._guid_index.get(guid, "")

    def is_texture(self, asset: Any) -> bool:
        if isinstance(asset, Texture):
            return True
        if isinstance(asset, (str, PurePosixPath, Path)):
            return is_texture_path(str(asset))
        return False

    def _writer_for(self, path: PurePosixPath) -> MaterialWriter:
        suffix = path.suffix.lower()
        key = "usd" if suffix in USD_EXTENSIONS else "json"
        if key not in self._writers:
            if key == "usd":
                from ..usd.material_writer import UsdMaterialWriter

                self._writers[key] = UsdMaterialWriter(self._fs)
            else:
                self._writers[key] = JsonMaterialWriter(self._fs)
        return self._writers[key]
