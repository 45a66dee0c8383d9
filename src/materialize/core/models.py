from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Dict, Optional, Tuple


DEFAULT_SHADER_NAME = "Shader Graphs/s_Materialize"
DEFAULT_MATERIALS_ROOT = "Materials"
DEFAULT_MATERIAL_EXTENSION = ".mat"


@dataclass(frozen=True)
class MaterializeSettings:
    """Configuration for a materialize run.

    Attributes:
        shader_name: Name of the shader every new material is bound to.
        materials_root: Asset-relative directory that holds material categories.
        material_extension: File extension of the written material asset.
        require_shared_base_name: Reject batches whose textures do not all
                                  share the first texture's base name.
    """

    shader_name: str = DEFAULT_SHADER_NAME
    materials_root: str = DEFAULT_MATERIALS_ROOT
    material_extension: str = DEFAULT_MATERIAL_EXTENSION
    require_shared_base_name: bool = False


@dataclass(frozen=True)
class MaterialPaths:
    """Naming derived from the first texture of a batch.

    Attributes:
        base_name: First two underscore tokens of the texture stem.
        category: First underscore token of the base name.
        directory: Directory the material is written into.
        output_path: Full asset path of the material file.
    """

    base_name: str
    category: str
    directory: PurePosixPath
    output_path: PurePosixPath


@dataclass(frozen=True)
class Shader:
    """Shader handle resolved by the asset database.

    Attributes:
        name: Shader lookup name, e.g. ``Shader Graphs/s_Materialize``.
        source_path: Optional asset path of the shader source.
    """

    name: str
    source_path: Optional[str] = None


@dataclass(frozen=True)
class Texture:
    """Texture handle loaded from the asset database.

    Attributes:
        path: Asset path of the texture.
        guid: Identifier assigned by the asset database.
        import_settings: Snapshot of the importer settings after import.
    """

    path: str
    guid: str = ""
    import_settings: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Material:
    """In-memory material bound to a shader.

    Attributes:
        name: Material name, normally the batch base name.
        shader: Shader the material renders with.
        textures: Mapping of shader slot name to bound texture.
    """

    name: str
    shader: Shader
    textures: Dict[str, Texture] = field(default_factory=dict)

    def set_texture(self, slot: str, texture: Optional[Texture]) -> None:
        """Bind a texture to a shader slot, replacing any previous binding."""
        if texture is None:
            self.textures.pop(slot, None)
            return
        self.textures[slot] = texture

    def get_texture(self, slot: str) -> Optional[Texture]:
        return self.textures.get(slot)


@dataclass(frozen=True)
class MaterializeResult:
    """Outcome of a successful materialize run.

    Attributes:
        output_path: Asset path the material was saved to.
        material: The saved material.
        unbound_textures: Texture paths imported but not bound to any slot.
    """

    output_path: PurePosixPath
    material: Material
    unbound_textures: Tuple[str, ...] = ()
