"""Write materials as USD shading networks."""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from pxr import Sdf, Tf, Usd, UsdShade

from ..core.exceptions import FileSystemError
from ..core.filesystem import DefaultFileSystem, FileSystem
from ..core.models import Material, Texture
from ..core.texture_keys import (
    SLOT_DIFFUSE,
    SLOT_MAOS,
    SLOT_NORMAL,
    TEXTURE_TYPE_NORMAL_MAP,
)


logger = logging.getLogger(__name__)

SHADER_PRIM_NAME = "Shader"
TEXCOORD_READER_NAME = "TexCoordReader"

# slot -> (shader input type, texture output name)
SLOT_SIGNATURES: Dict[str, Tuple[Sdf.ValueTypeName, str]] = {
    SLOT_DIFFUSE: (Sdf.ValueTypeNames.Color3f, "rgb"),
    SLOT_MAOS: (Sdf.ValueTypeNames.Float3, "rgb"),
    SLOT_NORMAL: (Sdf.ValueTypeNames.Normal3f, "rgb"),
}


def texture_reference(texture_path: str, target: Path, project_root: Path) -> str:
    """Return a texture path relative to the material file's directory.

    Examples:
        >>> texture_reference(
        ...     "Textures/Tex_Wood_Diffuse.png",
        ...     Path("/p/Materials/Tex/Tex_Wood.usda"),
        ...     Path("/p"),
        ... )
        '../../Textures/Tex_Wood_Diffuse.png'
    """
    absolute = project_root / texture_path
    relative = os.path.relpath(absolute, target.parent)
    return Path(relative).as_posix()


def _source_color_space(texture: Texture) -> str:
    settings = texture.import_settings or {}
    if settings.get("texture_type") == TEXTURE_TYPE_NORMAL_MAP:
        return "raw"
    if settings.get("srgb_texture") is False:
        return "raw"
    return "sRGB"


def build_material_stage(
    material: Material, target: Path, project_root: Path
) -> Usd.Stage:
    """Build an in-memory stage holding a single material.

    Args:
        material: Material to convert.
        target: Output file path, used to relativize texture paths.
        project_root: Project directory that texture paths are relative to.

    Returns:
        Usd.Stage: Stage whose default prim is the material.
    """
    stage = Usd.Stage.CreateInMemory()
    material_path = Sdf.Path.absoluteRootPath.AppendChild(
        Tf.MakeValidIdentifier(material.name)
    )
    usd_material = UsdShade.Material.Define(stage, material_path)
    stage.SetDefaultPrim(usd_material.GetPrim())

    shader = UsdShade.Shader.Define(
        stage, material_path.AppendChild(SHADER_PRIM_NAME)
    )
    shader.CreateIdAttr(material.shader.name)
    shader.CreateOutput("surface", Sdf.ValueTypeNames.Token)
    usd_material.CreateSurfaceOutput().ConnectToSource(
        shader.ConnectableAPI(), "surface"
    )

    if not material.textures:
        return stage

    st_reader = UsdShade.Shader.Define(
        stage, material_path.AppendChild(TEXCOORD_READER_NAME)
    )
    st_reader.CreateIdAttr("UsdPrimvarReader_float2")
    st_reader.CreateInput("varname", Sdf.ValueTypeNames.Token).Set("st")
    st_reader.CreateOutput("result", Sdf.ValueTypeNames.Float2)

    for slot, texture in material.textures.items():
        input_type, output_name = SLOT_SIGNATURES.get(
            slot, (Sdf.ValueTypeNames.Float3, "rgb")
        )
        texture_prim = UsdShade.Shader.Define(
            stage, material_path.AppendChild(Tf.MakeValidIdentifier(slot.strip("_")))
        )
        texture_prim.CreateIdAttr("UsdUVTexture")
        texture_prim.CreateInput("file", Sdf.ValueTypeNames.Asset).Set(
            texture_reference(texture.path, target, project_root)
        )
        texture_prim.CreateInput("sourceColorSpace", Sdf.ValueTypeNames.Token).Set(
            _source_color_space(texture)
        )
        texture_prim.CreateInput("st", Sdf.ValueTypeNames.Float2).ConnectToSource(
            st_reader.ConnectableAPI(), "result"
        )
        texture_prim.CreateOutput(output_name, Sdf.ValueTypeNames.Float3)
        shader.CreateInput(slot, input_type).ConnectToSource(
            texture_prim.ConnectableAPI(), output_name
        )
        logger.debug("Connected %s to %s", texture.path, slot)

    return stage


class UsdMaterialWriter:
    """Write materials to ``.usd``, ``.usda`` or ``.usdc`` files."""

    def __init__(self, fs: Optional[FileSystem] = None) -> None:
        self._fs = fs or DefaultFileSystem()

    def write(self, material: Material, target: Path, project_root: Path) -> None:
        self._fs.ensure_directory(target.parent)
        stage = build_material_stage(material, target, project_root)
        if not stage.GetRootLayer().Export(str(target)):
            raise FileSystemError(
                f"Failed to export USD material to {target}",
                details={"path": str(target), "material": material.name},
            )
