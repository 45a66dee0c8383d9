"""Tests for the USD material writer."""

import pytest

pxr = pytest.importorskip("pxr")

from pxr import Sdf, Usd, UsdShade

from materialize.core.models import Material, Shader, Texture
from materialize.core.texture_keys import SLOT_DIFFUSE, SLOT_MAOS, SLOT_NORMAL
from materialize.usd.material_writer import (
    build_material_stage,
    texture_reference,
    UsdMaterialWriter,
)


def _wood_material():
    material = Material(name="Tex_Wood", shader=Shader(name="Shader Graphs/s_Materialize"))
    material.set_texture(
        SLOT_DIFFUSE,
        Texture(path="Textures/Tex_Wood_Diffuse.png", import_settings={"srgb_texture": True}),
    )
    material.set_texture(
        SLOT_MAOS,
        Texture(path="Textures/Tex_Wood_MAOS.png", import_settings={"srgb_texture": False}),
    )
    material.set_texture(
        SLOT_NORMAL,
        Texture(
            path="Textures/Tex_Wood_NormalGL.png",
            import_settings={"texture_type": "normal_map", "srgb_texture": True},
        ),
    )
    return material


def _connected_texture(shader, slot):
    source = shader.GetInput(slot).GetConnectedSources()[0][0]
    return UsdShade.Shader(source.source.GetPrim())


def test_material_is_default_prim(tmp_path):
    """The material prim is the stage's default prim."""
    target = tmp_path / "Materials" / "Tex" / "Tex_Wood.usda"
    stage = build_material_stage(_wood_material(), target, tmp_path)

    prim = stage.GetDefaultPrim()
    assert prim.GetPath().pathString == "/Tex_Wood"
    assert prim.IsA(UsdShade.Material)


def test_shader_id_and_surface_connection(tmp_path):
    """The shader carries the shader name and drives the surface output."""
    target = tmp_path / "Materials" / "Tex" / "Tex_Wood.usda"
    stage = build_material_stage(_wood_material(), target, tmp_path)

    material = UsdShade.Material(stage.GetPrimAtPath("/Tex_Wood"))
    shader = UsdShade.Shader(stage.GetPrimAtPath("/Tex_Wood/Shader"))
    assert shader.GetIdAttr().Get() == "Shader Graphs/s_Materialize"
    surface_source = material.GetSurfaceOutput().GetConnectedSources()[0][0]
    assert surface_source.source.GetPrim() == shader.GetPrim()


def test_texture_readers_per_slot(tmp_path):
    """Each bound slot is fed by a UsdUVTexture with a relative file path."""
    target = tmp_path / "Materials" / "Tex" / "Tex_Wood.usda"
    stage = build_material_stage(_wood_material(), target, tmp_path)
    shader = UsdShade.Shader(stage.GetPrimAtPath("/Tex_Wood/Shader"))

    diffuse = _connected_texture(shader, SLOT_DIFFUSE)
    assert diffuse.GetIdAttr().Get() == "UsdUVTexture"
    assert diffuse.GetInput("file").Get().path == "../../Textures/Tex_Wood_Diffuse.png"
    assert diffuse.GetInput("sourceColorSpace").Get() == "sRGB"

    maos = _connected_texture(shader, SLOT_MAOS)
    assert maos.GetInput("sourceColorSpace").Get() == "raw"

    normal = _connected_texture(shader, SLOT_NORMAL)
    assert normal.GetInput("sourceColorSpace").Get() == "raw"


def test_texture_outputs_are_float3(tmp_path):
    """Readers expose a float3 rgb output; shader inputs keep the slot type."""
    target = tmp_path / "Materials" / "Tex" / "Tex_Wood.usda"
    stage = build_material_stage(_wood_material(), target, tmp_path)
    shader = UsdShade.Shader(stage.GetPrimAtPath("/Tex_Wood/Shader"))

    for slot in (SLOT_DIFFUSE, SLOT_MAOS, SLOT_NORMAL):
        rgb = _connected_texture(shader, slot).GetOutput("rgb")
        assert rgb.GetTypeName() == Sdf.ValueTypeNames.Float3

    assert shader.GetInput(SLOT_DIFFUSE).GetTypeName() == Sdf.ValueTypeNames.Color3f
    assert shader.GetInput(SLOT_MAOS).GetTypeName() == Sdf.ValueTypeNames.Float3
    assert shader.GetInput(SLOT_NORMAL).GetTypeName() == Sdf.ValueTypeNames.Normal3f


def test_texture_reference_is_relative_to_material(tmp_path):
    """Texture paths are written relative to the material file's folder."""
    target = tmp_path / "Materials" / "Tex" / "Tex_Wood.usda"

    assert texture_reference("Textures/a.png", target, tmp_path) == "../../Textures/a.png"
    assert texture_reference("Materials/Tex/b.png", target, tmp_path) == "b.png"


def test_material_without_textures(tmp_path):
    """Materials without bindings only define the shader."""
    material = Material(name="Tex_Wood", shader=Shader(name="Standard"))
    stage = build_material_stage(material, tmp_path / "Tex_Wood.usda", tmp_path)

    names = [prim.GetName() for prim in stage.GetPrimAtPath("/Tex_Wood").GetChildren()]
    assert names == ["Shader"]


def test_invalid_identifier_is_sanitized(tmp_path):
    """Names that are not valid prim names are made valid."""
    material = Material(name="01 Wood", shader=Shader(name="Standard"))
    stage = build_material_stage(material, tmp_path / "x.usda", tmp_path)

    name = stage.GetDefaultPrim().GetName()
    assert Sdf.Path.IsValidIdentifier(name)
    assert name.endswith("Wood")


def test_writer_exports_and_overwrites(tmp_path):
    """UsdMaterialWriter writes the layer and replaces an existing file."""
    target = tmp_path / "Materials" / "Tex" / "Tex_Wood.usda"
    writer = UsdMaterialWriter()

    writer.write(_wood_material(), target, tmp_path)
    writer.write(Material(name="Tex_Wood", shader=Shader(name="Standard")), target, tmp_path)

    stage = Usd.Stage.Open(str(target))
    shader = UsdShade.Shader(stage.GetPrimAtPath("/Tex_Wood/Shader"))
    assert shader.GetIdAttr().Get() == "Standard"
    assert not stage.GetPrimAtPath("/Tex_Wood/Diffuse_Map").IsValid()
