from types import SimpleNamespace

from materialize.core.texture_keys import (
    ALPHA_SOURCE_FROM_INPUT,
    ALPHA_SOURCE_NONE,
    SLOT_DIFFUSE,
    SLOT_MAOS,
    SLOT_NORMAL,
    TEXTURE_TYPE_DEFAULT,
    TEXTURE_TYPE_NORMAL_MAP,
    apply_import_rules,
    slot_from_name,
)


def _importer():
    return SimpleNamespace(
        alpha_source=ALPHA_SOURCE_FROM_INPUT,
        srgb_texture=True,
        texture_type=TEXTURE_TYPE_DEFAULT,
    )


def test_slot_from_name_keywords():
    """Ensure each keyword maps to its shader slot."""
    assert slot_from_name("Tex_Wood_Diffuse") == SLOT_DIFFUSE
    assert slot_from_name("Tex_Wood_MAOS") == SLOT_MAOS
    assert slot_from_name("Tex_Wood_NormalGL") == SLOT_NORMAL


def test_slot_from_name_first_match_wins():
    """Ensure Diffuse wins over MAOS and NormalGL."""
    assert slot_from_name("Tex_MAOS_Diffuse") == SLOT_DIFFUSE
    assert slot_from_name("Tex_NormalGL_MAOS") == SLOT_MAOS


def test_slot_from_name_substring_match():
    """Ensure keywords match anywhere in the name."""
    assert slot_from_name("TexDiffuseWood") == SLOT_DIFFUSE


def test_slot_from_name_no_match():
    """Ensure unrelated and lower-case names do not match."""
    assert slot_from_name("Tex_Wood_Height") is None
    assert slot_from_name("Tex_Wood_maos") is None
    assert slot_from_name("Tex_Wood_NormalDX") is None


def test_import_rules_diffuse():
    """Ensure Diffuse textures drop their alpha channel only."""
    importer = _importer()
    assert apply_import_rules("Tex_Wood_Diffuse", importer) == 1
    assert importer.alpha_source == ALPHA_SOURCE_NONE
    assert importer.srgb_texture is True
    assert importer.texture_type == TEXTURE_TYPE_DEFAULT


def test_import_rules_maos():
    """Ensure MAOS textures are linear and have no alpha."""
    importer = _importer()
    assert apply_import_rules("Tex_Wood_MAOS", importer) == 2
    assert importer.alpha_source == ALPHA_SOURCE_NONE
    assert importer.srgb_texture is False


def test_import_rules_normal():
    """Ensure NormalGL textures become normal maps."""
    importer = _importer()
    assert apply_import_rules("Tex_Wood_NormalGL", importer) == 1
    assert importer.texture_type == TEXTURE_TYPE_NORMAL_MAP
    assert importer.alpha_source == ALPHA_SOURCE_FROM_INPUT


def test_import_rules_are_independent():
    """Ensure every matching rule applies."""
    importer = _importer()
    assert apply_import_rules("Tex_Diffuse_NormalGL", importer) == 2
    assert importer.alpha_source == ALPHA_SOURCE_NONE
    assert importer.texture_type == TEXTURE_TYPE_NORMAL_MAP


def test_import_rules_no_match():
    """Ensure unrelated names leave the importer untouched."""
    importer = _importer()
    assert apply_import_rules("Tex_Wood_Height", importer) == 0
    assert importer == _importer()
