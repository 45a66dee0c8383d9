from typing import Callable, Optional, Tuple


SLOT_DIFFUSE = "_Diffuse_Map"
SLOT_MAOS = "_MAOS_Map"
SLOT_NORMAL = "_Normal_Map"

ALPHA_SOURCE_NONE = "none"
ALPHA_SOURCE_FROM_INPUT = "from_input"
TEXTURE_TYPE_DEFAULT = "default"
TEXTURE_TYPE_NORMAL_MAP = "normal_map"

# Checked in order, first match wins.
_KEYWORD_SLOTS = [
    ("Diffuse", SLOT_DIFFUSE),
    ("MAOS", SLOT_MAOS),
    ("NormalGL", SLOT_NORMAL),
]


def _disable_alpha(importer) -> None:
    importer.alpha_source = ALPHA_SOURCE_NONE


def _linear_color_space(importer) -> None:
    importer.srgb_texture = False


def _normal_map(importer) -> None:
    importer.texture_type = TEXTURE_TYPE_NORMAL_MAP


# Every rule whose keywords match is applied.
_IMPORT_RULES: Tuple[Tuple[Tuple[str, ...], Callable[[object], None]], ...] = (
    (("Diffuse", "MAOS"), _disable_alpha),
    (("MAOS",), _linear_color_space),
    (("NormalGL",), _normal_map),
)


def slot_from_name(texture_name: str) -> Optional[str]:
    """Resolve the shader slot for a texture name.

    Matching is a case-sensitive substring test.

    Args:
        texture_name: Texture file name without extension.

    Returns:
        Optional[str]: The shader slot name if matched.
    """
    for keyword, slot in _KEYWORD_SLOTS:
        if keyword in texture_name:
            return slot
    return None


def apply_import_rules(texture_name: str, importer) -> int:
    """Apply the keyword driven import settings to a texture importer.

    Args:
        texture_name: Texture file name without extension.
        importer: Importer exposing ``alpha_source``, ``srgb_texture`` and
            ``texture_type`` attributes.

    Returns:
        int: Number of rules applied.
    """
    applied = 0
    for keywords, action in _IMPORT_RULES:
        if any(keyword in texture_name for keyword in keywords):
            action(importer)
            applied += 1
    return applied
