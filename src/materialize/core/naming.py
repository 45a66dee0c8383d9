"""Naming conventions for materials derived from texture file names."""

import logging
from pathlib import PurePosixPath
from typing import Optional, Sequence

from .exceptions import ValidationError
from .models import MaterialPaths, MaterializeSettings


logger = logging.getLogger(__name__)

NAME_SEPARATOR = "_"
BASE_NAME_TOKENS = 2


def texture_name(path: str) -> str:
    """Return the file name of an asset path without its extension.

    Args:
        path: Asset path using forward or back slashes.

    Returns:
        str: File stem, e.g. ``Tex_Wood_Diffuse`` for ``a/Tex_Wood_Diffuse.png``.
    """
    return PurePosixPath(str(path).replace("\\", "/")).stem


def base_name(path: str) -> str:
    """Return the first two underscore tokens of a texture file name.

    Examples:
        >>> base_name("Assets/Textures/Tex_Wood_Diffuse.png")
        'Tex_Wood'
        >>> base_name("Wood.png")
        'Wood'
    """
    parts = texture_name(path).split(NAME_SEPARATOR)
    return NAME_SEPARATOR.join(parts[:BASE_NAME_TOKENS])


def category(name: str) -> str:
    """Return the category token of a base name.

    Examples:
        >>> category("Tex_Wood")
        'Tex'
    """
    return name.split(NAME_SEPARATOR)[0]


def build_material_paths(
    texture_path: str, settings: Optional[MaterializeSettings] = None
) -> MaterialPaths:
    """Build the material naming and output location for a texture.

    Args:
        texture_path: Asset path of the texture that names the batch.
        settings: Optional settings; defaults are used when omitted.

    Returns:
        MaterialPaths: Base name, category and material output path.
    """
    settings = settings or MaterializeSettings()
    name = base_name(texture_path)
    group = category(name)
    extension = settings.material_extension
    if extension and not extension.startswith("."):
        extension = f".{extension}"

    directory = PurePosixPath(settings.materials_root) / group
    return MaterialPaths(
        base_name=name,
        category=group,
        directory=directory,
        output_path=directory / f"{name}{extension}",
    )


def check_shared_base_name(texture_paths: Sequence[str], strict: bool = False) -> bool:
    """Check that every texture shares the first texture's base name.

    Args:
        texture_paths: Texture asset paths of one batch.
        strict: Raise instead of returning False on a mismatch.

    Returns:
        bool: True when all base names match.

    Raises:
        ValidationError: If strict and any base name differs.
    """
    if not texture_paths:
        return True

    expected = base_name(texture_paths[0])
    mismatched = [path for path in texture_paths if base_name(path) != expected]
    if not mismatched:
        return True

    if strict:
        raise ValidationError(
            "Selected textures do not share a base name",
            details={"expected": expected, "mismatched": list(mismatched)},
        )
    logger.debug(
        "Textures %s do not share base name '%s'; using it anyway.",
        mismatched,
        expected,
    )
    return False
