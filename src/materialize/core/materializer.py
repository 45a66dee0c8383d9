"""Build a material asset from a selection of texture assets."""

import logging
from typing import List, Optional, Sequence

from .asset_database import AssetDatabase
from .models import Material, MaterializeResult, MaterializeSettings
from .naming import build_material_paths, check_shared_base_name, texture_name
from .texture_keys import apply_import_rules, slot_from_name


logger = logging.getLogger(__name__)


class Materializer:
    """Create one material per texture batch through an asset database.

    Args:
        database: Host asset database implementation.
        settings: Optional settings; defaults are used when omitted.
    """

    def __init__(
        self,
        database: AssetDatabase,
        settings: Optional[MaterializeSettings] = None,
    ) -> None:
        self._database = database
        self._settings = settings or MaterializeSettings()

    @property
    def settings(self) -> MaterializeSettings:
        return self._settings

    def materialize_selection(
        self, asset_paths: Sequence[str]
    ) -> Optional[MaterializeResult]:
        """Configure, reimport and bind textures into a new material.

        The first texture names the whole batch. Import settings written
        before a failed save are kept.

        Args:
            asset_paths: Texture asset paths in selection order.

        Returns:
            Optional[MaterializeResult]: The saved material, or None when the
            selection is empty, the shader is missing or saving failed.

        Raises:
            ValidationError: If ``require_shared_base_name`` is set and the
                batch mixes base names.
        """
        if not asset_paths:
            return None

        paths = list(asset_paths)
        check_shared_base_name(paths, strict=self._settings.require_shared_base_name)
        material_paths = build_material_paths(paths[0], self._settings)

        database = self._database
        if not database.directory_exists(material_paths.directory):
            database.create_directory(material_paths.directory)
            database.refresh()

        shader_name = self._settings.shader_name
        shader = database.find_shader(shader_name)
        if shader is None:
            logger.error("Shader '%s' not found!", shader_name)
            return None

        material = Material(name=material_paths.base_name, shader=shader)
        unbound: List[str] = []

        for texture_path in paths:
            name = texture_name(texture_path)

            self.configure_texture_import(texture_path, name)
            database.import_asset(texture_path, force_update=True)
            texture = database.load_texture(texture_path)

            slot = slot_from_name(name)
            if slot is None:
                logger.debug("No shader slot for texture: %s", texture_path)
                unbound.append(texture_path)
                continue
            logger.debug("Binding %s to %s", texture_path, slot)
            material.set_texture(slot, texture)

        output_path = material_paths.output_path
        try:
            database.create_asset(material, output_path)
            database.save_assets()
        except Exception as exc:
            logger.error(
                "Failed to create material at %s. Error: %s", output_path, exc
            )
            return None

        logger.info("Material created and saved at: %s", output_path)
        return MaterializeResult(
            output_path=output_path,
            material=material,
            unbound_textures=tuple(unbound),
        )

    def configure_texture_import(self, texture_path: str, name: str) -> bool:
        """Adjust a texture's import settings from keywords in its name.

        Args:
            texture_path: Asset path of the texture.
            name: Texture file name without extension.

        Returns:
            bool: False if the asset has no texture importer.
        """
        importer = self._database.get_texture_importer(texture_path)
        if importer is None:
            return False

        apply_import_rules(name, importer)
        importer.save_and_reimport()
        return True
