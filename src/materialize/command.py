"""Editor menu command entry points.

Hosts register ``validate_selection`` as the menu item's enable check and
``run_materialize`` as its action.
"""

import logging
from typing import Any, List, Optional, Sequence

from .core.asset_database import AssetDatabase
from .core.materializer import Materializer
from .core.models import MaterializeResult, MaterializeSettings
from .logging_utils import configure_logging


configure_logging()
logger = logging.getLogger(__name__)


def validate_selection(database: AssetDatabase, selection: Sequence[Any]) -> bool:
    """Return True when the selection is non-empty and only holds textures."""
    if not selection:
        return False
    return all(database.is_texture(item) for item in selection)


def resolve_selection(database: AssetDatabase, guids: Sequence[str]) -> List[str]:
    """Resolve selected asset GUIDs to asset paths, keeping selection order.

    GUIDs the database does not know are dropped.
    """
    asset_paths = []
    for guid in guids:
        path = database.guid_to_asset_path(guid)
        if not path:
            logger.warning("Skipping unknown asset GUID: %s", guid)
            continue
        asset_paths.append(path)
    return asset_paths


def run_materialize(
    database: AssetDatabase,
    guids: Sequence[str],
    settings: Optional[MaterializeSettings] = None,
) -> Optional[MaterializeResult]:
    """Materialize the textures behind a list of selected GUIDs.

    Args:
        database: Host asset database.
        guids: Selected asset GUIDs.
        settings: Optional materialize settings.

    Returns:
        Optional[MaterializeResult]: Result of the run, if a material was saved.
    """
    asset_paths = resolve_selection(database, guids)
    return Materializer(database, settings).materialize_selection(asset_paths)
