"""Create materials from texture selections."""

from .core.materializer import Materializer
from .core.models import MaterializeResult, MaterializeSettings
from .version import get_version

__all__ = [
    "MaterializeResult",
    "MaterializeSettings",
    "Materializer",
    "get_version",
]
