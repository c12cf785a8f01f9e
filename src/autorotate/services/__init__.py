"""Business logic services for the autorotate application."""

from .access import AccessGate
from .catalog import ImageCatalog
from .events import EventBus, ImageAppended, ImageUpdated
from .gallery import Gallery
from .registry import EntityRegistry, OwnershipRegistry
from .rotation import RotationSettings, select_index
from .settings_store import SettingsStore

__all__ = [
    "AccessGate",
    "ImageCatalog",
    "EventBus", "ImageAppended", "ImageUpdated",
    "Gallery",
    "EntityRegistry", "OwnershipRegistry",
    "RotationSettings", "select_index",
    "SettingsStore",
]
