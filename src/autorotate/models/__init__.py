"""SQLAlchemy models for the autorotate application."""

from .administrator import Administrator
from .entity import Entity
from .image import ImageRecord
from .rotation import EntityOverride, GlobalDefaults

__all__ = [
    "Administrator",
    "Entity",
    "ImageRecord",
    "EntityOverride", "GlobalDefaults",
]
