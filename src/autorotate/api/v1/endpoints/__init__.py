"""API endpoint modules for version 1."""

from .admin import router as admin_router
from .entities import router as entities_router
from .images import router as images_router
from .settings import router as settings_router

__all__ = [
    "admin_router",
    "entities_router",
    "images_router",
    "settings_router",
]
