"""Version 1 API endpoints."""

from .endpoints import (
    admin_router,
    entities_router,
    images_router,
    settings_router,
)

__all__ = [
    "admin_router",
    "entities_router",
    "images_router",
    "settings_router",
]
