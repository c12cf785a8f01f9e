"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .entity import (
    AdministratorResponse,
    AdministratorTransfer,
    EntityApprove,
    EntityResponse,
    EntityTransfer,
    MetadataResponse,
)
from .image import ImageCreate, ImageResponse
from .settings import (
    DefaultSettingsPatch,
    DefaultSettingsUpdate,
    OverrideSettingsUpdate,
    SettingsResponse,
)

__all__ = [
    "AdministratorResponse", "AdministratorTransfer",
    "EntityApprove", "EntityResponse", "EntityTransfer", "MetadataResponse",
    "ImageCreate", "ImageResponse",
    "DefaultSettingsPatch", "DefaultSettingsUpdate",
    "OverrideSettingsUpdate", "SettingsResponse",
]
