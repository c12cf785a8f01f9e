"""Rotation settings Pydantic schemas."""
from __future__ import annotations

from pydantic import BaseModel, Field

from autorotate.services.rotation import MAX_STORED_INT


class SettingsResponse(BaseModel):
    """Schema for a rotation settings record."""

    tick_duration: int
    index_offset: int
    use_most_recent: bool
    enabled: bool


class DefaultSettingsUpdate(BaseModel):
    """Schema replacing every field of the global defaults."""

    tick_duration: int = Field(..., ge=0, le=MAX_STORED_INT)
    index_offset: int = Field(0, ge=0, le=MAX_STORED_INT)
    use_most_recent: bool = False


class DefaultSettingsPatch(BaseModel):
    """Schema changing individual fields of the global defaults."""

    tick_duration: int | None = Field(None, ge=0, le=MAX_STORED_INT)
    index_offset: int | None = Field(None, ge=0, le=MAX_STORED_INT)
    use_most_recent: bool | None = None


class OverrideSettingsUpdate(BaseModel):
    """Schema for writing an entity's own settings."""

    tick_duration: int = Field(..., ge=0, le=MAX_STORED_INT)
    index_offset: int = Field(0, ge=0, le=MAX_STORED_INT)
    use_most_recent: bool = False
    enabled: bool = True
