"""Global default rotation settings endpoints."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status

from autorotate.api.v1.dependencies import CurrentIdentityDep, GalleryDep, to_http_exception
from autorotate.schemas.settings import (
    DefaultSettingsPatch,
    DefaultSettingsUpdate,
    SettingsResponse,
)
from autorotate.services.errors import RotationError

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/defaults", response_model=SettingsResponse)
async def get_defaults(gallery: GalleryDep) -> SettingsResponse:
    """Return the global default rotation settings."""
    return SettingsResponse(**asdict(gallery.global_defaults()))


@router.put("/defaults", response_model=SettingsResponse)
async def set_defaults(
    payload: DefaultSettingsUpdate,
    caller: CurrentIdentityDep,
    gallery: GalleryDep,
) -> SettingsResponse:
    """Replace the global defaults (administrator only)."""
    try:
        updated = gallery.set_global_defaults(
            caller,
            payload.tick_duration,
            payload.index_offset,
            payload.use_most_recent,
        )
    except RotationError as err:
        raise to_http_exception(err) from err
    return SettingsResponse(**asdict(updated))


@router.patch("/defaults", response_model=SettingsResponse)
async def patch_defaults(
    payload: DefaultSettingsPatch,
    caller: CurrentIdentityDep,
    gallery: GalleryDep,
) -> SettingsResponse:
    """Change individual global default fields (administrator only).

    Fields are validated together before any of them is written.
    """
    changes = payload.model_dump(exclude_none=True)
    if not changes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No settings fields supplied",
        )

    current = gallery.global_defaults()
    try:
        # A full write keeps multi-field patches all-or-nothing.
        updated = gallery.set_global_defaults(
            caller,
            changes.get("tick_duration", current.tick_duration),
            changes.get("index_offset", current.index_offset),
            changes.get("use_most_recent", current.use_most_recent),
        )
    except RotationError as err:
        raise to_http_exception(err) from err
    return SettingsResponse(**asdict(updated))
