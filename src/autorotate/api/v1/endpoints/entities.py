"""Entity registry, per-entity settings and resolution endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, status

from autorotate.api.v1.dependencies import (
    CurrentIdentityDep,
    GalleryDep,
    RegistryDep,
    to_http_exception,
)
from autorotate.schemas.entity import (
    EntityApprove,
    EntityResponse,
    EntityTransfer,
    MetadataResponse,
)
from autorotate.schemas.image import ImageResponse
from autorotate.schemas.settings import OverrideSettingsUpdate, SettingsResponse
from autorotate.services.errors import RotationError
from autorotate.services.metadata import encode_metadata_uri
from autorotate.services.registry import EntityRegistry
from autorotate.services.rotation import MAX_STORED_INT

router = APIRouter(prefix="/entities", tags=["entities"])

EntityIdPath = Annotated[int, Path(ge=0, le=MAX_STORED_INT)]


def _entity_response(registry: EntityRegistry, entity_id: int) -> EntityResponse:
    owner = registry.owner_of(entity_id)
    if owner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entity not found")
    return EntityResponse(
        entity_id=entity_id,
        owner=owner,
        approved=registry.approved_delegate_of(entity_id),
    )


@router.post("/", response_model=EntityResponse, status_code=status.HTTP_201_CREATED)
async def mint_entity(caller: CurrentIdentityDep, registry: RegistryDep) -> EntityResponse:
    """Mint the next entity to the caller."""
    entity_id = registry.mint(caller)
    return EntityResponse(entity_id=entity_id, owner=caller, approved=None)


@router.get("/{entity_id}", response_model=EntityResponse)
async def get_entity(entity_id: EntityIdPath, registry: RegistryDep) -> EntityResponse:
    """Return the current owner and approved delegate of an entity."""
    return _entity_response(registry, entity_id)


@router.post("/{entity_id}/approve", response_model=EntityResponse)
async def approve_delegate(
    entity_id: EntityIdPath,
    payload: EntityApprove,
    caller: CurrentIdentityDep,
    registry: RegistryDep,
) -> EntityResponse:
    """Approve a delegate on an entity, or clear it with a null delegate."""
    try:
        registry.approve(caller, payload.delegate, entity_id)
    except RotationError as err:
        raise to_http_exception(err) from err
    except ValueError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return _entity_response(registry, entity_id)


@router.post("/{entity_id}/transfer", response_model=EntityResponse)
async def transfer_entity(
    entity_id: EntityIdPath,
    payload: EntityTransfer,
    caller: CurrentIdentityDep,
    registry: RegistryDep,
) -> EntityResponse:
    """Transfer an entity; clears its approved delegate."""
    try:
        registry.transfer(caller, payload.to, entity_id)
    except RotationError as err:
        raise to_http_exception(err) from err
    return _entity_response(registry, entity_id)


@router.get("/{entity_id}/settings", response_model=SettingsResponse)
async def get_entity_settings(entity_id: EntityIdPath, gallery: GalleryDep) -> SettingsResponse:
    """Return the entity's own override record."""
    return SettingsResponse(**asdict(gallery.entity_settings(entity_id)))


@router.put("/{entity_id}/settings", response_model=SettingsResponse)
async def update_entity_settings(
    entity_id: EntityIdPath,
    payload: OverrideSettingsUpdate,
    caller: CurrentIdentityDep,
    gallery: GalleryDep,
) -> SettingsResponse:
    """Write the entity's override (owner or approved delegate only)."""
    try:
        updated = gallery.update_settings(
            caller,
            entity_id,
            payload.tick_duration,
            payload.index_offset,
            payload.use_most_recent,
            payload.enabled,
        )
    except RotationError as err:
        raise to_http_exception(err) from err
    return SettingsResponse(**asdict(updated))


@router.get("/{entity_id}/effective-settings", response_model=SettingsResponse)
async def get_effective_settings(entity_id: EntityIdPath, gallery: GalleryDep) -> SettingsResponse:
    """Return the settings actually used to resolve the entity's image."""
    return SettingsResponse(**asdict(gallery.effective_settings(entity_id)))


@router.get("/{entity_id}/image", response_model=ImageResponse)
async def get_entity_image(
    entity_id: EntityIdPath,
    gallery: GalleryDep,
    tick: int = Query(..., ge=0),
) -> ImageResponse:
    """Return the catalog record applying to the entity at ``tick``."""
    try:
        record = gallery.image_for_entity_at_tick(entity_id, tick)
    except RotationError as err:
        raise to_http_exception(err) from err
    return ImageResponse(
        index=record.position,
        reference=record.reference,
        attribution=record.attribution,
    )


@router.get("/{entity_id}/metadata", response_model=MetadataResponse)
async def get_entity_metadata(
    entity_id: EntityIdPath,
    gallery: GalleryDep,
    tick: int = Query(..., ge=0),
) -> MetadataResponse:
    """Return the entity's descriptive document and its data URI at ``tick``."""
    document = gallery.entity_metadata(entity_id, tick)
    return MetadataResponse(**document, uri=encode_metadata_uri(document))
