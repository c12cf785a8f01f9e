"""Administrator handover endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from autorotate.api.v1.dependencies import CurrentIdentityDep, GalleryDep, to_http_exception
from autorotate.schemas.entity import AdministratorResponse, AdministratorTransfer
from autorotate.services.errors import RotationError

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("", response_model=AdministratorResponse)
async def get_administrator(gallery: GalleryDep) -> AdministratorResponse:
    """Return the identity currently allowed to curate the catalog."""
    return AdministratorResponse(administrator=gallery.administrator())


@router.post("/transfer", response_model=AdministratorResponse)
async def transfer_administration(
    payload: AdministratorTransfer,
    caller: CurrentIdentityDep,
    gallery: GalleryDep,
) -> AdministratorResponse:
    """Hand administration to another identity (administrator only)."""
    try:
        new_administrator = gallery.transfer_administration(caller, payload.new_administrator)
    except RotationError as err:
        raise to_http_exception(err) from err
    except ValueError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return AdministratorResponse(administrator=new_administrator)
