"""Image catalog endpoints for the autorotate API."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from autorotate.api.v1.dependencies import CurrentIdentityDep, GalleryDep, to_http_exception
from autorotate.models import ImageRecord
from autorotate.schemas.image import ImageCreate, ImageResponse
from autorotate.services.errors import RotationError

router = APIRouter(prefix="/images", tags=["images"])


def _image_response(record: ImageRecord) -> ImageResponse:
    return ImageResponse(
        index=record.position,
        reference=record.reference,
        attribution=record.attribution,
    )


@router.get("/", response_model=list[ImageResponse])
async def list_images(
    gallery: GalleryDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
) -> list[ImageResponse]:
    """List catalog records in index order."""
    return [_image_response(record) for record in gallery.list_images(skip=skip, limit=limit)]


@router.get("/count")
async def count_images(gallery: GalleryDep) -> dict[str, int]:
    """Return the number of records in the catalog."""
    return {"count": gallery.num_images()}


@router.get("/{index}", response_model=ImageResponse)
async def get_image(index: int, gallery: GalleryDep) -> ImageResponse:
    """Get the record at a catalog index."""
    try:
        return _image_response(gallery.image_at_index(index))
    except RotationError as err:
        raise to_http_exception(err) from err


@router.post("/", response_model=ImageResponse, status_code=status.HTTP_201_CREATED)
async def push_image(
    payload: ImageCreate,
    caller: CurrentIdentityDep,
    gallery: GalleryDep,
) -> ImageResponse:
    """Append a record to the catalog (administrator only)."""
    try:
        index = gallery.push_image(caller, payload.reference, payload.attribution)
    except RotationError as err:
        raise to_http_exception(err) from err
    return ImageResponse(index=index, reference=payload.reference, attribution=payload.attribution)


@router.put("/{index}", response_model=ImageResponse)
async def update_image(
    index: int,
    payload: ImageCreate,
    caller: CurrentIdentityDep,
    gallery: GalleryDep,
) -> ImageResponse:
    """Overwrite the record at a catalog index (administrator only)."""
    try:
        gallery.update_image(caller, index, payload.reference, payload.attribution)
    except RotationError as err:
        raise to_http_exception(err) from err
    return ImageResponse(index=index, reference=payload.reference, attribution=payload.attribution)
