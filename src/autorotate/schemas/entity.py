"""Entity registry and administration Pydantic schemas."""
from __future__ import annotations

from pydantic import BaseModel, Field


class EntityResponse(BaseModel):
    """Schema for an entity's ownership record."""

    entity_id: int
    owner: str
    approved: str | None = None


class EntityApprove(BaseModel):
    """Schema for approving (or clearing, with null) a delegate."""

    delegate: str | None = None


class EntityTransfer(BaseModel):
    """Schema for transferring an entity to a new owner."""

    to: str = Field(..., min_length=1)


class MetadataResponse(BaseModel):
    """Descriptive document for an entity plus its data URI encoding."""

    name: str
    description: str
    image: str
    artist: str
    uri: str


class AdministratorResponse(BaseModel):
    """Schema exposing the current administrator identity."""

    administrator: str


class AdministratorTransfer(BaseModel):
    """Schema for handing administration to another identity."""

    new_administrator: str = Field(..., min_length=1)
