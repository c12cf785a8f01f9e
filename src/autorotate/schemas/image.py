"""Image catalog Pydantic schemas."""


from pydantic import BaseModel, Field


class ImageCreate(BaseModel):
    """Schema for appending or overwriting a catalog record."""

    reference: str = Field(..., description="Opaque image reference, e.g. a URI.")
    attribution: str = Field(..., description="Credit for the image's creator.")


class ImageResponse(BaseModel):
    """Schema for a catalog record returned by the API."""

    index: int
    reference: str
    attribution: str
