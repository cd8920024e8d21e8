from pydantic import BaseModel, Field


class UploadedMedia(BaseModel):
    """Result of a successful upload to the media host."""

    url: str = Field(..., description="Stable HTTPS URL of the stored asset")
    public_id: str = Field(..., description="Media host identifier of the asset")
    resource_type: str = "image"
    format: str | None = None
    size: int | None = Field(None, description="Stored size in bytes")
