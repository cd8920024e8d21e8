"""Records that pair uploaded media with metadata fields."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mediarecords.core.db import MongoModel
from mediarecords.utils import now


class RecordField(BaseModel):
    """Form field accepted on upload and the document field it is stored as."""

    form_name: str = Field(..., description="Multipart form field name")
    stored_name: str = Field(..., description="Field name in the stored record")
    required: bool = False

    model_config = ConfigDict(frozen=True)


class RecordKind(BaseModel):
    """Descriptor for one entity kind (carousel image, blog post, event, ...)."""

    name: str = Field(..., description="Kind slug used in URLs, e.g. 'blog'")
    collection: str = Field(..., description="MongoDB collection holding the records")
    folder: str = Field(..., description="Media host folder for uploaded images")
    media_field: str = Field(..., description="Stored field that holds the media URL")
    fields: tuple[RecordField, ...] = ()
    sequence: str | None = Field(None, description="Counter name used to number records, if any")
    id_field: str | None = Field(None, description="Stored field that holds the sequence value")

    model_config = ConfigDict(frozen=True)

    @property
    def required_fields(self) -> tuple[RecordField, ...]:
        return tuple(field for field in self.fields if field.required)


class MediaRecord(MongoModel):
    """Stored record. Kind-specific fields are kept as extra top-level attributes."""

    created_at: datetime = Field(default_factory=now)

    model_config = ConfigDict(extra="allow")
