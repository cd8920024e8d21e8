from typing import Any

import structlog
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from mediarecords.core.core import Service
from mediarecords.core.modules.record.kinds import RECORD_KINDS
from mediarecords.core.modules.record.models import MediaRecord, RecordKind
from mediarecords.core.modules.record.validators import build_identifier_query, parse_form_fields
from mediarecords.errors import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class RecordService(Service):
    """Creates and reads media records for every registered kind."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collections = {kind.name: database.get_collection(kind.collection) for kind in RECORD_KINDS.values()}

    async def on_start(self) -> None:
        """Create indexes for listing and identifier lookup."""
        for kind in RECORD_KINDS.values():
            collection = self._get_collection(kind)
            await collection.create_index([("created_at", 1)])
            if kind.id_field is not None:
                await collection.create_index([(kind.id_field, 1)], unique=True)

    async def create_record(
        self, kind: RecordKind, form_values: dict[str, str | None], content: bytes | None, filename: str
    ) -> MediaRecord:
        """Upload the image, then number the record if the kind is sequenced, then store it.

        A failed upload leaves no record and consumes no sequence value. A failed
        insert after a successful upload leaves the uploaded asset orphaned.

        Raises:
            ValidationError: If the file or a required field is missing, or the file is not an image
            MediaUploadError: If the media host fails
        """
        if content is None:
            raise ValidationError("No file uploaded")
        fields = parse_form_fields(kind, form_values)

        media = await self.core.services.media.upload_image(content, kind.folder, filename)

        data: dict[str, Any] = {**fields, kind.media_field: media.url}
        if kind.sequence is not None and kind.id_field is not None:
            data[kind.id_field] = await self.core.services.counter.next_value(kind.sequence)

        record = MediaRecord(**data)
        try:
            await self._get_collection(kind).insert_one(record.to_mongo())
        except PyMongoError:
            logger.error("Record insert failed, uploaded media is orphaned", kind=kind.name, public_id=media.public_id)
            raise

        logger.debug("Created record", kind=kind.name, record_id=record.id)
        return record

    async def list_records(self, kind: RecordKind) -> list[MediaRecord]:
        """Get all records of a kind, by sequence value when numbered, else by creation time."""
        sort_field = kind.id_field or "created_at"
        cursor = self._get_collection(kind).find({}).sort(sort_field, 1)
        return await MediaRecord.list_cursor(cursor)

    async def get_record(self, kind: RecordKind, identifier: str) -> MediaRecord:
        """Get one record by its public identifier.

        Raises:
            NotFoundError: If the identifier is malformed or no record matches
        """
        query = build_identifier_query(kind, identifier)
        doc = await self._get_collection(kind).find_one(query)
        if doc is None:
            raise NotFoundError(f"{kind.name} not found: {identifier}")
        return MediaRecord.model_validate(doc)

    def _get_collection(self, kind: RecordKind) -> AsyncCollection[dict[str, Any]]:
        return self._collections[kind.name]
