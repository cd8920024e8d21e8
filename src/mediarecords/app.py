from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from pymongo.asynchronous.database import AsyncDatabase

from mediarecords.config import Config
from mediarecords.core.core import Core
from mediarecords.core.modules.media.storage import BlobStore
from mediarecords.core.modules.record.kinds import RECORD_KINDS, get_record_kind
from mediarecords.core.modules.record.models import MediaRecord, RecordKind


class App:
    """Facade for all application operations, resolves record kinds before delegating to Core."""

    def __init__(
        self,
        config: Config,
        database: AsyncDatabase[dict[str, Any]] | None = None,
        blob_store: BlobStore | None = None,
    ) -> None:
        self._core = Core(config, database=database, blob_store=blob_store)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def create_record(
        self, kind_name: str, form_values: dict[str, str | None], content: bytes | None, filename: str
    ) -> MediaRecord:
        """Upload an image and store a new record of the given kind."""
        kind = get_record_kind(kind_name)
        return await self._core.services.record.create_record(kind, form_values, content, filename)

    async def list_records(self, kind_name: str) -> list[MediaRecord]:
        """Get all records of the given kind."""
        kind = get_record_kind(kind_name)
        return await self._core.services.record.list_records(kind)

    async def get_record(self, kind_name: str, identifier: str) -> MediaRecord:
        """Get a single record by identifier."""
        kind = get_record_kind(kind_name)
        return await self._core.services.record.get_record(kind, identifier)

    def list_kinds(self) -> list[RecordKind]:
        """Get all registered record kinds."""
        return list(RECORD_KINDS.values())

    def get_version(self) -> dict[str, str]:
        """Get package version and build metadata."""
        try:
            package_version = version("mediarecords")
        except PackageNotFoundError:
            package_version = "unknown"
        config = self._core.config
        return {
            "version": package_version,
            "git_commit_hash": config.git_commit_hash,
            "git_commit_date": config.git_commit_date,
            "build_time": config.build_time,
        }
