"""Shared pytest fixtures."""

import asyncio
import copy
from io import BytesIO
from types import SimpleNamespace
from typing import Any
from uuid import uuid4

import pytest
from PIL import Image
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from mediarecords.config import Config
from mediarecords.core.core import Core
from mediarecords.core.modules.media.models import UploadedMedia
from mediarecords.errors import MediaUploadError


class FakeCursor:
    """Async cursor over a snapshot of matching documents."""

    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self._documents = documents

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents.sort(key=lambda doc: doc[key], reverse=direction == -1)
        return self

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for doc in self._documents:
            yield doc


class FakeCollection:
    """In-memory stand-in for the async collection API used by the services.

    Every call yields to the event loop, so a read-then-write done as two calls
    interleaves with other tasks. find_one_and_update holds a lock across its
    read and write, like the server-side atomic operation.
    """

    def __init__(self) -> None:
        self.documents: list[dict[str, Any]] = []
        self.indexes: list[tuple[Any, dict[str, Any]]] = []
        self.fail_writes = False
        self._lock = asyncio.Lock()

    async def create_index(self, keys: Any, **kwargs: Any) -> str:
        self.indexes.append((keys, kwargs))
        return str(keys)

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        await asyncio.sleep(0)
        doc = self._match_one(query)
        return copy.deepcopy(doc) if doc is not None else None

    def find(self, query: dict[str, Any]) -> FakeCursor:
        return FakeCursor([copy.deepcopy(doc) for doc in self.documents if _matches(doc, query)])

    async def insert_one(self, document: dict[str, Any]) -> SimpleNamespace:
        await asyncio.sleep(0)
        if self.fail_writes:
            raise PyMongoError("write failed")
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one_and_update(
        self,
        query: dict[str, Any],
        update: dict[str, Any],
        upsert: bool = False,
        return_document: bool = ReturnDocument.BEFORE,
    ) -> dict[str, Any] | None:
        if set(update) != {"$inc"}:
            raise NotImplementedError(f"Unsupported update: {update}")
        async with self._lock:
            await asyncio.sleep(0)
            if self.fail_writes:
                raise PyMongoError("write failed")
            doc = self._match_one(query)
            before = copy.deepcopy(doc)
            if doc is None:
                if not upsert:
                    return None
                doc = {"_id": uuid4(), **query}
                self.documents.append(doc)
            for field, amount in update["$inc"].items():
                doc[field] = doc.get(field, 0) + amount
            return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before

    def _match_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        return next((doc for doc in self.documents if _matches(doc, query)), None)


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


class StubBlobStore:
    """Blob store that records uploads and returns a fixed URL."""

    def __init__(self, url: str = "https://x/y.jpg") -> None:
        self.url = url
        self.uploads: list[tuple[bytes, str, str]] = []

    async def upload(self, content: bytes, folder: str, filename: str) -> UploadedMedia:
        self.uploads.append((content, folder, filename))
        return UploadedMedia(url=self.url, public_id=f"{folder}/{len(self.uploads)}")


class FailingBlobStore:
    """Blob store that always fails."""

    def __init__(self) -> None:
        self.attempts = 0

    async def upload(self, content: bytes, folder: str, filename: str) -> UploadedMedia:
        self.attempts += 1
        raise MediaUploadError("media host unavailable")


@pytest.fixture
def config():
    return Config(database_url="mongodb://localhost:27017/mediarecords_test", max_upload_size=1024 * 1024)


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
def blob_store():
    return StubBlobStore()


@pytest.fixture
def failing_blob_store():
    return FailingBlobStore()


@pytest.fixture
def core(config, database, blob_store):
    """Core wired to the in-memory database and the stub blob store."""
    return Core(config, database=database, blob_store=blob_store)


@pytest.fixture
def failing_core(config, database, failing_blob_store):
    """Core whose blob store rejects every upload."""
    return Core(config, database=database, blob_store=failing_blob_store)


@pytest.fixture
def png_bytes():
    """A small valid PNG image."""
    buffer = BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()
