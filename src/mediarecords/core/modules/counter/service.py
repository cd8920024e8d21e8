from typing import Any

import structlog
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from mediarecords.core.core import Service
from mediarecords.core.modules.counter.models import Counter
from mediarecords.errors import ValidationError

logger = structlog.get_logger(__name__)


class CounterService(Service):
    """Hands out sequential integers per counter name."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("counters")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        # Concurrent first-use upserts must not produce two documents for one name
        await self._collection.create_index([("name", 1)], unique=True)

    async def next_value(self, name: str) -> int:
        """Atomically increment and return the next value for a counter name.

        A missing counter is created by the same operation, so the first call returns 1.
        Errors from MongoDB propagate unchanged; the call is never retried here.
        """
        if not name:
            raise ValidationError("Counter name must not be empty")

        result = await self._collection.find_one_and_update(
            {"name": name},
            {"$inc": {"value": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        value = Counter.model_validate(result).value
        logger.debug("Allocated sequence value", counter=name, value=value)
        return value

    async def current_value(self, name: str) -> int:
        """Get the current value without incrementing."""
        doc = await self._collection.find_one({"name": name})
        if doc:
            return Counter.model_validate(doc).value
        return 0
