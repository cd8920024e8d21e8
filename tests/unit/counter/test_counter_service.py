"""Tests for sequential counter allocation."""

import asyncio

import pytest
from pymongo.errors import PyMongoError

from mediarecords.errors import ValidationError


class TestNextValue:
    """Tests for CounterService.next_value."""

    @pytest.mark.asyncio
    async def test_sequential_calls_start_at_one(self, core):
        """Test that a fresh counter returns 1 then 2."""
        counter = core.services.counter
        assert await counter.next_value("blog_id") == 1
        assert await counter.next_value("blog_id") == 2

    @pytest.mark.asyncio
    async def test_counter_document_created_on_first_use(self, core, database):
        """Test that the first allocation upserts exactly one counter document."""
        await core.services.counter.next_value("blog_id")
        docs = database.get_collection("counters").documents
        assert len(docs) == 1
        assert docs[0]["name"] == "blog_id"
        assert docs[0]["value"] == 1

    @pytest.mark.asyncio
    async def test_names_are_independent(self, core):
        """Test that allocating from one counter does not move another."""
        counter = core.services.counter
        for _ in range(5):
            await counter.next_value("a")
        assert await counter.next_value("b") == 1
        assert await counter.next_value("a") == 6

    @pytest.mark.asyncio
    @pytest.mark.parametrize("calls", [1, 2, 25, 100])
    async def test_concurrent_calls_yield_no_duplicates_or_gaps(self, core, calls):
        """Test that concurrent callers get exactly 1..k between them."""
        counter = core.services.counter
        values = await asyncio.gather(*(counter.next_value("x") for _ in range(calls)))
        assert sorted(values) == list(range(1, calls + 1))

    @pytest.mark.asyncio
    async def test_concurrent_calls_continue_from_prior_value(self, core):
        """Test that concurrent calls continue from an existing value k."""
        counter = core.services.counter
        for _ in range(3):
            await counter.next_value("x")
        values = await asyncio.gather(*(counter.next_value("x") for _ in range(10)))
        assert sorted(values) == list(range(4, 14))

    @pytest.mark.asyncio
    async def test_empty_name_rejected(self, core):
        """Test that an empty counter name is a validation error."""
        with pytest.raises(ValidationError):
            await core.services.counter.next_value("")

    @pytest.mark.asyncio
    async def test_storage_failure_propagates_without_mutation(self, core, database):
        """Test that a failed update raises and leaves the counter unchanged."""
        counter = core.services.counter
        await counter.next_value("blog_id")
        database.get_collection("counters").fail_writes = True

        with pytest.raises(PyMongoError):
            await counter.next_value("blog_id")

        database.get_collection("counters").fail_writes = False
        assert await counter.current_value("blog_id") == 1
        assert await counter.next_value("blog_id") == 2


class TestCurrentValue:
    """Tests for CounterService.current_value."""

    @pytest.mark.asyncio
    async def test_missing_counter_is_zero(self, core):
        assert await core.services.counter.current_value("missing") == 0

    @pytest.mark.asyncio
    async def test_does_not_increment(self, core):
        counter = core.services.counter
        await counter.next_value("blog_id")
        assert await counter.current_value("blog_id") == 1
        assert await counter.current_value("blog_id") == 1


@pytest.mark.asyncio
async def test_unique_index_on_name(core, database):
    """Test that startup creates a unique index on the counter name."""
    await core.services.counter.on_start()
    indexes = database.get_collection("counters").indexes
    assert ([("name", 1)], {"unique": True}) in indexes
