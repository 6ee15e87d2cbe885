from __future__ import annotations

import asyncio

import pytest

from docstore import AsyncDatabase, TimedStateCache, ValidationError


def test_async_database_basic_flow(db_path, clock):
    async def _run():
        db = AsyncDatabase(db_path, cache=TimedStateCache(5.0, clock=clock))

        assert await db.find("users", {}) == []
        await db.define_schema("users", {"name": {}})

        with pytest.raises(ValidationError):
            await db.save("users", {"age": 1})

        saved = await db.save("users", {"name": "alice", "visits": 0, "tags": []})
        assert saved["name"] == "alice"

        updated = await db.update("users", {"name": "alice"}, {"$inc": {"visits": 1}, "$push": {"tags": "new"}})
        assert updated == {"name": "alice", "visits": 1, "tags": ["new"]}

        got = await db.find_one("users", {"name": "alice"})
        assert got == updated

        assert await db.delete("users", {"name": "alice"}) == 1
        assert await db.find_one("users", {"name": "alice"}) is None

    asyncio.run(_run())


def test_async_database_wraps_existing(db):
    adb = AsyncDatabase(database=db)
    assert adb.sync is db

    async def _run():
        await adb.save("c", {"a": 1})

    asyncio.run(_run())
    assert db.find("c") == [{"a": 1}]



def test_overlapping_calls_run_one_at_a_time(db_path, clock):
    async def _run():
        db = AsyncDatabase(db_path, cache=TimedStateCache(5.0, clock=clock))
        calls = []
        for i in range(20):
            calls.append(db.define_schema(f"c{i % 3}", {"i": {}}))
            calls.append(db.save(f"c{i % 3}", {"i": i}))
        await asyncio.gather(*calls)
        return [await db.find(f"c{n}") for n in range(3)]

    results = asyncio.run(_run())
    assert sorted(d["i"] for docs in results for d in docs) == list(range(20))
    assert not (db_path.parent / "db.json.tmp").exists()
