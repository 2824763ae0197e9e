"""Unit tests for crud/sql_repo.py and crud/memory_repo.py"""

import pytest

from panelify.core.layout import validate_placement
from panelify.core.models import PlacementItem
from panelify.crud.memory_repo import MemoryLayoutStore
from panelify.crud.sql_repo import SqlLayoutStore


PLACEMENT = [
    PlacementItem(id="section-a", x=0, y=0, w=4, h=6, minW=3, minH=4),
    PlacementItem(id="section-b", x=4, y=0, w=8, h=2),
]


@pytest.fixture(name="store")
def store_fixture(engine):
    return SqlLayoutStore(engine, max_recent_files=2)


@pytest.mark.asyncio
async def test_load_unknown_path_is_none(store):
    assert await store.load("/nowhere.md") is None


@pytest.mark.asyncio
async def test_save_then_load_wire_format(store):
    """Saved placements come back as [{i, x, y, w, h, minW?, minH?}] in order."""
    assert await store.save("/a.md", PLACEMENT) is True
    raw = await store.load("/a.md")
    assert raw == [
        {"i": "section-a", "x": 0, "y": 0, "w": 4, "h": 6, "minW": 3, "minH": 4},
        {"i": "section-b", "x": 4, "y": 0, "w": 8, "h": 2},
    ]
    assert validate_placement(raw) == PLACEMENT


@pytest.mark.asyncio
async def test_save_overwrites_whole_placement(store):
    await store.save("/a.md", PLACEMENT)
    await store.save("/a.md", PLACEMENT[1:])
    assert [item["i"] for item in await store.load("/a.md")] == ["section-b"]


@pytest.mark.asyncio
async def test_layouts_are_keyed_by_path(store):
    await store.save("/a.md", PLACEMENT)
    await store.save("/b.md", [])
    assert len(await store.load("/a.md")) == 2
    assert await store.load("/b.md") == []


@pytest.mark.asyncio
async def test_save_records_recent_and_last_opened(store, existing_files):
    one, two, three = existing_files
    for p in (one, two, three):
        await store.save(p, PLACEMENT)
    recent = await store.recent_files()
    assert recent == [three, two]
    assert await store.last_opened_file() == three


@pytest.mark.asyncio
async def test_touch_recent_does_not_store_layout(store, existing_files):
    await store.touch_recent(existing_files[0])
    assert await store.recent_files() == [existing_files[0]]
    assert await store.load(existing_files[0]) is None
    assert await store.last_opened_file() is None


@pytest.mark.asyncio
async def test_memory_store_round_trip():
    store = MemoryLayoutStore()
    assert await store.load("/a.md") is None
    assert await store.save("/a.md", PLACEMENT) is True
    assert validate_placement(await store.load("/a.md")) == PLACEMENT
