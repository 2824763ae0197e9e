"""Shared fixtures for core unit tests"""

import asyncio

import pytest

from panelify.core.files import ContentStore
from panelify.core.models import PickResult, ReadResult
from panelify.crud.memory_repo import MemoryLayoutStore


SAMPLE_MD = """\
# Daily

Intro that belongs to no section.

## Tasks

- buy milk
- call home

## Notes

nothing
"""

SAMPLE_PATH = "/docs/daily.md"


class FakeContentStore(ContentStore):
    """In-memory documents; optionally fails or blocks reads until released."""

    def __init__(self, docs: dict[str, str] = None):
        self.docs = dict(docs or {})
        self.picked: PickResult | None = None
        self.raise_on_read = False
        self.gate: asyncio.Event | None = None
        self.reads = 0

    async def read(self, path: str) -> ReadResult:
        self.reads += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.raise_on_read:
            raise RuntimeError("disk on fire")
        if path not in self.docs:
            return ReadResult(success=False, error=f"ENOENT: {path}")
        return ReadResult(success=True, content=self.docs[path])

    async def pick_document(self) -> PickResult | None:
        return self.picked


class FailingLayoutStore(MemoryLayoutStore):
    """Memory store whose load/save can be made to fail."""

    def __init__(self):
        super().__init__()
        self.raise_on_load = False
        self.raise_on_save = False
        self.save_result = True

    async def load(self, path):
        if self.raise_on_load:
            raise ConnectionError("store unreachable")
        return await super().load(path)

    async def save(self, path, placement):
        if self.raise_on_save:
            raise ConnectionError("store unreachable")
        if not self.save_result:
            return False
        return await super().save(path, placement)


@pytest.fixture(name="content_store")
def content_store_fixture():
    return FakeContentStore({SAMPLE_PATH: SAMPLE_MD})


@pytest.fixture(name="layout_store")
def layout_store_fixture():
    return FailingLayoutStore()


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_path")
def sample_path_fixture():
    return SAMPLE_PATH
