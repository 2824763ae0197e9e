"""Shared fixtures for crud unit tests"""

import pytest
from sqlalchemy import create_engine
from sqlmodel import SQLModel, Session
from sqlalchemy.pool import StaticPool

from panelify.crud import models  # noqa: F401


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Fresh session per test; changes are not committed."""
    with Session(engine) as s:
        yield s


@pytest.fixture(name="existing_files")
def existing_files_fixture(tmp_path):
    """Three markdown files on disk, as path strings."""
    paths = []
    for name in ("one", "two", "three"):
        p = tmp_path / f"{name}.md"
        p.write_text(f"## {name}\n")
        paths.append(str(p))
    return paths
