from __future__ import annotations
from datetime import datetime
from typing import Any, Sequence

from sqlalchemy.engine import Engine
from sqlmodel import Session

from panelify.core.layout import dump_placement
from panelify.core.models import PlacementItem
from panelify.core.utils.logger import get_logger
from panelify.crud.models import LayoutRecord
from panelify.crud.recent import get_last_opened, list_recent, record_recent, set_last_opened
from panelify.crud.repo import LayoutStore

logger = get_logger(__name__)

class SqlLayoutStore(LayoutStore):
    """Layouts keyed by document path; saving also updates recent files and the last opened document."""

    def __init__(self, engine: Engine, max_recent_files: int = 5):
        self.engine = engine
        self.max_recent_files = max_recent_files

    async def load(self, path: str) -> Any | None:
        with Session(self.engine) as session:
            record = session.get(LayoutRecord, path)
            return list(record.items) if record else None

    async def save(self, path: str, placement: Sequence[PlacementItem]) -> bool:
        with Session(self.engine) as session:
            record = session.get(LayoutRecord, path) or LayoutRecord(path=path)
            record.items = dump_placement(placement)
            record.updated_at = datetime.now()
            session.add(record)
            set_last_opened(session, path)
            record_recent(session, path, self.max_recent_files)
            session.commit()
        logger.debug("Stored %d panel(s) for %s", len(placement), path)
        return True

    async def touch_recent(self, path: str) -> None:
        """Push a document shown by the `open` command to the recent-files list without storing a layout."""
        with Session(self.engine) as session:
            record_recent(session, path, self.max_recent_files)
            session.commit()

    async def recent_files(self) -> list[str]:
        with Session(self.engine) as session:
            paths = list_recent(session)
            session.commit()
            return paths

    async def last_opened_file(self) -> str | None:
        with Session(self.engine) as session:
            return get_last_opened(session)
