"""Recent-files list and last-opened document: record, prune, and list operations"""

from datetime import datetime, timedelta
from pathlib import Path

from sqlalchemy import func
from sqlmodel import Session, select

from panelify.crud.models import AppSetting, RecentFile


LAST_OPENED_KEY = "last_opened_file"


def prune_recent(session: Session, max_recent: int) -> int:
    """Delete the oldest entries beyond max_recent. Returns count deleted."""
    entries = session.exec(select(RecentFile).order_by(RecentFile.opened_at.desc())).all()
    excess = entries[max_recent:]
    for entry in excess:
        session.delete(entry)
    session.flush()
    return len(excess)


def record_recent(
    session: Session,
    path: str,
    max_recent: int = 5,
    opened_at: datetime | None = None,
    ) -> RecentFile:
    """Move path to the front of the recent-files list, keeping at most max_recent entries.

    Flushes but does not commit; caller controls the transaction.
    """
    if opened_at is None:
        latest = session.exec(select(func.max(RecentFile.opened_at))).one()
        opened_at = datetime.now()
        if latest is not None and opened_at <= latest:
            opened_at = latest + timedelta(microseconds=1)

    entry = session.get(RecentFile, path)
    if entry is None:
        entry = RecentFile(path=path)
    entry.opened_at = opened_at
    session.add(entry)
    session.flush()
    prune_recent(session, max_recent)
    return entry


def list_recent(session: Session) -> list[str]:
    """Return recent paths newest first, dropping (and deleting) entries whose file no longer exists."""
    entries = session.exec(select(RecentFile).order_by(RecentFile.opened_at.desc())).all()
    existing = []
    for entry in entries:
        if Path(entry.path).exists():
            existing.append(entry.path)
        else:
            session.delete(entry)
    session.flush()
    return existing


def set_last_opened(session: Session, path: str) -> None:
    """Remember path as the last opened document."""
    setting = session.get(AppSetting, LAST_OPENED_KEY)
    if setting is None:
        setting = AppSetting(key=LAST_OPENED_KEY, value=path)
    setting.value = path
    session.add(setting)
    session.flush()


def get_last_opened(session: Session) -> str | None:
    """Return the last opened document if it still exists, else None."""
    setting = session.get(AppSetting, LAST_OPENED_KEY)
    if setting is None or not Path(setting.value).exists():
        return None
    return setting.value
