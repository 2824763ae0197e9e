"""Unit tests for crud/recent.py"""

from datetime import datetime, timedelta

import pytest

from panelify.crud.models import RecentFile
from panelify.crud.recent import (
    get_last_opened, list_recent, prune_recent, record_recent, set_last_opened,
)


T0 = datetime(2024, 1, 1, 9, 0, 0)


def _record_all(session, paths, max_recent=5):
    """Record paths in order, one minute apart, so the last one is newest."""
    for n, p in enumerate(paths):
        record_recent(session, p, max_recent, opened_at=T0 + timedelta(minutes=n))


def test_record_recent_newest_first(session, existing_files):
    _record_all(session, existing_files)
    assert list_recent(session) == list(reversed(existing_files))


def test_record_recent_moves_existing_entry_to_front(session, existing_files):
    """Re-recording a path does not duplicate it; it becomes the newest."""
    one, two, three = existing_files
    _record_all(session, [one, two, three, one])
    assert list_recent(session) == [one, three, two]


@pytest.mark.parametrize("max_recent,expected_count", [(5, 3), (2, 2), (0, 0)])
def test_record_recent_caps_list(session, existing_files, max_recent, expected_count):
    _record_all(session, existing_files, max_recent=max_recent)
    assert len(list_recent(session)) == expected_count


def test_prune_recent_drops_oldest(session, existing_files):
    _record_all(session, existing_files, max_recent=10)
    assert prune_recent(session, 1) == 2
    assert list_recent(session) == [existing_files[-1]]


def test_list_recent_drops_vanished_files(session, existing_files, tmp_path):
    gone = str(tmp_path / "gone.md")
    _record_all(session, [*existing_files, gone])
    assert gone not in list_recent(session)
    assert session.get(RecentFile, gone) is None


def test_last_opened_round_trip(session, existing_files):
    assert get_last_opened(session) is None
    set_last_opened(session, existing_files[0])
    set_last_opened(session, existing_files[1])
    assert get_last_opened(session) == existing_files[1]


def test_last_opened_missing_file_is_none(session, tmp_path):
    set_last_opened(session, str(tmp_path / "deleted.md"))
    assert get_last_opened(session) is None
