"""Root test configuration: session-level cleanup of runtime artifacts"""

from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

# Default db_url of a CLI run without PANELIFY_DB_URL
_CLEANUP_FILES = ["panelify.db"]


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove the default database file if a test session created it."""
    yield
    for name in _CLEANUP_FILES:
        p = _PROJECT_ROOT / name
        if p.exists():
            p.unlink()
