"""DocumentSession: open, reload, rearrange, and save one document's panel layout"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from panelify.core.changes import has_changed
from panelify.core.errors import ReadFailure, SessionError, StoreFailure
from panelify.core.files import ContentStore
from panelify.core.layout import default_layout, find_new_sections, merge_new_sections, validate_placement
from panelify.core.models import PlacementItem, Section
from panelify.core.sections import parse_sections
from panelify.core.utils.logger import get_logger
from panelify.crud.repo import LayoutStore


logger = get_logger(__name__)


class SessionState(str, Enum):
    empty = "empty"
    loaded = "loaded"
    reloading = "reloading"


@dataclass(frozen=True)
class Outcome:
    """Result of a session operation. applied=False marks a no-op; error is set on failure."""
    ok: bool = True
    applied: bool = True
    error: Optional[SessionError] = None

    @classmethod
    def skipped(cls) -> "Outcome":
        return cls(ok=True, applied=False)

    @classmethod
    def failed(cls, error: SessionError) -> "Outcome":
        return cls(ok=False, applied=False, error=error)


class DocumentSession:
    """Holds one open document's sections plus its current and last-saved placement.

    Every I/O operation reports failure through its Outcome and leaves state
    either fully transitioned or untouched. Only one document is open at a time.
    """

    def __init__(self, content_store: ContentStore, layout_store: LayoutStore):
        self.content_store = content_store
        self.layout_store = layout_store
        self._reset()

    def _reset(self) -> None:
        self._state = SessionState.empty
        self._path: Optional[str] = None
        self._sections: list[Section] = []
        self._placement: list[PlacementItem] = []
        self._baseline: list[PlacementItem] = []
        self._has_changes = False
        self._generation = 0

    # --- read-only state ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def sections(self) -> list[Section]:
        return list(self._sections)

    @property
    def placement(self) -> list[PlacementItem]:
        return list(self._placement)

    @property
    def baseline(self) -> list[PlacementItem]:
        return list(self._baseline)

    @property
    def has_changes(self) -> bool:
        return self._has_changes

    # --- transitions ---

    async def open_document(self, path: str) -> Outcome:
        """Read, parse, and adopt the stored (or default) placement for path."""
        try:
            result = await self.content_store.read(path)
        except Exception as e:
            logger.warning("Reading %s raised: %s", path, e)
            return Outcome.failed(ReadFailure(f"Failed to read {path}: {e}"))
        if not result.success:
            return Outcome.failed(ReadFailure(f"Failed to read {path}: {result.error}"))
        await self._adopt(path, result.content or "")
        return Outcome()

    async def open_picked(self) -> Outcome:
        """Let the content store choose a document, then adopt it like open_document."""
        try:
            picked = await self.content_store.pick_document()
        except Exception as e:
            logger.warning("Document selection failed: %s", e)
            return Outcome.failed(ReadFailure(f"Document selection failed: {e}"))
        if picked is None:
            return Outcome.skipped()
        await self._adopt(picked.path, picked.content)
        return Outcome()

    async def _adopt(self, path: str, content: str) -> None:
        sections = parse_sections(content)
        placement = await self._load_placement(path, sections)
        generation = self._generation + 1

        self._reset()
        self._state = SessionState.loaded
        self._path = path
        self._sections = sections
        self._placement = placement
        self._baseline = list(placement)
        self._generation = generation
        logger.info("Opened %s: %d section(s), %d panel(s)", path, len(sections), len(placement))

    async def _load_placement(self, path: str, sections: list[Section]) -> list[PlacementItem]:
        """Stored placement if present and well-formed, else the default tiling."""
        try:
            raw = await self.layout_store.load(path)
        except Exception as e:
            logger.warning("Loading layout for %s failed, using default: %s", path, e)
            raw = None
        if raw is None:
            return default_layout(sections)
        stored = validate_placement(raw)
        if stored is None:
            logger.warning("Stored layout for %s is malformed, using default", path)
            return default_layout(sections)
        return stored

    async def reload(self) -> Outcome:
        """Re-read the open document and place any new sections below the current arrangement.

        No-op when nothing is open or a reload is already in flight. The
        baseline is not advanced, so a reload can introduce unsaved changes.
        """
        if self._state is not SessionState.loaded:
            return Outcome.skipped()

        path, generation = self._path, self._generation
        self._state = SessionState.reloading
        try:
            try:
                result = await self.content_store.read(path)
            except Exception as e:
                logger.warning("Reloading %s raised: %s", path, e)
                return Outcome.failed(ReadFailure(f"Failed to reload {path}: {e}"))
            if not result.success:
                return Outcome.failed(ReadFailure(f"Failed to reload {path}: {result.error}"))
            if generation != self._generation:
                logger.info("Discarding reload of %s; document changed while reading", path)
                return Outcome.skipped()

            sections = parse_sections(result.content or "")
            new_sections = find_new_sections(sections, self._placement)
            placement = list(merge_new_sections(new_sections, self._placement))

            self._sections = sections
            self._placement = placement
            self._has_changes = has_changed(placement, self._baseline)
            logger.info("Reloaded %s: %d new section(s)", path, len(new_sections))
            return Outcome()
        finally:
            if self._state is SessionState.reloading and generation == self._generation:
                self._state = SessionState.loaded

    def update_arrangement(self, placement: Sequence[PlacementItem]) -> None:
        """Replace the current placement and recompute the changed flag."""
        if self._state is SessionState.empty:
            return
        self._placement = list(placement)
        self._has_changes = has_changed(self._placement, self._baseline)

    async def save(self) -> Outcome:
        """Persist the whole current placement and make it the new baseline."""
        if self._state is SessionState.empty:
            return Outcome.skipped()

        path, generation, placement = self._path, self._generation, list(self._placement)
        try:
            saved = await self.layout_store.save(path, placement)
        except Exception as e:
            logger.warning("Saving layout for %s raised: %s", path, e)
            return Outcome.failed(StoreFailure(f"Failed to save layout for {path}: {e}"))
        if not saved:
            return Outcome.failed(StoreFailure(f"Failed to save layout for {path}"))

        if generation == self._generation:
            self._baseline = placement
            self._has_changes = has_changed(self._placement, self._baseline)
        logger.info("Saved layout for %s (%d panel(s))", path, len(placement))
        return Outcome()

    def close(self) -> None:
        """Discard the open document and return to the empty state."""
        generation = self._generation
        self._reset()
        self._generation = generation + 1
