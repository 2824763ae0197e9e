"""Document content access: ContentStore interface, filesystem store, and display names"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from panelify.core.models import PickResult, ReadResult
from panelify.core.utils.logger import get_logger


MD_EXTENSIONS = {'.md'}

logger = get_logger(__name__)

Picker = Callable[[], Optional[str]]


class ContentStore(ABC):
    @abstractmethod
    async def read(self, path: str) -> ReadResult:
        """Read a document; failures are returned as ReadResult(success=False)."""
        raise NotImplementedError

    @abstractmethod
    async def pick_document(self) -> PickResult | None:
        """Interactively choose a document; None if the selection was cancelled."""
        raise NotImplementedError


class FileContentStore(ContentStore):
    """Reads UTF-8 markdown from the local filesystem.

    `picker` is called to choose a path for pick_document (e.g. a prompt or a
    native dialog owned by the caller); without one, picking always cancels.
    """

    def __init__(self, picker: Picker | None = None, encoding: str = 'utf-8'):
        self.picker = picker
        self.encoding = encoding

    async def read(self, path: str) -> ReadResult:
        try:
            content = Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read %s: %s", path, e)
            return ReadResult(success=False, error=str(e))
        return ReadResult(success=True, content=content)

    async def pick_document(self) -> PickResult | None:
        if self.picker is None:
            return None
        chosen = self.picker()
        if not chosen:
            return None
        if Path(chosen).suffix not in MD_EXTENSIONS:
            raise ValueError(f"Not a markdown file: {chosen}")
        result = await self.read(chosen)
        if not result.success:
            raise OSError(result.error)
        return PickResult(path=str(chosen), content=result.content or "")


def display_name(path: str) -> str:
    """File name without its .md extension, or 'Unknown' for an empty path."""
    name = Path(path).name
    if name.endswith('.md'):
        name = name[:-len('.md')]
    return name or "Unknown"
