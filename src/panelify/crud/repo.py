from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Sequence

from panelify.core.models import PlacementItem

class LayoutStore(ABC):
    @abstractmethod
    async def load(self, path: str) -> Any | None:
        """Return the raw stored placement for path, or None if nothing is stored."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, path: str, placement: Sequence[PlacementItem]) -> bool:
        """Persist the whole placement for path; return the success flag."""
        raise NotImplementedError
