from dataclasses import dataclass, field
from typing import Any, Sequence

from panelify.core.layout import dump_placement
from panelify.core.models import PlacementItem
from panelify.crud.repo import LayoutStore

@dataclass
class MemoryLayoutStore(LayoutStore):
    _layouts: dict[str, Any] = field(default_factory=dict)

    async def load(self, path: str) -> Any | None:
        return self._layouts.get(path)

    async def save(self, path: str, placement: Sequence[PlacementItem]) -> bool:
        self._layouts[path] = dump_placement(placement)
        return True
