"""Panel placement on the 12-column grid: default tiling, merge, and stored-data validation"""

from typing import Any, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from panelify.core.models import PlacementItem, Section


GRID_COLUMNS    = 12
COLUMNS         = 3     # visual columns; COLUMNS * CELL_WIDTH fills the grid
CELL_WIDTH      = 4
CELL_HEIGHT     = 6
MIN_CELL_WIDTH  = 3
MIN_CELL_HEIGHT = 4

_PLACEMENT_ADAPTER = TypeAdapter(list[PlacementItem])


def default_layout(sections: Sequence[Section]) -> list[PlacementItem]:
    """Tile sections left-to-right, top-to-bottom in a 3-column grid."""
    return [
        PlacementItem(
            id=section.id,
            x=(index % COLUMNS) * CELL_WIDTH,
            y=(index // COLUMNS) * CELL_HEIGHT,
            w=CELL_WIDTH,
            h=CELL_HEIGHT,
            minW=MIN_CELL_WIDTH,
            minH=MIN_CELL_HEIGHT,
        )
        for index, section in enumerate(sections)
    ]


def bottom_edge(placement: Sequence[PlacementItem]) -> int:
    """Return max(y + h) over the placement, or 0 when it is empty."""
    return max((item.y + item.h for item in placement), default=0)


def merge_new_sections(
    new_sections: Sequence[Section],
    existing: Sequence[PlacementItem],
    ) -> Sequence[PlacementItem]:
    """Append default-tiled panels for new_sections below the existing placement.

    Existing items are returned untouched and first. When new_sections is empty
    the existing placement itself is returned.
    """
    if not new_sections:
        return existing

    max_y = bottom_edge(existing)
    added = [
        item.model_copy(update={"y": max_y + (index // COLUMNS) * CELL_HEIGHT})
        for index, item in enumerate(default_layout(new_sections))
    ]
    return [*existing, *added]


def find_new_sections(sections: Sequence[Section], placement: Sequence[PlacementItem]) -> list[Section]:
    """Return sections with no placement item yet, in document order."""
    placed = {item.id for item in placement}
    return [s for s in sections if s.id not in placed]


def validate_placement(raw: Any) -> Optional[list[PlacementItem]]:
    """Convert stored placement data to items; None if it is not a well-formed list."""
    if not isinstance(raw, list):
        return None
    try:
        return _PLACEMENT_ADAPTER.validate_python(raw, strict=True)
    except ValidationError:
        return None


def dump_placement(placement: Sequence[PlacementItem]) -> list[dict[str, Any]]:
    """Serialize items to the storage format: [{i, x, y, w, h, minW?, minH?}]."""
    return [item.model_dump(by_alias=True, exclude_none=True) for item in placement]
