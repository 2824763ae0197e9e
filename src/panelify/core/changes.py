"""Arrangement change detection against the last saved placement"""

from typing import Sequence

from panelify.core.models import PlacementItem


def has_changed(current: Sequence[PlacementItem], baseline: Sequence[PlacementItem]) -> bool:
    """True if the placements differ in length, order, or any field of any item."""
    return list(current) != list(baseline)


def changed_ids(current: Sequence[PlacementItem], baseline: Sequence[PlacementItem]) -> list[str]:
    """Return ids that were added, removed, moved, or resized, current order first.

    Pure reordering is not reported here; use has_changed for that.
    """
    before = {item.id: item for item in baseline}
    after = {item.id: item for item in current}
    ids = [item.id for item in current if before.get(item.id) != item]
    ids += [item.id for item in baseline if item.id not in after]
    return list(dict.fromkeys(ids))
