"""Item categories and the results of asking a grid for room."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .items import InventoryItem

INDEX_NONE = -1


class ItemCategory(enum.Enum):
    """Which inventory grid an item belongs to."""

    EQUIPPABLE = 0
    CONSUMABLE = 1
    CRAFTABLE = 2
    NONE = 3


@dataclass
class SlotAvailability:
    """Room for an item at one grid index."""

    index: int = INDEX_NONE
    amount_to_fill: int = 0
    item_at_index: bool = False


@dataclass
class SlotAvailabilityResult:
    """The outcome of looking for room for an item across a grid."""

    item: InventoryItem | None = None
    total_room_to_fill: int = 0
    remainder: int = 0
    stackable: bool = False
    slot_availabilities: list[SlotAvailability] = field(default_factory=list)