"""The inventory menu: a base widget and a spatial inventory with three grids."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .events import Event
from .grid_types import ItemCategory, SlotAvailabilityResult
from .inventory_grid import InventoryGrid
from .items import ItemComponent

logger = logging.getLogger("invgrid")


@dataclass(eq=False)
class _Button:
    enabled: bool = True
    on_clicked: Event = field(default_factory=Event)


@dataclass(eq=False)
class InventoryBase:
    """A menu that can tell whether an item would fit; the base has no room at all."""

    visible: bool = True
    in_viewport: bool = False

    @property
    def grids(self) -> tuple[InventoryGrid, ...]:
        return ()

    def has_room_for_item(self, item_component: ItemComponent | None) -> SlotAvailabilityResult:
        """An empty result: no room anywhere."""
        return SlotAvailabilityResult()


@dataclass(eq=False)
class SpatialInventory(InventoryBase):
    """Three grids, one per item category, with buttons to switch between them."""

    grid_equippables: InventoryGrid = field(
        default_factory=lambda: InventoryGrid(item_category=ItemCategory.EQUIPPABLE)
    )
    grid_consumables: InventoryGrid = field(
        default_factory=lambda: InventoryGrid(item_category=ItemCategory.CONSUMABLE)
    )
    grid_craftables: InventoryGrid = field(
        default_factory=lambda: InventoryGrid(item_category=ItemCategory.CRAFTABLE)
    )
    button_equippables: _Button = field(default_factory=_Button)
    button_consumables: _Button = field(default_factory=_Button)
    button_craftables: _Button = field(default_factory=_Button)
    active_grid: InventoryGrid | None = None

    def __post_init__(self) -> None:
        self.button_equippables.on_clicked.connect(self.show_equippables)
        self.button_consumables.on_clicked.connect(self.show_consumables)
        self.button_craftables.on_clicked.connect(self.show_craftables)
        self.show_equippables()

    @property
    def grids(self) -> tuple[InventoryGrid, ...]:
        return (self.grid_equippables, self.grid_consumables, self.grid_craftables)

    def show_equippables(self) -> None:
        """Show the equippables grid."""
        self._set_active_grid(self.grid_equippables, self.button_equippables)

    def show_consumables(self) -> None:
        """Show the consumables grid."""
        self._set_active_grid(self.grid_consumables, self.button_consumables)

    def show_craftables(self) -> None:
        """Show the craftables grid."""
        self._set_active_grid(self.grid_craftables, self.button_craftables)

    def _disable_button(self, button: _Button) -> None:
        for other in (self.button_equippables, self.button_consumables, self.button_craftables):
            other.enabled = True
        button.enabled = False

    def _set_active_grid(self, grid: InventoryGrid, button: _Button) -> None:
        self._disable_button(button)
        self.active_grid = grid

    def has_room_for_item(self, item_component: ItemComponent | None) -> SlotAvailabilityResult:
        """Ask the grid of the item's category; an item without a category has no room."""
        category = (
            item_component.item_manifest.item_category
            if item_component is not None
            else ItemCategory.NONE
        )
        if category is ItemCategory.EQUIPPABLE:
            return self.grid_equippables.has_room_for_item(item_component)
        if category is ItemCategory.CONSUMABLE:
            return self.grid_consumables.has_room_for_item(item_component)
        if category is ItemCategory.CRAFTABLE:
            return self.grid_craftables.has_room_for_item(item_component)
        logger.error("ItemComponent doesn't have a valid Item Category.")
        return SlotAvailabilityResult()