"""The inventory component: owns the item list and the menu, and adds picked-up items."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable

from .events import Event
from .fast_array import InventoryList
from .fragments import StackableFragment
from .grid_types import ItemCategory
from .items import ItemComponent
from .spatial import InventoryBase, SpatialInventory
from .tags import EMPTY_TAG

INPUT_MODE_GAME_ONLY = "game_only"
INPUT_MODE_GAME_AND_UI = "game_and_ui"


class NetMode(enum.Enum):
    """How the owning actor takes part in a networked game."""

    STANDALONE = 0
    DEDICATED_SERVER = 1
    LISTEN_SERVER = 2
    CLIENT = 3


@dataclass(eq=False)
class InventoryComponent:
    """Holds a player's items and the menu that shows them.

    ``owner`` is the player controller; it is read for ``is_local_controller``
    and ``net_mode``, and its ``input_mode`` and ``show_mouse_cursor`` are set
    when the menu opens or closes.
    """

    owner: Any = None
    inventory_menu_factory: Callable[[], InventoryBase] | None = SpatialInventory
    inventory_menu: InventoryBase | None = None
    menu_open: bool = False
    using_registered_sub_object_list: bool = True
    ready_for_replication: bool = True
    replicated_sub_objects: list[Any] = field(default_factory=list)
    on_item_added: Event = field(default_factory=Event)
    on_item_removed: Event = field(default_factory=Event)
    no_room_in_inventory: Event = field(default_factory=Event)
    on_stack_change: Event = field(default_factory=Event)
    inventory_list: InventoryList = field(init=False)

    def __post_init__(self) -> None:
        self.inventory_list = InventoryList(self)

    def begin_play(self) -> None:
        """Build the inventory menu for a local player."""
        self._construct_inventory()

    def _construct_inventory(self) -> None:
        if self.owner is None:
            raise RuntimeError("Inventory Component should have a Player Controller as Owner.")
        if not getattr(self.owner, "is_local_controller", True):
            return
        if self.inventory_menu_factory is None:
            raise RuntimeError("inventory component has no inventory menu to create")
        menu = self.inventory_menu_factory()
        self.inventory_menu = menu
        menu.in_viewport = True
        for grid in menu.grids:
            grid.bind(self)
        self._close_inventory_menu()

    def toggle_inventory_menu(self) -> None:
        """Open the menu if it is closed, close it if it is open."""
        if self.menu_open:
            self._close_inventory_menu()
        else:
            self._open_inventory_menu()

    def _open_inventory_menu(self) -> None:
        if self.inventory_menu is None:
            return
        self.inventory_menu.visible = True
        self.menu_open = True
        if self.owner is None:
            return
        self.owner.input_mode = INPUT_MODE_GAME_AND_UI
        self.owner.show_mouse_cursor = True

    def _close_inventory_menu(self) -> None:
        if self.inventory_menu is None:
            return
        self.inventory_menu.visible = False
        self.menu_open = False
        if self.owner is None:
            return
        self.owner.input_mode = INPUT_MODE_GAME_ONLY
        self.owner.show_mouse_cursor = False

    def try_add_item(self, item_component: ItemComponent) -> None:
        """Add the item if there is room, stacking onto an existing item where possible."""
        if self.inventory_menu is None:
            raise RuntimeError("inventory menu has not been constructed")
        result = self.inventory_menu.has_room_for_item(item_component)
        result.item = self.inventory_list.find_first_item_by_type(
            item_component.item_manifest.item_type
        )

        if result.total_room_to_fill == 0:
            self.no_room_in_inventory.emit()
            return

        if result.item is not None and result.stackable:
            self.on_stack_change.emit(result)
            self.server_add_stacks_to_item(
                item_component, result.total_room_to_fill, result.remainder
            )
        elif result.total_room_to_fill > 0:
            self.server_add_new_item(
                item_component, result.total_room_to_fill if result.stackable else 0
            )

    def server_add_new_item(self, item_component: ItemComponent, stack_count: int) -> None:
        """Create a new item from ``item_component`` and remove the pickup from the world."""
        new_item = self.inventory_list.add_entry(item_component)
        if new_item is None:
            raise RuntimeError("inventory list could not create an item")
        new_item.total_stack_count = stack_count

        net_mode = getattr(self.owner, "net_mode", NetMode.STANDALONE)
        if net_mode in (NetMode.LISTEN_SERVER, NetMode.STANDALONE):
            self.on_item_added.emit(new_item)

        item_component.picked_up()

    def server_add_stacks_to_item(
        self, item_component: ItemComponent | None, stack_count: int, remainder: int
    ) -> None:
        """Add stacks to the held item of the same type; leave any remainder on the pickup."""
        item_type = item_component.item_manifest.item_type if item_component is not None else EMPTY_TAG
        item = self.inventory_list.find_first_item_by_type(item_type)
        if item is None:
            return

        item.total_stack_count += stack_count

        if remainder == 0:
            item_component.picked_up()
        else:
            stackable = item_component.item_manifest.fragment_of_type(StackableFragment)
            if stackable is not None:
                stackable.stack_count = remainder

    def add_rep_sub_obj(self, sub_obj: Any) -> None:
        """Register an object to be replicated along with this component."""
        if (
            self.using_registered_sub_object_list
            and self.ready_for_replication
            and sub_obj is not None
            and sub_obj not in self.replicated_sub_objects
        ):
            self.replicated_sub_objects.append(sub_obj)


def get_inventory_component(controller: Any) -> InventoryComponent | None:
    """The inventory component of ``controller``, if it has one."""
    if controller is None:
        return None
    return controller.find_component(InventoryComponent)


def get_item_category(item_component: ItemComponent | None) -> ItemCategory:
    """The category of the item behind ``item_component``."""
    if item_component is None:
        return ItemCategory.NONE
    return item_component.item_manifest.item_category