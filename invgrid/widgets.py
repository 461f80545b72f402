"""The small widgets of the inventory: grid slots, slotted and hover items, and the HUD."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .events import Event
from .grid_types import INDEX_NONE
from .tags import EMPTY_TAG, GameplayTag

if TYPE_CHECKING:
    from .items import InventoryItem

NO_ROOM_MESSAGE = "No Room In Inventory."


def _format_count(count: int) -> str:
    return f"{count:,}"


class GridSlotState(enum.Enum):
    """How a grid slot is drawn."""

    UNOCCUPIED = 0
    OCCUPIED = 1
    SELECTED = 2
    GRAYED_OUT = 3


class MouseButton(enum.Enum):
    """The mouse button behind a pointer event."""

    LEFT = "LeftMouseButton"
    RIGHT = "RightMouseButton"
    MIDDLE = "MiddleMouseButton"


@dataclass(frozen=True)
class PointerEvent:
    """A mouse press on a widget."""

    effecting_button: MouseButton = MouseButton.LEFT
    position: tuple[float, float] = (0.0, 0.0)

    @property
    def is_left_click(self) -> bool:
        return self.effecting_button is MouseButton.LEFT

    @property
    def is_right_click(self) -> bool:
        return self.effecting_button is MouseButton.RIGHT


@dataclass(eq=False)
class GridSlot:
    """One tile of an inventory grid.

    ``upper_left_index`` is the index of the tile that holds the item covering
    this one, or INDEX_NONE when no item covers it.
    """

    index: int = 0
    inventory_item: InventoryItem | None = None
    stack_count: int = 0
    upper_left_index: int = INDEX_NONE
    available: bool = True
    brush_unoccupied: Any = None
    brush_occupied: Any = None
    brush_selected: Any = None
    brush_grayed_out: Any = None
    state: GridSlotState = GridSlotState.UNOCCUPIED
    image: Any = None

    def _show(self, state: GridSlotState, brush: Any) -> None:
        self.state = state
        self.image = brush

    def set_occupied_texture(self) -> None:
        """Draw the slot as holding an item."""
        self._show(GridSlotState.OCCUPIED, self.brush_occupied)

    def set_unoccupied_texture(self) -> None:
        """Draw the slot as empty."""
        self._show(GridSlotState.UNOCCUPIED, self.brush_unoccupied)

    def set_selected_texture(self) -> None:
        """Draw the slot as selected."""
        self._show(GridSlotState.SELECTED, self.brush_selected)

    def set_grayed_out_texture(self) -> None:
        """Draw the slot as unavailable."""
        self._show(GridSlotState.GRAYED_OUT, self.brush_grayed_out)


@dataclass(eq=False)
class SlottedItem:
    """The icon of an item placed on the grid."""

    grid_index: int = 0
    grid_dimensions: tuple[int, int] = (1, 1)
    inventory_item: InventoryItem | None = None
    stackable: bool = False
    image_brush: Any = None
    stack_count_text: str = ""
    stack_count_visible: bool = False
    on_slotted_item_clicked: Event = field(default_factory=Event)

    def update_stack_count(self, stack_count: int) -> None:
        """Show a positive stack count; hide the count otherwise."""
        if stack_count > 0:
            self.stack_count_visible = True
            self.stack_count_text = _format_count(stack_count)
        else:
            self.stack_count_visible = False

    def on_mouse_button_down(self, mouse_event: PointerEvent) -> bool:
        """Announce the click with this item's grid index; the press is always handled."""
        self.on_slotted_item_clicked.emit(self.grid_index, mouse_event)
        return True


@dataclass(eq=False)
class HoverItem:
    """The item that follows the mouse after it is picked up from the grid."""

    inventory_item: InventoryItem | None = None
    previous_grid_index: int = INDEX_NONE
    grid_dimensions: tuple[int, int] = (1, 1)
    stackable: bool = False
    stack_count: int = 0
    image_brush: Any = None
    stack_count_text: str = ""
    stack_count_visible: bool = False

    def update_stack_count(self, count: int) -> None:
        """Show a positive stack count; hide the count otherwise."""
        if count > 0:
            self.stack_count_text = _format_count(count)
            self.stack_count_visible = True
        else:
            self.stack_count_visible = False

    def item_type(self) -> GameplayTag:
        """The type of the held item, or the empty tag when nothing is held."""
        if self.inventory_item is not None:
            return self.inventory_item.manifest.item_type
        return EMPTY_TAG

    def set_is_stackable(self, stacks: bool) -> None:
        """Record whether the item stacks; a non-stacking item hides its count."""
        self.stackable = stacks
        if not stacks:
            self.stack_count_visible = False


@dataclass(eq=False)
class InfoMessage:
    """A message shown for ``message_lifetime`` seconds and then hidden."""

    message_lifetime: float = 3.0
    text: str = ""
    visible: bool = False
    active: bool = False
    _remaining: float | None = field(default=None, repr=False)

    def set_message(self, message: str) -> None:
        """Show ``message`` and restart the timer that hides it."""
        self.text = message
        if not self.active:
            self.visible = True
        self.active = True
        self._remaining = self.message_lifetime

    def tick(self, delta_time: float) -> None:
        """Advance the hide timer by ``delta_time`` seconds."""
        if self._remaining is None:
            return
        self._remaining -= delta_time
        if self._remaining <= 0:
            self._remaining = None
            self.visible = False
            self.active = False


@dataclass(eq=False)
class HUDWidget:
    """The on-screen overlay: a pickup prompt and an info message."""

    info_message: InfoMessage | None = field(default_factory=InfoMessage)
    pickup_message: str | None = None

    @property
    def pickup_message_visible(self) -> bool:
        return self.pickup_message is not None

    def bind(self, inventory_component: Any) -> bool:
        """Listen for the component's no-room event; returns whether a component was bound."""
        if inventory_component is None:
            return False
        inventory_component.no_room_in_inventory.connect(self.on_no_room)
        return True

    def on_no_room(self) -> None:
        """Tell the player the inventory is full."""
        if self.info_message is None:
            return
        self.info_message.set_message(NO_ROOM_MESSAGE)

    def show_pickup_message(self, message: str) -> None:
        """Show the prompt for the item under the crosshair."""
        self.pickup_message = message

    def hide_pickup_message(self) -> None:
        """Hide the pickup prompt."""
        self.pickup_message = None