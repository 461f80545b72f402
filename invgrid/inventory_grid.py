"""A spatial inventory grid: placing, stacking and picking up items on tiles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Union

from .fragments import GridFragment, ImageFragment, StackableFragment
from .grid_types import INDEX_NONE, ItemCategory, SlotAvailability, SlotAvailabilityResult
from .grid_utils import for_each_2d, index_from_position, position_from_index
from .items import InventoryItem, ItemComponent, ItemManifest, get_fragment
from .tags import GRID_FRAGMENT, ICON_FRAGMENT, GameplayTag
from .widgets import GridSlot, HoverItem, PointerEvent, SlottedItem

logger = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = 75.0

ItemSource = Union[ItemComponent, InventoryItem, ItemManifest]


@dataclass(frozen=True)
class _Brush:
    resource: Any
    image_size: tuple[float, float]
    draw_as: str = "image"


@dataclass(eq=False)
class _CanvasEntry:
    widget: Any
    position: tuple[float, float] = (0.0, 0.0)
    size: tuple[float, float] = (0.0, 0.0)


@dataclass(eq=False)
class InventoryGrid:
    """A ``rows`` by ``columns`` grid of slots holding items of one category.

    Slots are stored in row-major order, so a slot's index is its position in
    ``grid_slots``.
    """

    item_category: ItemCategory = ItemCategory.NONE
    rows: int = 0
    columns: int = 0
    tile_size: float = DEFAULT_TILE_SIZE
    grid_slot_factory: Callable[[], GridSlot] | None = GridSlot
    slotted_item_factory: Callable[[], SlottedItem] = SlottedItem
    hover_item_factory: Callable[[], HoverItem] = HoverItem
    viewport_scale: float = 1.0
    grid_slots: list[GridSlot] = field(default_factory=list)
    slotted_items: dict[int, SlottedItem] = field(default_factory=dict)
    canvas: list[_CanvasEntry] = field(default_factory=list)
    hover_item: HoverItem | None = None
    cursor_widget: Any = None
    inventory_component: Any = None

    def __post_init__(self) -> None:
        self.construct_grid()

    # Setup -----------------------------------------------------------------

    def bind(self, inventory_component: Any) -> None:
        """Listen for items added to, and stacks changed in, ``inventory_component``."""
        if inventory_component is None:
            raise ValueError("an inventory grid needs an inventory component")
        self.inventory_component = inventory_component
        inventory_component.on_item_added.connect(self.add_item)
        inventory_component.on_stack_change.connect(self.add_stacks)

    def construct_grid(self) -> None:
        """Rebuild every slot, in row-major order, and lay them out on the canvas."""
        self.grid_slots = []
        self.canvas = []
        if self.grid_slot_factory is None:
            return
        for row in range(self.rows):
            for column in range(self.columns):
                grid_slot = self.grid_slot_factory()
                grid_slot.index = index_from_position((column, row), self.columns)
                self.canvas.append(
                    _CanvasEntry(
                        grid_slot,
                        position=(column * self.tile_size, row * self.tile_size),
                        size=(self.tile_size, self.tile_size),
                    )
                )
                self.grid_slots.append(grid_slot)

    def calculate_tile_size(self, desired_size: tuple[float, float]) -> None:
        """Fit square tiles into ``desired_size``; fall back to the default size."""
        width, height = desired_size
        if self.rows <= 0 or self.columns <= 0 or (width == 0 and height == 0):
            self.tile_size = DEFAULT_TILE_SIZE
            return
        self.tile_size = min(width / self.columns, height / self.rows)

    # Adding items ----------------------------------------------------------

    def matches_category(self, item: InventoryItem) -> bool:
        """True if ``item`` belongs in this grid."""
        return item.manifest.item_category == self.item_category

    def add_item(self, item: InventoryItem) -> None:
        """Place ``item`` wherever there is room for it, if it belongs here."""
        if not self.matches_category(item):
            return
        logger.debug("InventoryGrid.add_item")
        self._add_item_to_indices(self.has_room_for_item(item), item)

    def has_room_for_item(self, source: ItemSource) -> SlotAvailabilityResult:
        """Work out where an item component, item or manifest would fit."""
        return self._has_room_for_manifest(self._manifest_of(source))

    @staticmethod
    def _manifest_of(source: ItemSource) -> ItemManifest:
        if isinstance(source, ItemManifest):
            return source
        if isinstance(source, ItemComponent):
            return source.item_manifest
        if isinstance(source, InventoryItem):
            return source.manifest
        raise TypeError(f"cannot find an item manifest in {source!r}")

    def _has_room_for_manifest(self, manifest: ItemManifest) -> SlotAvailabilityResult:
        result = SlotAvailabilityResult()

        stackable = manifest.fragment_of_type(StackableFragment)
        result.stackable = stackable is not None
        max_stack_size = stackable.max_stack_size if stackable is not None else 1
        amount_to_fill = stackable.stack_count if stackable is not None else 1

        dimensions = self._item_dimensions(manifest)
        checked: set[int] = set()
        for grid_slot in self.grid_slots:
            if amount_to_fill == 0:
                break
            if grid_slot.index in checked:
                continue
            if not self._is_in_grid_bounds(grid_slot.index, dimensions):
                continue

            tentatively_claimed: set[int] = set()
            if not self._has_room_at_index(
                grid_slot, dimensions, checked, tentatively_claimed,
                manifest.item_type, max_stack_size,
            ):
                continue

            fill = self._fill_amount_for_slot(
                result.stackable, max_stack_size, amount_to_fill, grid_slot
            )
            if fill == 0:
                continue

            checked |= tentatively_claimed
            result.total_room_to_fill += fill
            occupied = grid_slot.inventory_item is not None
            result.slot_availabilities.append(
                SlotAvailability(
                    index=grid_slot.upper_left_index if occupied else grid_slot.index,
                    amount_to_fill=fill if result.stackable else 0,
                    item_at_index=occupied,
                )
            )
            amount_to_fill -= fill
            result.remainder = amount_to_fill
            if amount_to_fill == 0:
                return result

        return result

    @staticmethod
    def _item_dimensions(manifest: ItemManifest) -> tuple[int, int]:
        grid_fragment = manifest.fragment_of_type(GridFragment)
        return grid_fragment.grid_size if grid_fragment is not None else (1, 1)

    def _is_in_grid_bounds(self, start_index: int, dimensions: tuple[int, int]) -> bool:
        if not 0 <= start_index < len(self.grid_slots):
            return False
        row, column = divmod(start_index, self.columns)
        return column + dimensions[0] <= self.columns and row + dimensions[1] <= self.rows

    def _has_room_at_index(
        self,
        grid_slot: GridSlot,
        dimensions: tuple[int, int],
        checked: set[int],
        tentatively_claimed: set[int],
        item_type: GameplayTag,
        max_stack_size: int,
    ) -> bool:
        has_room = True

        def visit(sub_slot: GridSlot) -> None:
            nonlocal has_room
            if self._check_slot_constraints(
                grid_slot, sub_slot, checked, tentatively_claimed, item_type, max_stack_size
            ):
                tentatively_claimed.add(sub_slot.index)
            else:
                has_room = False

        for_each_2d(self.grid_slots, grid_slot.index, dimensions, self.columns, visit)
        return has_room

    @staticmethod
    def _check_slot_constraints(
        grid_slot: GridSlot,
        sub_slot: GridSlot,
        checked: set[int],
        tentatively_claimed: set[int],
        item_type: GameplayTag,
        max_stack_size: int,
    ) -> bool:
        if sub_slot.index in checked:
            return False
        sub_item = sub_slot.inventory_item
        if sub_item is None:
            tentatively_claimed.add(sub_slot.index)
            return True
        if sub_slot.upper_left_index != grid_slot.index:
            return False
        if not sub_item.is_stackable():
            return False
        if not sub_item.manifest.item_type.matches_tag_exact(item_type):
            return False
        return grid_slot.stack_count < max_stack_size

    def _fill_amount_for_slot(
        self, stackable: bool, max_stack_size: int, amount_to_fill: int, grid_slot: GridSlot
    ) -> int:
        if not stackable:
            return 1
        return min(amount_to_fill, max_stack_size - self._stack_amount(grid_slot))

    def _stack_amount(self, grid_slot: GridSlot) -> int:
        if grid_slot.upper_left_index != INDEX_NONE:
            return self.grid_slots[grid_slot.upper_left_index].stack_count
        return grid_slot.stack_count

    def _add_item_to_indices(self, result: SlotAvailabilityResult, item: InventoryItem) -> None:
        for availability in result.slot_availabilities:
            self._add_item_at_index(item, availability.index, result.stackable, availability.amount_to_fill)
            self._update_grid_slots(item, availability.index, result.stackable, availability.amount_to_fill)

    def _add_item_at_index(
        self, item: InventoryItem, index: int, stackable: bool, stack_amount: int
    ) -> None:
        grid_fragment = get_fragment(item, GridFragment, GRID_FRAGMENT)
        image_fragment = get_fragment(item, ImageFragment, ICON_FRAGMENT)
        if grid_fragment is None or image_fragment is None:
            return

        slotted = self.slotted_item_factory()
        slotted.inventory_item = item
        slotted.image_brush = _Brush(image_fragment.icon, self._draw_size(grid_fragment))
        slotted.grid_index = index
        slotted.stackable = stackable
        slotted.update_stack_count(stack_amount if stackable else 0)
        slotted.on_slotted_item_clicked.connect(self.on_slotted_item_clicked)

        column, row = position_from_index(index, self.columns)
        padding = grid_fragment.grid_padding
        self.canvas.append(
            _CanvasEntry(
                slotted,
                position=(column * self.tile_size + padding, row * self.tile_size + padding),
                size=self._draw_size(grid_fragment),
            )
        )
        self.slotted_items[index] = slotted

    def _draw_size(self, grid_fragment: GridFragment) -> tuple[float, float]:
        icon_tile_width = self.tile_size - grid_fragment.grid_padding * 2
        width, height = grid_fragment.grid_size
        return width * icon_tile_width, height * icon_tile_width

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.grid_slots):
            raise IndexError(f"grid index {index} out of range")

    def _update_grid_slots(
        self, item: InventoryItem, index: int, stackable: bool, stack_amount: int
    ) -> None:
        self._check_index(index)
        if stackable:
            self.grid_slots[index].stack_count = stack_amount

        grid_fragment = get_fragment(item, GridFragment, GRID_FRAGMENT)
        dimensions = grid_fragment.grid_size if grid_fragment is not None else (1, 1)

        def occupy(grid_slot: GridSlot) -> None:
            grid_slot.inventory_item = item
            grid_slot.upper_left_index = index
            grid_slot.set_occupied_texture()
            grid_slot.available = False

        for_each_2d(self.grid_slots, index, dimensions, self.columns, occupy)

    def add_stacks(self, result: SlotAvailabilityResult) -> None:
        """Add the stacks described by ``result`` to existing or new slots."""
        if result.item is None or not self.matches_category(result.item):
            return
        for availability in result.slot_availabilities:
            if availability.item_at_index:
                grid_slot = self.grid_slots[availability.index]
                slotted = self.slotted_items[availability.index]
                new_count = grid_slot.stack_count + availability.amount_to_fill
                slotted.update_stack_count(new_count)
                grid_slot.stack_count = new_count
            else:
                self._add_item_at_index(
                    result.item, availability.index, result.stackable, availability.amount_to_fill
                )
                self._update_grid_slots(
                    result.item, availability.index, result.stackable, availability.amount_to_fill
                )

    # Picking items up ------------------------------------------------------

    def on_slotted_item_clicked(self, grid_index: int, mouse_event: PointerEvent) -> None:
        """Pick up the clicked item on a left click when nothing is being held."""
        self._check_index(grid_index)
        clicked = self.grid_slots[grid_index].inventory_item
        if self.hover_item is None and mouse_event.is_left_click:
            self._pick_up(clicked, grid_index)

    def _pick_up(self, item: InventoryItem, grid_index: int) -> None:
        self._assign_hover_item(item, grid_index, grid_index)
        self._remove_item_from_grid(item, grid_index)

    def _assign_hover_item(self, item: InventoryItem, grid_index: int, previous_grid_index: int) -> None:
        if self.hover_item is None:
            self.hover_item = self.hover_item_factory()
        hover = self.hover_item

        grid_fragment = get_fragment(item, GridFragment, GRID_FRAGMENT)
        image_fragment = get_fragment(item, ImageFragment, ICON_FRAGMENT)
        if grid_fragment is not None and image_fragment is not None:
            width, height = self._draw_size(grid_fragment)
            hover.image_brush = _Brush(
                image_fragment.icon, (width * self.viewport_scale, height * self.viewport_scale)
            )
            hover.grid_dimensions = grid_fragment.grid_size
            hover.inventory_item = item
            hover.set_is_stackable(item.is_stackable())
            self.cursor_widget = hover

        hover.previous_grid_index = previous_grid_index
        hover.update_stack_count(
            self.grid_slots[grid_index].stack_count if item.is_stackable() else 0
        )

    def _remove_item_from_grid(self, item: InventoryItem, grid_index: int) -> None:
        grid_fragment = get_fragment(item, GridFragment, GRID_FRAGMENT)
        if grid_fragment is None:
            return

        def clear(grid_slot: GridSlot) -> None:
            grid_slot.inventory_item = None
            grid_slot.upper_left_index = INDEX_NONE
            grid_slot.set_unoccupied_texture()
            grid_slot.available = True
            grid_slot.stack_count = 0

        for_each_2d(self.grid_slots, grid_index, grid_fragment.grid_size, self.columns, clear)

        slotted = self.slotted_items.pop(grid_index, None)
        if slotted is not None:
            self.canvas = [entry for entry in self.canvas if entry.widget is not slotted]