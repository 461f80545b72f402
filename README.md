# invgrid

A spatial grid inventory for games, modelled as plain Python state.

An item is described by an `ItemManifest`. The manifest holds an
`ItemCategory`, a `GameplayTag` for its type and a list of fragments
(`GridFragment`, `ImageFragment`, `StackableFragment`). An `InventoryGrid`
works out where an item fits, including items that cover several tiles, and
merges stacks of the same type. A `SpatialInventory` holds one grid for each
category: equippables, consumables and craftables. An `InventoryComponent`
ties the held item list, the menu and its events together.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `invgrid.tags`: `GameplayTag`, with `matches_tag_exact`, hierarchical
  `matches_tag` and `is_valid`. It also defines the item tags (`AXE`, `SWORD`,
  `RED_POTION_SMALL`, and others) and the fragment tags (`GRID_FRAGMENT`,
  `ICON_FRAGMENT`, `STACKABLE_FRAGMENT`).
- `invgrid.fragments`: `ItemFragment` and its subclasses.
- `invgrid.grid_types`: `ItemCategory`, `SlotAvailability`,
  `SlotAvailabilityResult` and `INDEX_NONE`.
- `invgrid.grid_utils`: `index_from_position`, `position_from_index` and
  `for_each_2d` for row-major grids.
- `invgrid.items`: these names:
  - `ItemManifest`, with `manifest`, `fragment_of_type` and
    `fragment_of_type_with_tag`.
  - `InventoryItem`.
  - `ItemComponent`, with `begin_play` and `picked_up`.
  - a minimal `Actor` that carries components.
  - `get_fragment`.
- `invgrid.events`: `Event`, a multicast signal with `connect`, `disconnect`
  and `emit`.
- `invgrid.messagelog`: `MessageLog` and the named listings
  (`register_log_listing`, `unregister_log_listing`, `get_log_listing`).
- `invgrid.widgets`: the widget state classes:
  - `GridSlot`, `SlottedItem` and `HoverItem`.
  - `InfoMessage`, which stays visible until `tick` has advanced past
    `message_lifetime` (3 seconds by default).
  - `HUDWidget`.
  - `PointerEvent` and `MouseButton`.
- `invgrid.inventory_grid`: `InventoryGrid`. It provides `has_room_for_item`,
  `add_item` and `add_stacks`. A left click on a slotted item, through
  `on_slotted_item_clicked`, picks the item up into a hover item.
- `invgrid.spatial`: `InventoryBase` and `SpatialInventory`.
  `SpatialInventory` routes each item to the grid of its category, and
  `show_equippables`, `show_consumables` and `show_craftables` switch the
  active grid.
- `invgrid.fast_array`: `InventoryList`, the ordered list of held items. It
  keeps replication keys and announces changes through
  `pre_replicated_remove` and `post_replicated_add`.
- `invgrid.component`: these names:
  - `InventoryComponent`, with `try_add_item`, `server_add_new_item`,
    `server_add_stacks_to_item` and `toggle_inventory_menu`.
  - `NetMode`.
  - `get_inventory_component` and `get_item_category`.
- `invgrid.controller`: these names:
  - `PlayerController`. It traces for the actor under the crosshair,
    highlights it, shows its pickup prompt and picks it up.
  - `Highlightable` and `HighlightableStaticMesh`.
- `invgrid.character`: these names:
  - `ThirdPersonCharacter`, which routes movement, look and jump input.
  - `MovementSettings` and `InputController`.
  - `ThirdPersonPlayerController` and `ThirdPersonGameMode`.

## Example

```python
from invgrid.fragments import StackableFragment
from invgrid.grid_types import ItemCategory
from invgrid.grid_utils import index_from_position, position_from_index
from invgrid.inventory_grid import InventoryGrid
from invgrid.items import ItemManifest
from invgrid.tags import RED_POTION_SMALL

assert index_from_position((3, 2), 8) == 19
assert position_from_index(19, 8) == (3, 2)

grid = InventoryGrid(item_category=ItemCategory.CONSUMABLE, rows=2, columns=3)
potions = ItemManifest(
    item_category=ItemCategory.CONSUMABLE,
    item_type=RED_POTION_SMALL,
    fragments=[StackableFragment(max_stack_size=5, stack_count=7)],
)
result = grid.has_room_for_item(potions)
assert result.total_room_to_fill == 7
assert [a.amount_to_fill for a in result.slot_availabilities] == [5, 2]
assert result.remainder == 0
```

When an item does not fit, `InventoryComponent.try_add_item` emits
`no_room_in_inventory`. A `HUDWidget` bound to the component then sets its
info message to "No Room In Inventory.".

## What it does not do

The package draws nothing and reads no input devices. Widgets, brushes and
canvas positions are recorded as state only.

Networking is not performed. The net mode, authority checks and replication
keys are bookkeeping within one process.

The player controller reaches the world only through the callables you give
it: `deproject` and `line_trace`.

There is no command-line program.