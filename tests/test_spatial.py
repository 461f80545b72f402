from __future__ import annotations

import logging

import pytest

from invgrid.fragments import GridFragment, ImageFragment
from invgrid.grid_types import ItemCategory, SlotAvailabilityResult
from invgrid.inventory_grid import InventoryGrid
from invgrid.items import ItemComponent, ItemManifest
from invgrid.spatial import InventoryBase, SpatialInventory
from invgrid.tags import AXE, GRID_FRAGMENT, ICON_FRAGMENT, LUMIN_DAISY, RED_POTION_SMALL


def make_component(category, tag):
    manifest = ItemManifest(
        item_category=category,
        item_type=tag,
        fragments=[
            GridFragment(fragment_tag=GRID_FRAGMENT),
            ImageFragment(fragment_tag=ICON_FRAGMENT, icon="icon"),
        ],
    )
    return ItemComponent(item_manifest=manifest)


@pytest.fixture
def spatial():
    return SpatialInventory(
        grid_equippables=InventoryGrid(item_category=ItemCategory.EQUIPPABLE, rows=2, columns=2),
        grid_consumables=InventoryGrid(item_category=ItemCategory.CONSUMABLE, rows=1, columns=1),
        grid_craftables=InventoryGrid(item_category=ItemCategory.CRAFTABLE, rows=0, columns=0),
    )


def test_base_has_no_room():
    component = make_component(ItemCategory.EQUIPPABLE, AXE)
    assert InventoryBase().has_room_for_item(component) == SlotAvailabilityResult()
    assert InventoryBase().grids == ()


def test_starts_on_equippables(spatial):
    assert spatial.active_grid is spatial.grid_equippables
    assert spatial.button_equippables.enabled is False
    assert spatial.button_consumables.enabled is True
    assert spatial.button_craftables.enabled is True


def test_show_methods_switch_grid(spatial):
    spatial.show_consumables()
    assert spatial.active_grid is spatial.grid_consumables
    assert spatial.button_consumables.enabled is False
    assert spatial.button_equippables.enabled is True
    spatial.show_craftables()
    assert spatial.active_grid is spatial.grid_craftables
    assert spatial.button_craftables.enabled is False
    assert spatial.button_consumables.enabled is True


def test_buttons_switch_grid(spatial):
    spatial.button_craftables.on_clicked.emit()
    assert spatial.active_grid is spatial.grid_craftables
    spatial.button_equippables.on_clicked.emit()
    assert spatial.active_grid is spatial.grid_equippables


def test_grids_property(spatial):
    assert spatial.grids == (
        spatial.grid_equippables,
        spatial.grid_consumables,
        spatial.grid_craftables,
    )


@pytest.mark.parametrize(
    "category, tag, grid_name",
    [
        (ItemCategory.EQUIPPABLE, AXE, "grid_equippables"),
        (ItemCategory.CONSUMABLE, RED_POTION_SMALL, "grid_consumables"),
        (ItemCategory.CRAFTABLE, LUMIN_DAISY, "grid_craftables"),
    ],
)
def test_has_room_routes_by_category(spatial, category, tag, grid_name):
    component = make_component(category, tag)
    expected = getattr(spatial, grid_name).has_room_for_item(component)
    assert spatial.has_room_for_item(component) == expected


def test_room_reflects_grid_size(spatial):
    consumable = make_component(ItemCategory.CONSUMABLE, RED_POTION_SMALL)
    craftable = make_component(ItemCategory.CRAFTABLE, LUMIN_DAISY)
    assert spatial.has_room_for_item(consumable).total_room_to_fill > 0
    assert spatial.has_room_for_item(craftable).total_room_to_fill == 0


def test_no_category_logs_and_has_no_room(spatial, caplog):
    component = make_component(ItemCategory.NONE, AXE)
    with caplog.at_level(logging.ERROR, logger="invgrid"):
        result = spatial.has_room_for_item(component)
    assert result == SlotAvailabilityResult()
    assert "doesn't have a valid Item Category" in caplog.text


def test_missing_component_has_no_room(spatial):
    assert spatial.has_room_for_item(None) == SlotAvailabilityResult()