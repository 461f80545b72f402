import pytest

from invgrid.fragments import GridFragment, ImageFragment, StackableFragment
from invgrid.grid_types import ItemCategory
from invgrid.items import (
    Actor,
    InventoryItem,
    ItemComponent,
    ItemManifest,
    get_fragment,
)
from invgrid.messagelog import MESSAGE_LOG_LISTING, get_log_listing, unregister_log_listing
from invgrid.tags import AXE, GRID_FRAGMENT, ICON_FRAGMENT, RED_POTION_SMALL, STACKABLE_FRAGMENT


def potion_manifest():
    return ItemManifest(
        item_category=ItemCategory.CONSUMABLE,
        item_type=RED_POTION_SMALL,
        fragments=[
            GridFragment(fragment_tag=GRID_FRAGMENT, grid_size=(1, 1)),
            StackableFragment(fragment_tag=STACKABLE_FRAGMENT, max_stack_size=10, stack_count=3),
        ],
    )


def test_manifest_creates_item_with_independent_copy():
    actor = Actor(name="Owner")
    manifest = potion_manifest()
    item = manifest.manifest(actor)
    assert item.outer is actor
    assert item.total_stack_count == 0
    item.manifest.fragment_of_type(StackableFragment).stack_count = 9
    assert manifest.fragment_of_type(StackableFragment).stack_count == 3
    assert item.manifest.item_type == RED_POTION_SMALL


def test_is_stackable():
    assert potion_manifest().manifest(None).is_stackable()
    assert not InventoryItem(ItemManifest(item_type=AXE)).is_stackable()


def test_fragment_lookup_by_type_and_tag():
    manifest = potion_manifest()
    grid = manifest.fragment_of_type_with_tag(GridFragment, GRID_FRAGMENT)
    assert grid is manifest.fragments[0]
    assert manifest.fragment_of_type_with_tag(GridFragment, ICON_FRAGMENT) is None
    assert manifest.fragment_of_type_with_tag(ImageFragment, GRID_FRAGMENT) is None
    assert manifest.fragment_of_type(ImageFragment) is None


def test_get_fragment():
    item = potion_manifest().manifest(None)
    stack = get_fragment(item, StackableFragment, STACKABLE_FRAGMENT)
    assert stack.max_stack_size == 10
    assert get_fragment(None, StackableFragment, STACKABLE_FRAGMENT) is None


def test_actor_components():
    actor = Actor(name="Chest")
    component = actor.add_component(ItemComponent())
    assert component.owner is actor
    assert actor.find_component(ItemComponent) is component
    assert actor.find_component(GridFragment) is None


def test_item_component_defaults():
    component = ItemComponent()
    assert component.pickup_message == "E - Pick Up"
    assert component.item_manifest.item_category is ItemCategory.NONE


def test_picked_up_emits_and_destroys_owner():
    actor = Actor()
    component = actor.add_component(ItemComponent())
    calls = []
    component.on_picked_up.connect(lambda: calls.append("picked"))
    component.picked_up()
    assert calls == ["picked"]
    assert actor.destroyed


def test_picked_up_without_owner_raises():
    with pytest.raises(RuntimeError):
        ItemComponent().picked_up()


def test_begin_play_reports_unreplicated_owner():
    unregister_log_listing(MESSAGE_LOG_LISTING)
    try:
        Actor(name="Chest", replicated=False).add_component(ItemComponent()).begin_play()
        Actor(name="Crate").add_component(ItemComponent()).begin_play()
        assert get_log_listing(MESSAGE_LOG_LISTING).messages() == (
            "Item Component on Actor Chest is Not Replicated.",
        )
    finally:
        unregister_log_listing(MESSAGE_LOG_LISTING)