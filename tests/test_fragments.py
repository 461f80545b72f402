from invgrid.fragments import (
    GridFragment,
    ImageFragment,
    ItemFragment,
    StackableFragment,
)
from invgrid.tags import EMPTY_TAG, GRID_FRAGMENT, STACKABLE_FRAGMENT


def test_fragment_tag_defaults_to_empty_and_can_be_set():
    fragment = ItemFragment()
    assert fragment.fragment_tag == EMPTY_TAG
    fragment.fragment_tag = STACKABLE_FRAGMENT
    assert fragment.fragment_tag.matches_tag_exact(STACKABLE_FRAGMENT)


def test_grid_fragment_defaults_and_update():
    fragment = GridFragment()
    assert fragment.grid_size == (1, 1)
    assert fragment.grid_padding == 0.0
    fragment.grid_size = (2, 3)
    fragment.grid_padding = 4.5
    assert (fragment.grid_size, fragment.grid_padding) == ((2, 3), 4.5)


def test_image_fragment_defaults():
    fragment = ImageFragment(fragment_tag=GRID_FRAGMENT)
    assert fragment.icon is None
    assert fragment.icon_dimensions == (44.0, 44.0)
    assert isinstance(fragment, ItemFragment)


def test_stackable_fragment_defaults_and_count_update():
    fragment = StackableFragment()
    assert (fragment.max_stack_size, fragment.stack_count) == (1, 1)
    fragment.stack_count = 7
    assert fragment.stack_count == 7
    assert fragment.max_stack_size == 1