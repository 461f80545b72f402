import pytest

from invgrid.tags import (
    AXE,
    EMPTY_TAG,
    GRID_FRAGMENT,
    ITEM_TAGS,
    FRAGMENT_TAGS,
    RED_POTION_SMALL,
    SWORD,
    GameplayTag,
)


def test_exact_match_on_same_name():
    assert AXE.matches_tag_exact(GameplayTag("GameItems.Equipment.Weapons.Axe"))
    assert not AXE.matches_tag_exact(SWORD)


def test_empty_tag_matches_nothing():
    assert not EMPTY_TAG.is_valid()
    assert not EMPTY_TAG.matches_tag_exact(EMPTY_TAG)
    assert not AXE.matches_tag(EMPTY_TAG)


def test_hierarchical_match():
    parent = GameplayTag("GameItems.Consumables")
    assert RED_POTION_SMALL.matches_tag(parent)
    assert not parent.matches_tag(RED_POTION_SMALL)
    assert not RED_POTION_SMALL.matches_tag_exact(parent)


def test_partial_segment_does_not_match():
    assert not AXE.matches_tag(GameplayTag("GameItems.Equip"))


def test_malformed_tag_rejected():
    with pytest.raises(ValueError):
        GameplayTag("GameItems..Axe")


def test_declared_tags_are_valid_and_distinct():
    all_tags = ITEM_TAGS + FRAGMENT_TAGS
    for tag in all_tags:
        assert tag.is_valid()
        assert tag.matches_tag_exact(GameplayTag(str(tag)))
        exact_matches = [other for other in all_tags if tag.matches_tag_exact(other)]
        assert exact_matches == [tag]
    assert GRID_FRAGMENT.matches_tag_exact(GameplayTag("FragmentTags.GridFragment"))
    assert str(GRID_FRAGMENT) == "FragmentTags.GridFragment"