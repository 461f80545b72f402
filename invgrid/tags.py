"""Hierarchical gameplay tags and the item and fragment tags used by the inventory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameplayTag:
    """A dotted, hierarchical name such as ``GameItems.Equipment.Weapons.Axe``.

    The empty tag is invalid and matches nothing.
    """

    name: str = ""

    def __post_init__(self) -> None:
        if self.name and any(not part for part in self.name.split(".")):
            raise ValueError(f"malformed gameplay tag: {self.name!r}")

    def is_valid(self) -> bool:
        """True unless this is the empty tag."""
        return bool(self.name)

    def matches_tag_exact(self, other: GameplayTag) -> bool:
        """True if both tags are valid and name the same node."""
        return other.is_valid() and self.name == other.name

    def matches_tag(self, other: GameplayTag) -> bool:
        """True if this tag is ``other`` or lies beneath it in the hierarchy."""
        if not other.is_valid():
            return False
        return self.name == other.name or self.name.startswith(other.name + ".")

    def __str__(self) -> str:
        return self.name


EMPTY_TAG = GameplayTag()

# Item types.
AXE = GameplayTag("GameItems.Equipment.Weapons.Axe")
SWORD = GameplayTag("GameItems.Equipment.Weapons.Sword")
RED_CLOAK = GameplayTag("GameItems.Equipment.Cloaks.RedCloak")
STEEL_MASK = GameplayTag("GameItems.Equipment.Masks.SteelMask")
RED_POTION_SMALL = GameplayTag("GameItems.Consumables.Potions.Red.Small")
RED_POTION_LARGE = GameplayTag("GameItems.Consumables.Potions.Red.Large")
BLUE_POTION_SMALL = GameplayTag("GameItems.Consumables.Potions.Blue.Small")
BLUE_POTION_LARGE = GameplayTag("GameItems.Consumables.Potions.Blue.Large")
FIRE_FERN_FRUIT = GameplayTag("GameItems.Craftables.FireFernFruit")
LUMIN_DAISY = GameplayTag("GameItems.Craftables.LuminDaisy")
SCORCH_PETAL_BLOSSOM = GameplayTag("GameItems.Craftables.ScorchPetalBlossom")

ITEM_TAGS = (
    AXE,
    SWORD,
    RED_CLOAK,
    STEEL_MASK,
    RED_POTION_SMALL,
    RED_POTION_LARGE,
    BLUE_POTION_SMALL,
    BLUE_POTION_LARGE,
    FIRE_FERN_FRUIT,
    LUMIN_DAISY,
    SCORCH_PETAL_BLOSSOM,
)

# Fragment tags.
GRID_FRAGMENT = GameplayTag("FragmentTags.GridFragment")
ICON_FRAGMENT = GameplayTag("FragmentTags.IconFragment")
STACKABLE_FRAGMENT = GameplayTag("FragmentTags.StackableFragment")

FRAGMENT_TAGS = (GRID_FRAGMENT, ICON_FRAGMENT, STACKABLE_FRAGMENT)