"""Actors, item manifests, inventory items and the pickup component."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .events import Event
from .fragments import ItemFragment, StackableFragment
from .grid_types import ItemCategory
from .messagelog import MESSAGE_LOG_LISTING, get_log_listing
from .tags import EMPTY_TAG, GameplayTag

F = TypeVar("F", bound=ItemFragment)
C = TypeVar("C")


@dataclass(eq=False)
class Actor:
    """Something in the world that owns components."""

    name: str = "Actor"
    replicated: bool = True
    has_authority: bool = True
    components: list[Any] = field(default_factory=list)
    destroyed: bool = False

    def add_component(self, component: C) -> C:
        """Attach ``component`` and make this actor its owner."""
        component.owner = self
        self.components.append(component)
        return component

    def find_component(self, component_type: type[C]) -> C | None:
        """The first component that is an instance of ``component_type``."""
        return next((c for c in self.components if isinstance(c, component_type)), None)

    def destroy(self) -> None:
        """Mark the actor as removed from the world."""
        self.destroyed = True


@dataclass
class ItemManifest:
    """All the data needed to create an inventory item."""

    item_category: ItemCategory = ItemCategory.NONE
    item_type: GameplayTag = EMPTY_TAG
    fragments: list[ItemFragment] = field(default_factory=list)

    def manifest(self, outer: Any) -> InventoryItem:
        """Create a new item, owned by ``outer``, holding a copy of this manifest."""
        return InventoryItem(manifest=copy.deepcopy(self), outer=outer)

    def fragment_of_type(self, fragment_type: type[F]) -> F | None:
        """The first fragment that is a ``fragment_type``."""
        return next((f for f in self.fragments if isinstance(f, fragment_type)), None)

    def fragment_of_type_with_tag(self, fragment_type: type[F], tag: GameplayTag) -> F | None:
        """The first ``fragment_type`` fragment whose tag is exactly ``tag``."""
        return next(
            (
                f
                for f in self.fragments
                if isinstance(f, fragment_type) and f.fragment_tag.matches_tag_exact(tag)
            ),
            None,
        )


@dataclass(eq=False)
class InventoryItem:
    """An item held in an inventory."""

    manifest: ItemManifest = field(default_factory=ItemManifest)
    total_stack_count: int = 0
    outer: Any = None

    def is_stackable(self) -> bool:
        """True if the manifest carries a stackable fragment."""
        return self.manifest.fragment_of_type(StackableFragment) is not None


def get_fragment(item: InventoryItem | None, fragment_type: type[F], tag: GameplayTag) -> F | None:
    """The tagged fragment of ``item``, or None if there is no item or no such fragment."""
    if item is None:
        return None
    return item.manifest.fragment_of_type_with_tag(fragment_type, tag)


@dataclass(eq=False)
class ItemComponent:
    """Makes its owning actor an item that can be picked up."""

    item_manifest: ItemManifest = field(default_factory=ItemManifest)
    pickup_message: str = "E - Pick Up"
    owner: Actor | None = None
    on_picked_up: Event = field(default_factory=Event)

    def begin_play(self) -> None:
        """Report an error if the owning actor is not replicated."""
        if self.owner is not None and not self.owner.replicated:
            get_log_listing(MESSAGE_LOG_LISTING).error(
                f"Item Component on Actor {self.owner.name} is Not Replicated."
            )

    def picked_up(self) -> None:
        """Announce the pickup and destroy the owning actor."""
        if self.owner is None:
            raise RuntimeError("item component has no owning actor")
        self.on_picked_up.emit()
        self.owner.destroy()