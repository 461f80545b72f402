"""The replicated list of items held by an inventory component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from .grid_types import INDEX_NONE
from .items import InventoryItem, ItemComponent
from .tags import GameplayTag


@dataclass(eq=False)
class _Entry:
    item: InventoryItem | None = None
    replication_id: int = INDEX_NONE
    replication_key: int = 0


class InventoryList:
    """An ordered list of inventory items that tracks changes for replication.

    ``owner_component`` is the inventory component the list belongs to. It is
    expected to have an ``owner`` actor and, for the events and sub-object
    registration, ``on_item_added``, ``on_item_removed`` and ``add_rep_sub_obj``.
    """

    def __init__(self, owner_component: Any = None) -> None:
        self.owner_component = owner_component
        self._entries: list[_Entry] = []
        self.array_replication_key = 0
        self._next_replication_id = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(self.all_items())

    def all_items(self) -> list[InventoryItem]:
        """Every item in the list, in order, skipping empty entries."""
        return [entry.item for entry in self._entries if entry.item is not None]

    def _owning_actor(self) -> Any:
        if self.owner_component is None:
            raise RuntimeError("inventory list has no owner component")
        actor = self.owner_component.owner
        if actor is None or not actor.has_authority:
            raise RuntimeError("only the authority may add entries to an inventory list")
        return actor

    def _mark_item_dirty(self, entry: _Entry) -> None:
        if entry.replication_id == INDEX_NONE:
            entry.replication_id = self._next_replication_id
            self._next_replication_id += 1
        entry.replication_key += 1
        self.array_replication_key += 1

    def _mark_array_dirty(self) -> None:
        self.array_replication_key += 1

    def add_entry(self, source: ItemComponent | InventoryItem) -> InventoryItem | None:
        """Append an item and return it.

        An item component is turned into a new item owned by the component's
        actor and registered for replication; returns None when the owner
        component cannot register sub-objects.
        """
        if isinstance(source, ItemComponent):
            owning_actor = self._owning_actor()
            register = getattr(self.owner_component, "add_rep_sub_obj", None)
            if register is None:
                return None
            entry = _Entry(item=source.item_manifest.manifest(owning_actor))
            self._entries.append(entry)
            register(entry.item)
            self._mark_item_dirty(entry)
            return entry.item
        if isinstance(source, InventoryItem):
            self._owning_actor()
            entry = _Entry(item=source)
            self._entries.append(entry)
            self._mark_item_dirty(entry)
            return source
        raise TypeError(f"cannot add {source!r} to an inventory list")

    def remove_entry(self, item: InventoryItem) -> None:
        """Remove the first entry holding ``item``, if any."""
        for position, entry in enumerate(self._entries):
            if entry.item is item:
                del self._entries[position]
                self._mark_array_dirty()
                break

    def find_first_item_by_type(self, item_type: GameplayTag) -> InventoryItem | None:
        """The first item whose type is exactly ``item_type``."""
        return next(
            (
                entry.item
                for entry in self._entries
                if entry.item is not None
                and entry.item.manifest.item_type.matches_tag_exact(item_type)
            ),
            None,
        )

    def pre_replicated_remove(self, removed_indices: Iterable[int]) -> None:
        """Announce the items at ``removed_indices`` as removed."""
        event = getattr(self.owner_component, "on_item_removed", None)
        if event is None:
            return
        for index in removed_indices:
            event.emit(self._entries[index].item)

    def post_replicated_add(self, added_indices: Iterable[int]) -> None:
        """Announce the items at ``added_indices`` as added."""
        event = getattr(self.owner_component, "on_item_added", None)
        if event is None:
            return
        for index in added_indices:
            event.emit(self._entries[index].item)