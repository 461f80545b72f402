"""Fragments: the pieces of data that together describe an item."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .tags import EMPTY_TAG, GameplayTag


@dataclass
class ItemFragment:
    """Base of every fragment; carries the tag that identifies it."""

    fragment_tag: GameplayTag = EMPTY_TAG


@dataclass
class GridFragment(ItemFragment):
    """How many grid tiles an item covers and the padding around its icon."""

    grid_size: tuple[int, int] = (1, 1)
    grid_padding: float = 0.0


@dataclass
class ImageFragment(ItemFragment):
    """The icon drawn for an item."""

    icon: Any = None
    icon_dimensions: tuple[float, float] = field(default=(44.0, 44.0))


@dataclass
class StackableFragment(ItemFragment):
    """Marks an item as stackable and holds its stack sizes."""

    max_stack_size: int = 1
    stack_count: int = 1