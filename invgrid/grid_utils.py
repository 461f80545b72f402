"""Conversions between grid indices and positions, and 2D iteration over a grid."""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

T = TypeVar("T")


def index_from_position(position: tuple[int, int], columns: int) -> int:
    """Row-major index of the tile at ``(x, y)``."""
    x, y = position
    return x + y * columns


def position_from_index(index: int, columns: int) -> tuple[int, int]:
    """The ``(x, y)`` position of a row-major index."""
    row, column = divmod(index, columns)
    return column, row


def for_each_2d(
    items: Sequence[T],
    index: int,
    range_2d: tuple[int, int],
    columns: int,
    function: Callable[[T], object],
) -> None:
    """Call ``function`` on each element of the ``range_2d`` block starting at ``index``.

    Tiles whose index falls outside ``items`` are skipped.
    """
    width, height = range_2d
    start_x, start_y = position_from_index(index, columns)
    for dy in range(height):
        for dx in range(width):
            tile = index_from_position((start_x + dx, start_y + dy), columns)
            if 0 <= tile < len(items):
                function(items[tile])