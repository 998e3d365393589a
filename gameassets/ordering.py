"""Moving an item one place up or down a list."""

from __future__ import annotations

from typing import MutableSequence, TypeVar

T = TypeVar("T")


def _check_index(items: MutableSequence[T], index: int) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"Index {index} is out of range (have {len(items)})")


def move_back(items: MutableSequence[T], index: int) -> None:
    """Swap the item at *index* with the one before it; the first item stays put."""
    _check_index(items, index)
    if index > 0:
        items[index - 1], items[index] = items[index], items[index - 1]


def move_forward(items: MutableSequence[T], index: int) -> None:
    """Swap the item at *index* with the one after it; the last item stays put."""
    _check_index(items, index)
    if index + 1 < len(items):
        items[index + 1], items[index] = items[index], items[index + 1]