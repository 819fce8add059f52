"""Comparison sorts and an order check for sequences of comparable values."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list of *values* in ascending order, sorted by bubble sort."""
    items = list(values)
    size = len(items)
    for step in range(size - 1):
        swapped = False
        for i in range(size - step - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list of *values* in ascending order, sorted by selection sort."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        min_index = min(range(i, size), key=items.__getitem__)
        items[i], items[min_index] = items[min_index], items[i]
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list of *values* in ascending order, sorted by heap sort."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in reversed(range(1, size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def is_sorted(values: Iterable[Any]) -> bool:
    """Tell whether *values* are in non-decreasing order."""
    items = list(values)
    return all(a <= b for a, b in zip(items, items[1:]))