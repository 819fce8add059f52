"""Searching in sequences and strings, and a few array questions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of *target* in the sorted *values*, or -1 if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def prefix_function(pattern: str) -> list[int]:
    """Return, for each prefix, the length of its longest proper prefix that is also a suffix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return the start of every (possibly overlapping) occurrence of *pattern* in *text*."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    n, m = len(text), len(pattern)
    found = []
    i = j = 0
    while i < n:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            found.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j == 0:
                i += 1
            else:
                j = lps[j - 1]
    return found


def find_triplet(values: Sequence[int], total: int) -> tuple[int, int, int] | None:
    """Return the first three values, in order, that add up to *total*, or None."""
    for triple in combinations(values, 3):
        if sum(triple) == total:
            return triple
    return None


def trapped_water(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation map *heights* traps."""
    left, right = 0, len(heights) - 1
    max_left = max_right = 0
    water = 0
    while left <= right:
        if heights[left] <= heights[right]:
            if heights[left] >= max_left:
                max_left = heights[left]
            else:
                water += max_left - heights[left]
            left += 1
        else:
            if heights[right] >= max_right:
                max_right = heights[right]
            else:
                water += max_right - heights[right]
            right -= 1
    return water


def longest_consecutive_run(values: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers among *values*."""
    ordered = sorted(set(values))
    if not ordered:
        return 0
    best = run = 1
    for previous, current in zip(ordered, ordered[1:]):
        run = run + 1 if current - previous == 1 else 1
        best = max(best, run)
    return best


def largest(values: Iterable[Any]) -> Any:
    """Return the largest of *values*; raise ValueError when there are none."""
    items = iter(values)
    try:
        best = next(items)
    except StopIteration:
        raise ValueError("largest() of an empty sequence") from None
    for item in items:
        if best < item:
            best = item
    return best


def has_subset_sum(values: Iterable[int], total: int) -> bool:
    """Tell whether some subset of *values* adds up to *total*."""
    reachable = {0}
    for value in values:
        reachable |= {s + value for s in reachable}
    return total in reachable