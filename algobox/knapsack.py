"""Knapsack-style dynamic programmes: 0/1 and unbounded knapsack, coins and rod cutting."""

from __future__ import annotations

from collections.abc import Sequence


def _check_capacity(capacity: int, name: str = "capacity") -> None:
    if capacity < 0:
        raise ValueError(f"{name} must not be negative")


def _check_lengths(first: Sequence[int], second: Sequence[int]) -> None:
    if len(first) != len(second):
        raise ValueError("weights and values must have the same length")


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of items, each used at most once, within *capacity*."""
    _check_lengths(weights, values)
    _check_capacity(capacity)
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def min_coins(coins: Sequence[int], target: int) -> int | None:
    """Return the fewest coins, each usable any number of times, that make *target*.

    Returns None when *target* cannot be made from *coins*.
    """
    _check_capacity(target, "target")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    unreachable = target + 1
    fewest = [0] + [unreachable] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            fewest[amount] = min(fewest[amount], fewest[amount - coin] + 1)
    return None if fewest[target] == unreachable else fewest[target]


def coin_change_ways(amount: int, coins: Sequence[int]) -> int:
    """Return how many multisets of *coins* add up to *amount*."""
    _check_capacity(amount, "amount")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def unbounded_knapsack(
    capacity: int, profits: Sequence[int], weights: Sequence[int]
) -> int:
    """Return the best total profit within *capacity*, each item usable any number of times."""
    _check_lengths(weights, profits)
    _check_capacity(capacity)
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    best = [0] * (capacity + 1)
    for weight, profit in zip(weights, profits):
        for room in range(weight, capacity + 1):
            best[room] = max(best[room], best[room - weight] + profit)
    return best[capacity]


def cut_rod(prices: Sequence[int], length: int) -> int:
    """Return the best price for a rod of *length* cut into pieces.

    ``prices[i]`` is the price of a piece of length ``i + 1``; pieces longer
    than the rod are not considered.
    """
    _check_capacity(length, "length")
    if len(prices) < length:
        raise ValueError("prices must cover every piece length up to the rod length")
    piece_lengths = range(1, length + 1)
    return unbounded_knapsack(length, prices[:length], list(piece_lengths))