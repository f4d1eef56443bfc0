"""Dynamic-programming solutions to classic optimisation problems."""

from collections.abc import Sequence
from functools import lru_cache


def coin_problem(n: int, coins: Sequence[int]) -> int:
    """Count the ways ``n`` can be made from unlimited coins of the given values.

    Order of coins does not matter.
    """
    if n < 0:
        raise ValueError(f"amount {n} must not be negative")
    if any(coin < 0 for coin in coins):
        raise ValueError("coin values must not be negative")

    combinations = [0] * (n + 1)
    combinations[0] = 1
    for coin in coins:
        for j in range(coin, n + 1):
            combinations[j] += combinations[j - coin]
    return combinations[n]


def egg_drop(eggs: int, floors: int) -> int:
    """Least number of drops that always finds the highest safe floor."""
    if eggs <= 0:
        raise ValueError("at least one egg is required")
    if floors < 0:
        raise ValueError(f"floors {floors} must not be negative")

    if eggs == 1 or floors <= 1:
        return floors

    # previous[j]: answer with one egg fewer and j floors
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0, 1] + [0] * (floors - 1)
        for j in range(2, floors + 1):
            current[j] = min(
                1 + max(previous[k - 1], current[j - k]) for k in range(1, j + 1)
            )
        previous = current
    return previous[floors]


def knapsack(w: int, weights: Sequence[int], values: Sequence[int]) -> tuple[int, int, list[int]]:
    """Solve the 0/1 knapsack problem.

    Returns ``(best_value, total_weight, items)`` where ``items`` are the
    1-based indices of the chosen items in ascending order.
    """
    if len(weights) != len(values):
        raise ValueError(
            "Number of items in the list of weights doesn't match "
            "the number of items in the list of values!"
        )
    if w < 0:
        raise ValueError(f"capacity {w} must not be negative")

    n = len(weights)
    table = [[0] * (w + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        weight, value = weights[i - 1], values[i - 1]
        above, row = table[i - 1], table[i]
        for j in range(1, w + 1):
            if weight <= j:
                row[j] = max(value + above[j - weight], above[j])
            else:
                row[j] = above[j]

    items: list[int] = []
    j = w
    for i in range(n, 0, -1):
        if table[i][j] > table[i - 1][j]:
            items.append(i)
            j -= weights[i - 1]
    items.reverse()

    total_weight = sum(weights[i - 1] for i in items)
    return table[n][w], total_weight, items


def rod_cutting(price: Sequence[int]) -> int:
    """Best value from cutting a rod of length ``len(price)``.

    ``price[i]`` is the value of a piece of length ``i + 1``.
    """
    length = len(price)
    best = [0] * (length + 1)
    for j in range(1, length + 1):
        best[j] = max(price[i] + best[j - i - 1] for i in range(j))
    return best[length]


def rod_cutting_recursive(price: Sequence[int], length: int) -> int:
    """Best value for a rod of ``length``, computed top-down."""
    if length < 0:
        raise ValueError(f"length {length} must not be negative")
    if length > len(price):
        raise ValueError(f"length {length} exceeds the {len(price)} known prices")

    prices = tuple(price)

    @lru_cache(maxsize=None)
    def best(remaining: int) -> int:
        if remaining == 0:
            return 0
        return max(prices[i] + best(remaining - i - 1) for i in range(remaining))

    return best(length)