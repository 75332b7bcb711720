"""Classic dynamic-programming routines: coin change, Fibonacci, knapsack and LIS."""

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from functools import lru_cache
from math import inf


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _positive_tuple(name: str, items: Iterable[int]) -> tuple[int, ...]:
    values = tuple(items)
    if any(item <= 0 for item in values):
        raise ValueError(f"every {name} must be positive")
    return values


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Fewest coins that sum to ``amount``, by memoised recursion; -1 if impossible."""
    _require_non_negative("amount", amount)
    denominations = _positive_tuple("coin", coins)

    @lru_cache(maxsize=None)
    def fewest(remaining: int) -> float:
        if remaining == 0:
            return 0
        best = min(
            (fewest(remaining - coin) for coin in denominations if remaining >= coin),
            default=inf,
        )
        return best + 1

    result = fewest(amount)
    return -1 if result == inf else int(result)


def coin_change_tabulation(coins: Iterable[int], amount: int) -> int:
    """Fewest coins that sum to ``amount``, filled in bottom-up; -1 if impossible."""
    _require_non_negative("amount", amount)
    denominations = _positive_tuple("coin", coins)
    table: list[float] = [0]
    for value in range(1, amount + 1):
        table.append(
            min(
                (table[value - coin] + 1 for coin in denominations if value >= coin),
                default=inf,
            )
        )
    return -1 if table[amount] == inf else int(table[amount])


def fib_top_down(n: int) -> int:
    """The n-th Fibonacci number, computed recursively with memoisation."""

    @lru_cache(maxsize=None)
    def fib(k: int) -> int:
        if k <= 1:
            return k
        return fib(k - 1) + fib(k - 2)

    return fib(n)


def fib_bottom_up(n: int) -> int:
    """The n-th Fibonacci number, computed with a full table."""
    if n <= 1:
        return n
    table = [0, 1]
    for _ in range(2, n + 1):
        table.append(table[-1] + table[-2])
    return table[n]


def fib_space_optimized(n: int) -> int:
    """The n-th Fibonacci number, keeping only the last two terms."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def _items(weights: Iterable[int], values: Iterable[int]) -> list[tuple[int, int]]:
    items = list(zip(weights, values, strict=True))
    if any(weight <= 0 for weight, _ in items):
        raise ValueError("every weight must be positive")
    return items


def knapsack_memoization(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> int:
    """Best total value for an unbounded knapsack, by memoised recursion."""
    _require_non_negative("capacity", capacity)
    items = _items(weights, values)

    @lru_cache(maxsize=None)
    def best(room: int) -> int:
        if room == 0:
            return 0
        return max(
            (value + best(room - weight) for weight, value in items if weight <= room),
            default=0,
        )

    return best(capacity)


def knapsack_tabulation(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> int:
    """Best total value for an unbounded knapsack, filled in bottom-up."""
    _require_non_negative("capacity", capacity)
    items = _items(weights, values)
    table = [0]
    for room in range(1, capacity + 1):
        table.append(
            max(
                (table[room - weight] + value for weight, value in items if weight <= room),
                default=0,
            )
        )
        table[room] = max(table[room], 0)
    return table[capacity]


def lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence, quadratic DP."""
    ending: list[int] = []
    for value in nums:
        ending.append(
            1 + max((length for prev, length in zip(nums, ending) if prev < value), default=0)
        )
    return max(ending, default=0)


def lis_binary_search(nums: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence, patience sorting."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)