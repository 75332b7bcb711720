"""Search exercises: split array, 132 pattern, triangle counting, reaching a number."""

from collections.abc import Iterable, Sequence
from math import inf


def _fits(nums: Iterable[int], limit: int, extra_pieces: int) -> bool:
    running = 0
    for value in nums:
        if running + value > limit:
            running = value
            extra_pieces -= 1
            if extra_pieces < 0:
                return False
        else:
            running += value
    return True


def split_array(nums: Sequence[int], m: int) -> int:
    """Smallest possible largest sum when ``nums`` is split into ``m`` contiguous parts."""
    low = max(nums, default=0)
    high = sum(nums)
    while low < high:
        mid = (low + high) // 2
        if _fits(nums, mid, m - 1):
            high = mid
        else:
            low = mid + 1
    return low


def find_132_pattern(nums: Sequence[int]) -> bool:
    """Whether some i < j < k has nums[i] < nums[k] < nums[j]."""
    stack: list[int] = []
    last: float = -inf
    for value in reversed(nums):
        if value < last:
            return True
        while stack and stack[-1] < value:
            last = stack.pop()
        stack.append(value)
    return False


def triangle_number(nums: Iterable[int]) -> int:
    """Number of index triples whose values can be the sides of a triangle."""
    sides = sorted(nums)
    count = 0
    for k in range(2, len(sides)):
        low, high = 0, k - 1
        while low < high:
            if sides[low] + sides[high] > sides[k]:
                count += high - low
                high -= 1
            else:
                low += 1
    return count


def reach_number(target: int) -> int:
    """Fewest moves of sizes 1, 2, 3, ... (each left or right) to land on ``target``."""
    target = abs(target)
    total = steps = 0
    while total < target or (total - target) % 2:
        steps += 1
        total += steps
    return steps