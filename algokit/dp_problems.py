"""Dynamic-programming exercises: LCS, products, house robbing, grid paths, edit distance."""

from collections.abc import Sequence
from itertools import accumulate


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest subsequence common to both strings."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        row = [0]
        for j, b in enumerate(text2):
            row.append(previous[j] + 1 if a == b else max(row[j], previous[j + 1]))
        previous = row
    return previous[-1]


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a contiguous, non-empty subarray."""
    if not nums:
        raise ValueError("max_product needs at least one number")
    best = nums[0]
    left = right = 0
    for front, back in zip(nums, reversed(nums)):
        left = (left or 1) * front
        right = (right or 1) * back
        best = max(best, left, right)
    return best


def rob(nums: Sequence[int]) -> int:
    """Most money taken from a row of houses without robbing two neighbours."""
    before_previous = previous = 0
    for amount in nums:
        before_previous, previous = previous, max(amount + before_previous, previous)
    return previous


def rob_circular(nums: Sequence[int]) -> int:
    """Like :func:`rob`, but the first and last houses are neighbours."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    return max(rob(nums[1:]), rob(nums[:-1]))


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an m by n grid."""
    if m < 0 or n < 0:
        raise ValueError("grid dimensions must be non-negative")
    if m == 0 or n == 0:
        return 0
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(row))
    return row[-1]


def min_distance(word1: str, word2: str) -> int:
    """Levenshtein distance: fewest inserts, deletes and replacements."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        row = [i]
        for j, b in enumerate(word2):
            if a == b:
                row.append(previous[j])
            else:
                row.append(1 + min(previous[j], previous[j + 1], row[j]))
        previous = row
    return previous[-1]