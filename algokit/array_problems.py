"""Array and string exercises: diagonal orders, parenthesis repair and anagram search."""

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence


def _by_diagonal(rows: Iterable[Iterable[int]]) -> dict[int, list[int]]:
    """Group values by ``row + column``, each group in row order."""
    groups: defaultdict[int, list[int]] = defaultdict(list)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            groups[i + j].append(value)
    return groups


def find_diagonal_order(nums: Iterable[Iterable[int]]) -> list[int]:
    """Values of a jagged grid read along anti-diagonals, each from bottom-left up."""
    groups = _by_diagonal(nums)
    return [value for d in sorted(groups) for value in reversed(groups[d])]


def diagonal_traverse(mat: Sequence[Sequence[int]]) -> list[int]:
    """Values of a matrix read diagonal by diagonal in a zigzag.

    Even diagonals run upwards (bottom-left to top-right), odd ones downwards.
    """
    groups = _by_diagonal(mat)
    result: list[int] = []
    for d in sorted(groups):
        result.extend(reversed(groups[d]) if d % 2 == 0 else groups[d])
    return result


def min_remove_to_make_valid(s: str) -> str:
    """``s`` with the fewest parentheses removed so that the rest are balanced."""
    unmatched_open: list[int] = []
    drop: set[int] = set()
    for i, ch in enumerate(s):
        if ch == "(":
            unmatched_open.append(i)
        elif ch == ")":
            if unmatched_open:
                unmatched_open.pop()
            else:
                drop.add(i)
    drop.update(unmatched_open)
    return "".join(ch for i, ch in enumerate(s) if i not in drop)


def find_anagrams(s: str, p: str) -> list[int]:
    """Start indices of every substring of ``s`` that is an anagram of ``p``."""
    if not p:
        raise ValueError("the pattern must not be empty")
    width = len(p)
    need = Counter(p)
    window: Counter[str] = Counter()
    starts: list[int] = []
    for i, ch in enumerate(s):
        window[ch] += 1
        if i >= width:
            old = s[i - width]
            window[old] -= 1
            if not window[old]:
                del window[old]
        if window == need:
            starts.append(i - width + 1)
    return starts