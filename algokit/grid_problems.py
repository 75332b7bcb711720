"""Flood-fill exercises on grids: enclaves, surrounded regions and islands."""

from collections.abc import Callable, Iterator, Sequence

Cell = tuple[int, int]


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[Cell]:
    for d_row, d_col in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _flood(
    start: Cell, is_land: Callable[[int, int], bool], rows: int, cols: int, seen: set[Cell]
) -> int:
    """Mark every land cell connected to ``start`` as seen; return how many."""
    seen.add(start)
    stack = [start]
    size = 0
    while stack:
        row, col = stack.pop()
        size += 1
        for cell in _neighbours(row, col, rows, cols):
            if cell not in seen and is_land(*cell):
                seen.add(cell)
                stack.append(cell)
    return size


def _border(rows: int, cols: int) -> set[Cell]:
    cells = {(r, 0) for r in range(rows)} | {(r, cols - 1) for r in range(rows)}
    cells |= {(0, c) for c in range(cols)} | {(rows - 1, c) for c in range(cols)}
    return cells


def _border_reachable(rows: int, cols: int, is_land: Callable[[int, int], bool]) -> set[Cell]:
    seen: set[Cell] = set()
    for cell in _border(rows, cols):
        if cell not in seen and is_land(*cell):
            _flood(cell, is_land, rows, cols, seen)
    return seen


def num_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Number of land cells (truthy) from which the grid's edge cannot be reached."""
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    if cols == 0:
        return 0

    def is_land(r: int, c: int) -> bool:
        return bool(grid[r][c])

    escaped = _border_reachable(rows, cols, is_land)
    return sum(
        1
        for r in range(rows)
        for c in range(cols)
        if is_land(r, c) and (r, c) not in escaped
    )


def capture_surrounded(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """A copy of ``board`` with every 'O' region not touching the edge turned to 'X'."""
    rows = len(board)
    if rows == 0 or len(board[0]) == 0:
        return [list(line) for line in board]
    cols = len(board[0])

    def is_open(r: int, c: int) -> bool:
        return board[r][c] == "O"

    safe = _border_reachable(rows, cols, is_open)
    return [
        ["X" if value == "O" and (r, c) not in safe else value for c, value in enumerate(line)]
        for r, line in enumerate(board)
    ]


def _component_sizes(
    rows: int, cols: int, is_land: Callable[[int, int], bool]
) -> Iterator[int]:
    seen: set[Cell] = set()
    for r in range(rows):
        for c in range(cols):
            if (r, c) not in seen and is_land(r, c):
                yield _flood((r, c), is_land, rows, cols, seen)


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected groups of '1' cells."""
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    return sum(1 for _ in _component_sizes(rows, cols, lambda r, c: grid[r][c] == "1"))


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Size of the largest 4-connected group of land cells (truthy values)."""
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    return max(_component_sizes(rows, cols, lambda r, c: bool(grid[r][c])), default=0)