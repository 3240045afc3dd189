"""Breadth- and depth-first searches over small rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

Cell = tuple[int, int]

_KNIGHT_STEPS: tuple[Cell, ...] = (
    (1, 2), (1, -2), (-1, 2), (-1, -2),
    (2, 1), (2, -1), (-2, 1), (-2, -1),
)
_ORTHOGONAL_STEPS: tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

RIPE = 1
UNRIPE = 0
EMPTY = -1


def _dimensions(grid: Sequence[Sequence]) -> tuple[int, int]:
    """Return (height, width) of a non-empty rectangular grid."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    return len(grid), width


def _orthogonal_neighbours(cell: Cell, height: int, width: int) -> Iterator[Cell]:
    row, col = cell
    for d_row, d_col in _ORTHOGONAL_STEPS:
        n_row, n_col = row + d_row, col + d_col
        if 0 <= n_row < height and 0 <= n_col < width:
            yield n_row, n_col


def knight_moves(rows: int, cols: int, start: Cell, target: Cell) -> int:
    """Fewest knight moves from start to target on a 1-indexed rows x cols board.

    Raises ValueError when a square lies off the board or the target
    cannot be reached.
    """
    if rows < 1 or cols < 1:
        raise ValueError("board must have at least one row and one column")
    start, target = tuple(start), tuple(target)
    for name, (row, col) in (("start", start), ("target", target)):
        if not (1 <= row <= rows and 1 <= col <= cols):
            raise ValueError(f"{name} square {(row, col)} is off the board")

    distance = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == target:
            return distance[cell]
        for d_row, d_col in _KNIGHT_STEPS:
            nxt = (cell[0] + d_row, cell[1] + d_col)
            if 1 <= nxt[0] <= rows and 1 <= nxt[1] <= cols and nxt not in distance:
                distance[nxt] = distance[cell] + 1
                queue.append(nxt)
    raise ValueError(f"target square {target} cannot be reached from {start}")


def ripening_days(grid: Sequence[Sequence[int]]) -> int:
    """Days until every tomato is ripe, or -1 if some never ripen.

    Cells hold 1 (ripe), 0 (unripe) or -1 (empty). Each day ripeness
    spreads to orthogonal neighbours.
    """
    height, width = _dimensions(grid)
    days = [list(row) for row in grid]
    queue = deque(
        (r, c) for r, row in enumerate(days) for c, value in enumerate(row) if value == RIPE
    )
    while queue:
        cell = queue.popleft()
        for n_row, n_col in _orthogonal_neighbours(cell, height, width):
            if days[n_row][n_col] == UNRIPE:
                days[n_row][n_col] = days[cell[0]][cell[1]] + 1
                queue.append((n_row, n_col))

    values = [value for row in days for value in row]
    if UNRIPE in values:
        return -1
    return max(values) - 1


def longest_increasing_path(grid: Sequence[Sequence[int]]) -> int:
    """Number of cells on the longest strictly increasing orthogonal path."""
    height, width = _dimensions(grid)
    order = sorted(
        ((r, c) for r in range(height) for c in range(width)),
        key=lambda cell: grid[cell[0]][cell[1]],
        reverse=True,
    )
    length: dict[Cell, int] = {}
    for cell in order:
        value = grid[cell[0]][cell[1]]
        length[cell] = 1 + max(
            (
                length[nb]
                for nb in _orthogonal_neighbours(cell, height, width)
                if grid[nb[0]][nb[1]] > value
            ),
            default=0,
        )
    return max(length.values())


def housing_complexes(rows: Sequence[str]) -> list[int]:
    """Sizes of the connected groups of '1' cells, in ascending order."""
    height, width = _dimensions(rows)
    for line in rows:
        if set(line) - {"0", "1"}:
            raise ValueError(f"row {line!r} may hold only '0' and '1'")

    seen: set[Cell] = set()
    sizes: list[int] = []
    for r, line in enumerate(rows):
        for c, mark in enumerate(line):
            if mark != "1" or (r, c) in seen:
                continue
            seen.add((r, c))
            stack = [(r, c)]
            size = 0
            while stack:
                cell = stack.pop()
                size += 1
                for n_row, n_col in _orthogonal_neighbours(cell, height, width):
                    if rows[n_row][n_col] == "1" and (n_row, n_col) not in seen:
                        seen.add((n_row, n_col))
                        stack.append((n_row, n_col))
            sizes.append(size)
    return sorted(sizes)


def cavity_map(grid: Sequence[str]) -> list[str]:
    """Mark with 'X' every interior cell deeper than all four of its neighbours."""
    height = len(grid)

    def is_cavity(r: int, c: int) -> bool:
        depth = grid[r][c]
        return all(
            depth > grid[n_row][n_col]
            for n_row, n_col in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1))
        )

    result = []
    for r, line in enumerate(grid):
        if 0 < r < height - 1:
            line = "".join(
                "X" if 0 < c < len(line) - 1 and is_cavity(r, c) else mark
                for c, mark in enumerate(line)
            )
        result.append(line)
    return result


def grid_search(grid: Sequence[str], pattern: Sequence[str]) -> bool:
    """Whether the pattern rows appear as a block somewhere in the grid."""
    if not pattern or not pattern[0]:
        raise ValueError("pattern must not be empty")
    pattern_height = len(pattern)
    return any(
        all(grid[top + k].startswith(part, left) for k, part in enumerate(pattern))
        for top in range(len(grid) - pattern_height + 1)
        for left in range(len(grid[top]) - len(pattern[0]) + 1)
    )