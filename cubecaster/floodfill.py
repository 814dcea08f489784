"""Reachability search over a map grid, starting from the player's cell."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, MutableSequence, Sequence

from .mapfile import find_longest_row

BLOCKING = frozenset("1 ")
QUEUED_MARK = "5"
VISITED_MARK = "6"

Cell = tuple[int, int]


def _cell(grid: Sequence[str], row: int, col: int) -> str:
    """Return a cell; cells missing from a short row count as empty space."""
    line = grid[row]
    return line[col] if col < len(line) else " "


def _set_cell(grid: MutableSequence[str], row: int, col: int, mark: str) -> None:
    line = grid[row].ljust(col + 1)
    grid[row] = line[:col] + mark + line[col + 1:]


def _neighbours(
    grid: Sequence[str], row: int, col: int, height: int, width: int
) -> Iterator[Cell]:
    """Yield open neighbours, keeping clear of the outermost rows and columns."""
    if row + 1 < height - 1 and _cell(grid, row + 1, col) not in BLOCKING:
        yield row + 1, col
    if row - 1 > 0 and _cell(grid, row - 1, col) not in BLOCKING:
        yield row - 1, col
    if col + 1 < width - 1 and _cell(grid, row, col + 1) not in BLOCKING:
        yield row, col + 1
    if col - 1 > 0 and _cell(grid, row, col - 1) not in BLOCKING:
        yield row, col - 1


def _search(
    grid: Sequence[str],
    start_row: int,
    start_col: int,
    on_step: Callable[[Sequence[str]], object] | None,
    mark: bool,
) -> set[Cell]:
    height = len(grid)
    width = find_longest_row(grid)
    if not (0 <= start_row < height and 0 <= start_col < width):
        raise ValueError(f"start cell ({start_row}, {start_col}) is outside the map")
    visited: set[Cell] = set()
    pending: deque[Cell] = deque([(start_row, start_col)])
    while pending:
        row, col = pending.popleft()
        visited.add((row, col))
        if mark:
            _set_cell(grid, row, col, VISITED_MARK)  # type: ignore[arg-type]
        for neighbour in _neighbours(grid, row, col, height, width):
            if neighbour in visited:
                continue
            # New cells go to the front, so the search runs depth first.
            pending.appendleft(neighbour)
            if mark:
                _set_cell(grid, *neighbour, QUEUED_MARK)  # type: ignore[arg-type]
        if on_step is not None:
            on_step(grid)
    return visited


def flood_fill(
    grid: MutableSequence[str],
    start_row: int,
    start_col: int,
    on_step: Callable[[Sequence[str]], object] | None = None,
) -> set[Cell]:
    """Search the grid in place, marking queued cells '5' and visited cells '6'.

    ``on_step`` is called with the grid after each cell is processed.
    Returns the set of visited (row, column) cells.
    """
    return _search(grid, start_row, start_col, on_step, mark=True)


def explore(grid: Sequence[str], start_row: int, start_col: int) -> set[Cell]:
    """Return the cells reachable from the start without changing the grid."""
    return _search(grid, start_row, start_col, None, mark=False)