"""Grid factory for creating grids and converting them to and from text."""

from typing import Iterable, List, Optional, Tuple
from ..domain.types import Cell, Coord, Grid

# Characters used by grid_to_ascii / grid_from_ascii
WALL_CHAR = "#"
START_CHAR = "S"
END_CHAR = "E"
PATH_CHAR = "*"
VISITED_CHAR = "."
EMPTY_CHAR = " "


def default_endpoints(rows: int, cols: int) -> Tuple[Coord, Coord]:
    """Start a quarter of the way across the middle row, end three quarters across."""
    return (rows // 2, cols // 4), (rows // 2, cols * 3 // 4)


def create_empty_grid(rows: int, cols: int,
                      start: Optional[Coord] = None,
                      end: Optional[Coord] = None) -> Grid:
    """
    Create a new grid with no walls.

    Args:
        rows: Number of rows (must be > 0)
        cols: Number of columns (must be > 0)
        start: Start coordinate, defaults to default_endpoints()
        end: End coordinate, defaults to default_endpoints()

    Returns:
        New Grid instance

    Raises:
        ValueError: If dimensions are not positive or an endpoint is out of bounds
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

    default_start, default_end = default_endpoints(rows, cols)
    start = default_start if start is None else tuple(start)
    end = default_end if end is None else tuple(end)

    for name, coord in (("Start", start), ("End", end)):
        if not (0 <= coord[0] < rows and 0 <= coord[1] < cols):
            raise ValueError(f"{name} coordinate {coord} is outside a {rows}x{cols} grid")

    cells = [
        [
            Cell(
                row=row,
                col=col,
                is_start=(row, col) == start,
                is_end=(row, col) == end,
            )
            for col in range(cols)
        ]
        for row in range(rows)
    ]

    return Grid(rows=rows, cols=cols, cells=cells, start=start, end=end)


def create_grid_with_walls(rows: int, cols: int, walls: Iterable[Coord],
                           start: Optional[Coord] = None,
                           end: Optional[Coord] = None) -> Grid:
    """Create a grid and place walls; walls on start/end are ignored."""
    grid = create_empty_grid(rows, cols, start, end)
    for coord in walls:
        grid.set_wall(tuple(coord), True)
    return grid


def grid_from_ascii(text: str) -> Grid:
    """
    Build a grid from a text picture, one line per row.
    '#' is a wall, 'S' the start, 'E' the end; anything else is open.
    """
    lines = text.strip("\n").splitlines()
    if not lines:
        raise ValueError("Grid picture is empty")

    rows = len(lines)
    cols = max(len(line) for line in lines)
    start: Optional[Coord] = None
    end: Optional[Coord] = None
    walls: List[Coord] = []

    for row, line in enumerate(lines):
        for col, char in enumerate(line.ljust(cols)):
            if char == START_CHAR:
                start = (row, col)
            elif char == END_CHAR:
                end = (row, col)
            elif char == WALL_CHAR:
                walls.append((row, col))

    if start is None or end is None:
        raise ValueError("Grid picture needs exactly one 'S' and one 'E'")

    return create_grid_with_walls(rows, cols, walls, start, end)


def cell_char(cell: Cell) -> str:
    """Get the display character for a cell."""
    if cell.is_start:
        return START_CHAR
    if cell.is_end:
        return END_CHAR
    if cell.is_wall:
        return WALL_CHAR
    if cell.is_path:
        return PATH_CHAR
    if cell.is_visited:
        return VISITED_CHAR
    return EMPTY_CHAR


def grid_to_ascii(grid: Grid) -> str:
    """Render the grid display state as text, one line per row."""
    return "\n".join(
        "".join(cell_char(cell) for cell in row) for row in grid.cells
    )
