"""Grid building and rendering utilities."""

from typing import Dict, List, Optional, Set, Tuple

from .models import PlacedWord

Cell = Tuple[int, int]

def build_grid(placed: List[PlacedWord]) -> Tuple[Dict[Cell, str], List[Cell]]:
    """Build the cell map for a placement and collect any conflicting cells."""
    grid: Dict[Cell, str] = {}
    conflicts: List[Cell] = []

    for pw in placed:
        for letter in pw.letters:
            cell = (letter.x, letter.y)
            if cell in grid and grid[cell] != letter.char:
                conflicts.append(cell)
            grid[cell] = letter.char

    return grid, conflicts


def render_grid(
    grid: Dict[Cell, str],
    revealed: Optional[Set[Cell]] = None,
    hidden: str = '#'
) -> str:
    """
    Render the grid as upper-case rows, '.' for empty cells.

    When `revealed` is given, letters outside it are drawn as `hidden` so a
    board can be shown without giving away unsolved words.
    """
    if not grid:
        return ""

    xs, ys = zip(*grid)
    rows = []
    for y in range(min(ys), max(ys) + 1):
        row = []
        for x in range(min(xs), max(xs) + 1):
            char = grid.get((x, y))
            if char is None:
                row.append('.')
            elif revealed is not None and (x, y) not in revealed:
                row.append(hidden)
            else:
                row.append(char.upper())
        rows.append(''.join(row))

    return '\n'.join(rows)


def visualize(placed: List[PlacedWord]) -> str:
    """
    Quick visualization of a placement.

    Raises ValueError if the placement has conflicting cells.
    """
    grid, conflicts = build_grid(placed)

    if conflicts:
        raise ValueError(f"Grid conflicts at {conflicts}")

    return render_grid(grid)
