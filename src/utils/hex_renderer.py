from typing import Dict, List

from ..generator.hexgrid import radius_for_cell_count
from ..generator.models import Coord, Level


def render_level(level: Level, empty: str = '.') -> str:
    """
    Render a level's hex grid to text.

    One line per r, each row shifted by half a cell per step away from the
    middle row, so neighbors line up diagonally:

          A B C
         D E F G
        H I J K L
         M N O P
          Q R S
    """
    if not level.grid:
        return ""

    letters: Dict[Coord, str] = {cell.coord: cell.letter for cell in level.grid}
    radius = radius_for_cell_count(len(letters))
    if radius is None:
        radius = max(max(abs(q), abs(r), abs(q + r)) for q, r in letters)

    lines: List[str] = []
    for r in range(-radius, radius + 1):
        q1 = max(-radius, -r - radius)
        q2 = min(radius, -r + radius)
        row = ' '.join(letters.get((q, r)) or empty for q in range(q1, q2 + 1))
        lines.append(' ' * abs(r) + row)

    return '\n'.join(lines)
