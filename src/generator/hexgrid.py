"""Hex grid construction and adjacency utilities."""

from collections import Counter
from typing import Dict, List, Mapping, Optional, Tuple

from .models import Coord, HexCell


# Axial direction vectors, shared by placement and trace checking
DIRECTIONS: Tuple[Coord, ...] = (
    (1, 0), (1, -1), (0, -1),
    (-1, 0), (-1, 1), (0, 1),
)

# Cap on cells visited by one find_word_path search
MAX_SEARCH_NODES = 200_000


def cell_count(radius: int) -> int:
    """Number of cells in a hexagonal region of the given radius."""
    return 3 * radius * radius + 3 * radius + 1


def radius_for_cell_count(count: int) -> Optional[int]:
    """Inverse of cell_count. Returns None if no radius yields `count` cells."""
    radius = 0
    while cell_count(radius) < count:
        radius += 1
    return radius if cell_count(radius) == count else None


def in_bounds(coord: Coord, radius: int) -> bool:
    """Check whether an axial coordinate lies inside the region."""
    q, r = coord
    return -radius <= q <= radius and -radius <= r <= radius and -radius <= q + r <= radius


def hex_neighbors(q: int, r: int) -> List[Coord]:
    """Return the 6 neighboring coordinates of (q, r)."""
    return [(q + dq, r + dr) for dq, dr in DIRECTIONS]


def is_adjacent(a: Coord, b: Coord) -> bool:
    """Check whether two coordinates are hex neighbors."""
    return (b[0] - a[0], b[1] - a[1]) in DIRECTIONS


def build_grid(radius: int) -> Dict[Coord, HexCell]:
    """
    Build an empty hex grid.

    Args:
        radius: Grid radius (0 gives a single cell)

    Returns:
        Mapping from (q, r) to an empty HexCell for every cell in the region

    Raises:
        ValueError: If radius is negative
    """
    if radius < 0:
        raise ValueError(f"Grid radius must be non-negative, got {radius}")

    grid: Dict[Coord, HexCell] = {}
    for q in range(-radius, radius + 1):
        r1 = max(-radius, -q - radius)
        r2 = min(radius, -q + radius)
        for r in range(r1, r2 + 1):
            grid[(q, r)] = HexCell(q=q, r=r)
    return grid


def find_word_path(
    letters: Mapping[Coord, str],
    word: str,
    max_nodes: int = MAX_SEARCH_NODES
) -> Optional[List[Coord]]:
    """
    Search the grid for a path of distinct adjacent cells spelling `word`.

    Depth-first search from every cell holding the first letter. Words
    needing more copies of a letter than the grid holds are rejected up
    front; otherwise the search gives up after visiting `max_nodes` cells.

    Args:
        letters: Mapping from coordinate to the letter in that cell
        word: Word to look for
        max_nodes: Search budget (cells pushed onto the path)

    Returns:
        The first path found (in word order), or None
    """
    if not word or len(word) > len(letters):
        return None

    available = Counter(letters.values())
    if any(available[letter] < needed for letter, needed in Counter(word).items()):
        return None

    visited = 0

    def extend(path: List[Coord]) -> Optional[bool]:
        """True when the word is complete, None when the budget runs out."""
        nonlocal visited
        if len(path) == len(word):
            return True
        q, r = path[-1]
        for coord in hex_neighbors(q, r):
            if coord in path or letters.get(coord) != word[len(path)]:
                continue
            if visited >= max_nodes:
                return None
            visited += 1
            path.append(coord)
            found = extend(path)
            if found or found is None:
                return found
            path.pop()
        return False

    for coord, letter in letters.items():
        if letter != word[0]:
            continue
        if visited >= max_nodes:
            return None
        visited += 1
        path = [coord]
        found = extend(path)
        if found:
            return path
        if found is None:
            return None
    return None
