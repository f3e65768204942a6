"""
Level verification.

Validates:
1. Grid shape (cell count matches a hex region, every cell inside it, no duplicates)
2. Letters (every cell holds exactly one uppercase letter)
3. Words (no duplicates, each traceable on distinct hex-adjacent cells)

Also checks a player's traced path against a level's words.
"""

import re
from typing import Dict, List, Optional, Sequence, Tuple

from .hexgrid import cell_count, find_word_path, in_bounds, is_adjacent, radius_for_cell_count
from .models import Coord, Level, TraceResult, ValidationError, ValidationResult


_LETTER_RE = re.compile(r'^[A-Z]$')


def validate_grid(level: Level, radius: Optional[int]) -> List[ValidationError]:
    """Validate grid shape and letters."""
    errors: List[ValidationError] = []

    if radius is None:
        errors.append(ValidationError(
            code="CELL_COUNT",
            message=f"{len(level.grid)} cells do not form a hexagonal region"
        ))
    elif len(level.grid) != cell_count(radius):
        errors.append(ValidationError(
            code="CELL_COUNT",
            message=f"Expected {cell_count(radius)} cells for radius {radius}, got {len(level.grid)}"
        ))

    seen = set()
    for cell in level.grid:
        coord = cell.coord
        if coord in seen:
            errors.append(ValidationError(
                code="DUPLICATE_CELL",
                message=f"Cell {coord} appears more than once",
                coord=coord
            ))
            continue
        seen.add(coord)

        if radius is not None and not in_bounds(coord, radius):
            errors.append(ValidationError(
                code="OUT_OF_BOUNDS",
                message=f"Cell {coord} lies outside radius {radius}",
                coord=coord
            ))

        if not _LETTER_RE.match(cell.letter):
            errors.append(ValidationError(
                code="INVALID_LETTER",
                message=f"Cell {coord} has letter {cell.letter!r}, expected one of A-Z",
                coord=coord
            ))

    return errors


def validate_words(level: Level, letters: Dict[Coord, str]) -> Tuple[List[ValidationError], Dict[str, List[Coord]]]:
    """Check every word is unique and traceable. Returns errors and the paths found."""
    errors: List[ValidationError] = []
    paths: Dict[str, List[Coord]] = {}

    for word in level.words:
        if word in paths:
            errors.append(ValidationError(
                code="DUPLICATE_WORD",
                message=f"'{word}' is listed more than once",
                word=word
            ))
            continue

        path = find_word_path(letters, word)
        if path is None:
            errors.append(ValidationError(
                code="WORD_NOT_FOUND",
                message=f"'{word}' cannot be traced on the grid",
                word=word
            ))
            continue
        paths[word] = path

    return errors, paths


def verify_level(level: Level, radius: Optional[int] = None) -> ValidationResult:
    """
    Main verification function: validates a generated level.

    Args:
        level: The level to check
        radius: Expected grid radius (inferred from the cell count if omitted)

    Returns:
        ValidationResult with errors and one traceable path per word
    """
    if radius is None:
        radius = radius_for_cell_count(len(level.grid))

    errors = validate_grid(level, radius)

    letters = {cell.coord: cell.letter for cell in level.grid}
    word_errors, paths = validate_words(level, letters)
    errors.extend(word_errors)

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        words=list(level.words),
        paths=paths,
        radius=radius,
    )


def check_trace(level: Level, trace: Sequence[Coord]) -> TraceResult:
    """
    Check whether a traced path finds one of the level's words.

    The trace must visit distinct grid cells, each adjacent to the one
    before it, and spell a word from the level's word list.

    Args:
        level: The level being played
        trace: Coordinates in the order the player selected them

    Returns:
        TraceResult; `found` is True only when a word was matched
    """
    if not trace:
        return TraceResult(found=False, error="EMPTY_TRACE")

    letters = {cell.coord: cell.letter for cell in level.grid}
    spelled = ""
    previous: Optional[Coord] = None
    visited = set()

    for raw in trace:
        coord = (raw[0], raw[1])
        if coord not in letters:
            return TraceResult(found=False, spelled=spelled, error="UNKNOWN_CELL")
        if coord in visited:
            return TraceResult(found=False, spelled=spelled, error="REPEATED_CELL")
        if previous is not None and not is_adjacent(previous, coord):
            return TraceResult(found=False, spelled=spelled, error="NOT_ADJACENT")

        visited.add(coord)
        spelled += letters[coord]
        previous = coord

    if spelled in level.words:
        return TraceResult(found=True, spelled=spelled, word=spelled)
    return TraceResult(found=False, spelled=spelled, error="NOT_A_WORD")
