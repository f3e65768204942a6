"""Hex word-search level generation."""

from .models import Coord, HexCell, Level, GeneratorConfig, ValidationError, ValidationResult, TraceResult
from .hexgrid import (
    DIRECTIONS,
    build_grid,
    cell_count,
    find_word_path,
    hex_neighbors,
    in_bounds,
    is_adjacent,
    radius_for_cell_count,
)
from .level import LevelGenerator, generate_level, ALPHABET
from .verify import verify_level, validate_grid, validate_words, check_trace
from .data import WORDS_POOL

__all__ = [
    # Models
    "Coord",
    "HexCell",
    "Level",
    "GeneratorConfig",
    "ValidationError",
    "ValidationResult",
    "TraceResult",
    # Grid utilities
    "DIRECTIONS",
    "build_grid",
    "cell_count",
    "find_word_path",
    "hex_neighbors",
    "in_bounds",
    "is_adjacent",
    "radius_for_cell_count",
    # Generation
    "LevelGenerator",
    "generate_level",
    "ALPHABET",
    # Verification
    "verify_level",
    "validate_grid",
    "validate_words",
    "check_trace",
    # Data
    "WORDS_POOL",
]
