"""Data models for level generation."""

from typing import Annotated, Dict, List, Optional, Tuple
from pydantic import BaseModel, Field


Coord = Tuple[int, int]
Word = Annotated[str, Field(min_length=1, pattern=r'^[A-Z]+$')]


class HexCell(BaseModel):
    """A single hex cell addressed by axial coordinates."""
    q: int
    r: int
    letter: str = Field(default="", pattern=r'^[A-Z]?$')  # Empty until assigned

    @property
    def coord(self) -> Coord:
        return (self.q, self.r)


class Level(BaseModel):
    """A generated level: every cell of the grid plus the words hidden in it."""
    grid: List[HexCell] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)


class GeneratorConfig(BaseModel):
    """Configuration for level generation."""
    radius: int = Field(default=4, ge=0, le=20)
    target_words: int = Field(default=10, ge=1)
    candidate_count: int = Field(default=20, ge=1)  # Oversampled draw from the pool
    overlap_attempts: int = Field(default=100, ge=0)
    fresh_attempts: int = Field(default=150, ge=0)
    seed: Optional[int] = None
    word_pool: Optional[List[Word]] = None  # Falls back to WORDS_POOL


class ValidationError(BaseModel):
    """A single level validation error."""
    code: str
    message: str
    word: Optional[str] = None
    coord: Optional[Coord] = None


class ValidationResult(BaseModel):
    """Result of level validation."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    paths: Dict[str, List[Coord]] = Field(default_factory=dict)  # One traceable path per word
    radius: Optional[int] = None


class TraceResult(BaseModel):
    """Outcome of checking a player's traced path."""
    found: bool
    spelled: str = ""
    word: Optional[str] = None
    error: Optional[str] = None
