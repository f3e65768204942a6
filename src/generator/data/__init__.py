"""Static word data for level generation."""

from .words import WORDS_POOL

__all__ = ["WORDS_POOL"]
