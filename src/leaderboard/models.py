"""Data models for the score leaderboard."""

from datetime import datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field


Period = Literal["today", "week", "month", "all"]


class ScoreCreate(BaseModel):
    """A score submission. Score is elapsed seconds, lower is better."""
    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(..., min_length=1, max_length=32)
    score: int = Field(..., ge=0)


class Score(ScoreCreate):
    """A stored score record."""
    id: int
    created_at: datetime


class ScoreQuery(BaseModel):
    """Listing parameters for the leaderboard."""
    limit: int = Field(default=10, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    period: Period = "all"
