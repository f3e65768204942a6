"""Score leaderboard for completed levels."""

from .models import Period, Score, ScoreCreate, ScoreQuery
from .storage import ScoreStorage, ScoreSubmissionError, PERIOD_WINDOWS

__all__ = [
    "Period",
    "Score",
    "ScoreCreate",
    "ScoreQuery",
    "ScoreStorage",
    "ScoreSubmissionError",
    "PERIOD_WINDOWS",
]
