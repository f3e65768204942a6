"""
Score storage for the leaderboard.

Scores are kept in memory and, when a path is given, mirrored to a JSON
file after every insert.
"""

import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from .models import Period, Score, ScoreCreate, ScoreQuery


# Look-back windows for rolling periods
PERIOD_WINDOWS: Dict[str, timedelta] = {
    "week": timedelta(days=7),
    "month": timedelta(days=30),
}


class ScoreSubmissionError(ValueError):
    """Raised when a submission or query fails validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> Dict[str, str]:
        """Error body in {message, field} form."""
        body = {"message": self.message}
        if self.field:
            body["field"] = self.field
        return body

    @classmethod
    def from_validation(cls, err: PydanticValidationError) -> "ScoreSubmissionError":
        """Build from the first error of a pydantic ValidationError."""
        first = err.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        return cls(first["msg"], field or None)


class ScoreStorage(BaseModel):
    """
    In-memory leaderboard with optional JSON persistence.

    Attributes:
        path: JSON file backing the store (None keeps scores in memory only)
        scores: All stored scores in insertion order
    """

    path: Optional[Path] = None
    scores: List[Score] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        """Load existing scores from disk if the backing file exists."""
        if self.path is not None and self.path.exists() and not self.scores:
            with open(self.path) as f:
                data = json.load(f)
            self.scores = [Score(**item) for item in data]

    @property
    def next_id(self) -> int:
        return max((s.id for s in self.scores), default=0) + 1

    def create_score(self, data: ScoreCreate | Dict[str, Any]) -> Score:
        """
        Validate and store a score.

        Args:
            data: ScoreCreate or raw payload dict

        Returns:
            The stored Score with id and timestamp

        Raises:
            ScoreSubmissionError: If the payload is invalid
            OSError: If the backing file cannot be written (the score is not stored)
        """
        try:
            entry = data if isinstance(data, ScoreCreate) else ScoreCreate(**data)
        except PydanticValidationError as e:
            raise ScoreSubmissionError.from_validation(e) from e

        score = Score(
            id=self.next_id,
            username=entry.username,
            score=entry.score,
            created_at=datetime.now(),
        )
        self.save(self.scores + [score])
        self.scores.append(score)
        return score

    def get_top_scores(
        self,
        limit: int = 10,
        offset: int = 0,
        period: Period = "all",
        now: Optional[datetime] = None
    ) -> List[Score]:
        """
        List scores for a period, best (lowest) first.

        Args:
            limit: Page size (1-100)
            offset: Number of scores to skip
            period: One of today, week, month, all
            now: Reference time for the period filter (defaults to now)

        Returns:
            One page of scores ordered ascending by score

        Raises:
            ScoreSubmissionError: If the query parameters are invalid
        """
        try:
            query = ScoreQuery(limit=limit, offset=offset, period=period)
        except PydanticValidationError as e:
            raise ScoreSubmissionError.from_validation(e) from e

        now = now or datetime.now()
        ranked = sorted(
            (s for s in self.scores if _in_period(s.created_at, query.period, now)),
            key=lambda s: (s.score, s.id)
        )
        return ranked[query.offset:query.offset + query.limit]

    def get_all_scores(self) -> List[Score]:
        """All scores ordered ascending by score."""
        return sorted(self.scores, key=lambda s: (s.score, s.id))

    def save(self, scores: Optional[List[Score]] = None) -> None:
        """
        Write scores to the backing file, if any.

        The file is written to a temporary sibling first and then moved into
        place, so a failed write leaves the previous file intact.

        Args:
            scores: Scores to write (defaults to the stored scores)
        """
        if self.path is None:
            return
        if scores is None:
            scores = self.scores

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, 'w') as f:
            json.dump([s.model_dump(mode="json") for s in scores], f, indent=2)
        tmp_path.replace(self.path)


def _in_period(created_at: datetime, period: Period, now: datetime) -> bool:
    if period == "all":
        return True
    if period == "today":
        return created_at.date() == now.date()
    return created_at >= now - PERIOD_WINDOWS[period]

