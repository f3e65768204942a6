"""Tests for score submission, listing and persistence."""

from datetime import datetime, timedelta

import pytest

from src.leaderboard import Score, ScoreCreate, ScoreStorage, ScoreSubmissionError


NOW = datetime(2026, 10, 18, 12, 0)


def make_score(id, username, score, age):
    return Score(id=id, username=username, score=score, created_at=NOW - age)


@pytest.fixture
def storage():
    """Storage with one score per period window."""
    return ScoreStorage(scores=[
        make_score(1, "today", 90, timedelta(hours=1)),
        make_score(2, "week", 30, timedelta(days=3)),
        make_score(3, "month", 60, timedelta(days=20)),
        make_score(4, "old", 10, timedelta(days=60)),
    ])


class TestSubmit:
    """Test score submission."""

    def test_create_score(self):
        """Valid submission gets an id and timestamp."""
        storage = ScoreStorage()
        score = storage.create_score({"username": "alice", "score": 95})
        assert score.id == 1
        assert score.username == "alice"
        assert score.score == 95
        assert isinstance(score.created_at, datetime)

    def test_ids_increment(self):
        """Each stored score gets the next id."""
        storage = ScoreStorage()
        first = storage.create_score(ScoreCreate(username="a", score=1))
        second = storage.create_score(ScoreCreate(username="b", score=2))
        assert (first.id, second.id) == (1, 2)

    def test_username_stripped(self):
        """Surrounding whitespace is removed from usernames."""
        score = ScoreStorage().create_score({"username": "  bob ", "score": 5})
        assert score.username == "bob"

    @pytest.mark.parametrize("payload,field", [
        ({"username": "", "score": 10}, "username"),
        ({"username": "   ", "score": 10}, "username"),
        ({"score": 10}, "username"),
        ({"username": "alice", "score": -1}, "score"),
        ({"username": "alice", "score": "fast"}, "score"),
        ({"username": "alice"}, "score"),
    ])
    def test_invalid_submission(self, payload, field):
        """Invalid payloads raise a field-level error and store nothing."""
        storage = ScoreStorage()
        with pytest.raises(ScoreSubmissionError) as exc_info:
            storage.create_score(payload)
        assert exc_info.value.field == field
        assert exc_info.value.message
        assert storage.scores == []

    def test_error_body(self):
        """Errors serialize to message and field."""
        with pytest.raises(ScoreSubmissionError) as exc_info:
            ScoreStorage().create_score({"username": "", "score": 1})
        body = exc_info.value.to_dict()
        assert set(body) == {"message", "field"}
        assert body["field"] == "username"


class TestListing:
    """Test leaderboard listing."""

    def test_all_ascending(self, storage):
        """All-time listing is ordered by score, lowest first."""
        scores = storage.get_top_scores(now=NOW)
        assert [s.username for s in scores] == ["old", "week", "month", "today"]

    def test_get_all_scores(self, storage):
        """get_all_scores ignores periods and pagination."""
        assert [s.score for s in storage.get_all_scores()] == [10, 30, 60, 90]

    @pytest.mark.parametrize("period,expected", [
        ("today", ["today"]),
        ("week", ["week", "today"]),
        ("month", ["week", "month", "today"]),
        ("all", ["old", "week", "month", "today"]),
    ])
    def test_period_filter(self, storage, period, expected):
        """Periods keep only scores inside their window."""
        scores = storage.get_top_scores(period=period, now=NOW)
        assert [s.username for s in scores] == expected

    def test_pagination(self, storage):
        """Limit and offset select a page."""
        page = storage.get_top_scores(limit=2, offset=1, now=NOW)
        assert [s.username for s in page] == ["week", "month"]

    def test_offset_past_end(self, storage):
        """Offset beyond the list gives an empty page."""
        assert storage.get_top_scores(offset=10, now=NOW) == []

    def test_ties_keep_insertion_order(self):
        """Equal scores are ordered by id."""
        storage = ScoreStorage()
        storage.create_score({"username": "first", "score": 50})
        storage.create_score({"username": "second", "score": 50})
        assert [s.username for s in storage.get_top_scores()] == ["first", "second"]

    @pytest.mark.parametrize("kwargs,field", [
        ({"limit": 0}, "limit"),
        ({"limit": 101}, "limit"),
        ({"offset": -1}, "offset"),
        ({"period": "year"}, "period"),
    ])
    def test_invalid_query(self, storage, kwargs, field):
        """Out-of-range listing parameters are rejected."""
        with pytest.raises(ScoreSubmissionError) as exc_info:
            storage.get_top_scores(**kwargs)
        assert exc_info.value.field == field


class TestPersistence:
    """Test JSON file persistence."""

    def test_round_trip(self, tmp_path):
        """Scores written to disk are loaded by a new storage."""
        path = tmp_path / "scores.json"
        storage = ScoreStorage(path=path)
        storage.create_score({"username": "alice", "score": 42})

        reloaded = ScoreStorage(path=path)
        assert len(reloaded.scores) == 1
        assert reloaded.scores[0].username == "alice"
        assert reloaded.scores[0].created_at == storage.scores[0].created_at

    def test_ids_continue_after_reload(self, tmp_path):
        """New scores continue numbering after a reload."""
        path = tmp_path / "nested" / "scores.json"
        ScoreStorage(path=path).create_score({"username": "a", "score": 1})
        score = ScoreStorage(path=path).create_score({"username": "b", "score": 2})
        assert score.id == 2

    def test_missing_file(self, tmp_path):
        """A missing file starts an empty store."""
        assert ScoreStorage(path=tmp_path / "none.json").scores == []

    def test_failed_write_stores_nothing(self, tmp_path):
        """A score whose write fails is neither kept in memory nor numbered."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        storage = ScoreStorage(path=blocker / "scores.json")

        with pytest.raises(OSError):
            storage.create_score({"username": "a", "score": 5})
        assert storage.scores == []
        assert storage.next_id == 1

    def test_failed_write_keeps_previous_file(self, tmp_path, monkeypatch):
        """The existing file survives a write that fails midway."""
        path = tmp_path / "scores.json"
        storage = ScoreStorage(path=path)
        storage.create_score({"username": "alice", "score": 42})
        before = path.read_text()

        def broken_dump(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr("src.leaderboard.storage.json.dump", broken_dump)
        with pytest.raises(OSError):
            storage.create_score({"username": "bob", "score": 7})

        assert path.read_text() == before
        assert [s.username for s in storage.scores] == ["alice"]
