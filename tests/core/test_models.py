"""Tests for record and filter-state models."""
import pytest

from question_bank.core.models import ALL, BrowserState, Difficulty, FilterState, Record


class TestDifficulty:
    """Difficulty is a closed string enum."""

    def test_compares_equal_to_value(self):
        assert Difficulty.EASY == "easy"
        assert Difficulty("hard") is Difficulty.HARD

    def test_values_in_declared_order(self):
        assert Difficulty.values() == ("easy", "medium", "hard")

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            Difficulty("impossible")


class TestRecord:
    """Tests for the Record dataclass."""

    def test_is_frozen(self, make_record):
        record = make_record("1")
        with pytest.raises(AttributeError):
            record.topic = "Geometry"  # type: ignore[misc]

    def test_empty_id_rejected(self, make_record):
        with pytest.raises(ValueError):
            make_record("")

    def test_duplicate_tags_rejected(self, make_record):
        with pytest.raises(ValueError, match="duplicate tags"):
            make_record("1", tags=("intro", "intro"))

    def test_has_tag(self, make_record):
        record = make_record("1", tags=("intro", "advanced"))
        assert record.has_tag("advanced")
        assert not record.has_tag("Advanced")

    def test_video_id_from_watch_url(self, make_record):
        record = make_record("1", solution_video_url="https://www.youtube.com/watch?v=abc123&t=5")
        assert record.video_id == "abc123"

    def test_video_id_none_without_url(self, make_record):
        assert make_record("1").video_id is None

    def test_video_id_none_without_v_param(self, make_record):
        record = make_record("1", solution_video_url="https://example.org/video.mp4")
        assert record.video_id is None


class TestFilterState:
    """Tests for FilterState defaults and reset."""

    def test_defaults(self):
        state = FilterState()
        assert state.topic == ALL
        assert state.subtopic == ALL
        assert state.difficulty == ALL
        assert state.tags == set()
        assert state.favorites_only is False
        assert state.is_default()

    def test_tags_not_shared_between_instances(self):
        first, second = FilterState(), FilterState()
        first.tags.add("intro")
        assert second.tags == set()

    @pytest.mark.parametrize("changes", [
        {"search_term": "x"},
        {"topic": "Algebra"},
        {"difficulty": "easy"},
        {"tags": {"intro"}},
        {"favorites_only": True},
    ])
    def test_is_default_false_when_narrowed(self, changes):
        assert not FilterState(**changes).is_default()

    def test_reset_restores_defaults(self):
        state = FilterState(search_term="q", topic="Algebra", subtopic="Linear",
                            difficulty="hard", tags={"intro"}, favorites_only=True)
        state.reset()
        assert state == FilterState()


class TestBrowserState:
    def test_defaults(self):
        state = BrowserState()
        assert state.filters == FilterState()
        assert state.favorites == set()
        assert state.dark_mode is False
