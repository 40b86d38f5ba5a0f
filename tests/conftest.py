import json
import os
import sys
from pathlib import Path

import pytest

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import question_bank
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from question_bank.core.models import Difficulty, Record  # noqa: E402


def _make_record(record_id: str, **overrides) -> Record:
    """Build a record with sensible defaults."""
    fields = dict(
        id=record_id,
        topic="Algebra",
        subtopic="Linear",
        difficulty=Difficulty.EASY,
        question_text=f"Question {record_id}",
        solution_text=f"Solution {record_id}",
        tags=(),
    )
    fields.update(overrides)
    return Record(**fields)


# Common test fixtures
@pytest.fixture
def make_record():
    """Factory for records with defaults; pass fields to override."""
    return _make_record


@pytest.fixture
def sample_records():
    """The two-record catalog used in the worked examples."""
    return [
        _make_record("1", subtopic="Linear", difficulty=Difficulty.EASY, tags=("intro",)),
        _make_record("2", subtopic="Quadratic", difficulty=Difficulty.HARD, tags=("intro", "advanced")),
    ]


@pytest.fixture
def mixed_records():
    """A small catalog spanning topics, subtopics, difficulties and tags."""
    return [
        _make_record("a1", topic="Algebra", subtopic="Linear", tags=("intro",),
                    question_text="Solve 2x + 3 = 7"),
        _make_record("g1", topic="Geometry", subtopic="Circles", difficulty=Difficulty.MEDIUM,
                    tags=("area",), question_text="Find the area of a circle of radius 2"),
        _make_record("a2", topic="Algebra", subtopic="Quadratic", difficulty=Difficulty.HARD,
                    tags=("advanced", "factoring"), solution_text="Use the quadratic formula"),
        _make_record("g2", topic="Geometry", subtopic="Triangles", tags=("intro", "angles"),
                    question_text="Sum of interior angles"),
        _make_record("a3", topic="Algebra", subtopic="Linear", difficulty=Difficulty.MEDIUM,
                    tags=("word-problems",), question_text="A train leaves at noon"),
    ]


@pytest.fixture
def many_records():
    """Thirty records that all match the default filters."""
    return [_make_record(str(i)) for i in range(30)]


@pytest.fixture
def catalog_file(tmp_path: Path):
    """Write a JSON catalog and return its path."""
    def _write(entries) -> Path:
        path = tmp_path / "questions.json"
        path.write_text(json.dumps(entries), encoding="utf-8")
        return path
    return _write
