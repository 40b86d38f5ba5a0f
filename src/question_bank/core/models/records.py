"""
Module: records

Purpose:
    Provides the Record dataclass - one catalog entry (question, solution
    and metadata). Records are immutable after load and identified by a
    stable string id.

Key Classes:
    - Difficulty: Closed set of difficulty levels
    - Record: Frozen question record

Dependencies:
    - dataclasses (std)
    - enum (std)
    - urllib.parse (std): video id extraction

Used By:
    - catalog.loading.parser: Builds records from JSON
    - catalog.filtering: Match predicate
    - gui.controller: Browser state
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from urllib.parse import parse_qs, urlparse


class Difficulty(str, Enum):
    """Difficulty level of a record. Compares equal to its string value."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def values(cls) -> Tuple[str, ...]:
        return tuple(member.value for member in cls)


@dataclass(frozen=True)
class Record:
    """
    A single question record (immutable).

    Attributes:
        id: Unique identifier, stable across loads
        topic: Main topic, e.g. "Algebra"
        subtopic: Subtopic under topic, e.g. "Linear"
        difficulty: Difficulty level
        question_text: Question body
        solution_text: Solution body
        tags: Tags in display order (unique within a record)
        question_images: Image references shown with the question
        solution_images: Image references shown with the solution
        solution_video_url: Optional walkthrough video URL

    Example:
        >>> r = Record(
        ...     id="1",
        ...     topic="Algebra",
        ...     subtopic="Linear",
        ...     difficulty=Difficulty.EASY,
        ...     question_text="Solve 2x = 4",
        ...     solution_text="x = 2",
        ...     tags=("intro",),
        ... )
        >>> r.difficulty == "easy"
        True
    """

    id: str
    topic: str
    subtopic: str
    difficulty: Difficulty
    question_text: str
    solution_text: str
    tags: Tuple[str, ...] = ()
    question_images: Tuple[str, ...] = ()
    solution_images: Tuple[str, ...] = ()
    solution_video_url: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("record id must be non-empty")
        if len(set(self.tags)) != len(self.tags):
            raise ValueError(f"duplicate tags in record {self.id!r}: {self.tags}")

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    @property
    def video_id(self) -> Optional[str]:
        """YouTube video id from ``solution_video_url`` (the ``v`` parameter)."""
        if not self.solution_video_url:
            return None
        query = parse_qs(urlparse(self.solution_video_url).query)
        values = query.get("v")
        return values[0] if values else None
