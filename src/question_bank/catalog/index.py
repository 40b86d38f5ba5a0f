"""
Module: catalog.index

Purpose:
    Immutable record store plus index helpers used to populate selector
    domains and to validate restored filter selections.

Key Functions:
    - distinct_topics(): ["all", ...topics in first-seen order]
    - distinct_subtopics(): ["all", ...subtopics of a topic]

Key Classes:
    - RecordStore: Loaded collection with id lookup

Used By:
    - gui.controller: Selector domains, filter normalization
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from question_bank.core.models import ALL, Difficulty, FilterState, Record

logger = logging.getLogger(__name__)


def distinct_topics(records: Iterable[Record]) -> List[str]:
    """Topics in first-seen order, preceded by the "all" sentinel."""
    return [ALL, *dict.fromkeys(r.topic for r in records)]


def distinct_subtopics(records: Iterable[Record], topic: str) -> List[str]:
    """
    Subtopics of ``topic`` in first-seen order, preceded by "all".

    Returns just ["all"] when topic is "all".
    """
    if topic == ALL:
        return [ALL]
    return [ALL, *dict.fromkeys(r.subtopic for r in records if r.topic == topic)]


class RecordStore:
    """
    Loaded record collection (immutable after construction).

    Example:
        >>> store = RecordStore(records)
        >>> store.topics()
        ['all', 'Algebra', 'Geometry']
        >>> store.get("2").subtopic
        'Quadratic'
    """

    def __init__(self, records: Sequence[Record]) -> None:
        self._records: Tuple[Record, ...] = tuple(records)
        self._by_id: Dict[str, Record] = {}
        for record in self._records:
            self._by_id.setdefault(record.id, record)
        if len(self._by_id) != len(self._records):
            logger.warning("Record store contains duplicate ids; lookups use the first")
        self._topics = distinct_topics(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def get(self, record_id: str) -> Optional[Record]:
        return self._by_id.get(record_id)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._by_id

    def topics(self) -> List[str]:
        return list(self._topics)

    def subtopics(self, topic: str) -> List[str]:
        return distinct_subtopics(self._records, topic)

    def difficulties(self) -> List[str]:
        """Selector domain for difficulty: "all" plus every known level."""
        return [ALL, *Difficulty.values()]

    def all_tags(self) -> List[str]:
        """Every tag in first-seen order."""
        return list(dict.fromkeys(tag for r in self._records for tag in r.tags))

    def normalize_filters(self, state: FilterState) -> bool:
        """
        Coerce selections that are illegal for this collection to "all".

        An unknown topic, a subtopic not under the topic, or an unknown
        difficulty is reset. Tags and flags are left alone.

        Returns:
            True if anything was changed
        """
        changed = False
        if state.topic not in self._topics:
            logger.debug(f"Coercing unknown topic {state.topic!r} to 'all'")
            state.topic = ALL
            changed = True
        if state.subtopic not in self.subtopics(state.topic):
            logger.debug(f"Coercing subtopic {state.subtopic!r} not under {state.topic!r} to 'all'")
            state.subtopic = ALL
            changed = True
        if state.difficulty not in self.difficulties():
            logger.debug(f"Coercing unknown difficulty {state.difficulty!r} to 'all'")
            state.difficulty = ALL
            changed = True
        return changed
