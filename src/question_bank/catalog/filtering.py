"""
Module: catalog.filtering

Purpose:
    Pure filter engine mapping (records, filter state, favorites) to an
    ordered result set. The result set is always rebuilt from scratch.

Key Functions:
    - matches(): Single-record predicate
    - filter_records(): Order-preserving filter over a collection

Used By:
    - gui.controller: Re-filter on every filter-affecting command
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, List

from question_bank.core.models import ALL, FilterState, Record


def _search_matches(record: Record, term: str) -> bool:
    """``term`` must already be lowercased and non-empty."""
    if term in record.question_text.lower():
        return True
    if term in record.solution_text.lower():
        return True
    if term in record.topic.lower() or term in record.subtopic.lower():
        return True
    return any(term in tag.lower() for tag in record.tags)


def matches(record: Record, state: FilterState, favorites: AbstractSet[str]) -> bool:
    """
    Check whether a record passes every active criterion.

    Args:
        record: Record to test
        state: Current filter state
        favorites: Favorited record ids (consulted only when favorites_only)

    Returns:
        True if the record belongs in the result set
    """
    term = state.search_term.lower()
    if term and not _search_matches(record, term):
        return False
    if state.topic != ALL and record.topic != state.topic:
        return False
    if state.subtopic != ALL and record.subtopic != state.subtopic:
        return False
    if state.difficulty != ALL and record.difficulty != state.difficulty:
        return False
    if state.tags and state.tags.isdisjoint(record.tags):
        return False
    if state.favorites_only and record.id not in favorites:
        return False
    return True


def filter_records(
    records: Iterable[Record],
    state: FilterState,
    favorites: AbstractSet[str] = frozenset(),
) -> List[Record]:
    """
    Filter records, preserving their relative order.

    Example:
        >>> state = FilterState(topic="Algebra", tags={"advanced"})
        >>> [r.id for r in filter_records(records, state)]
        ['2']
    """
    return [record for record in records if matches(record, state, favorites)]
