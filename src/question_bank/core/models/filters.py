"""
Module: filters

Purpose:
    Mutable filter and browser state containers. A single instance of each
    lives for the session and is owned by the browser controller.

Key Classes:
    - FilterState: Narrowing criteria plus search term
    - BrowserState: Filters, favorites and the dark-mode flag

Used By:
    - catalog.filtering: Match predicate
    - gui.models.preferences: Persistence round-trip
    - gui.controller: State owner
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set

# Sentinel selector value meaning "no narrowing"
ALL = "all"


@dataclass
class FilterState:
    """
    User-selected narrowing criteria.

    Invariants:
        - subtopic is ALL or a subtopic of topic
    """

    search_term: str = ""
    topic: str = ALL
    subtopic: str = ALL
    difficulty: str = ALL
    tags: Set[str] = field(default_factory=set)
    favorites_only: bool = False

    def is_default(self) -> bool:
        """True when no criterion narrows the result set."""
        return (
            not self.search_term
            and self.topic == ALL
            and self.subtopic == ALL
            and self.difficulty == ALL
            and not self.tags
            and not self.favorites_only
        )

    def reset(self) -> None:
        self.search_term = ""
        self.topic = ALL
        self.subtopic = ALL
        self.difficulty = ALL
        self.tags = set()
        self.favorites_only = False


@dataclass
class BrowserState:
    """Everything the preference store saves and restores."""

    filters: FilterState = field(default_factory=FilterState)
    favorites: Set[str] = field(default_factory=set)
    dark_mode: bool = False
