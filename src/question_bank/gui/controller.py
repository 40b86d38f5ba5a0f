"""
Module: gui.controller

Purpose:
    Owns the browser's single mutable state (filters, favorites, dark mode,
    pagination, open solution panels) and the derived result set. Every
    mutation goes through a named command; views listen to signals and
    never touch the state directly.

Key Classes:
    - BrowserController: Command interface and signal source

Dependencies:
    - PySide6: Signals and the debounce timer
    - catalog: Filter engine, pagination, index helpers, random pick
    - gui.models.preferences: Persistence

Used By:
    - gui.widgets.browser_window: Thin view
    - gui.app: Startup wiring
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from PySide6.QtCore import QObject, Signal

from question_bank.catalog.filtering import filter_records
from question_bank.catalog.index import RecordStore
from question_bank.catalog.pagination import DEFAULT_PAGE_SIZE, Paginator
from question_bank.catalog.config import DEFAULT_DEBOUNCE_MS
from question_bank.catalog.selection import pick_random
from question_bank.core.models import ALL, BrowserState, FilterState, Record
from question_bank.gui.models.preferences import PreferenceStore
from question_bank.gui.utils.debounce import Debouncer

logger = logging.getLogger(__name__)


class BrowserController(QObject):
    """
    State owner for the browser.

    Preferences are restored on construction. Until ``set_records`` is
    called every filter, pagination and favorite command is a no-op.

    Signals:
        resultsChanged(list, bool): Visible slice and whether more remain
        favoriteChanged(str, bool): Record id and its new favorite state
        solutionToggled(str, bool): Record id and whether its panel is open
        darkModeChanged(bool): New dark-mode flag
        filtersChanged(): Selector values or domains need refreshing
        randomPicked(str): Id of the record chosen by pick_random

    Example:
        >>> controller = BrowserController(PreferenceStore(MemoryStore()))
        >>> controller.set_records(records)
        >>> controller.apply_topic("Algebra")
        >>> [r.id for r in controller.visible_slice()]
        ['1', '2']
    """

    resultsChanged = Signal(list, bool)
    favoriteChanged = Signal(str, bool)
    solutionToggled = Signal(str, bool)
    darkModeChanged = Signal(bool)
    filtersChanged = Signal()
    randomPicked = Signal(str)

    def __init__(
        self,
        preferences: PreferenceStore,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        search_debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        rng: Optional[random.Random] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._preferences = preferences
        self._paginator = Paginator(page_size)
        self._rng = rng
        self._store: Optional[RecordStore] = None
        self._results: List[Record] = []
        self._expanded: set[str] = set()
        self._search_debouncer = Debouncer(search_debounce_ms, self.apply_search_now, self)

        self.state: BrowserState = preferences.load()
        logger.debug(f"Restored preferences: {self.state}")

    # ─────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────

    @property
    def is_ready(self) -> bool:
        return self._store is not None

    @property
    def store(self) -> Optional[RecordStore]:
        return self._store

    @property
    def filters(self) -> FilterState:
        return self.state.filters

    @property
    def favorites(self) -> frozenset[str]:
        return frozenset(self.state.favorites)

    @property
    def dark_mode(self) -> bool:
        return self.state.dark_mode

    @property
    def page(self) -> int:
        return self._paginator.page

    @property
    def results(self) -> Sequence[Record]:
        return tuple(self._results)

    def visible_slice(self) -> List[Record]:
        return self._paginator.visible_slice(self._results)

    def has_more(self) -> bool:
        return self._paginator.has_more(self._results)

    def is_favorite(self, record_id: str) -> bool:
        return record_id in self.state.favorites

    def is_solution_open(self, record_id: str) -> bool:
        return record_id in self._expanded

    def topics(self) -> List[str]:
        return self._store.topics() if self._store else [ALL]

    def subtopics(self) -> List[str]:
        return self._store.subtopics(self.filters.topic) if self._store else [ALL]

    def difficulties(self) -> List[str]:
        return self._store.difficulties() if self._store else [ALL]

    def search_pending(self) -> bool:
        return self._search_debouncer.is_pending()

    # ─────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────

    def set_records(self, records: Sequence[Record]) -> None:
        """Install the loaded collection and run the first filter pass."""
        self._store = RecordStore(records)
        if self._store.normalize_filters(self.filters):
            logger.info("Restored filters were not valid for this catalog and were reset")
        logger.info(f"Browser ready with {len(self._store)} questions")
        self.filtersChanged.emit()
        self._refilter()

    # ─────────────────────────────────────────────────────────────────────
    # Filter commands
    # ─────────────────────────────────────────────────────────────────────

    def apply_search(self, term: str) -> None:
        """Debounced search; only the latest term within the window applies."""
        self._search_debouncer.call(term)

    def apply_search_now(self, term: str) -> None:
        self._search_debouncer.cancel()
        if not self._require_ready("search"):
            return
        self.filters.search_term = term
        self._refilter()

    def apply_topic(self, topic: str) -> None:
        if not self._require_ready("topic change"):
            return
        self.filters.topic = topic
        self.filters.subtopic = ALL
        self._store.normalize_filters(self.filters)
        self.filtersChanged.emit()
        self._refilter()

    def apply_subtopic(self, subtopic: str) -> None:
        if not self._require_ready("subtopic change"):
            return
        self.filters.subtopic = subtopic
        if self._store.normalize_filters(self.filters):
            self.filtersChanged.emit()
        self._refilter()

    def apply_difficulty(self, difficulty: str) -> None:
        if not self._require_ready("difficulty change"):
            return
        self.filters.difficulty = difficulty
        if self._store.normalize_filters(self.filters):
            self.filtersChanged.emit()
        self._refilter()

    def toggle_tag(self, tag: str) -> None:
        if not self._require_ready("tag toggle"):
            return
        if tag in self.filters.tags:
            self.filters.tags.discard(tag)
        else:
            self.filters.tags.add(tag)
        self._refilter()

    def set_favorites_only(self, enabled: bool) -> None:
        if not self._require_ready("favorites-only change"):
            return
        self.filters.favorites_only = enabled
        self._refilter()

    def toggle_favorites_only(self) -> None:
        self.set_favorites_only(not self.filters.favorites_only)

    def clear_filters(self) -> None:
        if not self._require_ready("clear filters"):
            return
        self._search_debouncer.cancel()
        self.filters.reset()
        self.filtersChanged.emit()
        self._refilter()

    # ─────────────────────────────────────────────────────────────────────
    # Favorites, pagination, panels
    # ─────────────────────────────────────────────────────────────────────

    def toggle_favorite(self, record_id: str) -> bool:
        """
        Flip a record's favorite state and persist.

        When the favorites-only view is active the result set is rebuilt on
        both add and remove so it always agrees with the favorites set.

        Returns:
            The new favorite state
        """
        if not self._require_ready("favorite toggle"):
            return self.is_favorite(record_id)
        favorites = self.state.favorites
        if record_id in favorites:
            favorites.discard(record_id)
            now_favorite = False
        else:
            favorites.add(record_id)
            now_favorite = True
        self.favoriteChanged.emit(record_id, now_favorite)

        if self.filters.favorites_only:
            self._refilter()
        else:
            self._persist()
        return now_favorite

    def advance_page(self) -> bool:
        """Reveal the next page. No-op when everything is already visible."""
        if not self._require_ready("advance page"):
            return False
        if not self.has_more():
            logger.debug("advance_page ignored: all results visible")
            return False
        self._paginator.advance()
        self._emit_results()
        return True

    def toggle_solution(self, record_id: str) -> bool:
        """Open or close a record's solution panel. Returns the new state."""
        if not self._require_ready("solution toggle") or record_id not in self._store:
            return False
        if record_id in self._expanded:
            self._expanded.discard(record_id)
            is_open = False
        else:
            self._expanded.add(record_id)
            is_open = True
        self.solutionToggled.emit(record_id, is_open)
        return is_open

    def pick_random(self) -> Optional[Record]:
        """
        Choose a random record from the result set and bring it into view.

        Extends pagination just far enough to show it, closes every other
        open solution panel and opens the chosen one.

        Returns:
            The chosen record, or None for an empty result set
        """
        if not self._require_ready("random pick"):
            return None
        record = pick_random(self._results, self._rng)
        if record is None:
            logger.debug("pick_random ignored: no results")
            return None

        page_before = self._paginator.page
        self._paginator.reveal(self._results.index(record))
        if self._paginator.page != page_before:
            self._emit_results()

        for other in sorted(self._expanded - {record.id}):
            self._expanded.discard(other)
            self.solutionToggled.emit(other, False)
        if record.id not in self._expanded:
            self._expanded.add(record.id)
            self.solutionToggled.emit(record.id, True)

        self.randomPicked.emit(record.id)
        return record

    def toggle_dark_mode(self) -> bool:
        self.state.dark_mode = not self.state.dark_mode
        self._persist()
        self.darkModeChanged.emit(self.state.dark_mode)
        return self.state.dark_mode

    # ─────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────

    def _require_ready(self, action: str) -> bool:
        if self._store is None:
            logger.debug(f"Ignoring {action}: questions not loaded yet")
            return False
        return True

    def _refilter(self) -> None:
        """Rebuild the result set, reset pagination, persist and notify."""
        self._results = filter_records(self._store, self.filters, self.state.favorites)
        self._paginator.reset()
        self._expanded.clear()
        logger.debug(f"Filter produced {len(self._results)} of {len(self._store)} questions")
        self._persist()
        self._emit_results()

    def _persist(self) -> None:
        self._preferences.save(self.state)

    def _emit_results(self) -> None:
        self.resultsChanged.emit(self.visible_slice(), self.has_more())
