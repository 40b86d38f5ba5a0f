"""
Main window for the Question Bank Browser.

Adapts widget events to BrowserController commands and repaints from the
controller's signals. Holds no browsing state of its own.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication, QComboBox, QHBoxLayout, QLabel, QLineEdit, QMainWindow,
    QPushButton, QScrollArea, QVBoxLayout, QWidget,
)

from question_bank.core.models import ALL, Record
from question_bank.gui.controller import BrowserController
from question_bank.gui.styles.theme import apply_theme
from question_bank.gui.utils.icons import MaterialIcons
from question_bank.gui.widgets.question_card import QuestionCard

logger = logging.getLogger(__name__)

_ALL_LABELS = {
    "topic": "All Topics",
    "subtopic": "All Subtopics",
    "difficulty": "All Difficulties",
}


class BrowserWindow(QMainWindow):
    def __init__(self, controller: BrowserController, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.cards: Dict[str, QuestionCard] = {}

        self.setWindowTitle("Question Bank")
        self.resize(1000, 800)

        central = QWidget()
        root = QVBoxLayout(central)
        self.setCentralWidget(central)

        # --- Filter bar ---
        bar = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search questions, solutions, topics, tags...")
        self.search_input.addAction(MaterialIcons.magnify(), QLineEdit.ActionPosition.LeadingPosition)
        self.search_input.textChanged.connect(controller.apply_search)
        bar.addWidget(self.search_input, 2)

        self.topic_combo = QComboBox()
        self.topic_combo.currentIndexChanged.connect(
            lambda _i: controller.apply_topic(self.topic_combo.currentData())
        )
        bar.addWidget(self.topic_combo)

        self.subtopic_combo = QComboBox()
        self.subtopic_combo.currentIndexChanged.connect(
            lambda _i: controller.apply_subtopic(self.subtopic_combo.currentData())
        )
        bar.addWidget(self.subtopic_combo)

        self.difficulty_combo = QComboBox()
        self.difficulty_combo.currentIndexChanged.connect(
            lambda _i: controller.apply_difficulty(self.difficulty_combo.currentData())
        )
        bar.addWidget(self.difficulty_combo)

        self.favorites_toggle = QPushButton("Favorites")
        self.favorites_toggle.setCheckable(True)
        self.favorites_toggle.setIcon(MaterialIcons.star(True))
        self.favorites_toggle.clicked.connect(controller.set_favorites_only)
        bar.addWidget(self.favorites_toggle)

        self.random_btn = QPushButton("Random")
        self.random_btn.setIcon(MaterialIcons.dice())
        self.random_btn.clicked.connect(lambda: controller.pick_random())
        bar.addWidget(self.random_btn)

        self.clear_btn = QPushButton("Clear")
        self.clear_btn.setIcon(MaterialIcons.filter_remove())
        self.clear_btn.clicked.connect(lambda: controller.clear_filters())
        bar.addWidget(self.clear_btn)

        self.theme_btn = QPushButton()
        self.theme_btn.setToolTip("Toggle dark mode")
        self.theme_btn.setIcon(MaterialIcons.theme(controller.dark_mode))
        self.theme_btn.clicked.connect(lambda: controller.toggle_dark_mode())
        bar.addWidget(self.theme_btn)
        root.addLayout(bar)

        # --- Status / empty / error ---
        self.status_label = QLabel("Loading questions...")
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self.status_label)

        self.error_label = QLabel()
        self.error_label.setObjectName("errorState")
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        root.addWidget(self.error_label)

        # --- Grid ---
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.grid_host = QWidget()
        self.grid_layout = QVBoxLayout(self.grid_host)
        self.grid_layout.addStretch()
        self.scroll_area.setWidget(self.grid_host)
        root.addWidget(self.scroll_area, 1)

        self.load_more_btn = QPushButton("Load More")
        self.load_more_btn.clicked.connect(lambda: controller.advance_page())
        self.load_more_btn.hide()
        root.addWidget(self.load_more_btn, alignment=Qt.AlignmentFlag.AlignHCenter)

        self._set_filters_enabled(False)

        controller.resultsChanged.connect(self._on_results_changed)
        controller.filtersChanged.connect(self._sync_filters)
        controller.favoriteChanged.connect(self._on_favorite_changed)
        controller.solutionToggled.connect(self._on_solution_toggled)
        controller.darkModeChanged.connect(self._on_dark_mode_changed)
        controller.randomPicked.connect(self._on_random_picked)

    # ─────────────────────────────────────────────────────────────────────
    # Load outcome
    # ─────────────────────────────────────────────────────────────────────

    def show_records(self, records: List[Record]) -> None:
        """Hand the loaded collection to the controller and enable the UI."""
        self._set_filters_enabled(True)
        self.controller.set_records(records)

    def show_load_error(self, message: str) -> None:
        """Fatal load error: show an error state, not an empty result set."""
        self._set_filters_enabled(False)
        self.status_label.hide()
        self.load_more_btn.hide()
        self.error_label.setText(f"Could not load questions.\n{message}")
        self.error_label.show()

    # ─────────────────────────────────────────────────────────────────────
    # Controller signal handlers
    # ─────────────────────────────────────────────────────────────────────

    def _on_results_changed(self, visible: List[Record], has_more: bool) -> None:
        for card in self.cards.values():
            self.grid_layout.removeWidget(card)
            card.deleteLater()
        self.cards.clear()

        active_tags = frozenset(self.controller.filters.tags)
        for position, record in enumerate(visible):
            card = QuestionCard(
                record,
                is_favorite=self.controller.is_favorite(record.id),
                solution_open=self.controller.is_solution_open(record.id),
                active_tags=active_tags,
            )
            card.favoriteClicked.connect(self.controller.toggle_favorite)
            card.solutionClicked.connect(self.controller.toggle_solution)
            card.tagClicked.connect(self.controller.toggle_tag)
            self.grid_layout.insertWidget(position, card)
            self.cards[record.id] = card

        if visible:
            self.status_label.hide()
        else:
            self.status_label.setText("No questions match your filters.")
            self.status_label.show()
        self.load_more_btn.setVisible(has_more)

    def _sync_filters(self) -> None:
        """Repopulate selectors from the controller without echoing commands."""
        filters = self.controller.filters
        _fill_combo(self.topic_combo, self.controller.topics(), filters.topic, _ALL_LABELS["topic"])
        _fill_combo(self.subtopic_combo, self.controller.subtopics(), filters.subtopic, _ALL_LABELS["subtopic"])
        self.subtopic_combo.setEnabled(filters.topic != ALL)
        _fill_combo(
            self.difficulty_combo, self.controller.difficulties(), filters.difficulty,
            _ALL_LABELS["difficulty"],
        )

        self.search_input.blockSignals(True)
        self.search_input.setText(filters.search_term)
        self.search_input.blockSignals(False)
        self.favorites_toggle.setChecked(filters.favorites_only)

    def _on_favorite_changed(self, record_id: str, is_favorite: bool) -> None:
        card = self.cards.get(record_id)
        if card is not None:
            card.set_favorite(is_favorite)

    def _on_solution_toggled(self, record_id: str, is_open: bool) -> None:
        card = self.cards.get(record_id)
        if card is not None:
            card.set_solution_open(is_open)

    def _on_dark_mode_changed(self, is_dark: bool) -> None:
        app = QApplication.instance()
        if app is not None:
            apply_theme(app, is_dark)
        self.theme_btn.setIcon(MaterialIcons.theme(is_dark))
        for card in self.cards.values():
            card.set_favorite(card.is_favorite())

    def _on_random_picked(self, record_id: str) -> None:
        card = self.cards.get(record_id)
        if card is not None:
            self.scroll_area.ensureWidgetVisible(card)

    def _set_filters_enabled(self, enabled: bool) -> None:
        for widget in (
            self.search_input, self.topic_combo, self.subtopic_combo, self.difficulty_combo,
            self.favorites_toggle, self.random_btn, self.clear_btn,
        ):
            widget.setEnabled(enabled)


def _fill_combo(combo: QComboBox, values: List[str], current: str, all_label: str) -> None:
    combo.blockSignals(True)
    combo.clear()
    for value in values:
        combo.addItem(all_label if value == ALL else value, value)
    index = combo.findData(current)
    combo.setCurrentIndex(index if index >= 0 else 0)
    combo.blockSignals(False)
