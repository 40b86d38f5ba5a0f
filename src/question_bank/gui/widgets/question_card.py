"""Card widget for a single question record."""
from __future__ import annotations

from typing import AbstractSet, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from question_bank.core.models import Record
from question_bank.gui.styles.theme import difficulty_color
from question_bank.gui.utils.icons import MaterialIcons


class QuestionCard(QFrame):
    """Shows one record: metadata, question, tags, favorite and solution toggles.

    The card only reports clicks; the controller decides what they mean.
    """

    favoriteClicked = Signal(str)
    solutionClicked = Signal(str)
    tagClicked = Signal(str)

    def __init__(
        self,
        record: Record,
        *,
        is_favorite: bool = False,
        solution_open: bool = False,
        active_tags: AbstractSet[str] = frozenset(),
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.record = record
        self.setObjectName("questionCard")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)

        header = QHBoxLayout()
        meta = QLabel(f"{record.topic} > {record.subtopic}")
        meta.setObjectName("cardMeta")
        header.addWidget(meta)
        header.addStretch()
        difficulty = QLabel(record.difficulty.value)
        difficulty.setStyleSheet(f"color: {difficulty_color(record.difficulty.value)}; font-weight: bold;")
        header.addWidget(difficulty)
        layout.addLayout(header)

        question = QLabel(record.question_text)
        question.setWordWrap(True)
        question.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(question)
        for ref in record.question_images:
            layout.addWidget(_image_reference(ref))

        tags_row = QHBoxLayout()
        self.tag_buttons: dict[str, QPushButton] = {}
        for tag in record.tags:
            btn = QPushButton(tag)
            btn.setCheckable(True)
            btn.setChecked(tag in active_tags)
            btn.setFlat(True)
            btn.clicked.connect(lambda _checked=False, t=tag: self.tagClicked.emit(t))
            tags_row.addWidget(btn)
            self.tag_buttons[tag] = btn
        tags_row.addStretch()
        layout.addLayout(tags_row)

        footer = QHBoxLayout()
        self.favorite_btn = QPushButton()
        self.favorite_btn.setFlat(True)
        self.favorite_btn.setToolTip("Toggle Favorite")
        self.favorite_btn.clicked.connect(lambda: self.favoriteClicked.emit(self.record.id))
        footer.addWidget(self.favorite_btn)
        footer.addStretch()
        self.solution_btn = QPushButton()
        self.solution_btn.clicked.connect(lambda: self.solutionClicked.emit(self.record.id))
        footer.addWidget(self.solution_btn)
        layout.addLayout(footer)

        self.solution_panel = self._build_solution_panel()
        layout.addWidget(self.solution_panel)

        self.set_favorite(is_favorite)
        self.set_solution_open(solution_open)

    def _build_solution_panel(self) -> QWidget:
        panel = QWidget()
        panel_layout = QVBoxLayout(panel)
        panel_layout.setContentsMargins(0, 6, 0, 0)
        title = QLabel("<b>Solution</b>")
        panel_layout.addWidget(title)
        body = QLabel(self.record.solution_text)
        body.setWordWrap(True)
        body.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        panel_layout.addWidget(body)
        for ref in self.record.solution_images:
            panel_layout.addWidget(_image_reference(ref))
        video_id = self.record.video_id
        if video_id:
            link = QLabel(f'<a href="https://www.youtube.com/watch?v={video_id}">Watch solution video</a>')
            link.setOpenExternalLinks(True)
            panel_layout.addWidget(link)
        return panel

    def set_favorite(self, is_favorite: bool) -> None:
        self.favorite_btn.setIcon(MaterialIcons.star(is_favorite))
        self.favorite_btn.setProperty("favorited", is_favorite)

    def is_favorite(self) -> bool:
        return bool(self.favorite_btn.property("favorited"))

    def set_solution_open(self, is_open: bool) -> None:
        self.solution_panel.setVisible(is_open)
        self.solution_btn.setText("Hide Solution" if is_open else "Show Solution")

    def is_solution_open(self) -> bool:
        return not self.solution_panel.isHidden()


def _image_reference(ref: str) -> QLabel:
    label = QLabel(f'<a href="{ref}">{ref}</a>')
    label.setOpenExternalLinks(True)
    label.setObjectName("cardMeta")
    return label
