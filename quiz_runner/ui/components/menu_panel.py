"""Component for choosing a quiz and entering the player name."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import (
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_runner.constants.ui_constants import (
    MENU_BUTTON_IMPORT,
    MENU_BUTTON_LEADERBOARD,
    MENU_BUTTON_START,
    MENU_NAME_PLACEHOLDER,
    MENU_PRACTICE_CHECKBOX,
    NO_QUIZ_LOADED_MESSAGE,
)
from quiz_runner.core.models import Quiz
from quiz_runner.styling.styles import Styles


class MenuPanel(QWidget):
    """UI component for quiz selection and game start."""

    def __init__(
        self,
        on_import: Callable[[], None],
        on_start: Callable[[str, bool], None],
        on_show_leaderboard: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_import = on_import
        self.on_start = on_start
        self.on_show_leaderboard = on_show_leaderboard

        self._build_ui()
        self.show_quiz(None)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.import_button = QPushButton(MENU_BUTTON_IMPORT, self)
        self.import_button.clicked.connect(self.on_import)
        layout.addWidget(self.import_button)

        quiz_group = QGroupBox("Quiz", self)
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)
        self.title_label = QLabel("", self)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        quiz_layout.addWidget(self.title_label)
        self.description_label = QLabel("", self)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(Styles.get_muted_label_style())
        quiz_layout.addWidget(self.description_label)
        layout.addWidget(quiz_group)

        name_row = QHBoxLayout()
        name_row.addWidget(QLabel("Player name:", self))
        self.name_edit = QLineEdit(self)
        self.name_edit.setPlaceholderText(MENU_NAME_PLACEHOLDER)
        self.name_edit.returnPressed.connect(self._handle_start_click)
        name_row.addWidget(self.name_edit, stretch=1)
        layout.addLayout(name_row)

        self.practice_checkbox = QCheckBox(MENU_PRACTICE_CHECKBOX, self)
        layout.addWidget(self.practice_checkbox)

        button_row = QHBoxLayout()
        self.leaderboard_button = QPushButton(MENU_BUTTON_LEADERBOARD, self)
        self.leaderboard_button.clicked.connect(self.on_show_leaderboard)
        button_row.addWidget(self.leaderboard_button)
        button_row.addStretch()
        self.start_button = QPushButton(MENU_BUTTON_START, self)
        self.start_button.setDefault(True)
        self.start_button.clicked.connect(self._handle_start_click)
        button_row.addWidget(self.start_button)
        layout.addLayout(button_row)

        layout.addStretch()

    def _handle_start_click(self) -> None:
        self.on_start(self.name_edit.text(), self.practice_checkbox.isChecked())

    def show_quiz(self, quiz: Quiz | None) -> None:
        has_quiz = quiz is not None
        self.title_label.setText(quiz.title if has_quiz else NO_QUIZ_LOADED_MESSAGE)
        self.description_label.setText(quiz.description if has_quiz else "")
        self.description_label.setVisible(bool(has_quiz and quiz.description))
        self.start_button.setEnabled(has_quiz)
        self.leaderboard_button.setEnabled(has_quiz)

    def reset_state(self) -> None:
        self.practice_checkbox.setChecked(False)
        self.name_edit.setFocus()
