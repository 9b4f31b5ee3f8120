"""Component showing the final score and the quiz leaderboard."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from quiz_runner.constants.ui_constants import (
    LEADERBOARD_COLUMNS,
    NO_RESULTS_MESSAGE,
    RESULTS_BUTTON_EXPORT,
    RESULTS_BUTTON_MENU,
    RESULTS_BUTTON_PLAY_AGAIN,
    RESULTS_PRACTICE_SUFFIX,
    RESULTS_SCORE_TEMPLATE,
    RESULTS_TITLE_TEMPLATE,
)
from quiz_runner.core.models import PlayerResult
from quiz_runner.core.quiz_manager import QuizManager
from quiz_runner.core.services.leaderboard import LeaderboardRow
from quiz_runner.styling.styles import Styles


class ResultsPanel(QWidget):
    """UI component for the end-of-quiz summary."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_export: Callable[[], None],
        on_play_again: Callable[[], None],
        on_back_to_menu: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_export = on_export
        self.on_play_again = on_play_again
        self.on_back_to_menu = on_back_to_menu

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.completion_label = QLabel("", self)
        self.completion_label.setWordWrap(True)
        layout.addWidget(self.completion_label)

        self.score_label = QLabel("", self)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.leaderboard_table = QTableWidget(0, len(LEADERBOARD_COLUMNS), self)
        self.leaderboard_table.setHorizontalHeaderLabels(list(LEADERBOARD_COLUMNS))
        self.leaderboard_table.verticalHeader().setVisible(False)
        self.leaderboard_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.leaderboard_table.setSelectionMode(QAbstractItemView.NoSelection)
        self.leaderboard_table.horizontalHeader().setSectionResizeMode(1, QHeaderView.Stretch)
        layout.addWidget(self.leaderboard_table, stretch=1)

        self.empty_label = QLabel(NO_RESULTS_MESSAGE, self)
        self.empty_label.setStyleSheet(Styles.get_muted_label_style())
        layout.addWidget(self.empty_label)

        button_row = QHBoxLayout()
        self.menu_button = QPushButton(RESULTS_BUTTON_MENU, self)
        self.menu_button.clicked.connect(self.on_back_to_menu)
        button_row.addWidget(self.menu_button)
        button_row.addStretch()
        self.export_button = QPushButton(RESULTS_BUTTON_EXPORT, self)
        self.export_button.clicked.connect(self.on_export)
        button_row.addWidget(self.export_button)
        self.play_again_button = QPushButton(RESULTS_BUTTON_PLAY_AGAIN, self)
        self.play_again_button.clicked.connect(self.on_play_again)
        button_row.addWidget(self.play_again_button)
        layout.addLayout(button_row)

    def show_result(self, result: PlayerResult | None) -> None:
        """Show the finished game, or just the leaderboard when ``result`` is None."""
        quiz = self.quiz_manager.get_quiz()
        practice = self.quiz_manager.is_practice_mode()
        mode = RESULTS_PRACTICE_SUFFIX if practice else ""
        self.title_label.setText(RESULTS_TITLE_TEMPLATE.format(title=quiz.title, mode=mode))

        has_result = result is not None
        self.completion_label.setVisible(has_result)
        self.score_label.setVisible(has_result)
        self.play_again_button.setVisible(has_result)
        if has_result:
            self.completion_label.setText(self.quiz_manager.get_completion_message(result))
            self.score_label.setText(
                RESULTS_SCORE_TEMPLATE.format(percentage=result.score_percentage_text)
            )

        self._populate_leaderboard(self.quiz_manager.get_leaderboard_rows())
        self.export_button.setEnabled(not practice)

    def _populate_leaderboard(self, rows: list[LeaderboardRow]) -> None:
        self.leaderboard_table.setRowCount(len(rows))
        for row_index, row in enumerate(rows):
            values = (str(row.rank), row.player_name, row.score_text, row.percentage_text, row.date)
            for column, value in enumerate(values):
                self.leaderboard_table.setItem(row_index, column, QTableWidgetItem(value))
        self.leaderboard_table.resizeColumnsToContents()
        self.empty_label.setVisible(not rows)
