"""Component for answering questions against the clock."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QTimer
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from quiz_runner.constants.ui_constants import (
    GAME_FONT_SIZE,
    GAME_PROGRESS_TEMPLATE,
    GAME_SUBMIT_BUTTON,
    GAME_TIMER_TEMPLATE,
    GAME_UNTIMED_LABEL,
    TIME_LIMIT_WARNING_SECONDS,
    TIMER_TICK_INTERVAL_MS,
)
from quiz_runner.core.quiz_manager import QuizManager
from quiz_runner.styling.styles import Styles
from quiz_runner.ui.question_renderer import render_question


class GamePanel(QWidget):
    """UI component for one running play-through.

    The panel owns the countdown. When it reaches zero the current question
    is timed out through the manager, exactly like an empty submission.
    """

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_quiz_complete: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_quiz_complete = on_quiz_complete

        self._time_limit: int = 0
        self._time_remaining: int = 0
        self._choice_buttons: list[QRadioButton] = []

        self._build_ui()
        self._configure_countdown_timer()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        self.progress_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.progress_label)
        header_row.addStretch()
        self.player_label = QLabel("", self)
        self.player_label.setStyleSheet(Styles.get_muted_label_style())
        header_row.addWidget(self.player_label)
        layout.addLayout(header_row)

        timer_row = QHBoxLayout()
        self.timer_label = QLabel("", self)
        timer_row.addWidget(self.timer_label)
        self.timer_progress = QProgressBar(self)
        self.timer_progress.setTextVisible(False)
        timer_row.addWidget(self.timer_progress, stretch=1)
        layout.addLayout(timer_row)

        self.question_view = QWebEngineView(self)
        self.question_view.setMinimumHeight(160)
        layout.addWidget(self.question_view, stretch=1)

        self.choices_layout = QVBoxLayout()
        layout.addLayout(self.choices_layout)
        self.choice_group = QButtonGroup(self)
        self.choice_group.setExclusive(True)
        self.choice_group.buttonClicked.connect(self._handle_choice_selected)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.submit_button = QPushButton(GAME_SUBMIT_BUTTON, self)
        self.submit_button.setDefault(True)
        self.submit_button.setEnabled(False)
        self.submit_button.clicked.connect(self._handle_submit)
        button_row.addWidget(self.submit_button)
        layout.addLayout(button_row)

    def _configure_countdown_timer(self) -> None:
        self.countdown_timer = QTimer(self)
        self.countdown_timer.setInterval(TIMER_TICK_INTERVAL_MS)
        self.countdown_timer.timeout.connect(self._tick_countdown)

    def start_game(self) -> None:
        self.player_label.setText(self.quiz_manager.get_player_name())
        self._show_current_question()

    def stop_game(self) -> None:
        self.countdown_timer.stop()
        self._clear_choices()

    def _show_current_question(self) -> None:
        question = self.quiz_manager.get_current_question()
        if question is None:
            self.stop_game()
            self.on_quiz_complete()
            return

        number = self.quiz_manager.get_question_number()
        total = self.quiz_manager.get_question_count()
        self.progress_label.setText(GAME_PROGRESS_TEMPLATE.format(number=number, total=total))
        self.question_view.setHtml(render_question(question, number, total, GAME_FONT_SIZE))

        self._clear_choices()
        for choice in self.quiz_manager.get_current_display_options():
            button = QRadioButton(choice, self)
            self.choice_group.addButton(button)
            self.choices_layout.addWidget(button)
            self._choice_buttons.append(button)
        self.submit_button.setEnabled(False)

        self._start_countdown(self.quiz_manager.get_current_time_limit())

    def _clear_choices(self) -> None:
        for button in self._choice_buttons:
            self.choice_group.removeButton(button)
            self.choices_layout.removeWidget(button)
            button.deleteLater()
        self._choice_buttons = []

    def _handle_choice_selected(self) -> None:
        self.submit_button.setEnabled(True)

    def _handle_submit(self) -> None:
        selected = self.choice_group.checkedButton()
        if selected is None:
            return
        self.countdown_timer.stop()
        self.quiz_manager.submit_answer(selected.text())
        self._show_current_question()

    def _start_countdown(self, time_limit: int) -> None:
        self.countdown_timer.stop()
        self._time_limit = time_limit
        self._time_remaining = time_limit
        if time_limit <= 0:
            self.timer_label.setText(GAME_UNTIMED_LABEL)
            self.timer_progress.setVisible(False)
            return
        self.timer_progress.setVisible(True)
        self.timer_progress.setRange(0, time_limit)
        self._update_countdown_display()
        self.countdown_timer.start()

    def _tick_countdown(self) -> None:
        self._time_remaining -= 1
        if self._time_remaining > 0:
            self._update_countdown_display()
            return
        self.countdown_timer.stop()
        self.quiz_manager.time_out_question()
        self._show_current_question()

    def _update_countdown_display(self) -> None:
        self.timer_label.setText(GAME_TIMER_TEMPLATE.format(seconds=self._time_remaining))
        self.timer_progress.setValue(self._time_remaining)
        warning = self._time_remaining <= TIME_LIMIT_WARNING_SECONDS
        self.timer_progress.setStyleSheet(Styles.get_timer_bar_style(warning))
