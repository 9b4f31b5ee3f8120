"""Qt main window switching between menu, game and results views."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_runner.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from quiz_runner.constants.ui_constants import (
    EXPORT_DIALOG_TITLE,
    EXPORT_FILE_FILTER,
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    MENU_BUTTON_ABOUT,
    MENU_BUTTON_HELP,
    WINDOW_TITLE,
)
from quiz_runner.core.quiz_importer import QuizImportError
from quiz_runner.core.quiz_manager import PlayerNameError, QuizManager
from quiz_runner.core.results_exporter import ResultExportError, default_export_filename
from quiz_runner.styling.styles import Styles
from quiz_runner.ui.components.game_panel import GamePanel
from quiz_runner.ui.components.menu_panel import MenuPanel
from quiz_runner.ui.components.results_panel import ResultsPanel
from quiz_runner.ui.dialog_helpers import (
    confirm_leave_game,
    confirm_replace_quiz,
    show_error,
    show_info,
    show_warning,
)


class PlayerMode(Enum):
    """High-level UI mode for the player window."""

    MENU = auto()
    GAME = auto()
    RESULTS = auto()


class PlayerMainWindow(QMainWindow):
    """Main Qt window; every panel talks to the same injected QuizManager."""

    def __init__(self, quiz_manager: QuizManager, initial_quiz: Path | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(900, 640)

        self.quiz_manager = quiz_manager
        self._mode = PlayerMode.MENU
        self._last_import_dir: Path | None = None
        self._last_export_dir: Path | None = None

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        if initial_quiz is not None:
            self._load_quiz(initial_quiz)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.help_button = QPushButton(MENU_BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)
        self.about_button = QPushButton(MENU_BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)
        root_layout.addLayout(button_row)

        self.mode_stack = QStackedWidget(self)
        self.menu_panel = MenuPanel(
            on_import=self._handle_import_quiz,
            on_start=self._handle_start_game,
            on_show_leaderboard=self._handle_show_leaderboard,
            parent=self,
        )
        self.game_panel = GamePanel(
            self.quiz_manager,
            on_quiz_complete=self._handle_quiz_complete,
            parent=self,
        )
        self.results_panel = ResultsPanel(
            self.quiz_manager,
            on_export=self._handle_export,
            on_play_again=self._handle_play_again,
            on_back_to_menu=self._handle_back_to_menu,
            parent=self,
        )
        self.mode_stack.addWidget(self.menu_panel)
        self.mode_stack.addWidget(self.game_panel)
        self.mode_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(PlayerMode.MENU)

    def _set_mode(self, mode: PlayerMode) -> None:
        self._mode = mode
        index_map = {
            PlayerMode.MENU: 0,
            PlayerMode.GAME: 1,
            PlayerMode.RESULTS: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    def _handle_import_quiz(self) -> None:
        current = self.quiz_manager.get_quiz()
        if current is not None and not confirm_replace_quiz(self, current.title):
            return
        start_dir = str(self._last_import_dir) if self._last_import_dir else ""
        file_name, _ = QFileDialog.getOpenFileName(self, IMPORT_DIALOG_TITLE, start_dir, IMPORT_FILE_FILTER)
        if not file_name:
            return
        self._load_quiz(Path(file_name))

    def _load_quiz(self, file_path: Path) -> None:
        try:
            quiz = self.quiz_manager.load_quiz_file(file_path)
        except QuizImportError as exc:
            show_error(self, "Invalid quiz", str(exc))
            return
        except OSError as exc:
            show_error(self, "Import failed", f"Could not read {file_path}: {exc}")
            return
        self._last_import_dir = file_path.parent
        self.menu_panel.show_quiz(quiz)
        self.menu_panel.reset_state()

    def _handle_start_game(self, player_name: str, practice_mode: bool) -> None:
        try:
            self.quiz_manager.start_game(player_name, practice_mode=practice_mode)
        except PlayerNameError as exc:
            show_warning(self, "Name required", str(exc))
            return
        self._set_mode(PlayerMode.GAME)
        self.game_panel.start_game()

    def _handle_quiz_complete(self) -> None:
        try:
            result = self.quiz_manager.finish_game()
        except OSError as exc:
            result = self.quiz_manager.get_last_result()
            show_warning(self, "Result not saved", f"Could not save your result: {exc}")
        self.results_panel.show_result(result)
        self._set_mode(PlayerMode.RESULTS)

    def _handle_show_leaderboard(self) -> None:
        if not self.quiz_manager.has_loaded_quiz():
            return
        self.results_panel.show_result(None)
        self._set_mode(PlayerMode.RESULTS)

    def _handle_export(self) -> None:
        quiz = self.quiz_manager.get_quiz()
        suggested = default_export_filename(quiz.title)
        if self._last_export_dir is not None:
            suggested = str(self._last_export_dir / suggested)
        file_name, _ = QFileDialog.getSaveFileName(self, EXPORT_DIALOG_TITLE, suggested, EXPORT_FILE_FILTER)
        if not file_name:
            return
        try:
            written = self.quiz_manager.export_leaderboard(Path(file_name))
        except ResultExportError as exc:
            show_error(self, "Export failed", str(exc))
            return
        except OSError as exc:
            show_error(self, "Export failed", f"Failed to export leaderboard: {exc}")
            return
        self._last_export_dir = written.parent
        show_info(self, "Export successful", f"Leaderboard exported to: {written.resolve()}")

    def _handle_play_again(self) -> None:
        self.quiz_manager.play_again()
        self.menu_panel.reset_state()
        self._set_mode(PlayerMode.MENU)

    def _handle_back_to_menu(self) -> None:
        self.quiz_manager.play_again()
        self._set_mode(PlayerMode.MENU)

    def _handle_help(self) -> None:
        show_info(self, "Help", HELP_TEXT)

    def _handle_about(self) -> None:
        show_info(self, f"About {APP_NAME}", f"{APP_NAME} {APP_VERSION}\n{APP_LICENSE}\n\n{APP_ABOUT_TEXT}")

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        if self._mode == PlayerMode.GAME and not confirm_leave_game(self):
            event.ignore()
            return
        self.game_panel.stop_game()
        super().closeEvent(event)
