"""Application entry point for QuizRunner."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from quiz_runner.constants.quiz_constants import RESULTS_DIRECTORY
from quiz_runner.core.quiz_manager import QuizManager
from quiz_runner.core.services.result_store import ResultStore
from quiz_runner.ui.player_main_window import PlayerMainWindow
from quiz_runner.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt UI.

    An optional first argument names a quiz file to open on start.
    """
    logger = configure_logging()
    logger.info("Starting QuizRunner")

    initial_quiz = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    store = ResultStore(RESULTS_DIRECTORY)
    logger.info("Results are stored in %s", store.results_directory.resolve())
    quiz_manager = QuizManager(result_store=store)

    app = QApplication(sys.argv)
    window = PlayerMainWindow(quiz_manager=quiz_manager, initial_quiz=initial_quiz)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
