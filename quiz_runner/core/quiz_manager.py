"""Business logic tying the game session to result storage for the UI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from quiz_runner.constants.quiz_constants import RESULTS_DIRECTORY
from quiz_runner.core.completion_message import build_completion_message
from quiz_runner.core.models import PlayerResult, Question, Quiz, QuizResult
from quiz_runner.core.quiz_importer import load_quiz_from_file
from quiz_runner.core.results_exporter import ResultExportError, export_results_to_csv
from quiz_runner.core.services.game_session import GameSession, SessionStateError
from quiz_runner.core.services.leaderboard import Leaderboard, LeaderboardRow, rank_results
from quiz_runner.core.services.result_store import ResultStore, generate_quiz_id

logger = logging.getLogger(__name__)


class PlayerNameError(ValueError):
    """Raised when a player name is empty or whitespace only."""


def validate_player_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise PlayerNameError("Please enter your name before starting the quiz.")
    return cleaned


class QuizManager:
    """Facade for quiz services: GameSession, ResultStore and Leaderboard.

    One manager owns one session. It is meant for a single caller context
    (the Qt event loop) and does no locking.
    """

    def __init__(self, result_store: ResultStore | None = None) -> None:
        self._session = GameSession()
        self._store = result_store or ResultStore(RESULTS_DIRECTORY)
        self._practice_mode: bool = False
        self._last_result: PlayerResult | None = None

    # --- Quiz loading ---

    def load_quiz_file(self, file_path: Path) -> Quiz:
        quiz = load_quiz_from_file(file_path)
        self.load_quiz(quiz)
        return quiz

    def load_quiz(self, quiz: Quiz) -> None:
        self._session.load(quiz)
        self._practice_mode = False
        self._last_result = None

    def get_quiz(self) -> Quiz | None:
        return self._session.quiz

    def has_loaded_quiz(self) -> bool:
        return self._session.quiz is not None

    def get_quiz_id(self) -> str:
        return generate_quiz_id(self._require_quiz().title)

    # --- Game Session Delegation ---

    def start_game(self, player_name: str, practice_mode: bool = False) -> None:
        quiz = self._require_quiz()
        cleaned = validate_player_name(player_name)
        self._session.reset()
        self._session.set_player_name(cleaned)
        self._practice_mode = practice_mode
        self._last_result = None
        logger.info(
            "Starting '%s' for %s%s", quiz.title, cleaned, " (practice)" if practice_mode else ""
        )

    def play_again(self) -> None:
        """Return to the first question; the player name must be entered again."""
        self._session.reset()
        self._practice_mode = False
        self._last_result = None

    def is_practice_mode(self) -> bool:
        return self._practice_mode

    def get_player_name(self) -> str:
        return self._session.player_name

    def get_current_question(self) -> Question | None:
        return self._session.current_question()

    def get_current_time_limit(self) -> int:
        return self._session.current_time_limit()

    def get_current_display_options(self) -> tuple[str, ...]:
        return self._session.display_choices()

    def get_question_number(self) -> int:
        return self._session.question_number()

    def get_question_count(self) -> int:
        return self._session.total_questions

    def get_score(self) -> int:
        return self._session.score

    def submit_answer(self, answer: Any | None) -> bool:
        return self._session.submit_answer(answer)

    def time_out_question(self) -> None:
        self._session.timeout_tick()

    def is_quiz_complete(self) -> bool:
        return self._session.is_finished()

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._session.set_shuffle_seed(seed)

    def finish_game(self) -> PlayerResult:
        """Finalize the play-through and store it unless in practice mode.

        Raises OSError when the result history cannot be written.
        """
        quiz = self._require_quiz()
        result = self._session.finalize()
        self._last_result = result
        if self._practice_mode:
            logger.info("Practice mode: result for %s not saved", result.player_name)
        else:
            self._store.append_result(generate_quiz_id(quiz.title), quiz.title, result)
        return result

    def get_last_result(self) -> PlayerResult | None:
        return self._last_result

    def get_completion_message(self, result: PlayerResult) -> str:
        return build_completion_message(self._require_quiz(), result)

    # --- Leaderboard ---

    def load_leaderboard(self) -> QuizResult:
        quiz = self._require_quiz()
        return self._store.load_or_create(generate_quiz_id(quiz.title), quiz.title)

    def get_leaderboard_rows(self, limit: int | None = None) -> list[LeaderboardRow]:
        return Leaderboard(self.load_leaderboard()).rows(limit)

    def export_leaderboard(self, file_path: Path) -> Path:
        if self._practice_mode:
            raise ResultExportError(
                "Results are not saved in practice mode, so there is nothing to export."
            )
        quiz_result = self.load_leaderboard()
        if not quiz_result.results:
            raise ResultExportError("There are no quiz results to export.")
        return export_results_to_csv(quiz_result, file_path, rank_results(quiz_result.results))

    def _require_quiz(self) -> Quiz:
        quiz = self._session.quiz
        if quiz is None:
            raise SessionStateError("No quiz has been loaded.")
        return quiz
