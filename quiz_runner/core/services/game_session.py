"""Service driving one play-through of a quiz."""

from __future__ import annotations

from datetime import datetime
from enum import Enum, auto
import random
from typing import Any

from quiz_runner.core.models import PlayerResult, Question, Quiz


class SessionState(Enum):
    """Lifecycle of a game session."""

    IDLE = auto()
    ACTIVE = auto()
    FINISHED = auto()


class SessionStateError(RuntimeError):
    """Raised when a session operation is called in the wrong state."""


class GameSession:
    """Walks a quiz page by page, recording answers and the running score.

    The session never drives a clock. Callers deliver either ``submit_answer``
    or, when their countdown runs out, ``timeout_tick``; both advance to the
    next page. The quiz is only read, never modified.
    """

    def __init__(self) -> None:
        self._quiz: Quiz | None = None
        self._current_index: int = 0
        self._score: int = 0
        self._answers: list[Any] = []
        self._correctness: list[bool] = []
        self._player_name: str = ""

        self._shuffle_rng = random.Random()
        self._display_index: int | None = None
        self._display_choices: tuple[str, ...] = ()

    def load(self, quiz: Quiz) -> None:
        if not quiz.pages:
            raise ValueError("Quiz must contain at least one page.")
        self._quiz = quiz
        self.reset()

    def reset(self) -> None:
        """Restart from the first page, keeping the loaded quiz."""
        self._current_index = 0
        self._score = 0
        self._answers = []
        self._correctness = []
        self._player_name = ""
        self._display_index = None
        self._display_choices = ()

    @property
    def quiz(self) -> Quiz | None:
        return self._quiz

    @property
    def state(self) -> SessionState:
        if self._quiz is None:
            return SessionState.IDLE
        if self._current_index >= self._quiz.page_count:
            return SessionState.FINISHED
        return SessionState.ACTIVE

    def is_finished(self) -> bool:
        return self.state is SessionState.FINISHED

    @property
    def player_name(self) -> str:
        return self._player_name

    def set_player_name(self, name: str) -> None:
        self._player_name = name

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def score(self) -> int:
        return self._score

    @property
    def answers(self) -> tuple[Any, ...]:
        return tuple(self._answers)

    @property
    def correctness(self) -> tuple[bool, ...]:
        return tuple(self._correctness)

    @property
    def total_questions(self) -> int:
        return self._quiz.page_count if self._quiz is not None else 0

    def question_number(self) -> int:
        """1-based number of the current question, 0 when none is current."""
        if self.state is not SessionState.ACTIVE:
            return 0
        return self._current_index + 1

    def current_question(self) -> Question | None:
        if self.state is not SessionState.ACTIVE:
            return None
        return self._quiz.get_question(self._current_index)

    def current_time_limit(self) -> int:
        if self.state is not SessionState.ACTIVE:
            return 0
        return self._quiz.pages[self._current_index].time_limit

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._shuffle_rng.seed(seed)

    def display_choices(self) -> tuple[str, ...]:
        """Choices for the current page in the order shown to the player.

        Shuffled questions get one permutation per page, kept until the
        session advances so repeated calls agree with what is on screen.
        """
        question = self.current_question()
        if question is None:
            return ()
        if self._display_index != self._current_index:
            self._display_choices = question.display_choices(self._shuffle_rng)
            self._display_index = self._current_index
        return self._display_choices

    def submit_answer(self, answer: Any | None) -> bool:
        """Score ``answer`` for the current page and advance.

        Returns whether the answer was correct.
        """
        question = self.current_question()
        if question is None:
            raise SessionStateError(
                f"Cannot submit an answer while the session is {self.state.name.lower()}."
            )

        is_correct = question.evaluate(answer)
        self._answers.append(answer)
        self._correctness.append(is_correct)
        if is_correct:
            self._score += 1
        self._current_index += 1
        return is_correct

    def timeout_tick(self) -> None:
        """Record an unanswered page after the caller's countdown expired."""
        self.submit_answer(None)

    def finalize(self, completed_at: datetime | None = None) -> PlayerResult:
        if self.state is not SessionState.FINISHED:
            raise SessionStateError("Cannot finalize a session before the last question is answered.")
        return PlayerResult.create(
            player_name=self._player_name,
            total_questions=self.total_questions,
            correct_questions=self._score,
            completed_at=completed_at,
        )
