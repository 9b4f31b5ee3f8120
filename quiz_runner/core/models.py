"""Domain models for the quiz runner.

Quizzes, pages and questions are frozen after loading and shared by reference;
nothing in the engine copies them defensively. ``PlayerResult`` is frozen as
well. ``QuizResult`` is the one mutable container: it is loaded, receives one
appended result and is written back in full.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
import math
import random
from typing import Any, Union

from quiz_runner.constants.quiz_constants import (
    DEFAULT_LABEL_FALSE,
    DEFAULT_LABEL_TRUE,
    RESULT_DATE_FORMAT,
)


@dataclass(frozen=True, slots=True)
class RadioGroupQuestion:
    """Single-choice question answered with one of its ``choices``."""

    name: str
    title: str
    choices: tuple[str, ...] = ()
    correct_answer: str | None = None
    shuffle: bool = False
    required: bool = False

    kind = "radiogroup"

    def evaluate(self, answer: Any | None) -> bool:
        return evaluate_answer(self, answer)

    def display_choices(self, rng: random.Random | None = None) -> tuple[str, ...]:
        """Return the choices in presentation order without touching ``choices``."""
        if not self.shuffle:
            return self.choices
        shuffled = list(self.choices)
        (rng or random).shuffle(shuffled)
        return tuple(shuffled)


@dataclass(frozen=True, slots=True)
class BooleanQuestion:
    """True/false question with configurable labels for both options."""

    name: str
    title: str
    label_true: str = DEFAULT_LABEL_TRUE
    label_false: str = DEFAULT_LABEL_FALSE
    correct_answer: bool = False
    required: bool = False

    kind = "boolean"

    def evaluate(self, answer: Any | None) -> bool:
        return evaluate_answer(self, answer)

    def display_choices(self, rng: random.Random | None = None) -> tuple[str, ...]:
        return (self.label_true, self.label_false)


Question = Union[RadioGroupQuestion, BooleanQuestion]


def evaluate_answer(question: Question, answer: Any | None) -> bool:
    """Return whether ``answer`` is correct for ``question``.

    A missing answer (timeout or nothing selected) is never correct.
    """
    if answer is None:
        return False

    match question:
        case RadioGroupQuestion(correct_answer=expected):
            if expected is None:
                return False
            return str(answer) == expected
        case BooleanQuestion(correct_answer=expected):
            return _evaluate_boolean(question, expected, answer)
        case _:
            raise TypeError(f"Unsupported question variant: {type(question).__name__}")


def _evaluate_boolean(question: BooleanQuestion, expected: bool, answer: Any) -> bool:
    if isinstance(answer, bool):
        return answer == expected
    if not isinstance(answer, str):
        return False

    normalized = answer.casefold()
    if normalized == "true" or normalized == question.label_true.casefold():
        return expected
    if normalized == "false" or normalized == question.label_false.casefold():
        return not expected
    return False


@dataclass(frozen=True, slots=True)
class Page:
    """One question together with the seconds allowed to answer it."""

    question: Question
    time_limit: int = 0


@dataclass(frozen=True, slots=True)
class CompletionCondition:
    """Completion template shown when ``expression`` holds for the final score."""

    expression: str
    html: str


@dataclass(frozen=True, slots=True)
class Quiz:
    """A playable quiz: ordered pages plus completion templates."""

    title: str
    pages: tuple[Page, ...]
    description: str = ""
    completed_html: str | None = None
    completed_html_on_condition: tuple[CompletionCondition, ...] = ()

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def get_page(self, index: int) -> Page | None:
        if 0 <= index < len(self.pages):
            return self.pages[index]
        return None

    def get_question(self, index: int) -> Question | None:
        page = self.get_page(index)
        return page.question if page is not None else None


@dataclass(frozen=True, slots=True)
class PlayerResult:
    """Outcome of one completed play-through."""

    player_name: str
    total_questions: int
    correct_questions: int
    date: str

    @classmethod
    def create(
        cls,
        player_name: str,
        total_questions: int,
        correct_questions: int,
        completed_at: datetime | None = None,
    ) -> PlayerResult:
        completed_at = completed_at or datetime.now()
        return cls(
            player_name=player_name,
            total_questions=total_questions,
            correct_questions=correct_questions,
            date=completed_at.strftime(RESULT_DATE_FORMAT),
        )

    @property
    def timestamp(self) -> datetime:
        """Parsed ``date`` as naive local time.

        Unreadable dates sort as the oldest possible entry. Dates written with
        a UTC offset are converted to local time so all entries compare.
        """
        try:
            return datetime.strptime(self.date, RESULT_DATE_FORMAT)
        except ValueError:
            pass
        try:
            parsed = datetime.fromisoformat(self.date)
        except ValueError:
            return datetime.min
        if parsed.tzinfo is not None:
            return parsed.astimezone().replace(tzinfo=None)
        return parsed

    @property
    def score(self) -> float:
        if self.total_questions == 0:
            return 0.0
        return self.correct_questions / self.total_questions * 100.0

    @property
    def score_percent(self) -> int:
        # Half-up rounding; round() would send 12.5 to 12.
        return math.floor(self.score + 0.5)

    @property
    def score_percentage_text(self) -> str:
        return f"{self.score_percent}%"

    @property
    def score_string(self) -> str:
        return f"{self.correct_questions}/{self.total_questions} ({self.score:.1f}%)"


@dataclass(slots=True)
class QuizResult:
    """Persisted history of results for one quiz."""

    quiz_id: str
    name: str
    numeric_id: str
    results: list[PlayerResult] = field(default_factory=list)

    def add_result(self, result: PlayerResult) -> None:
        self.results.append(result)

    @property
    def result_count(self) -> int:
        return len(self.results)
