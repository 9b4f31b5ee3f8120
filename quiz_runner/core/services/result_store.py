"""File-backed storage of per-quiz result histories."""

from __future__ import annotations

import logging
from pathlib import Path
import re
import zlib

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from quiz_runner.constants.quiz_constants import (
    FALLBACK_QUIZ_ID,
    NUMERIC_ID_MODULUS,
    NUMERIC_ID_WIDTH,
    QUIZ_ID_MAX_LENGTH,
    RESULTS_DIRECTORY,
    RESULTS_FILE_SUFFIX,
)
from quiz_runner.core.models import PlayerResult, QuizResult

logger = logging.getLogger(__name__)

_QUIZ_ID_STRIP = re.compile(r"[^a-z0-9]")


class PlayerResultRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    player_name: str = Field(default="", alias="playerName")
    total_questions: int = Field(default=0, ge=0, alias="totalQuestions")
    correct_questions: int = Field(default=0, ge=0, alias="correctQuestions")
    date: str = ""

    @classmethod
    def from_result(cls, result: PlayerResult) -> PlayerResultRecord:
        return cls(
            player_name=result.player_name,
            total_questions=result.total_questions,
            correct_questions=result.correct_questions,
            date=result.date,
        )

    def to_result(self) -> PlayerResult:
        return PlayerResult(
            player_name=self.player_name,
            total_questions=self.total_questions,
            correct_questions=self.correct_questions,
            date=self.date,
        )


class ResultHistoryDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    quiz_id: str = Field(default="", alias="quizId")
    name: str = ""
    numeric_id: str | None = Field(default=None, alias="numericId")
    results: list[PlayerResultRecord] = Field(default_factory=list)


def generate_quiz_id(title: str | None) -> str:
    """Derive the storage key for a quiz title.

    Lossy: titles that agree on their first 20 alphanumeric characters share
    one history file.
    """
    if title is None:
        return FALLBACK_QUIZ_ID
    quiz_id = _QUIZ_ID_STRIP.sub("", title.lower())[:QUIZ_ID_MAX_LENGTH]
    return quiz_id or FALLBACK_QUIZ_ID


def generate_numeric_id(quiz_id: str) -> str:
    checksum = zlib.crc32(quiz_id.encode("utf-8")) % NUMERIC_ID_MODULUS
    return str(checksum).zfill(NUMERIC_ID_WIDTH)


class ResultStore:
    """Loads, merges and rewrites ``<quiz_id>-results.json`` files.

    Each save rewrites the whole file without locking, so two processes
    appending to the same quiz at once can lose one of the updates.
    """

    def __init__(self, results_directory: Path | str = RESULTS_DIRECTORY) -> None:
        self._results_directory = Path(results_directory)

    @property
    def results_directory(self) -> Path:
        return self._results_directory

    def results_path(self, quiz_id: str) -> Path:
        return self._results_directory / f"{quiz_id}{RESULTS_FILE_SUFFIX}"

    def load_or_create(self, quiz_id: str, quiz_title: str = "") -> QuizResult:
        """Return the stored history, or an empty one if none is usable.

        A history that cannot be parsed is discarded and replaced by an empty
        one on the next save.
        """
        file_path = self.results_path(quiz_id)
        if not file_path.exists():
            return self._new_history(quiz_id, quiz_title)

        try:
            document = ResultHistoryDocument.model_validate_json(
                file_path.read_text(encoding="utf-8")
            )
        except (UnicodeDecodeError, ValidationError) as exc:
            logger.warning("Discarding unreadable result history %s: %s", file_path, exc)
            return self._new_history(quiz_id, quiz_title)

        return QuizResult(
            quiz_id=document.quiz_id or quiz_id,
            name=document.name or quiz_title,
            numeric_id=document.numeric_id or generate_numeric_id(quiz_id),
            results=[record.to_result() for record in document.results],
        )

    def save(self, quiz_id: str, quiz_result: QuizResult) -> None:
        document = ResultHistoryDocument(
            quiz_id=quiz_result.quiz_id,
            name=quiz_result.name,
            numeric_id=quiz_result.numeric_id,
            results=[PlayerResultRecord.from_result(result) for result in quiz_result.results],
        )
        file_path = self.results_path(quiz_id)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(document.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        logger.info("Saved %d results to %s", quiz_result.result_count, file_path)

    def append_result(self, quiz_id: str, quiz_title: str, result: PlayerResult) -> QuizResult:
        quiz_result = self.load_or_create(quiz_id, quiz_title)
        quiz_result.add_result(result)
        self.save(quiz_id, quiz_result)
        return quiz_result

    @staticmethod
    def _new_history(quiz_id: str, quiz_title: str) -> QuizResult:
        return QuizResult(
            quiz_id=quiz_id,
            name=quiz_title,
            numeric_id=generate_numeric_id(quiz_id),
        )
