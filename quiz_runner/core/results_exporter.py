"""Utilities for exporting quiz result histories to semicolon-separated CSV."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
import logging
from pathlib import Path
import re

from quiz_runner.constants.quiz_constants import (
    CSV_DELIMITER,
    CSV_FILE_EXTENSION,
    CSV_HEADER_FIELDS,
)
from quiz_runner.core.models import PlayerResult, QuizResult

logger = logging.getLogger(__name__)

_FILENAME_SEPARATORS = re.compile(r"[^a-z0-9]+")


class ResultExportError(Exception):
    """Raised when results cannot be exported to the requested target."""


def export_results_to_csv(
    quiz_result: QuizResult,
    file_path: Path,
    results: Sequence[PlayerResult] | None = None,
) -> Path:
    """Write ``results`` (default: the stored order) to ``file_path``.

    Callers usually pass the ranked order. The path must end in ``.csv``;
    missing parent directories are created.
    """
    file_path = Path(file_path)
    if not file_path.name.lower().endswith(CSV_FILE_EXTENSION):
        raise ResultExportError("File must have .csv extension.")

    rows = quiz_result.results if results is None else results
    document = "\n".join(results_to_csv_lines(quiz_result, rows)) + "\n"

    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(document, encoding="utf-8")
    logger.info("Exported %d results to %s", len(rows), file_path)
    return file_path


def results_to_csv_lines(
    quiz_result: QuizResult, results: Sequence[PlayerResult]
) -> list[str]:
    lines = [CSV_DELIMITER.join(CSV_HEADER_FIELDS)]
    for result in results:
        lines.append(_serialize_result(quiz_result, result))
    return lines


def _serialize_result(quiz_result: QuizResult, result: PlayerResult) -> str:
    fields = (
        escape_csv_value(quiz_result.numeric_id),
        escape_csv_value(quiz_result.name),
        escape_csv_value(result.player_name),
        str(result.total_questions),
        str(result.correct_questions),
        escape_csv_value(result.date),
    )
    return CSV_DELIMITER.join(fields)


def escape_csv_value(value: str | None) -> str:
    if value is None:
        return ""
    if CSV_DELIMITER in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def default_export_filename(quiz_name: str, on_date: date | None = None) -> str:
    """Suggested file name, e.g. ``world-capitals-2024-05-01.csv``."""
    on_date = on_date or date.today()
    slug = _FILENAME_SEPARATORS.sub("-", quiz_name.lower()).strip("-")
    return f"{slug}-{on_date.isoformat()}{CSV_FILE_EXTENSION}"
