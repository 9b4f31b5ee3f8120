"""
Tests for CSV export of quiz results.
"""

import csv
from datetime import date

import pytest

from quiz_runner.core.models import PlayerResult, QuizResult
from quiz_runner.core.results_exporter import (
    ResultExportError,
    default_export_filename,
    escape_csv_value,
    export_results_to_csv,
    results_to_csv_lines,
)


@pytest.fixture
def quiz_result():
    quiz_result = QuizResult(quiz_id="capitals", name="World Capitals", numeric_id="004217")
    quiz_result.add_result(PlayerResult("Ada", 3, 2, "2024-05-01T09:30:15"))
    quiz_result.add_result(PlayerResult('Grace "Amazing"; Hopper', 3, 3, "2024-05-02T10:00:00"))
    return quiz_result


class TestEscapeCsvValue:

    def test_plain_value_is_verbatim(self):
        assert escape_csv_value("Ada Lovelace") == "Ada Lovelace"

    def test_delimiter_is_quoted(self):
        assert escape_csv_value("a;b") == '"a;b"'

    def test_quotes_are_doubled(self):
        assert escape_csv_value('say "hi"') == '"say ""hi"""'

    def test_none_is_empty(self):
        assert escape_csv_value(None) == ""


class TestResultsToCsvLines:

    def test_header_and_rows(self, quiz_result):
        lines = results_to_csv_lines(quiz_result, quiz_result.results[:1])

        assert lines == [
            "quizId;quizName;playerName;totalQuestions;correctQuestions;date",
            "004217;World Capitals;Ada;3;2;2024-05-01T09:30:15",
        ]

    def test_rows_follow_supplied_order(self, quiz_result):
        reversed_results = list(reversed(quiz_result.results))
        lines = results_to_csv_lines(quiz_result, reversed_results)
        assert lines[2].split(";")[2] == "Ada"


class TestExportResultsToCsv:

    def test_round_trips_through_csv_reader(self, quiz_result, tmp_path):
        path = export_results_to_csv(quiz_result, tmp_path / "results.csv")

        with path.open(encoding="utf-8", newline="") as handle:
            rows = list(csv.reader(handle, delimiter=";"))

        assert rows[0] == ["quizId", "quizName", "playerName", "totalQuestions", "correctQuestions", "date"]
        assert rows[2] == [
            "004217",
            "World Capitals",
            'Grace "Amazing"; Hopper',
            "3",
            "3",
            "2024-05-02T10:00:00",
        ]

    def test_writes_supplied_results_only(self, quiz_result, tmp_path):
        path = export_results_to_csv(quiz_result, tmp_path / "one.csv", quiz_result.results[1:])
        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2

    def test_header_only_for_empty_history(self, tmp_path):
        empty = QuizResult(quiz_id="q", name="Q", numeric_id="000000")
        path = export_results_to_csv(empty, tmp_path / "empty.csv")
        assert path.read_text(encoding="utf-8") == (
            "quizId;quizName;playerName;totalQuestions;correctQuestions;date\n"
        )

    def test_wrong_extension_writes_nothing(self, quiz_result, tmp_path):
        target = tmp_path / "sub" / "results.txt"

        with pytest.raises(ResultExportError, match=".csv"):
            export_results_to_csv(quiz_result, target)

        assert not target.exists()
        assert not target.parent.exists()

    def test_extension_check_ignores_case(self, quiz_result, tmp_path):
        path = export_results_to_csv(quiz_result, tmp_path / "RESULTS.CSV")
        assert path.is_file()

    def test_creates_parent_directories(self, quiz_result, tmp_path):
        path = export_results_to_csv(quiz_result, tmp_path / "a" / "b" / "results.csv")
        assert path.is_file()

    def test_accepts_string_path(self, quiz_result, tmp_path):
        path = export_results_to_csv(quiz_result, str(tmp_path / "results.csv"))
        assert path.is_file()


class TestDefaultExportFilename:

    def test_slug_and_date(self):
        assert (
            default_export_filename("World Capitals!", date(2024, 5, 1))
            == "world-capitals-2024-05-01.csv"
        )

    def test_defaults_to_today(self):
        assert default_export_filename("Quiz").endswith(f"{date.today().isoformat()}.csv")
