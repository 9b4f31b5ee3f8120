"""
Tests for loading quiz definitions from JSON files.
"""

import pytest

from quiz_runner.core.models import BooleanQuestion, RadioGroupQuestion
from quiz_runner.core.quiz_importer import QuizImportError, load_quiz_from_file, parse_quiz_text


class TestLoadQuizFromFile:

    def test_loads_complete_quiz(self, write_quiz, quiz_document):
        quiz = load_quiz_from_file(write_quiz(quiz_document))

        assert quiz.title == "World Capitals"
        assert quiz.description == "How well do you know them?"
        assert quiz.page_count == 2
        assert quiz.pages[0].time_limit == 15
        assert quiz.pages[1].time_limit == 10
        assert quiz.completed_html == "<h3>You got {correctAnswers} of {questionCount}</h3>"
        assert quiz.completed_html_on_condition[0].expression == "{correctAnswers} == 0"

    def test_builds_question_variants(self, write_quiz, quiz_document):
        quiz = load_quiz_from_file(write_quiz(quiz_document))

        radio = quiz.get_question(0)
        assert isinstance(radio, RadioGroupQuestion)
        assert radio.choices == ("Oslo", "Bergen", "Trondheim")
        assert radio.correct_answer == "Oslo"
        assert radio.shuffle is True
        assert radio.required is True

        boolean = quiz.get_question(1)
        assert isinstance(boolean, BooleanQuestion)
        assert boolean.label_true == "Yes"
        assert boolean.label_false == "No"
        assert boolean.correct_answer is True
        assert boolean.required is False

    def test_defaults_for_optional_fields(self):
        quiz = parse_quiz_text(
            '{"title": "Minimal", "pages": [{"elements": [{"type": "boolean", "name": "b"}]}]}'
        )

        question = quiz.get_question(0)
        assert quiz.description == ""
        assert quiz.completed_html is None
        assert quiz.completed_html_on_condition == ()
        assert quiz.pages[0].time_limit == 0
        assert question.label_true == "True"
        assert question.label_false == "False"
        assert question.correct_answer is False

    def test_non_random_order_does_not_shuffle(self, write_quiz, quiz_document):
        quiz_document["pages"][0]["elements"][0]["choicesOrder"] = "none"
        quiz = load_quiz_from_file(write_quiz(quiz_document))
        assert quiz.get_question(0).shuffle is False

    def test_extra_elements_use_first_question(self, write_quiz, quiz_document):
        extra = {"type": "boolean", "name": "extra", "title": "Ignored"}
        quiz_document["pages"][0]["elements"].append(extra)

        quiz = load_quiz_from_file(write_quiz(quiz_document))

        assert quiz.get_question(0).name == "norway"

    def test_unknown_keys_are_ignored(self, write_quiz, quiz_document):
        quiz_document["showProgressBar"] = "top"
        quiz_document["pages"][0]["name"] = "page1"
        quiz = load_quiz_from_file(write_quiz(quiz_document))
        assert quiz.page_count == 2

    def test_accepts_uppercase_extension(self, write_quiz, quiz_document):
        quiz = load_quiz_from_file(write_quiz(quiz_document, name="QUIZ.JSON"))
        assert quiz.title == "World Capitals"

    def test_missing_file_is_io_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_quiz_from_file(tmp_path / "missing.json")


class TestQuizValidation:

    def test_rejects_non_json_extension(self, write_quiz, quiz_document):
        with pytest.raises(QuizImportError, match="JSON"):
            load_quiz_from_file(write_quiz(quiz_document, name="quiz.txt"))

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_rejects_blank_title(self, write_quiz, quiz_document, title):
        quiz_document["title"] = title
        with pytest.raises(QuizImportError, match="title"):
            load_quiz_from_file(write_quiz(quiz_document))

    def test_rejects_missing_title(self, write_quiz, quiz_document):
        del quiz_document["title"]
        with pytest.raises(QuizImportError, match="title"):
            load_quiz_from_file(write_quiz(quiz_document))

    def test_rejects_zero_pages(self, write_quiz, quiz_document):
        quiz_document["pages"] = []
        with pytest.raises(QuizImportError, match="at least one question"):
            load_quiz_from_file(write_quiz(quiz_document))

    def test_rejects_page_without_question(self, write_quiz, quiz_document):
        quiz_document["pages"][1]["elements"] = []
        with pytest.raises(QuizImportError, match="Page 2 must have a question"):
            load_quiz_from_file(write_quiz(quiz_document))

    def test_rejects_unknown_question_type(self, write_quiz, quiz_document):
        quiz_document["pages"][0]["elements"][0]["type"] = "checkbox"
        with pytest.raises(QuizImportError, match="Unsupported question type"):
            load_quiz_from_file(write_quiz(quiz_document))

    def test_rejects_question_without_type(self, write_quiz, quiz_document):
        del quiz_document["pages"][0]["elements"][0]["type"]
        with pytest.raises(QuizImportError, match="type"):
            load_quiz_from_file(write_quiz(quiz_document))

    def test_rejects_negative_time_limit(self, write_quiz, quiz_document):
        quiz_document["pages"][0]["timeLimit"] = -5
        with pytest.raises(QuizImportError, match="timeLimit"):
            load_quiz_from_file(write_quiz(quiz_document))

    def test_rejects_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"title": "Broken", "pages": [', encoding="utf-8")
        with pytest.raises(QuizImportError, match="not valid JSON"):
            load_quiz_from_file(path)

    def test_rejects_non_object_root(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text('[{"title": "Quiz"}]', encoding="utf-8")
        with pytest.raises(QuizImportError, match="must be a JSON object"):
            load_quiz_from_file(path)

    def test_error_chains_validation_cause(self):
        with pytest.raises(QuizImportError) as excinfo:
            parse_quiz_text("[]")
        assert excinfo.value.__cause__ is not None
