import json

import pytest

from quiz_runner.core.models import BooleanQuestion, Page, Quiz, RadioGroupQuestion
from quiz_runner.core.services.result_store import ResultStore


@pytest.fixture
def radio_question():
    return RadioGroupQuestion(
        name="q1",
        title="Question 1",
        choices=("A", "B", "C"),
        correct_answer="B",
        required=True,
    )


@pytest.fixture
def boolean_question():
    return BooleanQuestion(
        name="q2",
        title="Question 2",
        label_true="Yes",
        label_false="No",
        correct_answer=True,
        required=True,
    )


@pytest.fixture
def two_page_quiz(radio_question, boolean_question):
    return Quiz(
        title="Test Quiz",
        description="A test quiz",
        pages=(
            Page(question=radio_question, time_limit=30),
            Page(question=boolean_question, time_limit=20),
        ),
    )


@pytest.fixture
def quiz_document():
    return {
        "title": "World Capitals",
        "description": "How well do you know them?",
        "pages": [
            {
                "timeLimit": 15,
                "elements": [
                    {
                        "type": "radiogroup",
                        "name": "norway",
                        "title": "Capital of **Norway**?",
                        "isRequired": True,
                        "choicesOrder": "random",
                        "choices": ["Oslo", "Bergen", "Trondheim"],
                        "correctAnswer": "Oslo",
                    }
                ],
            },
            {
                "timeLimit": 10,
                "elements": [
                    {
                        "type": "boolean",
                        "name": "sweden",
                        "title": "Stockholm is the capital of Sweden.",
                        "labelTrue": "Yes",
                        "labelFalse": "No",
                        "correctAnswer": True,
                    }
                ],
            },
        ],
        "completedHtml": "<h3>You got {correctAnswers} of {questionCount}</h3>",
        "completedHtmlOnCondition": [
            {"expression": "{correctAnswers} == 0", "html": "<p>Better luck next time</p>"}
        ],
    }


@pytest.fixture
def write_quiz(tmp_path):
    def _write(document, name="quiz.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def result_store(tmp_path):
    return ResultStore(tmp_path / "quiz-results")
