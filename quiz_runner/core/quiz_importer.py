"""Load quiz definitions from JSON files.

File format::

    {
      "title": "Capitals",
      "description": "Optional text shown before starting",
      "pages": [
        {
          "timeLimit": 20,
          "elements": [
            {
              "type": "radiogroup",
              "name": "q1",
              "title": "Capital of Norway?",
              "choices": ["Oslo", "Bergen", "Trondheim"],
              "correctAnswer": "Oslo",
              "choicesOrder": "random"
            }
          ]
        },
        {
          "timeLimit": 10,
          "elements": [
            {
              "type": "boolean",
              "name": "q2",
              "title": "Stockholm is in Sweden.",
              "labelTrue": "Yes",
              "labelFalse": "No",
              "correctAnswer": true
            }
          ]
        }
      ],
      "completedHtml": "<p>{correctAnswers} of {questionCount} correct</p>",
      "completedHtmlOnCondition": [
        {"expression": "{correctAnswers} == {questionCount}", "html": "Perfect!"}
      ]
    }

Each page is expected to carry exactly one question. Extra elements on a page
are ignored with a warning; unknown keys anywhere are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from quiz_runner.constants.quiz_constants import (
    DEFAULT_LABEL_FALSE,
    DEFAULT_LABEL_TRUE,
    QUIZ_FILE_EXTENSION,
    RANDOM_CHOICES_ORDER,
    SUPPORTED_QUESTION_TYPES,
)
from quiz_runner.core.models import (
    BooleanQuestion,
    CompletionCondition,
    Page,
    Question,
    Quiz,
    RadioGroupQuestion,
)

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


class _Document(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RadioGroupDocument(_Document):
    type: Literal["radiogroup"]
    name: str = ""
    title: str = ""
    is_required: bool = Field(default=False, alias="isRequired")
    choices: list[str] = Field(default_factory=list)
    correct_answer: str | None = Field(default=None, alias="correctAnswer")
    choices_order: str | None = Field(default=None, alias="choicesOrder")

    def to_question(self) -> RadioGroupQuestion:
        return RadioGroupQuestion(
            name=self.name,
            title=self.title,
            choices=tuple(self.choices),
            correct_answer=self.correct_answer,
            shuffle=self.choices_order == RANDOM_CHOICES_ORDER,
            required=self.is_required,
        )


class BooleanDocument(_Document):
    type: Literal["boolean"]
    name: str = ""
    title: str = ""
    is_required: bool = Field(default=False, alias="isRequired")
    label_true: str = Field(default=DEFAULT_LABEL_TRUE, alias="labelTrue")
    label_false: str = Field(default=DEFAULT_LABEL_FALSE, alias="labelFalse")
    correct_answer: bool = Field(default=False, alias="correctAnswer")

    def to_question(self) -> BooleanQuestion:
        return BooleanQuestion(
            name=self.name,
            title=self.title,
            label_true=self.label_true,
            label_false=self.label_false,
            correct_answer=self.correct_answer,
            required=self.is_required,
        )


QuestionDocument = Annotated[
    Union[RadioGroupDocument, BooleanDocument],
    Field(discriminator="type"),
]


class PageDocument(_Document):
    time_limit: int = Field(default=0, ge=0, alias="timeLimit")
    elements: list[QuestionDocument] = Field(default_factory=list)


class CompletionConditionDocument(_Document):
    expression: str = ""
    html: str = ""


class QuizDocument(_Document):
    title: str | None = None
    description: str | None = None
    pages: list[PageDocument] = Field(default_factory=list)
    completed_html: str | None = Field(default=None, alias="completedHtml")
    completed_html_on_condition: list[CompletionConditionDocument] = Field(
        default_factory=list, alias="completedHtmlOnCondition"
    )


def load_quiz_from_file(file_path: Path) -> Quiz:
    """Read, validate and convert a quiz file.

    Raises:
        QuizImportError: the file is not a ``.json`` file or its content does
            not describe a playable quiz.
        OSError: the file cannot be read.
    """
    file_path = Path(file_path)
    if file_path.suffix.lower() != QUIZ_FILE_EXTENSION:
        raise QuizImportError("Quiz file must be a JSON file.")

    text = file_path.read_text(encoding="utf-8")
    quiz = parse_quiz_text(text)
    logger.info("Loaded quiz '%s' (%d pages) from %s", quiz.title, quiz.page_count, file_path)
    return quiz


def parse_quiz_text(text: str) -> Quiz:
    try:
        document = QuizDocument.model_validate_json(text)
    except ValidationError as exc:
        raise QuizImportError(_describe_validation_error(exc)) from exc
    return _build_quiz(document)


def _build_quiz(document: QuizDocument) -> Quiz:
    title = (document.title or "").strip()
    if not title:
        raise QuizImportError("Quiz must have a title.")
    if not document.pages:
        raise QuizImportError("Quiz must have at least one question.")

    pages: list[Page] = []
    for number, page_document in enumerate(document.pages, start=1):
        if not page_document.elements:
            raise QuizImportError(f"Page {number} must have a question.")
        if len(page_document.elements) > 1:
            logger.warning(
                "Page %d defines %d questions; only the first is used.",
                number,
                len(page_document.elements),
            )
        question: Question = page_document.elements[0].to_question()
        pages.append(Page(question=question, time_limit=page_document.time_limit))

    return Quiz(
        title=title,
        pages=tuple(pages),
        description=document.description or "",
        completed_html=document.completed_html,
        completed_html_on_condition=tuple(
            CompletionCondition(expression=condition.expression, html=condition.html)
            for condition in document.completed_html_on_condition
        ),
    )


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    if first["type"] == "json_invalid":
        return "Quiz file is not valid JSON."
    if first["type"] == "union_tag_invalid":
        supported = ", ".join(SUPPORTED_QUESTION_TYPES)
        return f"Unsupported question type. Supported types: {supported}."
    if first["type"] == "union_tag_not_found":
        return "Every question must declare its 'type'."
    if not first["loc"]:
        return "Quiz file must be a JSON object."
    location = ".".join(str(part) for part in first["loc"])
    return f"Invalid quiz file at '{location}': {first['msg']}"
