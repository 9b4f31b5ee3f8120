"""Build the message shown once a quiz is completed.

Quiz files may carry a ``completedHtml`` template and a list of
``completedHtmlOnCondition`` entries. The first condition whose expression
holds wins, then the plain template, then a generated message. Templates may
use ``{correctAnswers}``, ``{incorrectAnswers}``, ``{questionCount}``,
``{score}`` (integer percent) and ``{playerName}``. HTML tags are stripped
because the results view shows plain text.

Expressions are comparisons between numbers and placeholders, optionally
joined with ``and`` / ``or`` (``and`` binds tighter)::

    {correctAnswers} == {questionCount}
    {score} >= 50 and {score} < 80
"""

from __future__ import annotations

import logging
import operator
import re

from quiz_runner.core.models import PlayerResult, Quiz

logger = logging.getLogger(__name__)

_TAG_PATTERN = re.compile(r"<[^>]*>")
_PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")
_COMPARISON_PATTERN = re.compile(
    r"^\s*(-?\d+(?:\.\d+)?)\s*(==|!=|>=|<=|=|>|<)\s*(-?\d+(?:\.\d+)?)\s*$"
)
_OR_PATTERN = re.compile(r"\s+or\s+", re.IGNORECASE)
_AND_PATTERN = re.compile(r"\s+and\s+", re.IGNORECASE)

_OPERATORS = {
    "==": operator.eq,
    "=": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}


def build_completion_message(quiz: Quiz, result: PlayerResult) -> str:
    variables = _template_variables(result)

    for condition in quiz.completed_html_on_condition:
        if evaluate_condition(condition.expression, variables):
            return _render_template(condition.html, variables)

    if quiz.completed_html and quiz.completed_html.strip():
        return _render_template(quiz.completed_html, variables)

    return _default_message(result)


def evaluate_condition(expression: str, variables: dict[str, str]) -> bool:
    """Evaluate a completion expression; malformed expressions are false."""
    substituted = _substitute(expression, variables)
    for alternative in _OR_PATTERN.split(substituted):
        terms = _AND_PATTERN.split(alternative)
        outcomes = [_compare(term) for term in terms]
        if None in outcomes:
            logger.debug("Ignoring unparseable completion expression: %r", expression)
            return False
        if all(outcomes):
            return True
    return False


def _compare(term: str) -> bool | None:
    match = _COMPARISON_PATTERN.match(term)
    if match is None:
        return None
    left, symbol, right = match.groups()
    return _OPERATORS[symbol](float(left), float(right))


def _template_variables(result: PlayerResult) -> dict[str, str]:
    return {
        "correctAnswers": str(result.correct_questions),
        "incorrectAnswers": str(result.total_questions - result.correct_questions),
        "questionCount": str(result.total_questions),
        "score": str(result.score_percent),
        "playerName": result.player_name,
    }


def _substitute(template: str, variables: dict[str, str]) -> str:
    return _PLACEHOLDER_PATTERN.sub(
        lambda match: variables.get(match.group(1), match.group(0)), template
    )


def _render_template(template: str, variables: dict[str, str]) -> str:
    return _TAG_PATTERN.sub("", _substitute(template, variables)).strip()


def _default_message(result: PlayerResult) -> str:
    if result.correct_questions == 0:
        return "Unfortunately, none of your answers are correct. Please try again."
    if result.correct_questions == result.total_questions:
        return "Excellent! You answered all questions correctly!"
    return f"You got {result.correct_questions} out of {result.total_questions} correct."
