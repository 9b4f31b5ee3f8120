"""Question rendering utilities for the game view."""

from __future__ import annotations

from quiz_runner.core.markdown_math_renderer import renderer
from quiz_runner.core.models import Question


def render_question(question: Question, question_number: int, total: int, font_size: int = 14) -> str:
    """Render the question title as an HTML document for QWebEngineView.

    Choices are real widgets below the view, so only the title is rendered.
    """
    heading = f"**{question_number}/{total}.** {question.title.strip() or question.name}"
    return renderer.render_full_document(heading, font_size=font_size)
