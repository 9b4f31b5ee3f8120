"""Qt UI components for the player application."""

from .dialog_helpers import (
    confirm_leave_game,
    confirm_replace_quiz,
    show_error,
    show_info,
    show_warning,
)
from .player_main_window import PlayerMainWindow
from .question_renderer import render_question

__all__ = [
    "PlayerMainWindow",
    "confirm_leave_game",
    "confirm_replace_quiz",
    "show_error",
    "show_info",
    "show_warning",
    "render_question",
]
