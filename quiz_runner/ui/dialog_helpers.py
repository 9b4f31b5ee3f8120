"""Helper functions for common dialog patterns in the player UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def confirm_replace_quiz(parent: QWidget, current_title: str) -> bool:
    """Ask before importing a quiz over the one that is loaded.

    Args:
        parent: Parent widget for the dialog
        current_title: Title of the quiz that would be replaced

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        "Replace Quiz",
        f"Importing a quiz will replace '{current_title}'. Continue?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def confirm_leave_game(parent: QWidget) -> bool:
    """Ask before abandoning a game in progress; the result is discarded."""
    reply = QMessageBox.question(
        parent,
        "Leave Quiz",
        "Leaving now discards your answers. Continue?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
