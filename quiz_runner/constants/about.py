"""Static metadata describing QuizRunner."""

APP_NAME = "QuizRunner"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizRunner plays timed single-player quizzes from JSON files, keeps a "
    "leaderboard per quiz and exports it to CSV."
)

HELP_TEXT = (
    "Import a quiz (.json), enter your name and press Start. Each question has "
    "its own time limit; when it runs out the question counts as unanswered.\n\n"
    "Practice mode plays the quiz without saving your result to the leaderboard.\n\n"
    "Results are stored in the 'quiz-results' folder next to where QuizRunner "
    "was started and can be exported as semicolon-separated CSV."
)
