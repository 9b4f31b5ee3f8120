"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizRunner"
TIMER_TICK_INTERVAL_MS: int = 1000
TIME_LIMIT_WARNING_SECONDS: int = 5
GAME_FONT_SIZE: int = 14

MENU_BUTTON_IMPORT: str = "Import Quiz"
MENU_BUTTON_START: str = "Start Quiz"
MENU_BUTTON_LEADERBOARD: str = "View Leaderboard"
MENU_BUTTON_ABOUT: str = "About"
MENU_BUTTON_HELP: str = "Help"
MENU_PRACTICE_CHECKBOX: str = "Practice mode (result is not saved)"
MENU_NAME_PLACEHOLDER: str = "Your name"

GAME_SUBMIT_BUTTON: str = "Submit Answer"
GAME_PROGRESS_TEMPLATE: str = "Question {number} of {total}"
GAME_TIMER_TEMPLATE: str = "Time: {seconds} seconds"
GAME_UNTIMED_LABEL: str = "No time limit"

RESULTS_BUTTON_EXPORT: str = "Export to CSV"
RESULTS_BUTTON_PLAY_AGAIN: str = "Play Again"
RESULTS_BUTTON_MENU: str = "Back to Menu"
RESULTS_SCORE_TEMPLATE: str = "Your score: {percentage}"
RESULTS_TITLE_TEMPLATE: str = "Quiz name: {title}{mode}"
RESULTS_PRACTICE_SUFFIX: str = " (Practice Mode)"
LEADERBOARD_COLUMNS: tuple[str, ...] = ("#", "Player", "Score", "%", "Date")

IMPORT_DIALOG_TITLE: str = "Select quiz file"
IMPORT_FILE_FILTER: str = "Quiz files (*.json);;All files (*.*)"
EXPORT_DIALOG_TITLE: str = "Export Leaderboard to CSV"
EXPORT_FILE_FILTER: str = "CSV Files (*.csv)"

NO_QUIZ_LOADED_MESSAGE: str = "Please import a quiz first."
NO_RESULTS_MESSAGE: str = "No results have been saved for this quiz yet."
