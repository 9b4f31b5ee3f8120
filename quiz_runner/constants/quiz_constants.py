"""Quiz-related constants shared across UI and core layers."""

QUIZ_FILE_EXTENSION: str = ".json"
SUPPORTED_QUESTION_TYPES: tuple[str, ...] = ("radiogroup", "boolean")
RANDOM_CHOICES_ORDER: str = "random"
DEFAULT_LABEL_TRUE: str = "True"
DEFAULT_LABEL_FALSE: str = "False"

RESULTS_DIRECTORY: str = "quiz-results"
RESULTS_FILE_SUFFIX: str = "-results.json"
FALLBACK_QUIZ_ID: str = "quiz001"
QUIZ_ID_MAX_LENGTH: int = 20
NUMERIC_ID_MODULUS: int = 1_000_000
NUMERIC_ID_WIDTH: int = 6

# Local time, second precision. Stored verbatim and exported verbatim.
RESULT_DATE_FORMAT: str = "%Y-%m-%dT%H:%M:%S"

CSV_FILE_EXTENSION: str = ".csv"
CSV_DELIMITER: str = ";"
CSV_HEADER_FIELDS: tuple[str, ...] = (
    "quizId",
    "quizName",
    "playerName",
    "totalQuestions",
    "correctQuestions",
    "date",
)
