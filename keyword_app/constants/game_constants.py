"""Game-related constants shared across UI and core layers."""

OPTION_LABELS: tuple[str, ...] = ("A", "B", "C", "D")
ROSTER_SEPARATORS: str = "\n,;"
DEFAULT_QUESTION_FILE: str = "keyword_questions.txt"

BLIND_BAG_SPIN_STEPS: int = 25
BLIND_BAG_SPIN_INTERVAL_MS: int = 80
BOARD_MAX_COLUMNS: int = 6
CORRECT_ANSWER_CLOSE_DELAY_MS: int = 800
