"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "KeywordQt Teacher Console"
BOARD_URL_PLACEHOLDER: str = "http://<teacher-ip>:8000/"
BOARD_REFRESH_INTERVAL_MS: int = 1000

PLACEHOLDER_KEYWORD: str = "e.g. INTERNET"
PLACEHOLDER_ROSTER: str = "Paste student names, one per line or separated by commas."
PLACEHOLDER_QUESTION: str = "Question text (supports Markdown)."

SETUP_GENERATE_BUTTON: str = "Generate Questions with AI"
SETUP_REGENERATE_BUTTON: str = "Regenerate with AI"
SETUP_GENERATING_BUTTON: str = "Generating…"
SETUP_REFERENCE_BUTTON: str = "Attach Reference Document"
SETUP_IMPORT_BUTTON: str = "Import Questions"
SETUP_EXPORT_BUTTON: str = "Save Questions to File"
SETUP_START_BUTTON: str = "Start Game"

BOARD_SOLVE_BUTTON: str = "Solve the Keyword!"
BOARD_RESET_BUTTON: str = "Play Again"
BOARD_HOME_BUTTON: str = "Back to Setup"
BOARD_BLIND_BAG_BUTTON: str = "Blind Bag"
BOARD_INSTRUCTIONS: str = (
    "Click a numbered tile to answer its question. Each correct answer reveals one letter. "
    "When every letter is open, press Solve to put the keyword in order."
)

BLIND_BAG_TITLE: str = "Who will answer?"
BLIND_BAG_SPIN_AGAIN: str = "Spin Again"
BLIND_BAG_SPINNING: str = "Picking…"
BLIND_BAG_EMPTY_MESSAGE: str = "The student list is empty!"
BLIND_BAG_REMAINING_TEMPLATE: str = "Remaining: {count}"

QUESTION_DIALOG_CORRECT: str = "Correct!"
QUESTION_DIALOG_WRONG: str = "Not quite, try another option."

REFERENCE_DIALOG_TITLE: str = "Select reference document"
REFERENCE_FILE_FILTER: str = "Documents (*.pdf *.docx *.txt *.md *.png *.jpg *.jpeg *.webp);;All files (*.*)"
IMPORT_DIALOG_TITLE: str = "Select question file"
IMPORT_FILE_FILTER: str = "Question files (*.txt);;All files (*.*)"
EXPORT_DIALOG_TITLE: str = "Save questions to file"
EXPORT_FILE_FILTER: str = "Question files (*.txt);;All files (*.*)"

NO_KEYWORD_MESSAGE: str = "Please enter a keyword first."
NO_QUESTIONS_MESSAGE: str = "Please generate or import questions first."
