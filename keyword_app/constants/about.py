"""Static metadata describing KeywordQt."""

APP_NAME = "KeywordQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "KeywordQt is a classroom 'secret keyword' game built with Qt and FastAPI. "
    "Each letter of the keyword hides behind a multiple-choice question; answer "
    "them all to reveal the scrambled letters, then solve the keyword."
)

HELP_TEXT = (
    "Enter a keyword and a grade, then generate one question per letter with AI "
    "or import a prepared question file. Paste the class list to use the blind bag.\n\n"
    "Question files use this format:\n\n"
    "KEYWORD: AI\n"
    "GRADE: 10\n\n"
    "Q: Which device executes program instructions?\n"
    "A: Central Processing Unit\nB: Monitor\nC: Keyboard\nD: Printer\n"
    "CORRECT: A\n\n"
    "Q: What does 'input' mean for a computer?\n"
    "A: Printing\nB: Data entering the computer\nC: Shutting down\nD: Charging\n"
    "CORRECT: B"
)
