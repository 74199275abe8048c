import re
from collections import Counter
from typing import Any

from ..question_types import is_coding_question_type

MIN_CODE_LENGTH = 20
MIN_TEXT_LENGTH = 20
MIN_WORD_COUNT = 5
REPEATED_WORD_THRESHOLD = 0.5

MEANINGLESS_RESPONSES = frozenset(
    {
        "i don't know",
        "no idea",
        "not sure",
        "pass",
        "skip",
        "i have no idea",
        "don't know",
        "no clue",
        "nothing",
    }
)

_BLOCK_OR_LINE_COMMENT = re.compile(r"/\*[\s\S]*?\*/|//.*$", re.MULTILINE)
_HASH_COMMENT = re.compile(r"#.*$", re.MULTILINE)
_MEANINGFUL_CODE = re.compile(r"[{};()=+\-*/><%]")
_WHITESPACE = re.compile(r"\s+")


def strip_code_comments(code: str) -> str:
    without_c_style = _BLOCK_OR_LINE_COMMENT.sub("", code)
    return _HASH_COMMENT.sub("", without_c_style).strip()


def is_valid_code_answer(code: str | None) -> bool:
    if not code or not code.strip():
        return False

    if len(_WHITESPACE.sub(" ", code).strip()) < MIN_CODE_LENGTH:
        return False

    code_without_comments = strip_code_comments(code)
    if len(code_without_comments) < MIN_CODE_LENGTH:
        return False

    return bool(_MEANINGFUL_CODE.search(code_without_comments))


def is_valid_text_answer(response_text: str | None) -> bool:
    if not response_text or not response_text.strip():
        return False

    text = response_text.strip().lower()
    if len(text) < MIN_TEXT_LENGTH:
        return False

    words = text.split()
    if len(words) < MIN_WORD_COUNT:
        return False

    if text in MEANINGLESS_RESPONSES:
        return False

    most_common_count = Counter(words).most_common(1)[0][1]
    return most_common_count / len(words) <= REPEATED_WORD_THRESHOLD


def is_valid_answer(
    response_text: str | None,
    question_type: Any,
    code: str | None = None,
) -> bool:
    """Return True when a response is substantive enough to be scored.

    Coding questions are judged on the submitted code only; every other
    question type is judged on the prose answer.
    """
    if is_coding_question_type(question_type):
        return is_valid_code_answer(code)
    return is_valid_text_answer(response_text)
