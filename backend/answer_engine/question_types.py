import re
from enum import Enum
from typing import Any


class QuestionType(str, Enum):
    BEHAVIORAL = "behavioral"
    TECHNICAL = "technical"
    CODING = "coding"


class ResponseType(str, Enum):
    """Relevance category of an answer, ordered from worst to best."""

    COMPLETELY_OFF_TOPIC = "completely-off-topic"
    MOSTLY_IRRELEVANT = "mostly-irrelevant"
    PARTIALLY_RELEVANT = "partially-relevant"
    MOSTLY_RELEVANT = "mostly-relevant"
    PERFECTLY_RELEVANT = "perfectly-relevant"

    @classmethod
    def from_score(cls, score: int | float) -> "ResponseType":
        if score >= 85:
            return cls.PERFECTLY_RELEVANT
        if score >= 65:
            return cls.MOSTLY_RELEVANT
        if score >= 45:
            return cls.PARTIALLY_RELEVANT
        if score >= 25:
            return cls.MOSTLY_IRRELEVANT
        return cls.COMPLETELY_OFF_TOPIC

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)


QUESTION_TYPE_ALIASES: dict[str, QuestionType] = {
    "behavioral": QuestionType.BEHAVIORAL,
    "behaviour": QuestionType.BEHAVIORAL,
    "behavioural": QuestionType.BEHAVIORAL,
    "technical": QuestionType.TECHNICAL,
    "tech": QuestionType.TECHNICAL,
    "system_design": QuestionType.TECHNICAL,
    "system-design": QuestionType.TECHNICAL,
    "design": QuestionType.TECHNICAL,
    "coding": QuestionType.CODING,
    "code": QuestionType.CODING,
    "programming": QuestionType.CODING,
    "problem-solving": QuestionType.CODING,
    "algorithm": QuestionType.CODING,
}

DEFAULT_QUESTION_TYPE = QuestionType.TECHNICAL

# Raw labels the answer gate treats as code submissions.
CODING_QUESTION_LABELS = frozenset({"coding", "technical_coding", "problem-solving"})

_TYPE_CLEANUP_PATTERN = re.compile(r"[^a-z_-]")


def normalize_question_type(value: Any) -> QuestionType:
    if isinstance(value, QuestionType):
        return value
    if not value or not isinstance(value, str):
        return DEFAULT_QUESTION_TYPE

    key = _TYPE_CLEANUP_PATTERN.sub("", value.lower())
    return QUESTION_TYPE_ALIASES.get(key, DEFAULT_QUESTION_TYPE)


def is_coding_question_type(value: Any) -> bool:
    if isinstance(value, QuestionType):
        return value is QuestionType.CODING
    return isinstance(value, str) and value in CODING_QUESTION_LABELS
