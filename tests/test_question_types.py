# tests/test_question_types.py
import pytest

from backend.answer_engine.question_types import (
    QuestionType,
    ResponseType,
    is_coding_question_type,
    normalize_question_type,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("behavioral", QuestionType.BEHAVIORAL),
        ("Behaviour", QuestionType.BEHAVIORAL),
        ("behavioural", QuestionType.BEHAVIORAL),
        ("tech", QuestionType.TECHNICAL),
        ("System-Design", QuestionType.TECHNICAL),
        ("system_design", QuestionType.TECHNICAL),
        ("code", QuestionType.CODING),
        ("programming", QuestionType.CODING),
        ("problem-solving", QuestionType.CODING),
        ("Algorithm!", QuestionType.CODING),
        (QuestionType.CODING, QuestionType.CODING),
    ],
)
def test_normalize_question_type_synonyms(raw, expected):
    assert normalize_question_type(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "trivia", 42, ["coding"]])
def test_unrecognized_question_types_default_to_technical(raw):
    assert normalize_question_type(raw) is QuestionType.TECHNICAL


def test_is_coding_question_type():
    assert is_coding_question_type("coding")
    assert is_coding_question_type("technical_coding")
    assert is_coding_question_type("problem-solving")
    assert is_coding_question_type(QuestionType.CODING)
    assert not is_coding_question_type("technical")
    assert not is_coding_question_type(QuestionType.BEHAVIORAL)
    assert not is_coding_question_type(None)


@pytest.mark.parametrize(
    "score, expected",
    [
        (100, ResponseType.PERFECTLY_RELEVANT),
        (85, ResponseType.PERFECTLY_RELEVANT),
        (84, ResponseType.MOSTLY_RELEVANT),
        (65, ResponseType.MOSTLY_RELEVANT),
        (64, ResponseType.PARTIALLY_RELEVANT),
        (45, ResponseType.PARTIALLY_RELEVANT),
        (44, ResponseType.MOSTLY_IRRELEVANT),
        (25, ResponseType.MOSTLY_IRRELEVANT),
        (24, ResponseType.COMPLETELY_OFF_TOPIC),
        (0, ResponseType.COMPLETELY_OFF_TOPIC),
    ],
)
def test_response_type_step_function(score, expected):
    assert ResponseType.from_score(score) is expected


def test_response_types_are_ordered_by_score():
    ranks = [ResponseType.from_score(score).rank for score in range(0, 101)]
    assert ranks == sorted(ranks)
    assert ResponseType.PERFECTLY_RELEVANT.value == "perfectly-relevant"
