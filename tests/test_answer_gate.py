# tests/test_answer_gate.py
import pytest

from backend.answer_engine.question_types import QuestionType
from backend.answer_engine.services.answer_gate import is_valid_answer, strip_code_comments


def test_rejects_dont_know():
    assert is_valid_answer("I don't know", "behavioral") is False


def test_accepts_substantive_behavioral_answer():
    text = "I designed and implemented a caching layer that reduced latency by forty percent"
    assert is_valid_answer(text, "behavioral") is True


@pytest.mark.parametrize("text", [None, "", "   ", "too short", "nineteen characters"])
def test_rejects_short_or_empty_text(text):
    assert is_valid_answer(text, "technical") is False


def test_rejects_fewer_than_five_words():
    assert is_valid_answer("alpha beta gamma delta", "technical") is False


def test_rejects_repetitive_text():
    assert is_valid_answer("very very very very good answer", "behavioral") is False


def test_accepts_word_at_exactly_half_of_the_text():
    assert is_valid_answer("yes yes yes no maybe okay", "behavioral") is True


def test_denylisted_phrase_is_rejected_regardless_of_case():
    assert is_valid_answer("  I HAVE NO IDEA  ", "technical") is False


def test_coding_answer_judged_on_code_not_text():
    prose = "I would loop over the list and keep track of the maximum value seen so far."
    assert is_valid_answer(prose, "coding") is False
    assert is_valid_answer(prose, "coding", code="x = compute(values) + 1") is True


@pytest.mark.parametrize("question_type", ["coding", "problem-solving", "technical_coding", QuestionType.CODING])
def test_coding_labels_use_code_gate(question_type):
    assert is_valid_answer("", question_type, code="def add(a, b): return a + b") is True


@pytest.mark.parametrize(
    "code",
    [
        None,
        "",
        "   \n\t ",
        "x = 1",
        "// just a comment that is long enough to pass",
        "# python comment that is quite long here",
        "/* a block comment\n spanning lines */",
        "return something useful here",
    ],
)
def test_rejects_trivial_code(code):
    assert is_valid_answer("", "coding", code=code) is False


def test_strip_code_comments_keeps_code():
    code = "int total = 0; // running sum\n/* note */ total += 5; # tally"
    assert strip_code_comments(code) == "int total = 0; \n total += 5;"
