# tests/test_sanitization.py
import pytest

from backend.answer_engine.config import settings
from backend.answer_engine.services.sanitization import sanitize_input, validate_language


@pytest.mark.parametrize("value", [None, 42, ["text"], {"a": "b"}])
def test_non_strings_become_empty(value):
    assert sanitize_input(value) == ""


def test_control_characters_are_removed_but_newlines_kept():
    assert sanitize_input("  line one\x00\nline\ttwo\x7f  ") == "line one\nline\ttwo"


def test_truncates_to_configured_length(monkeypatch):
    monkeypatch.setattr(settings, "max_input_length", 5)
    assert sanitize_input("abcdefgh") == "abcde"
    assert sanitize_input("abcdefgh", max_length=3) == "abc"


@pytest.mark.parametrize("value, expected", [(" python ", "python"), ("", None), ("   ", None), (3, None)])
def test_validate_language(value, expected):
    assert validate_language(value) == expected
