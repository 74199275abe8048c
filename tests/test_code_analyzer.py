# tests/test_code_analyzer.py
import pytest

from backend.answer_engine.question_types import ResponseType
from backend.answer_engine.schemas import ExecutionResult
from backend.answer_engine.services.code_analyzer import (
    analyze_code,
    analyze_code_quality,
    analyze_execution,
    check_basic_syntax,
)

LARGEST_NUMBER_JS = """function findLargest(numbers) {
  let max = numbers[0];
  for (let i = 1; i < numbers.length; i++) {
    if (numbers[i] > max) max = numbers[i];
  }
  return max;
}"""


def test_all_signals_detected_for_complete_function():
    signals = analyze_code_quality(LARGEST_NUMBER_JS)
    assert signals.has_basic_structure
    assert signals.has_control_flow
    assert signals.has_return_statement
    assert signals.has_variables
    assert signals.has_logic
    assert signals.syntax_errors == []


def test_complete_function_without_execution_scores_95():
    result = analyze_code(LARGEST_NUMBER_JS)
    assert result.score == 95
    assert result.response_type is ResponseType.PERFECTLY_RELEVANT
    assert "Code has correct basic syntax" in result.strengths
    assert "Ensure code produces expected output" in result.improvements


def test_successful_execution_caps_score_at_100():
    result = analyze_code(LARGEST_NUMBER_JS, execution_result=ExecutionResult(output="9\n"))
    assert result.score == 100
    assert "Code executes successfully" in result.strengths
    assert "Ensure code produces expected output" not in result.improvements


def test_explanation_bonus_requires_more_than_50_characters():
    short_note = "Loops once."
    long_note = "I track the running maximum in a single pass so the solution is linear time."
    assert analyze_code(LARGEST_NUMBER_JS, short_note).score == 95
    assert analyze_code(LARGEST_NUMBER_JS, long_note).score == 100


def test_execution_error_cancels_success_bonus():
    execution = ExecutionResult(output="9", error="ReferenceError: max is not defined")
    result = analyze_code(LARGEST_NUMBER_JS, execution_result=execution)
    assert result.score == 95
    assert "Debug and fix runtime errors" in result.improvements
    assert "Code executes successfully" not in result.strengths


def test_unbalanced_snippet_scores_base_only():
    result = analyze_code("total(a, b, c")
    assert result.score == 20
    assert result.response_type is ResponseType.COMPLETELY_OFF_TOPIC
    assert result.strengths == ["Made an attempt to write code"]
    assert result.improvements == [
        "Use proper function or class structure",
        "Add logical control flow (if/else, loops)",
        "Fix syntax errors: Unmatched parentheses",
        "Ensure code produces expected output",
        "Add comments to explain your logic",
        "Test your solution with different inputs",
    ]


@pytest.mark.parametrize("code", [None, "", "   ", "x=1", "  return 1  "])
def test_degenerate_code_short_circuits(code):
    result = analyze_code(code, "A long explanation that would otherwise earn the prose bonus here.")
    assert result.score == 5
    assert result.strengths == ["Submitted response"]
    assert result.improvements[0] == "Must provide actual code"
    assert result.response_type is ResponseType.COMPLETELY_OFF_TOPIC


def test_generic_improvements_always_appended():
    result = analyze_code(LARGEST_NUMBER_JS, execution_result=ExecutionResult(output="9"))
    assert result.improvements[-2:] == [
        "Add comments to explain your logic",
        "Test your solution with different inputs",
    ]


@pytest.mark.parametrize(
    "code, expected",
    [
        ("{()}", []),
        ("{(}", ["Unmatched parentheses"]),
        ("{{)", ["Unmatched braces", "Unmatched parentheses"]),
        ("{}}", ["Unmatched braces"]),
    ],
)
def test_check_basic_syntax(code, expected):
    assert check_basic_syntax(code) == expected


def test_analyze_execution_signals():
    assert analyze_execution(None).succeeded is False
    assert analyze_execution(ExecutionResult(output="   ")).has_output is False
    assert analyze_execution(ExecutionResult(output="ok", error="  ")).succeeded is True
    assert analyze_execution(ExecutionResult(error="boom")).has_error is True
