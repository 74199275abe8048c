import logging
import re
from dataclasses import dataclass, field

from ..schemas import ExecutionResult
from .heuristics import HeuristicResult

logger = logging.getLogger(__name__)

MIN_ANALYZABLE_CODE_LENGTH = 10

_STRUCTURE = re.compile(r"function|def|class|public|void", re.IGNORECASE)
_CONTROL_FLOW = re.compile(r"if|else|for|while|switch", re.IGNORECASE)
_RETURN = re.compile(r"return", re.IGNORECASE)
_VARIABLES = re.compile(r"let|const|var|int|string|=")
_LOGIC_CHARS = re.compile(r"[{}();]")

BASE_SCORE = 20
SCORE_WEIGHTS = {
    "structure": 15,
    "control_flow": 15,
    "return_statement": 10,
    "variables": 10,
    "logic": 10,
    "clean_syntax": 15,
    "execution_success": 20,
    "explanation": 5,
}


@dataclass(frozen=True)
class CodeSignals:
    has_basic_structure: bool
    has_control_flow: bool
    has_return_statement: bool
    has_variables: bool
    has_logic: bool
    syntax_errors: list[str] = field(default_factory=list)
    length: int = 0


@dataclass(frozen=True)
class ExecutionSignals:
    has_output: bool = False
    has_error: bool = False
    output_length: int = 0

    @property
    def succeeded(self) -> bool:
        return self.has_output and not self.has_error


def check_basic_syntax(code: str) -> list[str]:
    errors: list[str] = []
    if code.count("{") != code.count("}"):
        errors.append("Unmatched braces")
    if code.count("(") != code.count(")"):
        errors.append("Unmatched parentheses")
    return errors


def analyze_code_quality(code: str) -> CodeSignals:
    return CodeSignals(
        has_basic_structure=bool(_STRUCTURE.search(code)),
        has_control_flow=bool(_CONTROL_FLOW.search(code)),
        has_return_statement=bool(_RETURN.search(code)),
        has_variables=bool(_VARIABLES.search(code)),
        has_logic=len(code) > 50 and bool(_LOGIC_CHARS.search(code)),
        syntax_errors=check_basic_syntax(code),
        length=len(code),
    )


def analyze_execution(execution_result: ExecutionResult | None) -> ExecutionSignals:
    if execution_result is None:
        return ExecutionSignals()

    output = execution_result.output or ""
    error = execution_result.error or ""
    return ExecutionSignals(
        has_output=bool(output.strip()),
        has_error=bool(error.strip()),
        output_length=len(output),
    )


def calculate_coding_score(
    signals: CodeSignals,
    execution: ExecutionSignals,
    response_text: str | None = None,
) -> int:
    score = BASE_SCORE
    if signals.has_basic_structure:
        score += SCORE_WEIGHTS["structure"]
    if signals.has_control_flow:
        score += SCORE_WEIGHTS["control_flow"]
    if signals.has_return_statement:
        score += SCORE_WEIGHTS["return_statement"]
    if signals.has_variables:
        score += SCORE_WEIGHTS["variables"]
    if signals.has_logic:
        score += SCORE_WEIGHTS["logic"]
    if not signals.syntax_errors:
        score += SCORE_WEIGHTS["clean_syntax"]
    if execution.succeeded:
        score += SCORE_WEIGHTS["execution_success"]
    if response_text and len(response_text) > 50:
        score += SCORE_WEIGHTS["explanation"]

    return min(100, score)


def coding_strengths(signals: CodeSignals, execution: ExecutionSignals) -> list[str]:
    strengths: list[str] = []
    if signals.has_basic_structure:
        strengths.append("Provided proper function structure")
    if signals.has_control_flow:
        strengths.append("Used appropriate control flow logic")
    if signals.has_return_statement:
        strengths.append("Included return statement")
    if not signals.syntax_errors:
        strengths.append("Code has correct basic syntax")
    if execution.succeeded:
        strengths.append("Code executes successfully")

    return strengths or ["Made an attempt to write code"]


def coding_improvements(signals: CodeSignals, execution: ExecutionSignals) -> list[str]:
    improvements: list[str] = []
    if not signals.has_basic_structure:
        improvements.append("Use proper function or class structure")
    if not signals.has_control_flow:
        improvements.append("Add logical control flow (if/else, loops)")
    if signals.syntax_errors:
        improvements.append("Fix syntax errors: " + ", ".join(signals.syntax_errors))
    if execution.has_error:
        improvements.append("Debug and fix runtime errors")
    if not execution.has_output:
        improvements.append("Ensure code produces expected output")

    improvements.append("Add comments to explain your logic")
    improvements.append("Test your solution with different inputs")
    return improvements


def analyze_code(
    code: str | None,
    response_text: str | None = None,
    execution_result: ExecutionResult | None = None,
) -> HeuristicResult:
    if not code or len(code.strip()) < MIN_ANALYZABLE_CODE_LENGTH:
        logger.debug("Code submission too short for analysis; using degenerate score.")
        return HeuristicResult(
            score=5,
            strengths=["Submitted response"],
            improvements=[
                "Must provide actual code",
                "Implement the required function",
                "Show problem-solving approach",
            ],
        )

    signals = analyze_code_quality(code)
    execution = analyze_execution(execution_result)
    score = calculate_coding_score(signals, execution, response_text)

    return HeuristicResult(
        score=score,
        strengths=coding_strengths(signals, execution),
        improvements=coding_improvements(signals, execution),
    )
