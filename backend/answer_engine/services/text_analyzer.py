import re

from .heuristics import HeuristicResult

MIN_TECHNICAL_LENGTH = 50
DETAILED_TECHNICAL_LENGTH = 150
MIN_BEHAVIORAL_LENGTH = 100

_TECHNICAL_TERMS = re.compile(
    r"\b(algorithm|database|API|framework|library|function|variable|array|object"
    r"|server|client|HTTP|JSON|SQL)\b",
    re.IGNORECASE,
)
_EXAMPLES = re.compile(r"\b(example|instance|such as|like|for example)\b", re.IGNORECASE)
_EXPLANATION = re.compile(r"\b(because|therefore|thus|since|reason|due to)\b", re.IGNORECASE)

# STAR signals: situation, action, result.
_SITUATION = re.compile(r"\b(project|work|team|experience|situation|when|during)\b", re.IGNORECASE)
_ACTION = re.compile(
    r"\b(I did|I implemented|I decided|I approached|I solved|I learned)\b",
    re.IGNORECASE,
)
_RESULT = re.compile(r"\b(result|outcome|success|completed|achieved|learned)\b", re.IGNORECASE)


def analyze_technical(response_text: str | None) -> HeuristicResult:
    text = response_text or ""
    if len(text) < MIN_TECHNICAL_LENGTH:
        return HeuristicResult(
            score=10,
            strengths=["Provided brief response"],
            improvements=[
                "Provide detailed technical explanation",
                "Include specific examples",
                "Demonstrate deeper understanding",
            ],
        )

    has_technical_terms = bool(_TECHNICAL_TERMS.search(text))
    score = 50 if len(text) >= DETAILED_TECHNICAL_LENGTH else 20
    if has_technical_terms:
        score += 15
    if _EXAMPLES.search(text):
        score += 10
    if _EXPLANATION.search(text):
        score += 10
    score = min(100, score)

    if has_technical_terms:
        strengths = ["Used relevant technical terminology", "Attempted to explain concepts"]
    else:
        strengths = ["Provided some explanation"]

    return HeuristicResult(
        score=score,
        strengths=strengths,
        improvements=[
            "Provide more detailed explanations",
            "Include practical examples",
            "Use technical terminology correctly",
        ],
    )


def star_signals(response_text: str) -> tuple[bool, bool, bool]:
    return (
        bool(_SITUATION.search(response_text)),
        bool(_ACTION.search(response_text)),
        bool(_RESULT.search(response_text)),
    )


def analyze_behavioral(response_text: str | None) -> HeuristicResult:
    text = response_text or ""
    if len(text) < MIN_BEHAVIORAL_LENGTH:
        return HeuristicResult(
            score=15,
            strengths=["Provided response"],
            improvements=[
                "Use STAR method (Situation, Task, Action, Result)",
                "Provide specific examples",
                "Explain learning outcomes",
            ],
        )

    star_count = sum(star_signals(text))
    structured = star_count >= 2

    return HeuristicResult(
        score=60 if structured else 35,
        strengths=(
            ["Used structured approach", "Provided specific example"]
            if structured
            else ["Provided personal example"]
        ),
        improvements=[
            "Structure response using STAR method",
            "Be more specific about actions",
            "Explain what you learned",
        ],
    )
