from ..schemas import CategoryScores, OverallFeedback, SessionSummary
from .heuristics import round_half_up

ALL_SKIPPED_READINESS = "Not Ready for Intern Role"


def readiness_level(score: float) -> str:
    if score >= 75:
        return "Ready for Intern Position"
    if score >= 60:
        return "Nearly Ready"
    if score >= 45:
        return "Needs Development"
    return "Not Ready Yet"


def all_skipped_feedback(total_questions: int) -> OverallFeedback:
    return OverallFeedback(
        readiness_level=ALL_SKIPPED_READINESS,
        strengths=["Completed interview session"],
        improvements=["Answer questions instead of skipping", "Prepare thoroughly", "Build confidence"],
        recommendations=["Study fundamentals", "Practice coding", "Work on projects"],
        general_feedback=(
            f"All {total_questions} questions were skipped, indicating lack of preparation."
        ),
        category_scores=CategoryScores(),
    )


def category_scores(summary: SessionSummary) -> CategoryScores:
    # Categories without answered questions report 0 here, not the smoothed mean.
    percentages = summary.category_percentages
    breakdown = summary.breakdown
    return CategoryScores(
        technical_knowledge=percentages.technical if breakdown.technical_questions else 0,
        coding_ability=percentages.coding if breakdown.coding_questions else 0,
        behavioral_skills=percentages.behavioral if breakdown.behavioral_questions else 0,
        communication=round_half_up(percentages.communication / 10),
    )


def overall_feedback(summary: SessionSummary) -> OverallFeedback:
    """Deterministic session-level feedback built from an aggregated summary.

    Sessions where nothing was answered get the fixed all-skipped record.
    """
    breakdown = summary.breakdown
    if breakdown.answered_questions == 0:
        return all_skipped_feedback(breakdown.total_questions)

    return OverallFeedback(
        readiness_level=readiness_level(summary.score),
        strengths=["Completed all interview questions"],
        improvements=["Focus on technical fundamentals", "Practice explaining concepts clearly"],
        recommendations=["Build personal projects", "Practice coding problems"],
        general_feedback=(
            f"Completed {breakdown.answered_questions} questions with "
            f"{summary.score:.1f}% average."
        ),
        category_scores=category_scores(summary),
    )
