"""Answer scoring: word-overlap score and canned coaching lists.

Stands in for the AI reviewer. The output is deterministic so the same answer
always gets the same score.
"""
import math
from dataclasses import dataclass, field

from autodidact.schemas.question import AnswerFeedbackSchema

MIN_SCORE = 1
MAX_SCORE = 10

STAR_KEYWORDS = ("situation", "task", "action", "result")


@dataclass
class FeedbackResult:
    score: int
    feedback: AnswerFeedbackSchema
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


def overlap_score(user_answer: str, optimal_answer: str) -> int:
    """Score 1..10 from how many answer words appear in (or contain) a reference word."""
    user_words = user_answer.lower().split()
    optimal_words = optimal_answer.lower().split()
    if not optimal_words:
        return MIN_SCORE

    common = [w for w in user_words if any(o in w or w in o for o in optimal_words)]
    raw = math.floor(len(common) / len(optimal_words) * 10 + 0.5)
    return min(MAX_SCORE, max(MIN_SCORE, raw))


def _overall(score: int) -> str:
    if score >= 7:
        return "Strong response with good structure"
    if score >= 5:
        return "Good foundation, could use more detail"
    return "Needs significant improvement in detail and structure"


def _analysis(score: int) -> str:
    if score >= 7:
        tail = "You demonstrated good understanding and provided relevant examples."
    elif score >= 5:
        tail = "You have the right idea but could benefit from more specific details."
    else:
        tail = "Consider restructuring your response with more concrete examples."
    return f"Your response scored {score}/10. {tail}"


def generate_feedback(user_answer: str, optimal_answer: str) -> FeedbackResult:
    score = overlap_score(user_answer, optimal_answer)
    lowered = user_answer.lower()

    strengths = []
    improvements = []
    suggestions = []

    if len(user_answer) > 100:
        strengths.append("Good detail and comprehensive response")
    if any(word in lowered for word in STAR_KEYWORDS):
        strengths.append("Used structured approach (STAR method)")

    if score < 6:
        improvements.append("Provide more specific examples and details")
        improvements.append("Focus on quantifiable outcomes and results")
    if len(user_answer) < 150:
        improvements.append("Expand your answer with more detail")

    if "result" not in lowered and "outcome" not in lowered:
        suggestions.append("Always include the results and impact of your actions")
    suggestions.append("Consider using the STAR method for behavioral questions")
    suggestions.append("Include specific metrics and timelines when possible")

    return FeedbackResult(
        score=score,
        feedback=AnswerFeedbackSchema(overall=_overall(score), detailed_analysis=_analysis(score)),
        strengths=strengths or ["Clear communication"],
        improvements=improvements or ["Consider adding more specific examples"],
        suggestions=suggestions,
    )
