"""Questions written by the user: a prompt check and answer analysis.

There is no catalog record behind a custom question, so analysis borrows the
optimal answer of the closest catalog question and scores against that.
"""
from collections.abc import Iterable

from autodidact.models.question import Question
from autodidact.schemas.question import AnswerAnalysisSchema, QuestionValidationSchema
from autodidact.services.feedback import MIN_SCORE, generate_feedback, overlap_score

MIN_QUESTION_LENGTH = 10
MIN_ANALYZED_ANSWER_LENGTH = 50
DEFAULT_CUSTOM_TOPIC = "Technical Program Management"

OPEN_ENDED_OPENERS = frozenset(
    {"how", "what", "why", "which", "describe", "tell", "walk", "explain", "design", "imagine", "suppose", "give"}
)
CLOSED_OPENERS = frozenset({"is", "are", "do", "does", "did", "can", "could", "would", "should", "have", "has"})


def validate_question(question: str) -> QuestionValidationSchema:
    text = question.strip()
    first = text.split()[0].lower().strip(",:") if text else ""

    if first in OPEN_ENDED_OPENERS:
        return QuestionValidationSchema(
            is_valid=True,
            feedback="Open-ended prompt that lets the candidate walk through their reasoning.",
        )
    if first in CLOSED_OPENERS or text.endswith("?"):
        return QuestionValidationSchema(
            is_valid=True,
            feedback="Consider rephrasing as an open-ended question (\"How would you...\") to draw out more detail.",
        )
    return QuestionValidationSchema(
        is_valid=False,
        feedback="Phrase this as a question or prompt, e.g. \"Tell me about a time...\" or \"How would you...\".",
    )


def closest_question(question: str, candidates: Iterable[Question]) -> Question | None:
    """Catalog question whose title and description best overlap ``question``; None if nothing overlaps."""
    best, best_score = None, MIN_SCORE
    for candidate in candidates:
        score = overlap_score(question, f"{candidate.title} {candidate.description or ''}")
        if score > best_score:
            best, best_score = candidate, score
    return best


def analyze_answer(question: str, user_answer: str, reference: Question | None) -> AnswerAnalysisSchema:
    # without a reference the question text itself is the only yardstick
    optimal = reference.optimal_answer if reference is not None else question
    result = generate_feedback(user_answer, optimal)
    return AnswerAnalysisSchema(
        optimal_answer=optimal,
        user_score=result.score,
        strengths=result.strengths,
        improvements=result.improvements,
        suggestions=result.suggestions,
        detailed_feedback=result.feedback.detailed_analysis,
        reference_question_id=reference.id if reference is not None else None,
    )
