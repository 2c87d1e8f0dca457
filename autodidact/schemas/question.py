"""Pydantic schemas for catalog questions, answers and feedback."""
from datetime import datetime
from typing import Literal

from pydantic import Field

from autodidact.schemas.base import CamelSchema

Difficulty = Literal["easy", "medium", "hard"]


class QuestionOutSchema(CamelSchema):
    id: int
    title: str
    description: str | None = None
    category: str
    topic: str
    company: str | None = None
    difficulty: Difficulty
    time_limit: int  # minutes
    tips: list[str] | None = None
    optimal_answer: str
    is_popular: bool = False
    created_at: datetime | None = None


class AnswerFeedbackSchema(CamelSchema):
    """Structured feedback payload; bump ``version`` when the shape changes."""

    version: Literal[1] = 1
    overall: str
    detailed_analysis: str


class AnswerSubmitSchema(CamelSchema):
    question_id: int
    user_answer: str = Field(min_length=1)
    session_id: int | None = None


class AnswerOutSchema(CamelSchema):
    id: int
    question_id: int
    user_answer: str
    score: int | None = None
    feedback: AnswerFeedbackSchema | None = None
    strengths: list[str] | None = None
    improvements: list[str] | None = None
    suggestions: list[str] | None = None
    created_at: datetime | None = None


class QuestionValidateSchema(CamelSchema):
    question: str = ""


class QuestionValidationSchema(CamelSchema):
    is_valid: bool
    feedback: str | None = None


class AnswerAnalyzeSchema(CamelSchema):
    """A user-written question with an answer to it; no catalog record involved."""

    question: str = ""
    user_answer: str = ""
    topic: str = "Technical Program Management"


class AnswerAnalysisSchema(CamelSchema):
    optimal_answer: str
    user_score: int
    strengths: list[str]
    improvements: list[str]
    suggestions: list[str]
    detailed_feedback: str
    reference_question_id: int | None = None
