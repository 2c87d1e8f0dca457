"""Pydantic schemas for practice sessions."""
from datetime import datetime

from pydantic import Field

from autodidact.schemas.base import CamelSchema


class SessionCreateSchema(CamelSchema):
    topic: str = Field(min_length=1)
    category: str = Field(min_length=1)
    questions_count: int = Field(ge=1)


class SessionOutSchema(CamelSchema):
    id: int
    topic: str
    category: str
    questions_count: int
    completed_count: int = 0
    current_question_id: int | None = None
    created_at: datetime | None = None
