"""Pydantic schemas for community-posted questions."""
from datetime import datetime
from typing import Annotated

from pydantic import StringConstraints

from autodidact.schemas.base import CamelSchema
from autodidact.schemas.question import Difficulty

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CommunityQuestionCreateSchema(CamelSchema):
    title: RequiredText
    description: RequiredText
    role: RequiredText
    topic: RequiredText
    company: str | None = None
    difficulty: Difficulty
    is_anonymous: bool = False


class CommunityQuestionOutSchema(CamelSchema):
    id: int
    title: str
    description: str
    role: str
    topic: str
    company: str | None = None
    difficulty: Difficulty
    is_anonymous: bool
    author_id: int | None = None
    created_at: datetime | None = None
