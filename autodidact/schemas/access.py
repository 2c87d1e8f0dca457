"""Pydantic schemas for identity and free-tier access state."""
from datetime import datetime

from pydantic import Field

from autodidact.schemas.base import CamelSchema


class AccessStatusSchema(CamelSchema):
    is_authenticated: bool
    questions_viewed: int = Field(ge=0)
    questions_remaining: int = Field(ge=0)
    requires_auth: bool


class UserOutSchema(CamelSchema):
    id: int | str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    questions_viewed: int = 0
    created_at: datetime | None = None


class RegisterSchema(CamelSchema):
    email: str
    password: str
    first_name: str | None = None
    last_name: str | None = None


class LoginSchema(CamelSchema):
    email: str
    password: str


class ProfileUpdateSchema(CamelSchema):
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class ProfileUpdateResultSchema(CamelSchema):
    success: bool = True
    message: str
    user: UserOutSchema
