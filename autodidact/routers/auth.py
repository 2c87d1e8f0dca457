"""Auth routes: access status, current user, register/login, demo sign-in, logout.

Session-based auth via a signed cookie; guests are tracked by a separate session cookie.
"""
from __future__ import annotations

import logging
import re
import secrets
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import RedirectResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from autodidact.core.config import get_settings
from autodidact.core.security import create_session_token, hash_password, verify_password
from autodidact.db.session import get_db
from autodidact.models.user import User
from autodidact.models.visitor import Visitor
from autodidact.routers.deps import (
    count_question_views,
    get_current_user_optional,
    get_or_create_visitor,
)
from autodidact.schemas.access import (
    AccessStatusSchema,
    LoginSchema,
    ProfileUpdateResultSchema,
    ProfileUpdateSchema,
    RegisterSchema,
    UserOutSchema,
)
from autodidact.services.access import compute_access_status
from autodidact.services.demo import DEMO_MARKER_VALUE, DEMO_USER_PROFILE, LOGGED_OUT_MARKER_VALUE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])
settings = get_settings()

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72  # bcrypt hard limit


def _normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def _set_auth_cookie(response: Response, user_id: int) -> None:
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=create_session_token(user_id),
        max_age=settings.auth_cookie_max_age,
        httponly=True,
        samesite="lax",
        path="/",
    )


def _user_out(user: User, questions_viewed: int) -> UserOutSchema:
    return UserOutSchema(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        profile_image_url=user.profile_image_url,
        questions_viewed=questions_viewed,
        created_at=user.created_at,
    )


@router.get("/auth/access-status", response_model=AccessStatusSchema)
async def access_status(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
    visitor: Annotated[Visitor, Depends(get_or_create_visitor)],
):
    """Free-tier state of the caller. The server's view count is the only source of truth."""
    viewed = await count_question_views(db, visitor)
    return compute_access_status(current_user is not None, viewed, settings.free_question_quota)


@router.get("/auth/user", response_model=UserOutSchema)
async def current_user_get(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
    visitor: Annotated[Visitor, Depends(get_or_create_visitor)],
):
    if current_user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return _user_out(current_user, await count_question_views(db, visitor))


@router.post("/auth/register", response_model=UserOutSchema)
async def register(
    request: Request,
    response: Response,
    body: RegisterSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Create user, carry over guest views, set auth cookie."""
    email_norm = _normalize_email(body.email)
    pwd = body.password or ""

    if not email_norm or not EMAIL_RE.match(email_norm):
        raise HTTPException(status_code=400, detail="Invalid email address")
    if len(pwd) < MIN_PASSWORD_LENGTH:
        raise HTTPException(status_code=400, detail="Password must be at least 8 characters")
    if len(pwd.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise HTTPException(status_code=400, detail="Password is too long")

    existing = await db.execute(select(User).where(User.email == email_norm))
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    user = User(
        email=email_norm,
        hashed_password=hash_password(pwd),
        first_name=body.first_name,
        last_name=body.last_name,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)

    # link guest views
    viewed = 0
    sid = request.cookies.get(settings.session_cookie_name)
    if sid:
        result = await db.execute(select(Visitor).where(Visitor.session_id == sid))
        visitor = result.scalar_one_or_none()
        if visitor is not None:
            visitor.user_id = user.id
            visitor.session_id = None
            await db.commit()
            viewed = await count_question_views(db, visitor)

    logger.info("Registered user %s", user.id)
    _set_auth_cookie(response, user.id)
    return _user_out(user, viewed)


@router.post("/auth/login", response_model=UserOutSchema)
async def login(
    response: Response,
    body: LoginSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Authenticate and set auth cookie."""
    result = await db.execute(select(User).where(User.email == _normalize_email(body.email)))
    user = result.scalar_one_or_none()
    if not user or not verify_password(body.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    visitor_result = await db.execute(select(Visitor).where(Visitor.user_id == user.id))
    visitor = visitor_result.scalar_one_or_none()
    viewed = await count_question_views(db, visitor) if visitor else 0

    _set_auth_cookie(response, user.id)
    return _user_out(user, viewed)


@router.put("/users/profile", response_model=ProfileUpdateResultSchema)
async def update_profile(
    body: ProfileUpdateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
    visitor: Annotated[Visitor, Depends(get_or_create_visitor)],
):
    """Update name and avatar of the signed-in user. Fields left out are unchanged."""
    if current_user is None:
        raise HTTPException(status_code=400, detail="User ID is required")

    for field, value in body.model_dump(exclude_unset=True).items():
        # blank clears the field
        setattr(current_user, field, (value or "").strip() or None)
    await db.commit()
    await db.refresh(current_user)

    logger.info("Updated profile of user %s", current_user.id)
    return ProfileUpdateResultSchema(
        message="Profile updated successfully",
        user=_user_out(current_user, await count_question_views(db, visitor)),
    )


@router.get("/login", response_class=RedirectResponse)
async def demo_login(db: Annotated[AsyncSession, Depends(get_db)]):
    """Sign in as the shared demo account and bounce back with the demo marker."""
    result = await db.execute(select(User).where(User.email == DEMO_USER_PROFILE["email"]))
    user = result.scalar_one_or_none()
    if user is None:
        # random password: the demo account is only reachable through this route
        user = User(hashed_password=hash_password(secrets.token_urlsafe(32)), **DEMO_USER_PROFILE)
        db.add(user)
        await db.commit()
        await db.refresh(user)
        logger.info("Created demo user %s", user.id)

    response = RedirectResponse(f"/?message={DEMO_MARKER_VALUE}", status_code=303)
    _set_auth_cookie(response, user.id)
    return response


@router.get("/logout", response_class=RedirectResponse)
async def logout():
    """Clear auth cookie and redirect to home."""
    response = RedirectResponse(f"/?message={LOGGED_OUT_MARKER_VALUE}", status_code=303)
    # path must match the one used in set_cookie()
    response.delete_cookie(settings.auth_cookie_name, path="/")
    return response
