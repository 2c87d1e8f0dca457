"""Request dependencies: current user, visitor identity and view tracking."""
import logging
import uuid
from typing import Annotated

from fastapi import Depends, Request, Response
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from autodidact.core.config import get_settings
from autodidact.core.security import verify_session_token
from autodidact.db.session import get_db
from autodidact.models.user import User
from autodidact.models.visitor import QuestionView, Visitor

logger = logging.getLogger(__name__)
settings = get_settings()


async def get_current_user_optional(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User | None:
    """Return current user if auth cookie is valid; else None."""
    user_id = verify_session_token(request.cookies.get(settings.auth_cookie_name))
    if user_id is None:
        return None
    return await db.get(User, user_id)


def get_or_create_session_id(request: Request) -> str:
    sid = request.cookies.get(settings.session_cookie_name)
    if not sid:
        sid = str(uuid.uuid4())
    return sid


def _ensure_session_cookie(request: Request, response: Response, visitor: Visitor) -> None:
    if visitor.session_id and request.cookies.get(settings.session_cookie_name) != visitor.session_id:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=visitor.session_id,
            max_age=settings.session_cookie_max_age,
            httponly=True,
            samesite="lax",
        )


async def _insert_visitor(db: AsyncSession, visitor: Visitor, lookup) -> Visitor:
    """Insert ``visitor``, or return the row a concurrent request inserted first."""
    db.add(visitor)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        return (await db.execute(lookup)).scalar_one()
    await db.refresh(visitor)
    return visitor


async def get_or_create_visitor(
    request: Request,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
) -> Visitor:
    if current_user:
        lookup = select(Visitor).where(Visitor.user_id == current_user.id)
        visitor = (await db.execute(lookup)).scalar_one_or_none()
        if visitor is None:
            visitor = await _insert_visitor(db, Visitor(user_id=current_user.id, session_id=None), lookup)
            # a lost insert race rolls back and expires the user
            await db.refresh(current_user)
        return visitor

    sid = get_or_create_session_id(request)
    lookup = select(Visitor).where(Visitor.session_id == sid)
    visitor = (await db.execute(lookup)).scalar_one_or_none()
    if visitor is None:
        visitor = await _insert_visitor(db, Visitor(session_id=sid), lookup)
        logger.debug("New guest visitor %s", visitor.id)

    _ensure_session_cookie(request, response, visitor)
    return visitor


async def count_question_views(db: AsyncSession, visitor: Visitor) -> int:
    result = await db.execute(
        select(func.count(QuestionView.id)).where(QuestionView.visitor_id == visitor.id)
    )
    return result.scalar_one()


async def record_question_view(db: AsyncSession, visitor: Visitor, question_id: int) -> bool:
    """Record a distinct view; returns False when this visitor already saw the question."""
    result = await db.execute(
        select(QuestionView.id).where(
            QuestionView.visitor_id == visitor.id,
            QuestionView.question_id == question_id,
        )
    )
    if result.scalar_one_or_none() is not None:
        return False

    db.add(QuestionView(visitor_id=visitor.id, question_id=question_id))
    try:
        await db.commit()
    except IntegrityError:
        # concurrent request for the same question won the insert
        await db.rollback()
        return False
    return True
