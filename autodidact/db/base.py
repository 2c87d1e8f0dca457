"""SQLAlchemy declarative base and model imports for Alembic."""
from autodidact.db.session import Base

# Import all models so Alembic can see them
from autodidact.models.answer import Answer  # noqa: F401
from autodidact.models.community import CommunityQuestion  # noqa: F401
from autodidact.models.practice_session import PracticeSession  # noqa: F401
from autodidact.models.question import Question  # noqa: F401
from autodidact.models.user import User  # noqa: F401
from autodidact.models.visitor import QuestionView, Visitor  # noqa: F401

__all__ = [
    "Base",
    "User",
    "Visitor",
    "QuestionView",
    "Question",
    "Answer",
    "PracticeSession",
    "CommunityQuestion",
]
