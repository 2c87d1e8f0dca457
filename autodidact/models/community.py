"""Community question model: interview questions posted by visitors."""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from autodidact.db.session import Base


class CommunityQuestion(Base):
    __tablename__ = "community_questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(512), nullable=False)
    description = Column(Text, nullable=False)
    role = Column(String(64), nullable=False)
    topic = Column(String(128), nullable=False)
    company = Column(String(64), nullable=True)
    difficulty = Column(String(16), nullable=False)
    is_anonymous = Column(Boolean, nullable=False, default=False)
    # null for anonymous posts and guests
    author_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
