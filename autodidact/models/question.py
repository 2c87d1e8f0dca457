"""Question model: one practice prompt with its reference answer."""
from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String, Text
from sqlalchemy.sql import func

from autodidact.db.session import Base


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(512), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(64), nullable=False, index=True)  # mock-interview | case-study
    topic = Column(String(128), nullable=False, index=True)
    company = Column(String(64), nullable=True, index=True)  # lower-case slug: meta, google, ...
    difficulty = Column(String(16), nullable=False)  # easy | medium | hard
    time_limit = Column(Integer, nullable=False)  # minutes
    tips = Column(JSON, nullable=True)  # list[str]
    roles = Column(JSON, nullable=True)  # list[str] of role names
    optimal_answer = Column(Text, nullable=False)
    is_popular = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
