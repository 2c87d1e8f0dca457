"""Practice session model: a multi-question run and its progress."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func

from autodidact.db.session import Base


class PracticeSession(Base):
    __tablename__ = "practice_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    topic = Column(String(128), nullable=False)
    category = Column(String(64), nullable=False)
    questions_count = Column(Integer, nullable=False)
    completed_count = Column(Integer, nullable=False, default=0)
    current_question_id = Column(Integer, ForeignKey("questions.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
