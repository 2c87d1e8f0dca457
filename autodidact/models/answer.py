"""Answer model: a submitted answer plus the feedback computed for it."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, Text
from sqlalchemy.sql import func

from autodidact.db.session import Base


class Answer(Base):
    __tablename__ = "answers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    question_id = Column(Integer, ForeignKey("questions.id"), nullable=False, index=True)
    user_answer = Column(Text, nullable=False)
    score = Column(Integer, nullable=True)  # 1-10
    feedback = Column(JSON, nullable=True)  # AnswerFeedback, versioned
    strengths = Column(JSON, nullable=True)
    improvements = Column(JSON, nullable=True)
    suggestions = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
