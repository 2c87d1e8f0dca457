"""Visitor model: one per guest session or per user. Owns the distinct question views."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from autodidact.db.session import Base


class Visitor(Base):
    __tablename__ = "visitors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # For guest: unique session_id (UUID string). For user: null and we use user_id.
    session_id = Column(String(64), unique=True, nullable=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    user = relationship("User", back_populates="visitor")
    views = relationship("QuestionView", back_populates="visitor", order_by="QuestionView.id")


class QuestionView(Base):
    __tablename__ = "question_views"
    __table_args__ = (UniqueConstraint("visitor_id", "question_id", name="uq_question_views_visitor_question"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    visitor_id = Column(Integer, ForeignKey("visitors.id"), nullable=False, index=True)
    question_id = Column(Integer, ForeignKey("questions.id"), nullable=False, index=True)
    viewed_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    visitor = relationship("Visitor", back_populates="views")
