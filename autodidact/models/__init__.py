from autodidact.models.user import User
from autodidact.models.visitor import Visitor, QuestionView
from autodidact.models.question import Question
from autodidact.models.answer import Answer
from autodidact.models.practice_session import PracticeSession
from autodidact.models.community import CommunityQuestion

__all__ = ["User", "Visitor", "QuestionView", "Question", "Answer", "PracticeSession", "CommunityQuestion"]
