"""API routes: JSON for questions, answers, practice sessions and community questions."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from autodidact.db.session import get_db
from autodidact.models.answer import Answer
from autodidact.models.community import CommunityQuestion
from autodidact.models.practice_session import PracticeSession
from autodidact.models.question import Question
from autodidact.models.user import User
from autodidact.models.visitor import Visitor
from autodidact.routers.deps import get_current_user_optional, get_or_create_visitor, record_question_view
from autodidact.schemas.community import CommunityQuestionCreateSchema, CommunityQuestionOutSchema
from autodidact.schemas.practice_session import SessionCreateSchema, SessionOutSchema
from autodidact.schemas.question import (
    AnswerAnalysisSchema,
    AnswerAnalyzeSchema,
    AnswerOutSchema,
    AnswerSubmitSchema,
    QuestionOutSchema,
    QuestionValidateSchema,
    QuestionValidationSchema,
)
from autodidact.services.custom_questions import (
    MIN_ANALYZED_ANSWER_LENGTH,
    MIN_QUESTION_LENGTH,
    analyze_answer,
    closest_question,
    validate_question,
)
from autodidact.services.feedback import generate_feedback

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])

ALL = "all"


def _is_set(value: str | None) -> bool:
    return bool(value) and value != ALL


def _newest_first(stmt):
    return stmt.order_by(Question.created_at.desc(), Question.id.desc())


def _questions_out(questions) -> list[QuestionOutSchema]:
    return [QuestionOutSchema.model_validate(q) for q in questions]


# ---------- questions ----------
# static paths are declared before /questions/{question_id}

@router.get("/questions/popular", response_model=list[QuestionOutSchema])
async def popular_questions(
    db: Annotated[AsyncSession, Depends(get_db)],
    company: str | None = None,
    topic: str | None = None,
    difficulty: str | None = None,
):
    """Popular questions, optionally narrowed by company, topic and difficulty."""
    stmt = select(Question).where(Question.is_popular.is_(True))
    if company:
        stmt = stmt.where(Question.company == company.lower())
    if _is_set(topic):
        stmt = stmt.where(Question.topic == topic)
    if _is_set(difficulty):
        stmt = stmt.where(Question.difficulty == difficulty)

    result = await db.execute(_newest_first(stmt))
    return _questions_out(result.scalars().all())


@router.get("/questions/search", response_model=list[QuestionOutSchema])
async def search_questions(
    db: Annotated[AsyncSession, Depends(get_db)],
    q: str | None = None,
):
    """Case-insensitive substring search over title, description, company and topic."""
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")

    pattern = f"%{q.lower()}%"
    stmt = select(Question).where(
        or_(
            func.lower(Question.title).like(pattern),
            func.lower(Question.description).like(pattern),
            func.lower(Question.company).like(pattern),
            func.lower(Question.topic).like(pattern),
        )
    )
    result = await db.execute(_newest_first(stmt))
    return _questions_out(result.scalars().all())


@router.get("/questions/filtered", response_model=list[QuestionOutSchema])
async def filtered_questions(
    db: Annotated[AsyncSession, Depends(get_db)],
    company: str | None = None,
    difficulty: str | None = None,
    role: str | None = None,
    topic: str | None = None,
    search: str | None = None,
):
    stmt = select(Question)
    if _is_set(company):
        stmt = stmt.where(Question.company == company.lower())
    if _is_set(difficulty):
        stmt = stmt.where(Question.difficulty == difficulty)
    if _is_set(topic):
        stmt = stmt.where(Question.topic == topic)
    if search:
        pattern = f"%{search.lower()}%"
        stmt = stmt.where(
            or_(
                func.lower(Question.title).like(pattern),
                func.lower(Question.description).like(pattern),
            )
        )

    result = await db.execute(_newest_first(stmt))
    questions = result.scalars().all()
    # roles is a JSON list; filter in Python to stay portable across backends
    if _is_set(role):
        questions = [q for q in questions if role in (q.roles or [])]
    return _questions_out(questions)


@router.get("/questions", response_model=list[QuestionOutSchema])
async def questions_by_topic(
    db: Annotated[AsyncSession, Depends(get_db)],
    topic: str | None = None,
    category: str | None = None,
):
    if not topic or not category:
        raise HTTPException(status_code=400, detail="Topic and category are required")

    stmt = select(Question).where(Question.topic == topic, Question.category == category)
    result = await db.execute(_newest_first(stmt))
    return _questions_out(result.scalars().all())


@router.get("/questions/{question_id}", response_model=QuestionOutSchema)
async def get_question(
    question_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    visitor: Annotated[Visitor, Depends(get_or_create_visitor)],
):
    """Get one question by ID and count it against the caller's free views."""
    question = await db.get(Question, question_id)
    if question is None:
        raise HTTPException(status_code=404, detail="Question not found")

    out = QuestionOutSchema.model_validate(question)
    if await record_question_view(db, visitor, question_id):
        logger.debug("Visitor %s viewed question %s", visitor.id, question_id)
    return out


# ---------- custom questions ----------

@router.post("/questions/validate", response_model=QuestionValidationSchema)
async def validate_custom_question(body: QuestionValidateSchema):
    text = body.question.strip()
    if len(text) < MIN_QUESTION_LENGTH:
        raise HTTPException(status_code=400, detail=f"Question must be at least {MIN_QUESTION_LENGTH} characters long")
    return validate_question(text)


@router.post("/answers/analyze", response_model=AnswerAnalysisSchema)
async def analyze_custom_answer(
    body: AnswerAnalyzeSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Score an answer to a user-written question against the closest catalog question."""
    question = body.question.strip()
    user_answer = body.user_answer.strip()
    if not question or not user_answer:
        raise HTTPException(status_code=400, detail="Question and answer are required")
    if len(user_answer) < MIN_ANALYZED_ANSWER_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Answer must be at least {MIN_ANALYZED_ANSWER_LENGTH} characters long",
        )

    result = await db.execute(select(Question).order_by(Question.id))
    reference = closest_question(question, result.scalars().all())
    analysis = analyze_answer(question, user_answer, reference)
    logger.info(
        "Custom answer scored %s/10 against question %s", analysis.user_score, analysis.reference_question_id
    )
    return analysis


# ---------- answers ----------

@router.post("/answers", response_model=AnswerOutSchema)
async def submit_answer(
    body: AnswerSubmitSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Store an answer and return it with feedback already filled in."""
    question = await db.get(Question, body.question_id)
    if question is None:
        raise HTTPException(status_code=404, detail="Question not found")

    practice = None
    if body.session_id is not None:
        practice = await db.get(PracticeSession, body.session_id)
        if practice is None:
            raise HTTPException(status_code=404, detail="Session not found")

    result = generate_feedback(body.user_answer, question.optimal_answer)
    answer = Answer(
        question_id=question.id,
        user_answer=body.user_answer,
        score=result.score,
        feedback=result.feedback.to_wire(),
        strengths=result.strengths,
        improvements=result.improvements,
        suggestions=result.suggestions,
    )
    db.add(answer)

    if practice is not None:
        practice.completed_count = min(practice.questions_count, (practice.completed_count or 0) + 1)
        practice.current_question_id = question.id

    await db.commit()
    await db.refresh(answer)
    logger.info("Answer %s for question %s scored %s/10", answer.id, question.id, answer.score)
    return AnswerOutSchema.model_validate(answer)


@router.get("/answers/{answer_id}", response_model=AnswerOutSchema)
async def get_answer(
    answer_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    answer = await db.get(Answer, answer_id)
    if answer is None:
        raise HTTPException(status_code=404, detail="Answer not found")
    return AnswerOutSchema.model_validate(answer)


# ---------- practice sessions ----------

@router.post("/sessions", response_model=SessionOutSchema)
async def create_session(
    body: SessionCreateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    practice = PracticeSession(
        topic=body.topic,
        category=body.category,
        questions_count=body.questions_count,
        completed_count=0,
    )
    db.add(practice)
    await db.commit()
    await db.refresh(practice)
    return SessionOutSchema.model_validate(practice)


@router.get("/sessions/{session_id}", response_model=SessionOutSchema)
async def get_session(
    session_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    practice = await db.get(PracticeSession, session_id)
    if practice is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return SessionOutSchema.model_validate(practice)


# ---------- community ----------

@router.post("/community-questions", response_model=CommunityQuestionOutSchema, status_code=201)
async def create_community_question(
    body: CommunityQuestionCreateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
):
    """Post a question to the community board; anonymous posts keep no author."""
    author_id = None if body.is_anonymous or current_user is None else current_user.id
    posted = CommunityQuestion(
        title=body.title,
        description=body.description,
        role=body.role,
        topic=body.topic,
        company=(body.company or "").strip() or None,
        difficulty=body.difficulty,
        is_anonymous=body.is_anonymous,
        author_id=author_id,
    )
    db.add(posted)
    await db.commit()
    await db.refresh(posted)
    return CommunityQuestionOutSchema.model_validate(posted)


@router.get("/community-questions", response_model=list[CommunityQuestionOutSchema])
async def list_community_questions(db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(
        select(CommunityQuestion).order_by(CommunityQuestion.created_at.desc(), CommunityQuestion.id.desc())
    )
    return [CommunityQuestionOutSchema.model_validate(c) for c in result.scalars().all()]
