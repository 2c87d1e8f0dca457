"""Async HTTP client for the catalog, answer, session and auth endpoints.

Every call is attempted once. Non-2xx responses raise :class:`TransportFailure`
(:class:`NotFound` for 404) tagged with the operation name; retrying is up to
the caller. This client never makes access decisions, see
:mod:`autodidact.client.access` for the free-tier gate.
"""
import logging
from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter

from autodidact.client.errors import NotFound, TransportFailure, ValidationFailure
from autodidact.core.config import get_settings
from autodidact.schemas.access import (
    AccessStatusSchema,
    ProfileUpdateResultSchema,
    ProfileUpdateSchema,
    UserOutSchema,
)
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
from autodidact.services.topics import get_all_topics, get_topics_for_role

logger = logging.getLogger(__name__)

_adapter = lru_cache(maxsize=None)(TypeAdapter)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return str(body.get("detail") or body.get("error") or body.get("message") or response.reason_phrase)
    return response.reason_phrase


class CatalogClient:
    """Thin typed wrapper over ``httpx.AsyncClient``.

    Pass ``client`` to share a connection pool or inject a mock transport;
    otherwise one is created from settings and closed by :meth:`aclose`.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        settings = get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
        )

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self,
        operation: str,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, url, params=params, json=json)
        except httpx.HTTPError as exc:
            logger.warning("%s: transport error: %s", operation, exc)
            raise TransportFailure(operation, str(exc) or exc.__class__.__name__) from exc

        if response.status_code == 404:
            raise NotFound(operation, _error_message(response))
        if response.is_error:
            message = _error_message(response)
            level = logging.WARNING if response.status_code >= 500 else logging.DEBUG
            logger.log(level, "%s: HTTP %s: %s", operation, response.status_code, message)
            raise TransportFailure(operation, message, status_code=response.status_code)
        return response

    @staticmethod
    def _parse(operation: str, response: httpx.Response, schema):
        """Validate a 2xx body against ``schema`` (a model or ``list[Model]``).

        A body that is not JSON or has the wrong shape is a transport failure
        like any other bad response.
        """
        try:
            return _adapter(schema).validate_python(response.json())
        except ValueError as exc:
            logger.warning("%s: invalid response body: %s", operation, exc)
            raise TransportFailure(operation, "invalid response body", status_code=response.status_code) from exc

    # ---------- access ----------

    async def get_access_status(self) -> AccessStatusSchema:
        response = await self._request("get_access_status", "GET", "/api/auth/access-status")
        return self._parse("get_access_status", response, AccessStatusSchema)

    async def get_current_user(self) -> UserOutSchema | None:
        """Signed-in user, or None when the identity service reports nobody (401)."""
        try:
            response = await self._request("get_current_user", "GET", "/api/auth/user")
        except TransportFailure as exc:
            if exc.status_code == 401:
                return None
            raise
        return self._parse("get_current_user", response, UserOutSchema)

    async def update_profile(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        profile_image_url: str | None = None,
    ) -> ProfileUpdateResultSchema:
        """Change the signed-in user's profile; arguments left as None are not sent."""
        body = ProfileUpdateSchema.model_construct(
            first_name=first_name,
            last_name=last_name,
            profile_image_url=profile_image_url,
        )
        payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        response = await self._request("update_profile", "PUT", "/api/users/profile", json=payload)
        return self._parse("update_profile", response, ProfileUpdateResultSchema)

    # ---------- questions ----------

    async def get_popular_questions(self, company: str | None = None) -> list[QuestionOutSchema]:
        params = {"company": company} if company else None
        response = await self._request("get_popular_questions", "GET", "/api/questions/popular", params=params)
        return self._parse("get_popular_questions", response, list[QuestionOutSchema])

    async def get_questions_by_topic(self, topic: str, category: str) -> list[QuestionOutSchema]:
        response = await self._request(
            "get_questions_by_topic",
            "GET",
            "/api/questions",
            params={"topic": topic, "category": category},
        )
        return self._parse("get_questions_by_topic", response, list[QuestionOutSchema])

    async def get_question(self, question_id: int) -> QuestionOutSchema:
        response = await self._request("get_question", "GET", f"/api/questions/{question_id}")
        return self._parse("get_question", response, QuestionOutSchema)

    async def search_questions(self, query: str) -> list[QuestionOutSchema]:
        response = await self._request("search_questions", "GET", "/api/questions/search", params={"q": query})
        return self._parse("search_questions", response, list[QuestionOutSchema])

    async def validate_question(self, question: str) -> QuestionValidationSchema:
        body = QuestionValidateSchema.model_construct(question=question)
        response = await self._request(
            "validate_question", "POST", "/api/questions/validate", json=body.model_dump(mode="json", by_alias=True)
        )
        return self._parse("validate_question", response, QuestionValidationSchema)

    # ---------- answers ----------

    async def submit_answer(
        self,
        question_id: int,
        user_answer: str,
        session_id: int | None = None,
    ) -> AnswerOutSchema:
        body = AnswerSubmitSchema.model_construct(
            question_id=question_id,
            user_answer=user_answer,
            session_id=session_id,
        )
        payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        response = await self._request("submit_answer", "POST", "/api/answers", json=payload)
        return self._parse("submit_answer", response, AnswerOutSchema)

    async def get_answer(self, answer_id: int) -> AnswerOutSchema:
        response = await self._request("get_answer", "GET", f"/api/answers/{answer_id}")
        return self._parse("get_answer", response, AnswerOutSchema)

    async def analyze_answer(
        self,
        question: str,
        user_answer: str,
        topic: str = "Technical Program Management",
    ) -> AnswerAnalysisSchema:
        """Score an answer to a question the user wrote themselves."""
        body = AnswerAnalyzeSchema.model_construct(question=question, user_answer=user_answer, topic=topic)
        response = await self._request(
            "analyze_answer", "POST", "/api/answers/analyze", json=body.model_dump(mode="json", by_alias=True)
        )
        return self._parse("analyze_answer", response, AnswerAnalysisSchema)

    # ---------- practice sessions ----------

    async def create_session(self, topic: str, category: str, questions_count: int) -> SessionOutSchema:
        body = SessionCreateSchema.model_construct(topic=topic, category=category, questions_count=questions_count)
        response = await self._request(
            "create_session", "POST", "/api/sessions", json=body.model_dump(mode="json", by_alias=True)
        )
        return self._parse("create_session", response, SessionOutSchema)

    async def get_session(self, session_id: int) -> SessionOutSchema:
        response = await self._request("get_session", "GET", f"/api/sessions/{session_id}")
        return self._parse("get_session", response, SessionOutSchema)

    # ---------- community ----------

    async def post_community_question(
        self,
        title: str,
        description: str,
        role: str,
        topic: str,
        difficulty: str,
        company: str | None = None,
        is_anonymous: bool = False,
    ) -> CommunityQuestionOutSchema:
        """Post to the community board after checking required fields locally."""
        required = {
            "title": (title or "").strip(),
            "description": (description or "").strip(),
            "role": (role or "").strip(),
            "topic": (topic or "").strip(),
            "difficulty": (difficulty or "").strip(),
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ValidationFailure(missing)

        body = CommunityQuestionCreateSchema.model_construct(
            title=required["title"],
            description=required["description"],
            role=required["role"],
            topic=required["topic"],
            company=(company or "").strip() or None,
            difficulty=required["difficulty"],
            is_anonymous=is_anonymous,
        )
        response = await self._request(
            "post_community_question",
            "POST",
            "/api/community-questions",
            json=body.model_dump(mode="json", by_alias=True),
        )
        return self._parse("post_community_question", response, CommunityQuestionOutSchema)

    # ---------- topic vocabulary (local) ----------

    @staticmethod
    def get_topics_for_role(role: str) -> list[str]:
        return get_topics_for_role(role)

    @staticmethod
    def get_all_topics() -> list[str]:
        return get_all_topics()
