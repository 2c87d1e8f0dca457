"""Page controller: the gate decides, the catalog fetches, the page renders one view."""
import logging
from dataclasses import dataclass, field
from typing import Union

from autodidact.client.access import AccessGate
from autodidact.client.api import CatalogClient
from autodidact.client.errors import ClientError, NotFound
from autodidact.schemas.question import QuestionOutSchema

logger = logging.getLogger(__name__)


@dataclass
class QuestionView:
    question: QuestionOutSchema


@dataclass
class QuestionList:
    questions: list[QuestionOutSchema] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.questions


@dataclass
class AuthPrompt:
    questions_viewed: int
    quota: int


@dataclass
class FetchError:
    message: str
    retryable: bool = True


PageView = Union[QuestionView, QuestionList, AuthPrompt, FetchError]


def _fetch_error(exc: ClientError) -> FetchError:
    return FetchError(message=str(exc), retryable=not isinstance(exc, NotFound))


class PracticePage:
    def __init__(self, client: CatalogClient, gate: AccessGate):
        self.client = client
        self.gate = gate

    async def mount(self) -> None:
        await self.gate.mount()

    async def on_focus(self) -> None:
        await self.gate.on_focus()

    def unmount(self) -> None:
        self.gate.unmount()

    def _auth_prompt(self) -> AuthPrompt | None:
        if self.gate.should_show_auth_prompt:
            return AuthPrompt(questions_viewed=self.gate.questions_viewed, quota=self.gate.quota)
        return None

    async def open_question(self, question_id: int) -> PageView:
        prompt = self._auth_prompt()
        if prompt is not None:
            return prompt
        try:
            question = await self.client.get_question(question_id)
        except ClientError as exc:
            return _fetch_error(exc)
        # the detail read counted as a view server-side
        await self.gate.refresh()
        return QuestionView(question)

    async def browse_popular(self, company: str | None = None) -> PageView:
        try:
            return QuestionList(await self.client.get_popular_questions(company))
        except ClientError as exc:
            return _fetch_error(exc)

    async def browse_topic(self, topic: str, category: str) -> PageView:
        try:
            return QuestionList(await self.client.get_questions_by_topic(topic, category))
        except ClientError as exc:
            return _fetch_error(exc)

    async def search(self, query: str) -> PageView:
        try:
            return QuestionList(await self.client.search_questions(query))
        except ClientError as exc:
            return _fetch_error(exc)
