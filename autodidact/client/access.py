"""Free-tier access gate.

The gate mirrors the server's access status for one mounted page. It never
changes counters itself; every state change comes from a completed fetch.

Ordering rule: each fetch gets a sequence number when it is issued, and a
completed response is applied only if its number is higher than the last one
applied. A newer request that finishes first therefore cannot be overwritten by
an older one that finishes later. Responses issued before the page was
unmounted are dropped.
"""
import enum
import logging

from autodidact.client.errors import ClientError
from autodidact.client.session import SessionContext
from autodidact.schemas.access import AccessStatusSchema
from autodidact.services.access import (
    FREE_QUESTION_QUOTA,
    can_view_questions,
    compute_access_status,
    default_access_status,
    should_show_auth_prompt,
)

logger = logging.getLogger(__name__)


class GateState(str, enum.Enum):
    RESOLVING = "resolving"
    OPEN = "open"
    GATED = "gated"


class AccessGate:
    def __init__(self, client, session: SessionContext, quota: int = FREE_QUESTION_QUOTA):
        self._client = client
        self._session = session
        self.quota = quota
        self._server_status: AccessStatusSchema | None = None
        self._issued = 0
        self._applied = 0
        self._generation = 0
        self._mounted = False

    # ---------- lifecycle ----------

    async def mount(self) -> AccessStatusSchema:
        self._mounted = True
        return await self.refresh()

    async def on_focus(self) -> AccessStatusSchema:
        return await self.refresh()

    def unmount(self) -> None:
        """Page navigated away: in-flight results must not land."""
        self._mounted = False
        self._generation += 1

    async def refresh(self) -> AccessStatusSchema:
        """Fetch the access status and apply it if still current.

        Fetch failures are logged and leave the previous state in place (the
        optimistic default if nothing has loaded yet).
        """
        self._issued += 1
        seq = self._issued
        generation = self._generation
        try:
            fetched = await self._client.get_access_status()
        except ClientError as exc:
            logger.warning("Access status fetch #%d failed: %s", seq, exc)
            return self.status

        if generation != self._generation or not self._mounted:
            logger.debug("Dropping access status #%d: page unmounted", seq)
        elif seq <= self._applied:
            logger.debug("Dropping stale access status #%d (applied #%d)", seq, self._applied)
        else:
            self._server_status = fetched
            self._applied = seq
        return self.status

    # ---------- derived state ----------

    @property
    def loaded(self) -> bool:
        return self._server_status is not None

    @property
    def is_authenticated(self) -> bool:
        server_auth = self._server_status is not None and self._server_status.is_authenticated
        return server_auth or self._session.is_authenticated

    @property
    def status(self) -> AccessStatusSchema:
        """Current status with a local demo sign-in folded in."""
        if self._server_status is None:
            return default_access_status(self.is_authenticated, self.quota)
        return compute_access_status(self.is_authenticated, self._server_status.questions_viewed, self.quota)

    @property
    def questions_viewed(self) -> int:
        return self.status.questions_viewed

    @property
    def questions_remaining(self) -> int:
        return self.status.questions_remaining

    @property
    def should_show_auth_prompt(self) -> bool:
        return should_show_auth_prompt(self.status)

    @property
    def can_view_questions(self) -> bool:
        return can_view_questions(self.status)

    @property
    def state(self) -> GateState:
        if not self.loaded:
            return GateState.RESOLVING
        return GateState.GATED if self.should_show_auth_prompt else GateState.OPEN
