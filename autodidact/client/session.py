"""Session-scoped identity: who the current browser session belongs to.

One :class:`SessionContext` lives for one page load. It is passed explicitly to
whatever needs it (the access gate, page controllers) instead of being a module
global, so tests and parallel sessions never share state.
"""
import logging

import httpx

from autodidact.client.errors import ClientError
from autodidact.schemas.access import UserOutSchema
from autodidact.services.demo import DEMO_MARKER_PARAM, DEMO_MARKER_VALUE, DEMO_USER_ID, DEMO_USER_PROFILE

logger = logging.getLogger(__name__)


def demo_user() -> UserOutSchema:
    return UserOutSchema(id=DEMO_USER_ID, questions_viewed=0, **DEMO_USER_PROFILE)


class SessionContext:
    def __init__(self):
        self.user: UserOutSchema | None = None
        self.is_demo = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def sign_in_demo(self) -> UserOutSchema:
        """Synthesize the demo user locally. Wins over any remote user until reload."""
        self.user = demo_user()
        self.is_demo = True
        logger.info("Demo sign-in for this session")
        return self.user

    def consume_url(self, url: str) -> str:
        """Handle the demo marker in ``url`` and return the URL to show in its place.

        Without the marker the URL comes back untouched. With it, the demo user is
        created and the marker parameter is removed; other parameters are kept.
        """
        parsed = httpx.URL(url)
        if parsed.params.get(DEMO_MARKER_PARAM) != DEMO_MARKER_VALUE:
            return url
        self.sign_in_demo()
        return str(parsed.copy_remove_param(DEMO_MARKER_PARAM))

    async def resolve_user(self, client) -> UserOutSchema | None:
        """Current user: demo first, then the identity service.

        A missing user or an unreachable identity service both mean anonymous.
        """
        if self.is_demo:
            return self.user
        try:
            user = await client.get_current_user()
        except ClientError as exc:
            logger.warning("Could not resolve current user: %s", exc)
            return self.user
        # a demo sign-in may have landed while the request was in flight
        if not self.is_demo:
            self.user = user
        return self.user
