"""Free-tier access rules shared by the access-status endpoint and the client gate."""
from autodidact.schemas.access import AccessStatusSchema

# Distinct questions an anonymous visitor may open before signing in
FREE_QUESTION_QUOTA = 5


def requires_auth(is_authenticated: bool, questions_viewed: int, quota: int = FREE_QUESTION_QUOTA) -> bool:
    return not is_authenticated and questions_viewed >= quota


def compute_access_status(
    is_authenticated: bool,
    questions_viewed: int,
    quota: int = FREE_QUESTION_QUOTA,
) -> AccessStatusSchema:
    """Build an AccessStatus that satisfies the gate invariant by construction."""
    viewed = max(0, questions_viewed)
    return AccessStatusSchema(
        is_authenticated=is_authenticated,
        questions_viewed=viewed,
        questions_remaining=max(0, quota - viewed),
        requires_auth=requires_auth(is_authenticated, viewed, quota),
    )


def default_access_status(is_authenticated: bool = False, quota: int = FREE_QUESTION_QUOTA) -> AccessStatusSchema:
    """Status assumed before the first successful fetch: nothing viewed, full quota left."""
    return compute_access_status(is_authenticated, 0, quota)


def should_show_auth_prompt(status: AccessStatusSchema) -> bool:
    return status.requires_auth and not status.is_authenticated


def can_view_questions(status: AccessStatusSchema) -> bool:
    return not status.requires_auth
