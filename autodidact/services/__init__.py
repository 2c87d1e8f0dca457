from autodidact.services.access import (
    FREE_QUESTION_QUOTA,
    can_view_questions,
    compute_access_status,
    should_show_auth_prompt,
)
from autodidact.services.feedback import generate_feedback
from autodidact.services.seeding import seed_questions
from autodidact.services.topics import get_all_topics, get_topics_for_role

__all__ = [
    "FREE_QUESTION_QUOTA",
    "can_view_questions",
    "compute_access_status",
    "generate_feedback",
    "get_all_topics",
    "get_topics_for_role",
    "seed_questions",
    "should_show_auth_prompt",
]
