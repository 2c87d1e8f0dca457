"""Seed the catalog with starter questions on first start."""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from autodidact.models.question import Question

logger = logging.getLogger(__name__)

SEED_QUESTIONS = [
    {
        "title": "How do you handle team communication in a remote environment?",
        "description": "Describe your approach to maintaining effective communication with distributed engineering teams.",
        "category": "mock-interview",
        "topic": "tpm",
        "company": "meta",
        "difficulty": "easy",
        "time_limit": 5,
        "tips": ["Focus on tools and processes", "Mention async communication", "Include regular sync points"],
        "roles": ["Program Management"],
        "optimal_answer": (
            "I establish clear communication channels using tools like Slack for async updates, weekly team "
            "meetings for alignment, and documentation in shared spaces. I ensure time zone coverage and set "
            "response time expectations."
        ),
        "is_popular": True,
    },
    {
        "title": "Describe a time when you had to manage a cross-functional project with competing priorities",
        "description": (
            "Tell me about a situation where you had to manage a cross-functional project with competing "
            "priorities. How did you align stakeholders and ensure successful delivery?"
        ),
        "category": "mock-interview",
        "topic": "tpm",
        "company": "meta",
        "difficulty": "medium",
        "time_limit": 7,
        "tips": ["Use the STAR method", "Focus on stakeholder alignment", "Highlight trade-off decisions"],
        "roles": ["Program Management"],
        "optimal_answer": (
            "I organized stakeholder alignment meetings, created a shared timeline with dependencies, and "
            "established regular check-ins. I worked with each team to identify critical path items and "
            "negotiated a phased delivery approach that met everyone's core needs."
        ),
        "is_popular": True,
    },
    {
        "title": "Walk me through how you would reduce the latency of Google Search by 200ms",
        "description": (
            "Google Search currently has an average latency of 400ms. How would you approach reducing this by "
            "200ms while maintaining quality?"
        ),
        "category": "case-study",
        "topic": "tpm",
        "company": "google",
        "difficulty": "hard",
        "time_limit": 15,
        "tips": [
            "Think systematically about the pipeline",
            "Consider measurement and monitoring",
            "Address both technical and product trade-offs",
        ],
        "roles": ["Program Management", "Engineering Management"],
        "optimal_answer": (
            "I'd analyze the search pipeline, identify bottlenecks through measurement, implement optimizations "
            "in phases (frontend caching, backend algorithms, infrastructure), and monitor quality metrics "
            "throughout the process."
        ),
        "is_popular": True,
    },
    {
        "title": "How would you improve user engagement for a social media app?",
        "description": (
            "You notice user engagement has dropped 15% over the past month. Walk through your approach to "
            "diagnose and address this."
        ),
        "category": "mock-interview",
        "topic": "pm",
        "company": "meta",
        "difficulty": "easy",
        "time_limit": 6,
        "tips": ["Start with data analysis", "Consider user feedback", "Think about recent changes"],
        "roles": ["Product Management"],
        "optimal_answer": (
            "I'd first analyze engagement metrics by user segment and feature usage, then investigate recent "
            "product changes, conduct user research to understand pain points, and develop targeted solutions "
            "based on the root causes identified."
        ),
        "is_popular": True,
    },
    {
        "title": "How would you prioritize features for Instagram Stories when you have limited engineering resources?",
        "description": (
            "You're a Product Manager for Instagram Stories. You have 5 engineers for the next quarter and 10 "
            "potential features to build. Walk me through your prioritization framework."
        ),
        "category": "mock-interview",
        "topic": "pm",
        "company": "meta",
        "difficulty": "hard",
        "time_limit": 10,
        "tips": ["Define success metrics", "Use impact vs effort matrix", "Consider strategic alignment"],
        "roles": ["Product Management"],
        "optimal_answer": (
            "I'd use an impact vs effort framework, evaluating user value, business impact, and technical "
            "complexity. I'd prioritize high-impact, low-effort wins first, then major strategic initiatives, "
            "while reserving capacity for urgent fixes."
        ),
        "is_popular": True,
    },
]


async def is_seeded(db: AsyncSession) -> bool:
    result = await db.execute(select(func.count(Question.id)))
    return result.scalar_one() > 0


async def seed_questions(db: AsyncSession) -> int:
    """Insert the starter questions if the catalog is empty. Returns rows inserted."""
    if await is_seeded(db):
        return 0

    for data in SEED_QUESTIONS:
        db.add(Question(**data))
    await db.commit()
    logger.info("Seeded %d questions", len(SEED_QUESTIONS))
    return len(SEED_QUESTIONS)
