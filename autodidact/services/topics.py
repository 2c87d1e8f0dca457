"""Role -> topic vocabulary used to filter the catalog."""

ROLE_TOPICS: dict[str, tuple[str, ...]] = {
    "Product Management": (
        "Product Strategy",
        "Product Roadmap",
        "Product Analytics",
        "User Research",
        "Market Analysis",
        "Product Launch",
        "Feature Prioritization",
        "Stakeholder Management",
        "Product Discovery",
        "Product Growth",
    ),
    "Program Management": (
        "Technical Program Management",
        "Cross-functional Coordination",
        "Program Planning",
        "Risk Management",
        "Resource Allocation",
        "Timeline Management",
        "Stakeholder Alignment",
        "Process Optimization",
        "Project Delivery",
        "Technical Strategy",
    ),
    "Engineering Management": (
        "Team Leadership",
        "Technical Architecture",
        "Code Review Process",
        "Engineering Performance",
        "Technical Hiring",
        "Engineering Culture",
        "System Design",
        "Technology Roadmap",
        "Engineering Operations",
        "Technical Mentoring",
    ),
    "General Management": (
        "Strategic Planning",
        "Team Building",
        "Communication",
        "Decision Making",
        "Change Management",
        "Performance Management",
        "Budget Management",
        "Organizational Design",
        "Leadership Skills",
        "Business Operations",
    ),
}

ROLES: tuple[str, ...] = tuple(ROLE_TOPICS)


def get_topics_for_role(role: str) -> list[str]:
    """Return the topics for a role in declared order; unknown roles get an empty list."""
    return list(ROLE_TOPICS.get(role, ()))


def get_all_topics() -> list[str]:
    """Every role's topics concatenated in role order. Repeats are kept."""
    return [topic for topics in ROLE_TOPICS.values() for topic in topics]
