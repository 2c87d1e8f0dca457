from autodidact.services.feedback import generate_feedback, overlap_score

OPTIMAL = "align stakeholders early and ship in phases"


def test_overlap_score_is_clamped():
    assert overlap_score("", OPTIMAL) == 1
    assert overlap_score("nothing relevant here", OPTIMAL) == 1
    assert overlap_score(OPTIMAL + " " + OPTIMAL, OPTIMAL) == 10


def test_overlap_score_empty_reference():
    assert overlap_score("anything", "") == 1


def test_overlap_score_counts_substring_matches():
    # "stakeholders" contains "stakeholder", "phases" contains "phase"
    assert overlap_score("stakeholder phase", "stakeholders phases") == 10


def test_overlap_score_rounds_half_up():
    # 1 of 4 reference words -> 2.5 -> 3
    assert overlap_score("alpha", "alpha beta gamma delta") == 3


def test_weak_answer_feedback():
    result = generate_feedback("Nope.", OPTIMAL)

    assert result.score == 1
    assert result.feedback.version == 1
    assert result.feedback.overall == "Needs significant improvement in detail and structure"
    assert result.feedback.detailed_analysis.startswith("Your response scored 1/10.")
    assert result.strengths == ["Clear communication"]
    assert "Provide more specific examples and details" in result.improvements
    assert "Expand your answer with more detail" in result.improvements
    assert result.suggestions[0] == "Always include the results and impact of your actions"


def test_strong_structured_answer_feedback():
    answer = (
        "Situation: two teams disagreed. Task: align stakeholders early. Action: I ran a planning session "
        "and we agreed to ship in phases. Result: we launched on time and cut escalations by half, "
        "which kept every team aligned and unblocked for the rest of the quarter."
    )
    result = generate_feedback(answer, OPTIMAL)

    assert result.score >= 7
    assert result.feedback.overall == "Strong response with good structure"
    assert "Good detail and comprehensive response" in result.strengths
    assert "Used structured approach (STAR method)" in result.strengths
    assert "Always include the results and impact of your actions" not in result.suggestions
    assert result.improvements == ["Consider adding more specific examples"]
