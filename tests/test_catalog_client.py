import json

import httpx
import pytest

from autodidact.client.api import CatalogClient
from autodidact.client.errors import NotFound, TransportFailure, ValidationFailure

QUESTION = {
    "id": 1,
    "title": "How would you prioritize features?",
    "description": "Limited engineers, ten features.",
    "category": "mock-interview",
    "topic": "pm",
    "company": "meta",
    "difficulty": "hard",
    "timeLimit": 10,
    "tips": ["Define success metrics"],
    "optimalAnswer": "Impact vs effort.",
    "isPopular": True,
    "createdAt": "2026-10-19T12:00:00",
}


class Recorder:
    """MockTransport handler that records requests and replies from a callable."""

    def __init__(self, reply):
        self.reply = reply
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.reply(request)


def make_client(reply) -> tuple[CatalogClient, Recorder]:
    recorder = Recorder(reply)
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder), base_url="http://api.test")
    return CatalogClient(client=http), recorder


@pytest.mark.asyncio
async def test_popular_without_company_sends_no_company_param():
    client, recorder = make_client(lambda r: httpx.Response(200, json=[QUESTION]))
    questions = await client.get_popular_questions()

    request = recorder.requests[0]
    assert request.url.path == "/api/questions/popular"
    assert "company" not in request.url.params
    assert request.url.query == b""
    assert questions[0].time_limit == 10
    assert questions[0].optimal_answer == "Impact vs effort."


@pytest.mark.asyncio
async def test_popular_with_empty_company_sends_no_company_param():
    client, recorder = make_client(lambda r: httpx.Response(200, json=[]))
    assert await client.get_popular_questions("") == []
    assert "company" not in recorder.requests[0].url.params


@pytest.mark.asyncio
async def test_popular_with_company():
    client, recorder = make_client(lambda r: httpx.Response(200, json=[QUESTION]))
    await client.get_popular_questions("meta")
    assert recorder.requests[0].url.params["company"] == "meta"


@pytest.mark.asyncio
async def test_questions_by_topic_sends_both_params():
    client, recorder = make_client(lambda r: httpx.Response(200, json=[QUESTION]))
    await client.get_questions_by_topic("pm", "mock-interview")
    params = recorder.requests[0].url.params
    assert params["topic"] == "pm"
    assert params["category"] == "mock-interview"


@pytest.mark.asyncio
async def test_search_query_is_escaped():
    client, recorder = make_client(lambda r: httpx.Response(200, json=[]))
    await client.search_questions("a&b c?")

    request = recorder.requests[0]
    assert request.url.params["q"] == "a&b c?"
    assert b"a%26b" in request.url.query


@pytest.mark.asyncio
async def test_get_question_not_found():
    client, _ = make_client(lambda r: httpx.Response(404, json={"detail": "Question not found"}))
    with pytest.raises(NotFound) as excinfo:
        await client.get_question(99)
    assert excinfo.value.operation == "get_question"
    assert excinfo.value.message == "Question not found"


@pytest.mark.asyncio
async def test_server_error_is_transport_failure():
    client, _ = make_client(lambda r: httpx.Response(500, json={"error": "Failed to fetch popular questions"}))
    with pytest.raises(TransportFailure) as excinfo:
        await client.get_popular_questions()
    assert not isinstance(excinfo.value, NotFound)
    assert excinfo.value.status_code == 500
    assert excinfo.value.operation == "get_popular_questions"
    assert "Failed to fetch popular questions" in str(excinfo.value)


@pytest.mark.asyncio
async def test_network_error_is_transport_failure():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = make_client(refuse)
    with pytest.raises(TransportFailure) as excinfo:
        await client.get_question(1)
    assert excinfo.value.status_code is None


@pytest.mark.asyncio
async def test_submit_answer_round_trip():
    def echo(request):
        body = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "id": 10,
                "questionId": body["questionId"],
                "userAnswer": body["userAnswer"],
                "score": 4,
                "feedback": {"version": 1, "overall": "ok", "detailedAnalysis": "fine"},
                "strengths": ["Clear communication"],
            },
        )

    client, recorder = make_client(echo)
    answer = await client.submit_answer(42, "X")

    assert json.loads(recorder.requests[0].content) == {"questionId": 42, "userAnswer": "X"}
    assert recorder.requests[0].method == "POST"
    assert answer.question_id == 42
    assert answer.user_answer == "X"
    assert answer.feedback.detailed_analysis == "fine"
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_submit_answer_with_session():
    client, recorder = make_client(
        lambda r: httpx.Response(200, json={"id": 1, "questionId": 2, "userAnswer": "y"})
    )
    await client.submit_answer(2, "y", session_id=5)
    assert json.loads(recorder.requests[0].content)["sessionId"] == 5


@pytest.mark.asyncio
async def test_create_and_get_session():
    session = {"id": 3, "topic": "pm", "category": "case-study", "questionsCount": 4, "completedCount": 0}
    client, recorder = make_client(lambda r: httpx.Response(200, json=session))

    created = await client.create_session("pm", "case-study", 4)
    fetched = await client.get_session(3)

    assert json.loads(recorder.requests[0].content) == {"topic": "pm", "category": "case-study", "questionsCount": 4}
    assert recorder.requests[1].url.path == "/api/sessions/3"
    assert created.questions_count == 4
    assert fetched.current_question_id is None


@pytest.mark.asyncio
async def test_get_answer_not_found():
    client, _ = make_client(lambda r: httpx.Response(404, json={"detail": "Answer not found"}))
    with pytest.raises(NotFound):
        await client.get_answer(5)


@pytest.mark.asyncio
async def test_current_user_absent_on_401():
    client, _ = make_client(lambda r: httpx.Response(401, json={"detail": "Unauthorized"}))
    assert await client.get_current_user() is None


@pytest.mark.asyncio
async def test_access_status_parsed():
    payload = {"isAuthenticated": False, "questionsViewed": 2, "questionsRemaining": 3, "requiresAuth": False}
    client, recorder = make_client(lambda r: httpx.Response(200, json=payload))
    status = await client.get_access_status()
    assert recorder.requests[0].url.path == "/api/auth/access-status"
    assert status.questions_remaining == 3


@pytest.mark.asyncio
async def test_community_question_validation_happens_before_network():
    client, recorder = make_client(lambda r: httpx.Response(201, json={}))
    with pytest.raises(ValidationFailure) as excinfo:
        await client.post_community_question(
            title="   ",
            description="Tell me about a launch",
            role="Product Management",
            topic="",
            difficulty="easy",
        )
    assert excinfo.value.missing == ["title", "topic"]
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_community_question_posted():
    def created(request):
        body = json.loads(request.content)
        return httpx.Response(201, json={"id": 1, "authorId": None, **body})

    client, recorder = make_client(created)
    posted = await client.post_community_question(
        title=" Launch story ",
        description="Tell me about a launch",
        role="Product Management",
        topic="Product Launch",
        difficulty="medium",
        company="",
        is_anonymous=True,
    )
    sent = json.loads(recorder.requests[0].content)
    assert sent["title"] == "Launch story"
    assert sent["company"] is None
    assert sent["isAnonymous"] is True
    assert posted.is_anonymous


@pytest.mark.asyncio
async def test_owned_client_is_closed():
    async with CatalogClient(base_url="http://api.test") as client:
        inner = client._client
    assert inner.is_closed


@pytest.mark.asyncio
async def test_non_json_success_body_is_transport_failure():
    client, _ = make_client(lambda r: httpx.Response(200, text="<html>proxy error</html>"))
    with pytest.raises(TransportFailure) as excinfo:
        await client.get_access_status()
    assert excinfo.value.operation == "get_access_status"
    assert excinfo.value.message == "invalid response body"
    assert excinfo.value.status_code == 200


@pytest.mark.asyncio
async def test_wrongly_shaped_list_is_transport_failure():
    client, _ = make_client(lambda r: httpx.Response(200, json=[{"id": 1}]))
    with pytest.raises(TransportFailure) as excinfo:
        await client.get_popular_questions()
    assert excinfo.value.operation == "get_popular_questions"
    assert not isinstance(excinfo.value, NotFound)


@pytest.mark.asyncio
async def test_object_where_list_expected_is_transport_failure():
    client, _ = make_client(lambda r: httpx.Response(200, json=QUESTION))
    with pytest.raises(TransportFailure):
        await client.search_questions("meta")


@pytest.mark.asyncio
async def test_current_user_with_garbage_body_is_transport_failure():
    client, _ = make_client(lambda r: httpx.Response(200, text="not json"))
    with pytest.raises(TransportFailure):
        await client.get_current_user()


@pytest.mark.asyncio
async def test_blank_role_topic_and_difficulty_fail_validation():
    client, recorder = make_client(lambda r: httpx.Response(201, json={}))
    with pytest.raises(ValidationFailure) as excinfo:
        await client.post_community_question(
            title="Launch story",
            description="Tell me about a launch",
            role=" ",
            topic="\t",
            difficulty="  ",
        )
    assert excinfo.value.missing == ["role", "topic", "difficulty"]
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_validate_question_request():
    client, recorder = make_client(lambda r: httpx.Response(200, json={"isValid": True, "feedback": "ok"}))
    result = await client.validate_question("How would you scale a team?")

    request = recorder.requests[0]
    assert (request.method, request.url.path) == ("POST", "/api/questions/validate")
    assert json.loads(request.content) == {"question": "How would you scale a team?"}
    assert result.is_valid


@pytest.mark.asyncio
async def test_analyze_answer_request():
    analysis = {
        "optimalAnswer": "Impact vs effort.",
        "userScore": 6,
        "strengths": ["Clear communication"],
        "improvements": [],
        "suggestions": [],
        "detailedFeedback": "Your response scored 6/10.",
        "referenceQuestionId": 5,
    }
    client, recorder = make_client(lambda r: httpx.Response(200, json=analysis))
    result = await client.analyze_answer("How do you prioritize?", "I rank by impact and effort.")

    assert recorder.requests[0].url.path == "/api/answers/analyze"
    assert json.loads(recorder.requests[0].content) == {
        "question": "How do you prioritize?",
        "userAnswer": "I rank by impact and effort.",
        "topic": "Technical Program Management",
    }
    assert result.user_score == 6
    assert result.reference_question_id == 5


@pytest.mark.asyncio
async def test_update_profile_sends_only_given_fields():
    def updated(request):
        body = json.loads(request.content)
        return httpx.Response(
            200,
            json={"success": True, "message": "Profile updated successfully", "user": {"id": 3, **body}},
        )

    client, recorder = make_client(updated)
    result = await client.update_profile(first_name="Grace")

    assert recorder.requests[0].method == "PUT"
    assert json.loads(recorder.requests[0].content) == {"firstName": "Grace"}
    assert result.user.first_name == "Grace"
