import asyncio

import pytest
from sqlalchemy import select

from autodidact.models.user import User
from autodidact.models.visitor import Visitor

CREDENTIALS = {"email": "Ada@Example.com", "password": "analytical-engine"}


@pytest.mark.asyncio
async def test_current_user_unauthorized(api_client):
    response = await api_client.get("/api/auth/user")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_register_signs_in_and_keeps_guest_views(api_client):
    await api_client.get("/api/questions/1")
    await api_client.get("/api/questions/2")

    response = await api_client.post("/api/auth/register", json={**CREDENTIALS, "firstName": "Ada"})
    assert response.status_code == 200
    user = response.json()
    assert user["email"] == "ada@example.com"
    assert user["firstName"] == "Ada"
    assert user["questionsViewed"] == 2

    status = (await api_client.get("/api/auth/access-status")).json()
    assert status["isAuthenticated"] is True
    assert status["questionsViewed"] == 2
    assert status["requiresAuth"] is False


@pytest.mark.asyncio
async def test_authenticated_user_is_never_gated(api_client):
    await api_client.post("/api/auth/register", json=CREDENTIALS)
    for question_id in range(1, 6):
        await api_client.get(f"/api/questions/{question_id}")

    status = (await api_client.get("/api/auth/access-status")).json()
    assert status["questionsViewed"] == 5
    assert status["questionsRemaining"] == 0
    assert status["requiresAuth"] is False


@pytest.mark.asyncio
async def test_register_rejects_duplicates_and_bad_input(api_client):
    assert (await api_client.post("/api/auth/register", json=CREDENTIALS)).status_code == 200
    api_client.cookies.clear()

    duplicate = await api_client.post("/api/auth/register", json=CREDENTIALS)
    assert duplicate.status_code == 409

    bad_email = await api_client.post("/api/auth/register", json={"email": "nope", "password": "long enough"})
    assert bad_email.status_code == 400

    short_password = await api_client.post("/api/auth/register", json={"email": "b@example.com", "password": "short"})
    assert short_password.status_code == 400


@pytest.mark.asyncio
async def test_login(api_client):
    await api_client.post("/api/auth/register", json=CREDENTIALS)
    api_client.cookies.clear()

    wrong = await api_client.post("/api/auth/login", json={**CREDENTIALS, "password": "wrong password"})
    assert wrong.status_code == 401

    response = await api_client.post("/api/auth/login", json=CREDENTIALS)
    assert response.status_code == 200
    assert (await api_client.get("/api/auth/user")).json()["email"] == "ada@example.com"


@pytest.mark.asyncio
async def test_demo_login_redirects_with_marker(api_client):
    response = await api_client.get("/api/login")
    assert response.status_code == 303
    assert response.headers["location"] == "/?message=signed-in-demo"

    user = (await api_client.get("/api/auth/user")).json()
    assert user["email"] == "demo@example.com"
    assert user["firstName"] == "Demo"

    # second sign-in reuses the demo account
    await api_client.get("/api/login")
    assert (await api_client.get("/api/auth/user")).json()["id"] == user["id"]


@pytest.mark.asyncio
async def test_logout_clears_auth_cookie(api_client):
    await api_client.get("/api/login")
    response = await api_client.get("/api/logout")
    assert response.status_code == 303
    assert response.headers["location"] == "/?message=logged-out"
    assert (await api_client.get("/api/auth/user")).status_code == 401


@pytest.mark.asyncio
async def test_concurrent_first_requests_share_one_visitor(api_client, session_factory):
    await api_client.get("/api/login")

    responses = await asyncio.gather(*(api_client.get("/api/auth/access-status") for _ in range(4)))
    assert [r.status_code for r in responses] == [200, 200, 200, 200]

    await api_client.get("/api/questions/1")
    status = await api_client.get("/api/auth/access-status")
    assert status.status_code == 200
    assert status.json()["questionsViewed"] == 1
    assert (await api_client.get("/api/auth/user")).status_code == 200

    async with session_factory() as db:
        demo = (await db.execute(select(User).where(User.email == "demo@example.com"))).scalar_one()
        visitors = (await db.execute(select(Visitor).where(Visitor.user_id == demo.id))).scalars().all()
    assert len(visitors) == 1


@pytest.mark.asyncio
async def test_update_profile(api_client):
    await api_client.post("/api/auth/register", json={**CREDENTIALS, "firstName": "Ada"})

    response = await api_client.put("/api/users/profile", json={"lastName": " Lovelace ", "profileImageUrl": ""})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Profile updated successfully"
    assert body["user"]["firstName"] == "Ada"
    assert body["user"]["lastName"] == "Lovelace"
    assert body["user"]["profileImageUrl"] is None

    assert (await api_client.get("/api/auth/user")).json()["lastName"] == "Lovelace"


@pytest.mark.asyncio
async def test_update_profile_requires_user(api_client):
    response = await api_client.put("/api/users/profile", json={"firstName": "Nobody"})
    assert response.status_code == 400
