"""
Integration tests for the complete signup flow.

Runs the real application (lifespan, session store, console submitter)
through the HTTP API:
- Start -> step 1 -> step 2 -> step 3 -> submit -> redirect
- Validation failures at each step
- Abandoning a signup
"""

import logging
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from signupflow.api.main import app
from signupflow.config.settings import get_settings
from signupflow.domain.ssn import protect_ssn

STEP_1 = {"email": " user@example.com ", "password": "Str0ng!Pass", "confirmPassword": "Str0ng!Pass"}
STEP_2 = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "phoneNumber": "+1 415 555 2671",
    "dateOfBirth": "1990-05-17",
}
STEP_3 = {"ssn": "123456789", "address": "1 Main St", "city": "Springfield", "state": "CA", "zipCode": "94105"}


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """Test client with lifespan events and a configured SSN secret."""
    monkeypatch.setenv("SSN_SECRET", "integration-secret")
    get_settings.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_settings.cache_clear()


def start(client: TestClient) -> str:
    response = client.post("/v1/signup")
    assert response.status_code == 201
    return response.json()["sessionId"]


def fill(client: TestClient, session_id: str, fields: dict[str, str]) -> dict:
    response = client.patch(f"/v1/signup/{session_id}/fields", json=fields)
    assert response.status_code == 200
    return response.json()


def advance(client: TestClient, session_id: str) -> dict:
    response = client.post(f"/v1/signup/{session_id}/advance")
    assert response.status_code == 200
    return response.json()


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCompleteFlow:
    """End-to-end signup through all three steps."""

    def test_happy_path(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        session_id = start(client)

        fill(client, session_id, STEP_1)
        assert advance(client, session_id)["step"] == 2

        fill(client, session_id, STEP_2)
        assert advance(client, session_id)["step"] == 3

        fill(client, session_id, STEP_3)
        with caplog.at_level(logging.INFO):
            response = client.post(f"/v1/signup/{session_id}/submit")

        assert response.status_code == 200
        body = response.json()
        assert body["completed"] is True
        assert body["redirectTo"] == "/dashboard"
        assert body["errors"] == {}

        # Console submitter received the normalized email and only the SSN digest
        assert "Email: user@example.com " in caplog.text
        digest = protect_ssn("123456789", "integration-secret")
        assert f"SSN digest: {digest}" in caplog.text

    def test_session_closed_after_completion(self, client: TestClient) -> None:
        session_id = start(client)
        for fields in (STEP_1, STEP_2):
            fill(client, session_id, fields)
            advance(client, session_id)
        fill(client, session_id, STEP_3)
        client.post(f"/v1/signup/{session_id}/submit")

        assert client.get(f"/v1/signup/{session_id}").status_code == 404
        assert client.post(f"/v1/signup/{session_id}/submit").status_code == 404

    def test_back_and_forth_keeps_values(self, client: TestClient) -> None:
        session_id = start(client)
        fill(client, session_id, STEP_1)
        advance(client, session_id)

        assert client.post(f"/v1/signup/{session_id}/retreat").json()["step"] == 1
        assert advance(client, session_id)["step"] == 2


class TestValidationFailures:
    """Validation failures block navigation at each step."""

    def test_short_password(self, client: TestClient) -> None:
        session_id = start(client)
        fill(client, session_id, {**STEP_1, "password": "short", "confirmPassword": "short"})

        body = advance(client, session_id)

        assert body["step"] == 1
        assert body["errors"]["password"] == "Password must be at least 8 characters"

    def test_dot_con_email(self, client: TestClient) -> None:
        session_id = start(client)
        fill(client, session_id, {**STEP_1, "email": "user@test.con"})

        body = advance(client, session_id)

        assert body["errors"] == {
            "email": "Email domain looks incorrect ('.con'); did you mean '.com'?"
        }

    def test_error_clears_when_field_fixed(self, client: TestClient) -> None:
        session_id = start(client)
        fill(client, session_id, {**STEP_1, "email": "user@test.con"})
        advance(client, session_id)

        body = fill(client, session_id, {"email": "user@test.com"})

        assert body["errors"] == {}

    def test_bad_phone_and_future_birth_date(self, client: TestClient) -> None:
        session_id = start(client)
        fill(client, session_id, STEP_1)
        advance(client, session_id)
        fill(client, session_id, {**STEP_2, "phoneNumber": "123", "dateOfBirth": "2999-01-01"})

        body = advance(client, session_id)

        assert body["step"] == 2
        assert body["errors"] == {
            "phoneNumber": "Enter a valid international phone number (10–15 digits, optional +)",
            "dateOfBirth": "Date of birth cannot be in the future",
        }

    def test_bad_state_on_submit(self, client: TestClient) -> None:
        session_id = start(client)
        for fields in (STEP_1, STEP_2):
            fill(client, session_id, fields)
            advance(client, session_id)
        fill(client, session_id, {**STEP_3, "state": "ZZ"})

        body = client.post(f"/v1/signup/{session_id}/submit").json()

        assert body["completed"] is False
        assert body["errors"] == {"state": "Invalid U.S. state code"}


class TestAbandon:
    """Abandoning discards the draft."""

    def test_abandon(self, client: TestClient) -> None:
        session_id = start(client)
        fill(client, session_id, STEP_1)

        assert client.delete(f"/v1/signup/{session_id}").status_code == 204
        assert client.get(f"/v1/signup/{session_id}").status_code == 404
