"""Tests for the gateway HTTP client."""

import pytest

from weekwise.client.api import ApiError, WeekwiseApi
from weekwise.schemas.plan import ChatMessage


class _FakeResponse:
    def __init__(self, status_code, payload=None):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON")
        return self._payload


class _FakeSession:
    def __init__(self, response):
        self.response = response
        self.requests = []

    def post(self, url, json=None, timeout=None):
        self.requests.append(("POST", url, json, timeout))
        return self.response

    def get(self, url, timeout=None):
        self.requests.append(("GET", url, None, timeout))
        return self.response


def test_chat_posts_message_history_and_language():
    session = _FakeSession(_FakeResponse(200, {"response": "hi", "trainingPlan": None}))
    api = WeekwiseApi("http://localhost:3001/api/", timeout=5, session=session)

    reply = api.chat("hello", [ChatMessage(role="assistant", content="welcome")], "en")

    assert reply.response == "hi"
    assert reply.training_plan is None
    method, url, payload, timeout = session.requests[0]
    assert url == "http://localhost:3001/api/chat"
    assert payload == {
        "message": "hello",
        "history": [{"role": "assistant", "content": "welcome"}],
        "language": "en",
    }
    assert timeout == 5


def test_generate_plan_omits_empty_prompt():
    session = _FakeSession(_FakeResponse(200, {"response": "ok", "trainingPlan": None}))
    api = WeekwiseApi("http://localhost:3001/api", session=session)

    api.generate_plan(language="en")

    assert session.requests[0][1].endswith("/generate-plan")
    assert session.requests[0][2] == {"language": "en"}


def test_error_prefers_details_then_error_then_default():
    api = WeekwiseApi(
        "http://x/api",
        session=_FakeSession(_FakeResponse(503, {"error": "unavailable", "details": "ECONNRESET", "errorType": "service_unavailable"})),
    )
    with pytest.raises(ApiError) as excinfo:
        api.chat("hi")
    assert str(excinfo.value) == "ECONNRESET"
    assert excinfo.value.status_code == 503
    assert excinfo.value.error_type == "service_unavailable"

    api = WeekwiseApi("http://x/api", session=_FakeSession(_FakeResponse(400, {"error": "消息内容不能为空"})))
    with pytest.raises(ApiError) as excinfo:
        api.chat("")
    assert str(excinfo.value) == "消息内容不能为空"

    api = WeekwiseApi("http://x/api", session=_FakeSession(_FakeResponse(502)))
    with pytest.raises(ApiError) as excinfo:
        api.chat("hi", language="en")
    assert str(excinfo.value) == "Chat request failed"


def test_check_health_parses_payload():
    payload = {
        "status": "healthy",
        "timestamp": "2026-01-01T00:00:00Z",
        "azureConfig": {"endpoint": "https://models.github.ai/inference", "model": "openai/gpt-4.1", "hasToken": True},
    }
    api = WeekwiseApi("http://x/api", session=_FakeSession(_FakeResponse(200, payload)))

    health = api.check_health()

    assert health.azure_config.has_token is True


def test_malformed_success_body_raises_api_error():
    api = WeekwiseApi("http://x/api", session=_FakeSession(_FakeResponse(200, {"response": 5})))

    with pytest.raises(ApiError) as excinfo:
        api.chat("hi", language="en")
    assert str(excinfo.value) == "Chat request failed"
    assert excinfo.value.status_code == 200
