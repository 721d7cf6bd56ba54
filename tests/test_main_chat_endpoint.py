"""Tests for the FastAPI /api endpoints contract."""

from fastapi.testclient import TestClient

import weekwise.main as main
from weekwise.utils.errors import ModelProviderError


class _DummyGraph:
    def __init__(self, body=None, exc=None):
        self._body = body
        self._exc = exc
        self.calls = []

    def invoke(self, state):
        self.calls.append(state)
        if self._exc is not None:
            raise self._exc
        return {"body": dict(self._body)}


_PLAIN = {"response": "Hi there", "trainingPlan": None}


def test_chat_endpoint_returns_reply(monkeypatch):
    dummy = _DummyGraph(_PLAIN)
    monkeypatch.setattr(main, "graph", dummy)

    with TestClient(main.app) as client:
        response = client.post(
            "/api/chat",
            json={
                "message": "hello",
                "history": [{"role": "assistant", "content": "welcome"}],
                "language": "en",
            },
        )

    assert response.status_code == 200
    assert response.json() == _PLAIN
    state = dummy.calls[0]
    assert state["user_message"] == "hello"
    assert state["language"] == "en"
    assert [m.content for m in state["history"]] == ["welcome"]


def test_chat_endpoint_rejects_missing_message(monkeypatch):
    dummy = _DummyGraph(_PLAIN)
    monkeypatch.setattr(main, "graph", dummy)

    with TestClient(main.app) as client:
        zh = client.post("/api/chat", json={"history": []})
        en = client.post("/api/chat", json={"message": "", "language": "en"})

    assert zh.status_code == 400
    assert zh.json()["errorType"] == "validation"
    assert zh.json()["error"] == "消息内容不能为空"
    assert en.status_code == 400
    assert en.json()["error"] == "Message content cannot be empty"
    assert dummy.calls == []


def test_chat_endpoint_maps_malformed_body_to_400(monkeypatch):
    monkeypatch.setattr(main, "graph", _DummyGraph(_PLAIN))

    with TestClient(main.app) as client:
        response = client.post("/api/chat", json={"message": "hi", "history": "not a list"})

    assert response.status_code == 400
    assert response.json()["errorType"] == "validation"


def test_unknown_language_falls_back_to_chinese(monkeypatch):
    dummy = _DummyGraph(_PLAIN)
    monkeypatch.setattr(main, "graph", dummy)

    with TestClient(main.app) as client:
        client.post("/api/chat", json={"message": "hi", "language": "fr"})

    assert dummy.calls[0]["language"] == "zh"


def test_generate_plan_uses_language_default_prompt(monkeypatch):
    dummy = _DummyGraph(_PLAIN)
    monkeypatch.setattr(main, "graph", dummy)

    with TestClient(main.app) as client:
        client.post("/api/generate-plan", json={"language": "zh"})
        client.post("/api/generate-plan", json={"language": "en"})
        client.post("/api/generate-plan", json={})

    assert dummy.calls[0]["user_message"] == "请生成一个通用的周训练计划"
    assert dummy.calls[1]["user_message"] == "Please generate a general weekly training plan"
    assert dummy.calls[2]["user_message"] == "请生成一个通用的周训练计划"
    assert all(call["history"] == [] for call in dummy.calls)


def test_generate_plan_forwards_given_prompt(monkeypatch):
    dummy = _DummyGraph(_PLAIN)
    monkeypatch.setattr(main, "graph", dummy)

    with TestClient(main.app) as client:
        response = client.post("/api/generate-plan", json={"prompt": "3 days a week", "language": "en"})

    assert response.status_code == 200
    assert dummy.calls[0]["user_message"] == "3 days a week"


def test_connection_reset_maps_to_503(monkeypatch):
    monkeypatch.setattr(main, "graph", _DummyGraph(exc=RuntimeError("read ECONNRESET")))

    with TestClient(main.app) as client:
        response = client.post("/api/chat", json={"message": "hello"})

    assert response.status_code == 503
    payload = response.json()
    assert payload["errorType"] == "service_unavailable"
    assert payload["error"] == "AI服务暂时不可用，请稍后再试。"
    assert payload["details"] == "read ECONNRESET"


def test_rate_limit_message_maps_to_429(monkeypatch):
    monkeypatch.setattr(
        main,
        "graph",
        _DummyGraph(exc=RuntimeError("Azure AI API error: 429 - Too many requests")),
    )

    with TestClient(main.app) as client:
        response = client.post("/api/generate-plan", json={"language": "en"})

    assert response.status_code == 429
    assert response.json()["errorType"] == "rate_limit"
    assert response.json()["error"] == "Too many requests. Please try again later."


def test_missing_token_maps_to_401(monkeypatch):
    monkeypatch.setattr(
        main,
        "graph",
        _DummyGraph(exc=ModelProviderError("GITHUB_TOKEN is not configured", status_code=401)),
    )

    with TestClient(main.app) as client:
        response = client.post("/api/chat", json={"message": "hello"})

    assert response.status_code == 401
    assert response.json()["errorType"] == "auth_error"


def test_health_reports_model_config(monkeypatch):
    monkeypatch.setattr(main.settings, "github_token", "")

    with TestClient(main.app) as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "healthy"
    assert payload["timestamp"].endswith("Z")
    assert payload["azureConfig"] == {
        "endpoint": "https://models.github.ai/inference",
        "model": "openai/gpt-4.1",
        "hasToken": False,
    }


def test_spa_shell_serves_index_for_client_routes(monkeypatch, tmp_path):
    (tmp_path / "index.html").write_text("<html>weekwise</html>", encoding="utf-8")
    (tmp_path / "app.js").write_text("console.log(1)", encoding="utf-8")
    monkeypatch.setattr(main.settings, "static_dir", str(tmp_path))

    with TestClient(main.app) as client:
        page = client.get("/training-plan")
        asset = client.get("/app.js")
        missing_api = client.get("/api/unknown")

    assert page.status_code == 200
    assert "weekwise" in page.text
    assert asset.text == "console.log(1)"
    assert missing_api.status_code == 404
