"""HTTP client for the weekwise gateway."""

from __future__ import annotations

import requests

from weekwise.schemas.chat import ChatResponse, HealthResponse
from weekwise.schemas.plan import ChatMessage
from weekwise.utils.constants import DEFAULT_LANGUAGE
from weekwise.utils.messages import CHAT_TEXT, localized


class ApiError(RuntimeError):
    """The gateway answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, error_type: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type


class WeekwiseApi:
    def __init__(self, base_url: str, timeout: float | None = None, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def chat(
        self,
        message: str,
        history: list[ChatMessage] | None = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> ChatResponse:
        payload = {
            "message": message,
            "history": [item.model_dump() for item in history or []],
            "language": language,
        }
        resp = self.session.post(f"{self.base_url}/chat", json=payload, timeout=self.timeout)
        return self._reply(resp, localized(CHAT_TEXT, language, "request_failed"))

    def generate_plan(self, prompt: str | None = None, language: str = DEFAULT_LANGUAGE) -> ChatResponse:
        payload: dict[str, str] = {"language": language}
        if prompt:
            payload["prompt"] = prompt
        resp = self.session.post(f"{self.base_url}/generate-plan", json=payload, timeout=self.timeout)
        return self._reply(resp, localized(CHAT_TEXT, language, "generate_failed"))

    def check_health(self) -> HealthResponse:
        resp = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        if not resp.ok:
            raise ApiError(localized(CHAT_TEXT, DEFAULT_LANGUAGE, "health_failed"), resp.status_code)
        return HealthResponse.model_validate(resp.json())

    @staticmethod
    def _reply(resp: requests.Response, fallback: str) -> ChatResponse:
        if not resp.ok:
            try:
                data = resp.json()
            except ValueError:
                data = {}
            if not isinstance(data, dict):
                data = {}
            message = data.get("details") or data.get("error") or fallback
            raise ApiError(message, resp.status_code, data.get("errorType"))
        try:
            return ChatResponse.model_validate(resp.json())
        except ValueError as exc:
            # Invalid JSON or a body that fails ChatResponse validation.
            raise ApiError(fallback, resp.status_code) from exc
