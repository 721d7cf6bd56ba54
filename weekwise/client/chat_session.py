"""Chat loop: optimistic transcript, one request in flight, retire on plan."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

import requests
from pydantic import ValidationError

from weekwise.client.api import ApiError, WeekwiseApi
from weekwise.schemas.plan import ChatMessage, TrainingPlan
from weekwise.utils.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from weekwise.utils.messages import CHAT_TEXT, localized

logger = logging.getLogger(__name__)


class ChatState(str, Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"
    COMPLETED = "completed"


class ChatBusyError(RuntimeError):
    """A reply is still pending; the composer is disabled."""


class ChatCompletedError(RuntimeError):
    """A plan was generated; this session takes no more messages."""


class ChatSession:
    """One conversation with the gateway.

    ``idle -> awaiting_reply -> idle | completed``. Once a reply carries a plan
    the session is completed and the plan goes to ``on_plan``.
    """

    def __init__(
        self,
        api: WeekwiseApi,
        language: str = DEFAULT_LANGUAGE,
        on_plan: Callable[[TrainingPlan], None] | None = None,
    ):
        self.api = api
        self.language = language if language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
        self.on_plan = on_plan
        self.state = ChatState.IDLE
        self.plan: TrainingPlan | None = None
        self.messages: list[ChatMessage] = []
        self._reset_transcript()

    @property
    def completed(self) -> bool:
        return self.state is ChatState.COMPLETED

    def set_language(self, language: str) -> None:
        """Switch language; the transcript restarts with the new welcome message."""
        if self.state is not ChatState.IDLE:
            raise ChatBusyError("Language can only be switched while idle")
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")
        self.language = language
        self._reset_transcript()

    def send(self, text: str) -> ChatMessage | None:
        """Send ``text`` and append the assistant's reply (or an apology).

        Returns the appended assistant message, or None for blank input.
        """
        if self.state is ChatState.AWAITING_REPLY:
            raise ChatBusyError("A reply is still pending")
        if self.state is ChatState.COMPLETED:
            raise ChatCompletedError("The training plan has already been generated")
        if not text or not text.strip():
            return None

        history = list(self.messages)
        self.messages.append(ChatMessage(role="user", content=text))
        self.state = ChatState.AWAITING_REPLY
        try:
            reply = self.api.chat(text, history, self.language)
        except (ApiError, ValidationError, requests.RequestException) as exc:
            logger.error("Error calling AI API: %s", exc)
            self.state = ChatState.IDLE
            return self._append_assistant(localized(CHAT_TEXT, self.language, "apology"))

        message = self._append_assistant(reply.response)
        if reply.training_plan is None:
            logger.info("Reply carries no training plan")
            self.state = ChatState.IDLE
            return message

        self.plan = reply.training_plan
        self.state = ChatState.COMPLETED
        if self.on_plan is not None:
            self.on_plan(reply.training_plan)
        else:
            logger.warning("Training plan generated but no on_plan handler is set")
        return message

    def _append_assistant(self, text: str) -> ChatMessage:
        message = ChatMessage(role="assistant", content=text)
        self.messages.append(message)
        return message

    def _reset_transcript(self) -> None:
        self.messages = [
            ChatMessage(role="assistant", content=localized(CHAT_TEXT, self.language, "welcome"))
        ]
