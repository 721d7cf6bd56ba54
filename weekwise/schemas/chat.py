"""Request and response schemas for the /api endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from weekwise.schemas.plan import ChatMessage, TrainingPlan
from weekwise.utils.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES


def _normalize_language(value: Any) -> str:
    if isinstance(value, str) and value.strip().lower() in SUPPORTED_LANGUAGES:
        return value.strip().lower()
    return DEFAULT_LANGUAGE


class ChatRequest(BaseModel):
    """Incoming chat message with the transcript so far."""

    message: str | None = None
    history: list[ChatMessage] = Field(default_factory=list)
    language: str = DEFAULT_LANGUAGE

    @field_validator("language", mode="before")
    @classmethod
    def normalize_language(cls, value: Any) -> str:
        return _normalize_language(value)


class GeneratePlanRequest(BaseModel):
    """One-shot plan generation; ``prompt`` is optional."""

    prompt: str | None = None
    language: str = DEFAULT_LANGUAGE

    @field_validator("language", mode="before")
    @classmethod
    def normalize_language(cls, value: Any) -> str:
        return _normalize_language(value)


class ChatResponse(BaseModel):
    """Reply body shared by /api/chat and /api/generate-plan."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    response: str
    training_plan: TrainingPlan | None = Field(default=None, alias="trainingPlan")


class AzureConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    endpoint: str
    model: str
    has_token: bool = Field(alias="hasToken")


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str
    timestamp: str
    azure_config: AzureConfig = Field(alias="azureConfig")
