"""Schemas for chat transcripts and weekly training plans."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str


class TrainingDay(BaseModel):
    model_config = ConfigDict(extra="allow")

    day: str
    content: str = ""
    duration: str = ""
    notes: str = ""


class TrainingStrategy(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str
    description: str = ""


class TrainingPlan(BaseModel):
    """A full weekly plan as emitted by the model."""

    model_config = ConfigDict(extra="allow")

    title: str = ""
    subtitle: str = ""
    schedule: list[TrainingDay] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)
    strategies: list[TrainingStrategy] = Field(default_factory=list)


class ModelReply(BaseModel):
    """The JSON object the system prompt asks the model to return."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    response: str
    training_plan: TrainingPlan | None = Field(default=None, alias="trainingPlan")
