"""Parsing of model completions into a structured or plain reply."""

from __future__ import annotations

import json
import logging
from typing import Any, Literal, Union

from pydantic import BaseModel, ValidationError

from weekwise.schemas.plan import ModelReply, TrainingPlan

logger = logging.getLogger("uvicorn.error")


class StructuredReply(BaseModel):
    """Completion that is valid JSON matching the reply contract.

    ``body`` is the parsed object exactly as the model emitted it.
    """

    kind: Literal["structured"] = "structured"
    body: dict[str, Any]
    reply: ModelReply

    @property
    def response(self) -> str:
        return self.reply.response

    @property
    def training_plan(self) -> TrainingPlan | None:
        return self.reply.training_plan

    def to_body(self) -> dict[str, Any]:
        return self.body


class PlainReply(BaseModel):
    """Completion that did not follow the contract; the raw text becomes the reply."""

    kind: Literal["plain"] = "plain"
    response: str

    @property
    def training_plan(self) -> None:
        return None

    def to_body(self) -> dict[str, Any]:
        return {"response": self.response, "trainingPlan": None}


ParsedReply = Union[StructuredReply, PlainReply]


def parse_model_reply(raw: str) -> ParsedReply:
    """Strictly parse ``raw`` as the reply JSON, degrading to a plain reply.

    No fence stripping or repair is attempted: anything that is not a JSON object
    matching the contract is returned untouched as ``PlainReply(response=raw)``.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Model reply is not JSON, falling back to plain chat: %s", exc)
        return PlainReply(response=raw)
    if not isinstance(data, dict):
        logger.warning("Model reply JSON is %s, not an object", type(data).__name__)
        return PlainReply(response=raw)
    try:
        reply = ModelReply.model_validate(data)
    except ValidationError as exc:
        logger.warning("Model reply does not match the reply schema: %s", exc.errors())
        return PlainReply(response=raw)
    return StructuredReply(body=data, reply=reply)
