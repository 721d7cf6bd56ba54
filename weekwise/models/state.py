"""LangGraph shared state definition."""

from typing import Any
from typing_extensions import TypedDict

from weekwise.schemas.plan import ChatMessage
from weekwise.utils.llm_parse import ParsedReply


class GatewayState(TypedDict, total=False):
    """State passed between the gateway pipeline nodes.

    Fields
    ------
    language : str
        Reply language selector (zh | en).
    history : list[ChatMessage]
        Prior transcript, oldest first.
    user_message : str
        The message sent in this turn.
    completion : str
        Raw text returned by the model (populated by coach).
    reply : ParsedReply
        Structured or plain reply (populated by parse_reply).
    body : dict[str, Any]
        HTTP response body (populated by format_response).
    """

    language: str
    history: list[ChatMessage]
    user_message: str
    completion: str
    reply: ParsedReply
    body: dict[str, Any]
