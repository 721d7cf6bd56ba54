"""Coach agent node: sends the conversation to the hosted model."""

import logging

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from weekwise.config import Settings
from weekwise.llm.github_models_client import get_chat_model
from weekwise.models.state import GatewayState
from weekwise.prompts.training_plan import get_system_prompt
from weekwise.schemas.plan import ChatMessage

logger = logging.getLogger("uvicorn.error")

_MESSAGE_TYPES = {
    "system": SystemMessage,
    "user": HumanMessage,
    "assistant": AIMessage,
}


def build_messages(
    language: str, history: list[ChatMessage], user_message: str
) -> list[BaseMessage]:
    """Return [system prompt, *history, user message] in that order."""
    messages: list[BaseMessage] = [SystemMessage(content=get_system_prompt(language))]
    for item in history:
        messages.append(_MESSAGE_TYPES[item.role](content=item.content))
    messages.append(HumanMessage(content=user_message))
    return messages


def coach_node(state: GatewayState, settings: Settings, llm=None) -> dict:
    """Call the model once with the system prompt, history and new message.

    Populates: completion.

    Parameters
    ----------
    state : GatewayState
    settings : Settings
        Used to build the chat model when ``llm`` is not given.
    llm : optional
        Pre-built chat model (tests pass a fake).

    Returns
    -------
    dict
        Partial state update with ``completion``.
    """
    language = state.get("language", "zh")
    messages = build_messages(
        language, state.get("history") or [], state.get("user_message", "")
    )
    if llm is None:
        llm = get_chat_model(settings)
    logger.info("Coach LLM call started (language=%s, messages=%d)", language, len(messages))
    response = llm.invoke(messages)
    logger.info("Coach LLM call finished")
    content = getattr(response, "content", response)
    if not isinstance(content, str):
        content = "" if content is None else str(content)
    logger.debug("Raw model completion (%d chars): %s", len(content), content)
    return {"completion": content}
