"""Factory for the chat model served by GitHub Models."""

from langchain_openai import ChatOpenAI

from weekwise.config import Settings
from weekwise.utils.errors import ModelProviderError


def get_chat_model(settings: Settings):
    """Return a ChatOpenAI instance pointed at the configured inference endpoint.

    Parameters
    ----------
    settings : Settings
        Process configuration; token, endpoint, model and sampling parameters.

    Returns
    -------
    langchain_openai.ChatOpenAI
        A chat model with fixed sampling parameters and retries disabled.

    Raises
    ------
    ModelProviderError
        If no access token is configured.
    """
    if not settings.has_token:
        raise ModelProviderError(
            "401 Unauthorized: GITHUB_TOKEN is not configured",
            status_code=401,
        )
    return ChatOpenAI(
        base_url=settings.models_endpoint,
        api_key=settings.github_token,
        model=settings.model_name,
        temperature=settings.temperature,
        top_p=settings.top_p,
        max_tokens=settings.max_tokens,
        timeout=settings.model_timeout_seconds,
        max_retries=0,
    )
