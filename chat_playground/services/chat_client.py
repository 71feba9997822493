"""Chat model factory.

Builds the LangChain chat model every request talks to. Default chat options
from the settings are applied at construction time so they hold for every
prompt unless a call overrides them.
"""

import logging

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI

from chat_playground.config import Settings

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("openai", "ollama")


def build_chat_model(settings: Settings) -> BaseChatModel:
    """Create the chat model for the configured provider.

    Args:
        settings: Application settings with provider and default options.

    Returns:
        A chat model with the client-level default options applied.

    Raises:
        ValueError: If ``settings.llm_provider`` is not supported.
    """
    provider = settings.llm_provider.lower()
    options = settings.default_chat_options.as_kwargs()

    if provider == "openai":
        # Without a configured key the client falls back to OPENAI_API_KEY.
        client_kwargs = {}
        if settings.openai_api_key:
            client_kwargs["api_key"] = settings.openai_api_key
        if settings.openai_base_url:
            client_kwargs["base_url"] = settings.openai_base_url
    elif provider == "ollama":
        # Ollama ignores the key but the OpenAI client requires one.
        client_kwargs = {"api_key": "ollama", "base_url": settings.ollama_base_url}
        options["model"] = settings.ollama_model
    else:
        raise ValueError(
            f"Unsupported LLM provider: '{settings.llm_provider}'. "
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    logger.info(f"Building {provider} chat model: {options['model']}")
    return ChatOpenAI(
        **options,
        **client_kwargs,
        timeout=settings.llm_timeout_seconds,
        max_retries=settings.llm_max_retries,
    )
