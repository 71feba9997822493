"""FastAPI dependencies shared by the routers."""

from functools import lru_cache

from fastapi import Depends
from langchain_core.language_models.chat_models import BaseChatModel

from chat_playground.config import settings
from chat_playground.services import ChatService, build_chat_model


@lru_cache
def get_chat_model() -> BaseChatModel:
    """Application-wide chat model, built on first use."""
    return build_chat_model(settings)


def get_chat_service(
    chat_model: BaseChatModel = Depends(get_chat_model),
) -> ChatService:
    return ChatService(chat_model, prompts_dir=settings.prompts_dir)
