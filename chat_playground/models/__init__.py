"""Pydantic models for request/response validation.

This module contains data models used for:
- Structured replies mapped from model output
- Generation options passed to the chat model
"""

from chat_playground.models.ai_response import AiResponse
from chat_playground.models.chat_options import ChatOptions

__all__ = ["AiResponse", "ChatOptions"]
