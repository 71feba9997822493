"""Business logic services.

This module contains:
- The chat model factory (provider selection, default options)
- The chat service exposing each prompting pattern
- Conversion of model replies into typed entities
"""

from chat_playground.services.ai_service import ChatService
from chat_playground.services.chat_client import build_chat_model
from chat_playground.services.entity_converter import EntityConverter

__all__ = ["ChatService", "EntityConverter", "build_chat_model"]
