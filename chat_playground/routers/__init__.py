"""API route handlers.

This module contains FastAPI routers for:
- Chat endpoints under /api/v1/chat
"""

from chat_playground.routers.chat import router as chat_router

__all__ = ["chat_router"]
