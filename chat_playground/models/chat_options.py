"""Generation options for a chat model call."""

from typing import Any

from pydantic import BaseModel


class ChatOptions(BaseModel):
    """Model name and sampling parameters sent along with a prompt.

    Unset fields are left to the chat model's own defaults.
    """

    model: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None
    top_p: float | None = None

    def as_kwargs(self) -> dict[str, Any]:
        """Return the set options as keyword arguments for a chat model call."""
        return self.model_dump(exclude_none=True)
