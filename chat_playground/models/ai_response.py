"""Structured reply shape that model output is mapped into."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AiResponse(BaseModel):
    """A titled piece of generated text with its creation timestamp."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(default=None, description="Short title of the answer")
    data: str | None = Field(default=None, description="Free-form answer text")
    created_at: str | None = Field(
        default=None, description="Timestamp of when the answer was created"
    )
