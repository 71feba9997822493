from typing import Any

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from pydantic import Field

from chat_playground.dependencies import get_chat_model
from chat_playground.main import app


class RecordingChatModel(FakeListChatModel):
    """Fake chat model that replays canned replies and records each call."""

    calls: list[dict[str, Any]] = Field(default_factory=list)

    def _call(self, messages, stop=None, run_manager=None, **kwargs):
        self.calls.append({"messages": messages, "kwargs": kwargs})
        return super()._call(messages, stop=stop, run_manager=run_manager, **kwargs)

    @property
    def last_messages(self):
        return self.calls[-1]["messages"]

    @property
    def last_turns(self):
        """(role, content) pairs of the last call, e.g. ("human", "Hi")."""
        return [(message.type, message.content) for message in self.last_messages]

    @property
    def last_kwargs(self):
        return self.calls[-1]["kwargs"]


@pytest.fixture
def fake_model():
    """Factory installing a RecordingChatModel with the given replies into the app."""

    def _install(*responses: str) -> RecordingChatModel:
        model = RecordingChatModel(responses=list(responses))
        app.dependency_overrides[get_chat_model] = lambda: model
        return model

    yield _install
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)
