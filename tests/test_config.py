from chat_playground.config import Settings
from chat_playground.models import ChatOptions


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.llm_provider == "openai"
    assert settings.default_chat_options == ChatOptions(
        model="gpt-4o",
        max_tokens=300,
        temperature=0.5,
        frequency_penalty=0.2,
        presence_penalty=0.1,
        top_p=1.0,
    )


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CHAT_MAX_TOKENS", "512")
    monkeypatch.setenv("ENVIRONMENT", "Production")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")

    settings = Settings(_env_file=None)

    assert settings.default_chat_options.max_tokens == 512
    assert settings.environment == "Production"
    assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]


def test_chat_options_only_pass_set_values():
    assert ChatOptions(temperature=0.0, max_tokens=10).as_kwargs() == {
        "temperature": 0.0,
        "max_tokens": 10,
    }
