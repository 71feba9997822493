import pytest

from chat_playground.utils import load_prompt_template


def test_packaged_templates():
    system = load_prompt_template("system_message.txt")
    user = load_prompt_template("user_message.txt")

    assert set(system.input_variables) == {"sport"}
    assert set(user.input_variables) == {"sport", "player_name"}
    assert user.format(sport="golf", player_name="Rory McIlroy").startswith(
        "Explain briefly about golf in 100 words"
    )


def test_custom_directory(tmp_path):
    (tmp_path / "greeting.txt").write_text("Hello {name}!", encoding="utf-8")

    template = load_prompt_template("greeting.txt", tmp_path)

    assert template.format(name="Ada") == "Hello Ada!"


def test_missing_template(tmp_path):
    with pytest.raises(FileNotFoundError, match="nope.txt"):
        load_prompt_template("nope.txt", tmp_path)
