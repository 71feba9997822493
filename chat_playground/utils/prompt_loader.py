"""Load prompt templates kept in text files outside the code."""

import logging
from pathlib import Path

from langchain_core.prompts import PromptTemplate

logger = logging.getLogger(__name__)

PACKAGED_PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"


def load_prompt_template(name: str, prompts_dir: Path | None = None) -> PromptTemplate:
    """Read ``name`` from the prompts directory as a prompt template.

    Args:
        name: File name inside the prompts directory, e.g. ``"user_message.txt"``.
        prompts_dir: Directory to read from. Defaults to the packaged prompts.

    Raises:
        FileNotFoundError: If the template file does not exist.
    """
    path = (prompts_dir or PACKAGED_PROMPTS_DIR) / name
    if not path.is_file():
        raise FileNotFoundError(f"Prompt template not found: {path}")

    logger.debug(f"Loading prompt template from {path}")
    return PromptTemplate.from_file(path, encoding="utf-8")
