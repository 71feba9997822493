"""Map model replies onto typed Python objects.

The target type is captured by a pydantic ``TypeAdapter``, so parameterized
targets such as ``list[AiResponse]`` keep their element type at runtime.
"""

import json
from typing import Any, Generic, TypeVar

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import JsonOutputParser
from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")

FORMAT_INSTRUCTIONS = """Your response should be in JSON format.
Do not include any explanations, only provide a RFC8259 compliant JSON response following this format without deviation.
Do not include markdown code blocks in your response.
Here is the JSON Schema instance your output must adhere to:
{schema}"""


class EntityConverter(Generic[T]):
    """Builds format instructions for a target type and parses replies into it."""

    def __init__(self, target: Any):
        self._adapter: TypeAdapter[T] = TypeAdapter(target)
        self._parser = JsonOutputParser()

    def get_format_instructions(self) -> str:
        schema = self._adapter.json_schema(by_alias=True)
        return FORMAT_INSTRUCTIONS.format(schema=json.dumps(schema, indent=2))

    def convert(self, text: str) -> T:
        """Parse a reply, optionally wrapped in a ```json fence, into the target type.

        Raises:
            OutputParserException: If the reply is not JSON or does not fit the target.
        """
        data = self._parser.parse(text)
        try:
            return self._adapter.validate_python(data)
        except ValidationError as e:
            raise OutputParserException(
                f"Reply does not match the expected shape: {e}", llm_output=text
            ) from e
