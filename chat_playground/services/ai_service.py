"""Chat service: the different ways of prompting the chat model.

Each method shows one usage pattern and makes exactly one model call. Errors
from the model or from mapping its reply are not caught here.
"""

import logging
from pathlib import Path

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import (
    ChatPromptTemplate,
    HumanMessagePromptTemplate,
    PromptTemplate,
    SystemMessagePromptTemplate,
)

from chat_playground.models import AiResponse, ChatOptions
from chat_playground.services.entity_converter import EntityConverter
from chat_playground.utils.prompt_loader import load_prompt_template

logger = logging.getLogger(__name__)

USER_TEMPLATE = (
    "Explain briefly about {sport} in 100 words, "
    "and also provide a short summary of {player_name}."
)
SYSTEM_TEMPLATE = (
    "You are a world-class football expert who provides clear, accurate, "
    "and insightful facts."
)

DEFAULT_PERSONA = "Act as an Expert in Java"
DEFAULT_QUESTION = "Tell me about Collections Framework in Java"

# Bound to a single call, not shared with the rest of the application. The
# model is left to the client so the configured provider keeps its own.
PROMPT_OPTIONS = ChatOptions(
    max_tokens=200,
    temperature=0.5,
    frequency_penalty=0.2,
    presence_penalty=0.1,
    top_p=1.0,
)

STRUCTURED_PROMPT = ChatPromptTemplate.from_messages(
    [("human", "{prompt}\n\n{format_instructions}")]
)
RESPONSE_CONVERTER: EntityConverter[AiResponse] = EntityConverter(AiResponse)
RESPONSE_LIST_CONVERTER: EntityConverter[list[AiResponse]] = EntityConverter(
    list[AiResponse]
)


class ChatService:
    """Forwards prompts to a chat model and shapes its replies."""

    def __init__(self, chat_model: BaseChatModel, prompts_dir: Path | None = None):
        self.chat_model = chat_model
        self.prompts_dir = prompts_dir
        self._text = StrOutputParser()

    async def chat(self, prompt: str) -> str:
        """Send a prompt as-is and return the reply text.

        The call metadata (model, token usage, finish reason) is logged.
        """
        logger.debug("Sending plain prompt")
        message = await self.chat_model.ainvoke(prompt)
        logger.info(
            f"metadata: {message.response_metadata}",
            extra={"usage": getattr(message, "usage_metadata", None)},
        )
        return self._text.invoke(message)

    async def get_response(self, prompt: str) -> AiResponse:
        """Ask for a JSON object and map it into an :class:`AiResponse`."""
        return await self._structured(prompt, RESPONSE_CONVERTER)

    async def get_response_list(self, prompt: str) -> list[AiResponse]:
        """Ask for a JSON array and map each element into an :class:`AiResponse`."""
        return await self._structured(prompt, RESPONSE_LIST_CONVERTER)

    async def _structured(self, prompt: str, converter: EntityConverter):
        messages = STRUCTURED_PROMPT.format_messages(
            prompt=prompt, format_instructions=converter.get_format_instructions()
        )
        message = await self.chat_model.ainvoke(messages)
        return converter.convert(self._text.invoke(message))

    async def get_response_using_prompt_defaults(self, message: str) -> str:
        """Send a prompt that carries its own generation options.

        The options only apply to this call. Options that several endpoints
        need belong in the client defaults instead.
        """
        model = self.chat_model.bind(**PROMPT_OPTIONS.as_kwargs())
        reply = await model.ainvoke(message)
        return self._text.invoke(reply)

    async def get_response_using_prompt_template(
        self, sport: str = "Football", player_name: str = "Harry Kane"
    ) -> str:
        """Render a user prompt template and send the result."""
        rendered = PromptTemplate.from_template(USER_TEMPLATE).format(
            sport=sport, player_name=player_name
        )
        reply = await self.chat_model.ainvoke(rendered)
        return self._text.invoke(reply)

    async def get_response_using_system_and_user_prompt_template(
        self, sport: str = "football", player_name: str = "Wayne Roney"
    ) -> str:
        """Send a fixed system message followed by a rendered user message."""
        system_message = SystemMessagePromptTemplate.from_template(SYSTEM_TEMPLATE).format()
        user_message = HumanMessagePromptTemplate.from_template(USER_TEMPLATE).format(
            sport=sport, player_name=player_name
        )
        reply = await self.chat_model.ainvoke([system_message, user_message])
        return self._text.invoke(reply)

    async def get_response_using_fluent_api(
        self, question: str = DEFAULT_QUESTION, persona: str = DEFAULT_PERSONA
    ) -> str:
        """Chain prompt, model and text parser together and run the chain."""
        chain = (
            ChatPromptTemplate.from_messages(
                [("system", "{persona}"), ("human", "{question}")]
            )
            | self.chat_model
            | self._text
        )
        return await chain.ainvoke({"persona": persona, "question": question})

    async def get_response_by_fetching_prompt_from_external_files(
        self, sport: str = "football", player_name: str = "Wayne Roney"
    ) -> str:
        """Build system and user messages from prompt files and send them."""
        prompt = ChatPromptTemplate.from_messages(
            [
                SystemMessagePromptTemplate(
                    prompt=load_prompt_template("system_message.txt", self.prompts_dir)
                ),
                HumanMessagePromptTemplate(
                    prompt=load_prompt_template("user_message.txt", self.prompts_dir)
                ),
            ]
        )
        chain = prompt | self.chat_model | self._text
        return await chain.ainvoke({"sport": sport, "player_name": player_name})
