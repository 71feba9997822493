"""Chat endpoints.

Every endpoint hands its query parameters to :class:`ChatService` and returns
the reply, either as plain text or mapped into :class:`AiResponse`.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from chat_playground.dependencies import get_chat_service
from chat_playground.models import AiResponse
from chat_playground.services import ChatService
from chat_playground.services.ai_service import DEFAULT_PERSONA, DEFAULT_QUESTION

router = APIRouter(prefix="/api/v1/chat", tags=["chat"])


@router.get("", response_class=PlainTextResponse)
async def ask(
    prompt: str = Query(...),
    service: ChatService = Depends(get_chat_service),
) -> str:
    """Send the prompt to the model and return its reply text."""
    return await service.chat(prompt)


@router.get("/response", response_model=AiResponse)
async def get_response(
    prompt: str = Query(...),
    service: ChatService = Depends(get_chat_service),
) -> AiResponse:
    """Return the reply mapped into a single AiResponse object.

    Example: ``GET /api/v1/chat/response?prompt=Hello``
    """
    return await service.get_response(prompt)


@router.get("/responses", response_model=list[AiResponse])
async def get_response_list(
    prompt: str = Query(...),
    service: ChatService = Depends(get_chat_service),
) -> list[AiResponse]:
    """Return the reply mapped into a list of AiResponse objects."""
    return await service.get_response_list(prompt)


@router.get("/defaults", response_class=PlainTextResponse)
async def get_response_using_prompt_defaults(
    prompt: str = Query(...),
    service: ChatService = Depends(get_chat_service),
) -> str:
    """Send the prompt with its own per-call generation options."""
    return await service.get_response_using_prompt_defaults(prompt)


@router.get("/template", response_class=PlainTextResponse)
async def get_response_using_prompt_template(
    sport: str = "Football",
    player_name: str = Query("Harry Kane", alias="playerName"),
    service: ChatService = Depends(get_chat_service),
) -> str:
    """Render the user prompt template with the given sport and player."""
    return await service.get_response_using_prompt_template(sport, player_name)


@router.get("/system-template", response_class=PlainTextResponse)
async def get_response_using_system_and_user_prompt_template(
    sport: str = "football",
    player_name: str = Query("Wayne Roney", alias="playerName"),
    service: ChatService = Depends(get_chat_service),
) -> str:
    """Send a system message followed by the rendered user prompt template."""
    return await service.get_response_using_system_and_user_prompt_template(
        sport, player_name
    )


@router.get("/fluent", response_class=PlainTextResponse)
async def get_response_using_fluent_api(
    question: str = DEFAULT_QUESTION,
    persona: str = DEFAULT_PERSONA,
    service: ChatService = Depends(get_chat_service),
) -> str:
    """Run the persona and question through a prompt, model and parser chain."""
    return await service.get_response_using_fluent_api(question, persona)


@router.get("/external-template", response_class=PlainTextResponse)
async def get_response_by_fetching_prompt_from_external_files(
    sport: str = "football",
    player_name: str = Query("Wayne Roney", alias="playerName"),
    service: ChatService = Depends(get_chat_service),
) -> str:
    """Build the prompt from the system and user message files."""
    return await service.get_response_by_fetching_prompt_from_external_files(
        sport, player_name
    )
