"""Placement bot chat endpoint.

Forwards the message and prior turns to OpenRouter and relays the reply.
"""
import logging

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from placement_bot.config import Settings, get_settings
from placement_bot.schemas.chat import ChatRequest, ChatResponse
from placement_bot.services.openrouter import (
    UpstreamError,
    complete_chat,
    get_http_client,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat(
    request: ChatRequest | None = None,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Send a chat message and receive the assistant's reply."""
    if request is None or not request.message:
        return JSONResponse(
            status_code=400,
            content={"error": "Message is required"},
        )

    try:
        reply, usage = await complete_chat(
            client, settings, request.message, request.history
        )
    except UpstreamError as e:
        return JSONResponse(
            status_code=e.status_code,
            content={"error": e.message},
        )
    except Exception as e:
        logger.exception(f"Chat request failed: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(e)},
        )

    return ChatResponse(response=reply, usage=usage)
