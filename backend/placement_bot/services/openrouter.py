"""OpenRouter chat-completion client for the placement bot.

Builds the upstream turn sequence (system prompt, history, new message) and
relays a single completion request. No retries, no streaming.
"""
import logging
from collections.abc import AsyncGenerator
from functools import lru_cache
from pathlib import Path
from typing import Any

import httpx
from fastapi import Depends

from placement_bot.config import Settings, get_settings
from placement_bot.schemas.chat import ChatTurn

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).parent.parent / "prompts"

FALLBACK_RESPONSE = "Sorry, I could not generate a response."
UPSTREAM_ERROR_FALLBACK = "Failed to get response from AI"


@lru_cache
def load_system_prompt() -> str:
    """Load the placement bot system instruction."""
    prompt_path = PROMPTS_DIR / "system.txt"
    return prompt_path.read_text(encoding="utf-8").strip()


class UpstreamError(Exception):
    """Raised when OpenRouter answers with a non-success status."""

    def __init__(self, status_code: int, message: str = UPSTREAM_ERROR_FALLBACK):
        self.status_code = status_code
        self.message = message
        super().__init__(self.message)


async def get_http_client(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Per-request outbound client, closed when the request finishes."""
    async with httpx.AsyncClient(timeout=settings.openrouter_timeout) as client:
        yield client


def build_messages(message: str, history: list[ChatTurn]) -> list[dict[str, str]]:
    """System turn first, history unchanged, new user message last."""
    messages = [{"role": "system", "content": load_system_prompt()}]
    messages.extend({"role": turn.role, "content": turn.content} for turn in history)
    messages.append({"role": "user", "content": message})
    return messages


def build_payload(messages: list[dict[str, str]], settings: Settings) -> dict[str, Any]:
    return {
        "model": settings.openrouter_model,
        "messages": messages,
        "temperature": settings.llm_temperature,
        "max_tokens": settings.llm_max_tokens,
        "top_p": settings.llm_top_p,
    }


def build_headers(settings: Settings) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {settings.openrouter_api_key}",
        "Content-Type": "application/json",
        "HTTP-Referer": settings.site_url,
        "X-Title": settings.app_title,
    }


def extract_error_message(response: httpx.Response) -> str:
    """Pull `error.message` out of an upstream error body, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return UPSTREAM_ERROR_FALLBACK

    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return UPSTREAM_ERROR_FALLBACK


def extract_reply(data: dict[str, Any]) -> str:
    """Text of the first generated choice, or the fallback apology."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return FALLBACK_RESPONSE
    if not isinstance(content, str) or not content:
        return FALLBACK_RESPONSE
    return content


async def complete_chat(
    client: httpx.AsyncClient,
    settings: Settings,
    message: str,
    history: list[ChatTurn],
) -> tuple[str, dict[str, Any] | None]:
    """Send one chat-completion request and return (reply, usage).

    Raises:
        ValueError: API key not configured, or success body is not a JSON object.
        UpstreamError: OpenRouter returned a non-success status.
        httpx.HTTPError: transport failure.
    """
    if not settings.has_api_key:
        raise ValueError(
            "OpenRouter API key not configured. Set OPENROUTER_API_KEY in .env."
        )

    messages = build_messages(message, history)
    logger.info(
        f"Calling OpenRouter: model={settings.openrouter_model}, turns={len(messages)}"
    )

    response = await client.post(
        settings.chat_completions_url,
        headers=build_headers(settings),
        json=build_payload(messages, settings),
    )

    if not response.is_success:
        error_message = extract_error_message(response)
        logger.warning(
            f"OpenRouter error: status={response.status_code}, message={error_message}"
        )
        raise UpstreamError(response.status_code, error_message)

    data = response.json()
    if not isinstance(data, dict):
        raise ValueError("Unexpected response format from OpenRouter.")

    usage = data.get("usage")
    return extract_reply(data), usage if isinstance(usage, dict) else None
