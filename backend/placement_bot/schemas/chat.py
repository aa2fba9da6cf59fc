from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChatTurn(BaseModel):
    """A single message in conversation history."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(..., pattern="^(system|user|assistant)$")
    content: str


class ChatRequest(BaseModel):
    """Request body for sending a chat message.

    `message` is optional at the schema level so the route can answer a
    missing message with 400 instead of a validation error.
    """

    message: str | None = None
    history: list[ChatTurn] = Field(default_factory=list)


class ChatResponse(BaseModel):
    success: bool = True
    response: str
    usage: dict[str, Any] | None = None
