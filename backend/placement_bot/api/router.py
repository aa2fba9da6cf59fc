from fastapi import APIRouter

from placement_bot.api.v1 import chat, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router, tags=["Health"])
api_router.include_router(chat.router, prefix="/placement-bot", tags=["Chat"])
