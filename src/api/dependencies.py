from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator
import logging

from fastapi import FastAPI

from src.api.chat_service import ChatService
from src.core.config import ApiSettings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> ApiSettings:
    return ApiSettings.from_env()


@lru_cache(maxsize=1)
def get_chat_service() -> ChatService:
    service = ChatService(get_settings())
    logger.info("Chat service ready: %r", service)
    return service


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    try:
        yield
    finally:
        # only close a service that was actually built
        if get_chat_service.cache_info().currsize:
            await get_chat_service().close()
