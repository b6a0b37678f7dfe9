"""
FastAPI application entry point for the chat proxy.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chat_proxy.config import settings
from chat_proxy.routes.chat import router as chat_router
from chat_proxy.routes.health import router as health_router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (empty means none)
    - anything else: Allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] outside production.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No web origins allowed. Set CORS_ALLOWED_ORIGINS for web clients."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="Chat Proxy API",
    description="Relays chat requests to the chatbot backend",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(chat_router)

logger.info(f"FastAPI app initialized, relaying /api/chat to {settings.CHATBOT_BACKEND_URL}")
