"""
Health check route for the chat proxy.

This endpoint is PUBLIC and only reports that the proxy process is up.
It does not contact the chatbot backend.
"""

import logging

from fastapi import APIRouter

from chat_proxy.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint. "
        "Returns a simple status indicator for monitoring and load balancing."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
