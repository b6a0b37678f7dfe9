"""
Health check endpoint schemas.

The health endpoint is PUBLIC and returns a simple status indicator.
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """
    Response model for GET /health endpoint.

    Used by load balancers and deployment checks. Answering does not
    involve the chatbot backend.
    """

    status: str = Field(
        default="ok",
        description="Health status of the proxy (always 'ok' if responding)",
        examples=["ok"]
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok"
            }
        }
    )
