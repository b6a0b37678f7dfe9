"""
Chat relay schemas.

Request and success bodies are opaque JSON and have no model: whatever the
caller sends is forwarded, whatever the chatbot backend answers is returned.
Only the failure body has a fixed shape.
"""

from pydantic import BaseModel, ConfigDict, Field

from chat_proxy.utils.constants import APPLICATION_NOT_FOUND_MESSAGE


class ChatErrorResponse(BaseModel):
    """
    Response model for any failed POST /api/chat call (HTTP 500).

    The message is identical for every cause: bad request body,
    unreachable backend, or unreadable backend reply.
    """

    message: str = Field(
        default=APPLICATION_NOT_FOUND_MESSAGE,
        description="Generic failure message",
        examples=[APPLICATION_NOT_FOUND_MESSAGE]
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": APPLICATION_NOT_FOUND_MESSAGE
            }
        }
    )
