"""
Chat relay endpoint.

Forwards the caller's JSON body to the chatbot backend and returns the
backend's JSON reply. Any failure along the way becomes the same generic
500 response.
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from chat_proxy.schemas.chat import ChatErrorResponse
from chat_proxy.services import forward_chat_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    status_code=status.HTTP_200_OK,
    summary="Relay a chat request to the chatbot backend",
    description="""
    Forward an arbitrary JSON body to the chatbot backend.

    This endpoint:
    - Does not validate the body (any JSON value is accepted)
    - Returns the backend's JSON reply verbatim with status 200
    - Returns {"message": "Application not found"} with status 500 on any error
    """,
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ChatErrorResponse},
    },
)
async def relay_chat(request: Request) -> JSONResponse:
    """
    Relay one chat request.

    Parse Request
    - Decode the raw body as JSON (failure -> 500)

    Call Service
    - forward_chat_payload() POSTs it to the backend once

    Map Output -> Response
    - Backend JSON passed through with 200, whatever the backend status
    """
    try:
        body = await request.json()

        data = await forward_chat_payload(body)

        return JSONResponse(status_code=status.HTTP_200_OK, content=data)

    except Exception as e:
        logger.error(f"Error communicating with chatbot: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ChatErrorResponse().model_dump(),
        )
