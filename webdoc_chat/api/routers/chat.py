"""Chat endpoint."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ...composition.container import get_chat_service
from ...domain.exceptions import ValidationError
from ..models import ChatRequest, ChatResponse, ErrorResponse, StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

CHAT_FAILED = "Failed to process chat request"


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def chat(request: ChatRequest):
    """Answer the last message of a conversation.

    Web lookups and stored PDF text are pulled in as context. Without a
    configured model key the reply is a templated fallback.
    """
    try:
        service = get_chat_service()
        reply = service.reply([message.to_domain() for message in request.messages])
    except ValidationError as e:
        logger.warning("Invalid chat request: %s", e.message)
        return JSONResponse(status_code=400, content=ErrorResponse(error=e.message).model_dump())
    except Exception as e:
        logger.exception("Chat API error: %s", e)
        return JSONResponse(status_code=500, content=ErrorResponse(error=CHAT_FAILED).model_dump())

    logger.info("Chat reply served (source=%s, searched=%s)", reply.source.value, reply.searched)
    return ChatResponse(message=reply.text)


@router.get("/chat", response_model=StatusResponse)
async def chat_status() -> StatusResponse:
    """Liveness probe for the chat endpoint."""
    return StatusResponse(message="Chat API is running. Use POST to send messages.")
