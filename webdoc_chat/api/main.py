"""FastAPI application for the WebDoc Chat API."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..common.exception_handler import get_http_status_code, log_exception
from ..config import settings, setup_logging
from ..domain.exceptions import WebDocChatError
from .routers import chat, health, upload

setup_logging(settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request format"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup configuration and shutdown."""
    logger.info("WebDoc Chat API starting up...")
    logger.info("API docs available at /docs")
    logger.info("LLM mode: %s", "Gemini" if settings.llm_enabled else "fallback only")
    logger.info("Debug mode: %s", "ENABLED" if settings.debug else "DISABLED")
    yield
    logger.info("WebDoc Chat API shutting down...")


app = FastAPI(
    title="WebDoc Chat API",
    description=(
        "Chat assistant that augments a language model with Wikipedia lookups "
        "and the text of uploaded PDF documents."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(chat.router)
app.include_router(upload.router)


# =============================================================================
# Global Exception Handlers
# =============================================================================


def _error_body(request: Request, message: str) -> dict:
    body: dict = {"error": message}
    if request.url.path == upload.UPLOAD_PATH:
        body = {"success": False, **body}
    return body


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as a 400 with a flat error message."""
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content=_error_body(request, INVALID_REQUEST))


@app.exception_handler(WebDocChatError)
async def webdoc_chat_error_handler(request: Request, exc: WebDocChatError) -> JSONResponse:
    """Handle application errors that escaped a router."""
    log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})

    body = _error_body(request, exc.message)
    if settings.debug:
        body["detail"] = exc.to_dict(include_trace=True)
    return JSONResponse(status_code=get_http_status_code(exc), content=body)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions with a generic 500."""
    log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})
    return JSONResponse(status_code=500, content=_error_body(request, "Internal server error"))


__all__ = ["app"]
