"""Health check endpoint."""

from fastapi import APIRouter

from ... import __version__
from ...composition.container import get_document_store
from ...config import settings
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report liveness, stored document count and whether the model is configured."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        documents=len(get_document_store()),
        llm="configured" if settings.llm_enabled else "fallback",
    )
