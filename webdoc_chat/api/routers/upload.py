"""PDF upload endpoint."""

import logging

from fastapi import APIRouter, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ...composition.container import get_ingestion_service
from ...domain.exceptions import ValidationError
from ..models import StatusResponse, UploadErrorResponse, UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upload"])

UPLOAD_PATH = "/api/upload-pdf"
UPLOAD_OK = "PDF uploaded and processed successfully"
UPLOAD_FAILED = "Failed to process PDF"


@router.post(
    "/upload-pdf",
    response_model=UploadResponse,
    responses={
        400: {"model": UploadErrorResponse, "description": "Missing file or not a PDF"},
        500: {"model": UploadErrorResponse, "description": "Internal server error"},
    },
)
async def upload_pdf(file: UploadFile | None = File(default=None)):
    """Store the text of an uploaded PDF for use as chat context.

    Uploading a file with an existing name replaces the stored text.
    """
    try:
        data = await file.read() if file is not None else None
        service = get_ingestion_service()
        result = await run_in_threadpool(
            service.ingest,
            filename=file.filename if file is not None else None,
            content_type=file.content_type if file is not None else None,
            data=data,
        )
    except ValidationError as e:
        logger.warning("Rejected upload: %s", e.message)
        return JSONResponse(
            status_code=400, content=UploadErrorResponse(error=e.message).model_dump()
        )
    except Exception as e:
        logger.exception("Upload error: %s", e)
        return JSONResponse(
            status_code=500, content=UploadErrorResponse(error=UPLOAD_FAILED).model_dump()
        )

    return UploadResponse(filename=result.filename, size=result.size, message=UPLOAD_OK)


@router.get("/upload-pdf", response_model=StatusResponse)
async def upload_status() -> StatusResponse:
    """Liveness probe for the upload endpoint."""
    return StatusResponse(message="Upload PDF API is running. Use POST to upload files.")
