"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field

from ..domain.models import Message, Role


class ChatMessage(BaseModel):
    """A single message in the conversation."""

    role: Role = Field(..., description="Role of the message sender (user, assistant, system)")
    content: str = Field(..., description="Content of the message")

    def to_domain(self) -> Message:
        return Message(role=self.role, content=self.content)


class ChatRequest(BaseModel):
    """Request model for a chat turn."""

    messages: list[ChatMessage] = Field(
        ...,
        description="Conversation so far, oldest first; the last message is answered",
        json_schema_extra={"example": [{"role": "user", "content": "What is the Higgs boson?"}]},
    )


class ChatResponse(BaseModel):
    """Assistant reply."""

    message: str = Field(..., description="Reply text")


class ErrorResponse(BaseModel):
    """Error body for chat requests."""

    error: str = Field(..., description="Human-readable error message")


class UploadResponse(BaseModel):
    """Successful upload."""

    success: bool = True
    filename: str = Field(..., description="Stored document name")
    size: int = Field(..., ge=0, description="Upload size in bytes")
    message: str = Field(..., description="Status message")


class UploadErrorResponse(BaseModel):
    """Rejected or failed upload."""

    success: bool = False
    error: str = Field(..., description="Human-readable error message")


class StatusResponse(BaseModel):
    """Liveness message returned by GET on the POST endpoints."""

    message: str


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    documents: int = Field(..., ge=0, description="Number of stored documents")
    llm: str = Field(..., description="'configured' or 'fallback'")
