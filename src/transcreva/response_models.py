"""Response models for the transcription API."""

from pydantic import BaseModel

from transcreva.domain import DisplayLine, TranscriptionStatus, ValidationWarning


class FileSelectionResponse(BaseModel):
    """Returned after a file is uploaded and selected."""

    file_name: str
    mime_type: str
    size_bytes: int
    size_mb: float
    preview_url: str
    warnings: list[ValidationWarning]


class TranscriptionStateResponse(BaseModel):
    """Current transcript with its rendered lines."""

    status: TranscriptionStatus
    is_transcribing: bool
    error: str | None = None
    file_name: str | None = None
    preview_url: str | None = None
    text: str
    lines: list[DisplayLine]
