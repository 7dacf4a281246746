"""Domain models for the transcription pipeline."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field


class SourceFile(BaseModel, frozen=True):
    """An uploaded audio or video file stored locally for the pipeline to read."""

    file_name: str
    mime_type: str
    size: int
    path: Path


class EncodedPayload(BaseModel, frozen=True):
    """Base64 text of a source file paired with its media type."""

    data: str
    mime_type: str


class DisplayLine(BaseModel, frozen=True):
    """One newline-delimited segment of the transcript, parsed for display."""

    kind: Literal["timestamp", "plain"]
    text: str
    timestamp: str | None = None


class ValidationWarning(BaseModel, frozen=True):
    """Advisory notice about an upload. Never blocks a transcription."""

    code: Literal["unsupported_type", "large_file"]
    message: str


class TranscriptionStatus(str, Enum):
    """Lifecycle of the current transcription attempt."""

    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class SelectedFile(BaseModel, frozen=True):
    """The file currently selected for transcription and its playback handle."""

    preview_id: str
    source: SourceFile

    @computed_field
    @property
    def preview_url(self) -> str:
        """Returns the path the file can be played back from."""
        return f"/media/{self.preview_id}"


class TranscriptionState(BaseModel, frozen=True):
    """Snapshot of the session read by the output surface."""

    status: TranscriptionStatus
    text: str
    error: str | None = None
    file: SelectedFile | None = None

    @computed_field
    @property
    def is_transcribing(self) -> bool:
        """Whether an attempt is still streaming."""
        return self.status is TranscriptionStatus.PROCESSING
