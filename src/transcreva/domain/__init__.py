"""Domain layer exports."""

from .encoder import encode
from .export import export_filename
from .models import (
    DisplayLine,
    EncodedPayload,
    SelectedFile,
    SourceFile,
    TranscriptionState,
    TranscriptionStatus,
    ValidationWarning,
)
from .renderer import render
from .transcript_buffer import TranscriptBuffer
from .upload_validator import validate_upload

__all__ = [
    "DisplayLine",
    "EncodedPayload",
    "SelectedFile",
    "SourceFile",
    "TranscriptBuffer",
    "TranscriptionState",
    "TranscriptionStatus",
    "ValidationWarning",
    "encode",
    "export_filename",
    "render",
    "validate_upload",
]
