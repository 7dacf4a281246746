"""Infrastructure interface exports."""

from .preview_store import PreviewStore
from .transcription_service import TranscriptionService

__all__ = ["PreviewStore", "TranscriptionService"]
