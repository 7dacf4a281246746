"""Handler exports."""

from .transcription_session import TranscriptionSession

__all__ = ["TranscriptionSession"]
