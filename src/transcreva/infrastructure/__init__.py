"""Infrastructure layer exports."""

from transcreva.infrastructure.gemini_transcriber import GeminiTranscriber
from transcreva.infrastructure.local_preview_store import LocalPreviewStore

__all__ = ["GeminiTranscriber", "LocalPreviewStore"]
