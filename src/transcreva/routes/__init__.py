"""API route exports."""

from .media import router as media_router
from .transcription import router as transcription_router

__all__ = ["media_router", "transcription_router"]
