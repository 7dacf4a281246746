"""Dependency injection configuration for the transcription service."""

from pathlib import Path

from google import genai

from transcreva.config import UploadConfig, load_config
from transcreva.handlers import TranscriptionSession
from transcreva.infrastructure import GeminiTranscriber, LocalPreviewStore
from transcreva.infrastructure.interfaces import PreviewStore, TranscriptionService
from transcreva.logging import setup_logging

logger = setup_logging()

_config = load_config()

# Gemini
_gemini_client = genai.Client(api_key=_config.gemini.api_key)
_prompt_path = Path(__file__).parent / _config.gemini.prompt_path
_prompt = _prompt_path.read_text(encoding="utf-8").format(language=_config.gemini.language)
_transcription_service = GeminiTranscriber(
    _gemini_client,
    _config.gemini.model_name,
    _prompt,
    temperature=_config.gemini.temperature,
)
logger.info(
    "Gemini transcriber configured",
    extra={"model": _config.gemini.model_name, "language": _config.gemini.language},
)

# Local previews
_preview_store = LocalPreviewStore(_config.upload.preview_directory)

# Session composition
_session = TranscriptionSession(
    _transcription_service,
    _preview_store,
    timeout_seconds=_config.transcription.timeout_seconds,
)


def get_transcription_service() -> TranscriptionService:
    """Returns the configured transcription service."""
    return _transcription_service


def get_preview_store() -> PreviewStore:
    """Returns the configured preview store."""
    return _preview_store


def get_upload_config() -> UploadConfig:
    """Returns the advisory upload checks."""
    return _config.upload


def get_session() -> TranscriptionSession:
    """Returns the transcription session."""
    return _session
