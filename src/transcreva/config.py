"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

MEGABYTE = 1024 * 1024


class GeminiConfig(BaseModel, frozen=True):
    """Gemini transcription model configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash"
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    language: str = "Brazilian Portuguese"
    prompt_path: Path = Path("prompts/transcription.txt")


class UploadConfig(BaseModel, frozen=True):
    """Advisory checks applied to uploaded files."""

    size_warning_bytes: int = 50 * MEGABYTE
    accepted_type_prefixes: tuple[str, ...] = ("audio/", "video/")
    preview_directory: Path | None = None


class TranscriptionConfig(BaseModel, frozen=True):
    """Limits applied to a single transcription attempt."""

    timeout_seconds: float | None = Field(default=None, gt=0)


class ServerConfig(BaseModel, frozen=True):
    """HTTP server bind configuration."""

    host: str = "0.0.0.0"
    port: int = 8000


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gemini: GeminiConfig
    upload: UploadConfig
    transcription: TranscriptionConfig
    server: ServerConfig


def _optional_float(name: str) -> float | None:
    value = os.getenv(name, "")
    return float(value) if value else None


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    preview_directory = os.getenv("PREVIEW_DIRECTORY", "")
    return AppConfig(
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL_NAME", "gemini-2.5-flash"),
            temperature=float(os.getenv("GEMINI_TEMPERATURE", "0.3")),
            language=os.getenv("TRANSCRIPTION_LANGUAGE", "Brazilian Portuguese"),
        ),
        upload=UploadConfig(
            size_warning_bytes=int(os.getenv("UPLOAD_SIZE_WARNING_MB", "50")) * MEGABYTE,
            preview_directory=Path(preview_directory) if preview_directory else None,
        ),
        transcription=TranscriptionConfig(
            timeout_seconds=_optional_float("TRANSCRIPTION_TIMEOUT_SECONDS"),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
        ),
    )
