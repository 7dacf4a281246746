"""Advisory checks for uploaded media files."""

from transcreva.config import MEGABYTE, UploadConfig

from .models import ValidationWarning


def validate_upload(
    mime_type: str | None, size: int | None, config: UploadConfig
) -> list[ValidationWarning]:
    """
    Checks an upload's media type and size.

    Args:
        mime_type: Declared content type of the upload.
        size: Size of the upload in bytes, if known.
        config: Accepted type prefixes and the size warning threshold.

    Returns:
        Warnings for the caller to show. An empty list means no concerns.
    """
    warnings: list[ValidationWarning] = []

    if not (mime_type or "").startswith(config.accepted_type_prefixes):
        warnings.append(
            ValidationWarning(
                code="unsupported_type",
                message="Only audio files (MP3, WAV, M4A) or video files are supported.",
            )
        )

    if size is not None and size > config.size_warning_bytes:
        limit_mb = config.size_warning_bytes // MEGABYTE
        warnings.append(
            ValidationWarning(
                code="large_file",
                message=(
                    f"Files above {limit_mb} MB may be slow to encode. "
                    "Consider compressing the audio."
                ),
            )
        )

    return warnings
