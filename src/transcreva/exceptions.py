"""Custom exceptions for the transcription service."""


class EncodingFailed(Exception):
    """Raised when a source file cannot be read and encoded for upload."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to encode '{file_name}'{detail}")


class TranscriptionFailed(Exception):
    """Raised when the remote transcription request or its stream fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class AttemptInProgressError(Exception):
    """Raised when an action conflicts with a transcription still streaming."""

    def __init__(self):
        super().__init__("A transcription is already in progress")


class NoFileSelectedError(Exception):
    """Raised when a transcription is requested without a selected file."""

    def __init__(self):
        super().__init__("No file selected")


class PreviewNotFoundError(Exception):
    """Raised when a preview does not exist or was already released."""

    def __init__(self, preview_id: str):
        self.preview_id = preview_id
        super().__init__(f"Preview '{preview_id}' not found")
