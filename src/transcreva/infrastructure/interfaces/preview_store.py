"""Abstract interface for locally held playback copies of uploads."""

from abc import ABC, abstractmethod
from typing import BinaryIO

from transcreva.domain.models import SourceFile


class PreviewStore(ABC):
    """Abstract base class for ephemeral preview storage."""

    @abstractmethod
    def save(self, data: BinaryIO, file_name: str, mime_type: str) -> tuple[str, SourceFile]:
        """
        Stores an uploaded file for playback and transcription.

        Args:
            data: File-like object containing the upload.
            file_name: Original name of the file.
            mime_type: Declared media type of the file.

        Returns:
            Tuple of (preview_id, source_file).
        """
        pass

    @abstractmethod
    def resolve(self, preview_id: str) -> SourceFile:
        """
        Looks up a stored preview.

        Raises:
            PreviewNotFoundError: If the preview is unknown or released.
        """
        pass

    @abstractmethod
    def release(self, preview_id: str) -> bool:
        """
        Deletes a stored preview.

        Returns:
            True if the preview was released by this call, False if it was
            already gone.
        """
        pass

    @abstractmethod
    def release_all(self) -> None:
        """Deletes every stored preview."""
        pass
