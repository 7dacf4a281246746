"""Abstract interface for streaming transcription backends."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from transcreva.domain.models import SourceFile


class TranscriptionService(ABC):
    """Abstract base class for streaming transcription backends."""

    @abstractmethod
    async def transcribe_stream(
        self, source: SourceFile, on_fragment: Callable[[str], None]
    ) -> None:
        """
        Transcribes a source file, delivering text as it is produced.

        Args:
            source: The audio or video file to transcribe.
            on_fragment: Called synchronously with each non-empty text
                fragment, in the order the backend emits them.

        Raises:
            EncodingFailed: If the file cannot be read.
            TranscriptionFailed: If the request or the stream fails.
        """
        pass
