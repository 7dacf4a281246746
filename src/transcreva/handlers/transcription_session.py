"""Session that owns the selected file and the transcript being streamed."""

import asyncio
from typing import BinaryIO

from transcreva.domain import (
    DisplayLine,
    SelectedFile,
    SourceFile,
    TranscriptBuffer,
    TranscriptionState,
    TranscriptionStatus,
    render,
)
from transcreva.exceptions import (
    AttemptInProgressError,
    EncodingFailed,
    NoFileSelectedError,
    TranscriptionFailed,
)
from transcreva.infrastructure.interfaces import PreviewStore, TranscriptionService
from transcreva.logging import setup_logging

logger = setup_logging()


class TranscriptionSession:
    """
    Coordinates file selection and transcription attempts.

    At most one attempt runs at a time. Selecting, clearing or starting while
    an attempt is streaming raises AttemptInProgressError, so the buffer only
    ever holds fragments of the latest attempt.
    """

    def __init__(
        self,
        transcription_service: TranscriptionService,
        preview_store: PreviewStore,
        timeout_seconds: float | None = None,
    ):
        self._transcription_service = transcription_service
        self._preview_store = preview_store
        self._timeout_seconds = timeout_seconds
        self._buffer = TranscriptBuffer()
        self._selected: SelectedFile | None = None
        self._status = TranscriptionStatus.IDLE
        self._error: str | None = None
        self._task: asyncio.Task | None = None

    @property
    def is_transcribing(self) -> bool:
        return self._status is TranscriptionStatus.PROCESSING

    @property
    def selected_file(self) -> SelectedFile | None:
        return self._selected

    @property
    def text(self) -> str:
        """The verbatim transcript, as copied or downloaded."""
        return self._buffer.text

    def state(self) -> TranscriptionState:
        return TranscriptionState(
            status=self._status,
            text=self._buffer.text,
            error=self._error,
            file=self._selected,
        )

    def lines(self) -> list[DisplayLine]:
        return render(self._buffer.text)

    async def select_file(
        self, data: BinaryIO, file_name: str, mime_type: str
    ) -> SelectedFile:
        """
        Replaces the selected file and clears any previous transcript.

        The upload is copied in a worker thread. Session state is only
        changed on the event loop, after the copy, so an attempt started
        meanwhile makes the selection fail instead of resetting its buffer.

        Raises:
            AttemptInProgressError: If an attempt is streaming.
        """
        self._ensure_idle()
        preview_id, source = await asyncio.to_thread(
            self._preview_store.save, data, file_name, mime_type
        )
        if self.is_transcribing:
            self._preview_store.release(preview_id)
            raise AttemptInProgressError()

        self._release_selected()
        self._selected = SelectedFile(preview_id=preview_id, source=source)
        self._reset(TranscriptionStatus.IDLE)

        logger.info(
            "File selected",
            extra={"file_name": file_name, "mime_type": mime_type, "size": source.size},
        )
        return self._selected

    def clear_file(self) -> None:
        """
        Discards the selected file and its transcript.

        Raises:
            AttemptInProgressError: If an attempt is streaming.
        """
        self._ensure_idle()
        self._release_selected()
        self._reset(TranscriptionStatus.IDLE)

    def start(self) -> asyncio.Task:
        """
        Starts a transcription attempt in the background.

        Must be called from a running event loop.

        Raises:
            NoFileSelectedError: If no file is selected.
            AttemptInProgressError: If an attempt is streaming.
        """
        source = self._begin_attempt()
        self._task = asyncio.create_task(self._run_attempt(source))
        return self._task

    async def transcribe(self) -> TranscriptionState:
        """
        Runs a transcription attempt to completion.

        Failures are recorded on the returned state, not raised.

        Raises:
            NoFileSelectedError: If no file is selected.
            AttemptInProgressError: If an attempt is streaming.
        """
        source = self._begin_attempt()
        await self._run_attempt(source)
        return self.state()

    async def close(self) -> None:
        """Cancels any running attempt and releases every preview."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._selected = None
        self._preview_store.release_all()
        logger.info("Transcription session closed")

    def _begin_attempt(self) -> SourceFile:
        if self._selected is None:
            raise NoFileSelectedError()
        self._ensure_idle()
        self._reset(TranscriptionStatus.PROCESSING)
        return self._selected.source

    async def _run_attempt(self, source: SourceFile) -> None:
        logger.info("Transcription attempt started", extra={"file_name": source.file_name})
        try:
            await asyncio.wait_for(
                self._transcription_service.transcribe_stream(source, self._buffer.append),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            self._fail(
                TranscriptionFailed(
                    f"Transcription timed out after {self._timeout_seconds:g} seconds",
                    cause=e,
                )
            )
        except (EncodingFailed, TranscriptionFailed) as e:
            self._fail(e)
        except asyncio.CancelledError:
            self._status = TranscriptionStatus.ERROR
            self._error = "Transcription cancelled"
            raise
        except Exception as e:
            logger.exception(
                "Unexpected transcription error", extra={"file_name": source.file_name}
            )
            self._fail(e)
        else:
            self._status = TranscriptionStatus.COMPLETED
            logger.info(
                "Transcription attempt completed",
                extra={
                    "file_name": source.file_name,
                    "fragments": self._buffer.fragment_count,
                    "characters": len(self._buffer.text),
                },
            )

    def _fail(self, error: Exception) -> None:
        self._status = TranscriptionStatus.ERROR
        self._error = str(error) or "An unknown error occurred during transcription."
        logger.error(
            "Transcription attempt failed",
            extra={"error": self._error, "fragments": self._buffer.fragment_count},
        )

    def _ensure_idle(self) -> None:
        if self.is_transcribing:
            raise AttemptInProgressError()

    def _reset(self, status: TranscriptionStatus) -> None:
        self._buffer.reset()
        self._error = None
        self._status = status

    def _release_selected(self) -> None:
        if self._selected is not None:
            self._preview_store.release(self._selected.preview_id)
            self._selected = None
