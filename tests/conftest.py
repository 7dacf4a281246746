"""
Test configuration and shared fixtures.
"""

import asyncio
import os
import threading
from collections.abc import Callable
from pathlib import Path

import pytest

os.environ.setdefault("GEMINI_API_KEY", "test-key")

from transcreva.domain.models import SourceFile  # noqa: E402
from transcreva.exceptions import TranscriptionFailed  # noqa: E402
from transcreva.handlers import TranscriptionSession  # noqa: E402
from transcreva.infrastructure import LocalPreviewStore  # noqa: E402
from transcreva.infrastructure.interfaces import TranscriptionService  # noqa: E402


class FakeTranscriptionService(TranscriptionService):
    """Replays scripted fragments, optionally failing or blocking partway."""

    def __init__(
        self,
        fragments: list[str] | None = None,
        fail_after: int | None = None,
        release: threading.Event | None = None,
        error: Exception | None = None,
    ):
        self.fragments = fragments or []
        self.fail_after = fail_after
        self.error = error or TranscriptionFailed("stream interrupted")
        self.release = release
        self.calls: list[SourceFile] = []

    async def transcribe_stream(
        self, source: SourceFile, on_fragment: Callable[[str], None]
    ) -> None:
        self.calls.append(source)
        for index, fragment in enumerate(self.fragments):
            if self.fail_after is not None and index == self.fail_after:
                raise self.error
            on_fragment(fragment)
            await asyncio.sleep(0)
        if self.fail_after is not None and self.fail_after >= len(self.fragments):
            raise self.error
        while self.release is not None and not self.release.is_set():
            await asyncio.sleep(0.01)


@pytest.fixture
def make_source(tmp_path: Path) -> Callable[..., SourceFile]:
    """Writes bytes to disk and returns a SourceFile pointing at them."""

    def _make(data: bytes = b"ABC", mime_type: str = "audio/mpeg") -> SourceFile:
        path = tmp_path / "clip.mp3"
        path.write_bytes(data)
        return SourceFile(file_name="clip.mp3", mime_type=mime_type, size=len(data), path=path)

    return _make


@pytest.fixture
def preview_store(tmp_path: Path) -> LocalPreviewStore:
    return LocalPreviewStore(tmp_path / "previews")


@pytest.fixture
def fake_service() -> FakeTranscriptionService:
    return FakeTranscriptionService(fragments=["[00:00] A", "BC"])


@pytest.fixture
def session(fake_service, preview_store) -> TranscriptionSession:
    return TranscriptionSession(fake_service, preview_store)
