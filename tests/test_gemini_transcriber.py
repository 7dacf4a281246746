"""Tests for transcreva.infrastructure.gemini_transcriber."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from transcreva.exceptions import EncodingFailed, TranscriptionFailed
from transcreva.infrastructure import GeminiTranscriber


def _stream(*texts, error: Exception | None = None):
    async def _gen():
        for text in texts:
            yield SimpleNamespace(text=text)
        if error is not None:
            raise error

    return _gen()


def _client(stream=None, side_effect=None) -> MagicMock:
    client = MagicMock()
    client.aio.models.generate_content_stream = AsyncMock(
        return_value=stream, side_effect=side_effect
    )
    return client


def _transcriber(client) -> GeminiTranscriber:
    return GeminiTranscriber(client, "gemini-2.5-flash", "Transcribe this.", temperature=0.3)


@pytest.mark.asyncio
async def test_relays_fragments_in_order(make_source) -> None:
    client = _client(_stream("[00:00] A", "BC"))
    received: list[str] = []

    await _transcriber(client).transcribe_stream(make_source(), received.append)

    assert received == ["[00:00] A", "BC"]


@pytest.mark.asyncio
async def test_skips_chunks_without_text(make_source) -> None:
    client = _client(_stream("one", None, "", "two"))
    received: list[str] = []

    await _transcriber(client).transcribe_stream(make_source(), received.append)

    assert received == ["one", "two"]


@pytest.mark.asyncio
async def test_empty_stream_is_not_an_error(make_source) -> None:
    received: list[str] = []
    await _transcriber(_client(_stream())).transcribe_stream(make_source(), received.append)
    assert received == []


@pytest.mark.asyncio
async def test_request_carries_inline_media_and_prompt(make_source) -> None:
    client = _client(_stream())

    await _transcriber(client).transcribe_stream(make_source(b"ABC", "audio/wav"), lambda _: None)

    kwargs = client.aio.models.generate_content_stream.call_args.kwargs
    assert kwargs["model"] == "gemini-2.5-flash"
    assert kwargs["config"].temperature == 0.3
    (content,) = kwargs["contents"]
    media_part, prompt_part = content.parts
    assert media_part.inline_data.data == b"ABC"
    assert media_part.inline_data.mime_type == "audio/wav"
    assert prompt_part.text == "Transcribe this."


@pytest.mark.asyncio
async def test_request_failure_raises_transcription_failed(make_source) -> None:
    client = _client(side_effect=RuntimeError("API key not valid"))

    with pytest.raises(TranscriptionFailed, match="API key not valid") as exc_info:
        await _transcriber(client).transcribe_stream(make_source(), lambda _: None)

    assert isinstance(exc_info.value.cause, RuntimeError)


@pytest.mark.asyncio
async def test_stream_failure_keeps_delivered_fragments(make_source) -> None:
    client = _client(_stream("[00:00] partial", error=ConnectionError("reset by peer")))
    received: list[str] = []

    with pytest.raises(TranscriptionFailed, match="reset by peer"):
        await _transcriber(client).transcribe_stream(make_source(), received.append)

    assert received == ["[00:00] partial"]


@pytest.mark.asyncio
async def test_encoding_failure_skips_request(make_source) -> None:
    client = _client(_stream())
    source = make_source()
    source.path.unlink()

    with pytest.raises(EncodingFailed):
        await _transcriber(client).transcribe_stream(source, lambda _: None)

    client.aio.models.generate_content_stream.assert_not_called()
