"""Gemini implementation of the TranscriptionService interface."""

import base64
from collections.abc import Callable

from google import genai
from google.genai import types

from transcreva.domain import encode
from transcreva.domain.models import EncodedPayload, SourceFile
from transcreva.exceptions import TranscriptionFailed
from transcreva.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class GeminiTranscriber(TranscriptionService):
    """Streams transcriptions of audio and video files from Google Gemini."""

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        prompt: str,
        temperature: float = 0.3,
    ):
        self._client = client
        self._model_name = model_name
        self._prompt = prompt
        self._temperature = temperature

    async def transcribe_stream(
        self, source: SourceFile, on_fragment: Callable[[str], None]
    ) -> None:
        """
        Sends the file inline with the transcription prompt and relays the
        streamed response text.

        Raises:
            EncodingFailed: If the file cannot be read. No request is sent.
            TranscriptionFailed: If the Gemini request or stream fails.
        """
        payload = await encode(source)

        logger.info(
            "Starting Gemini transcription",
            extra={
                "file_name": source.file_name,
                "mime_type": source.mime_type,
                "model": self._model_name,
            },
        )

        fragment_count = 0
        try:
            stream = await self._client.aio.models.generate_content_stream(
                model=self._model_name,
                contents=[
                    types.Content(
                        role="user",
                        parts=[self._inline_part(payload), types.Part(text=self._prompt)],
                    )
                ],
                config=types.GenerateContentConfig(temperature=self._temperature),
            )
            async for chunk in stream:
                if chunk.text:
                    fragment_count += 1
                    on_fragment(chunk.text)
        except Exception as e:
            logger.exception(
                "Gemini transcription failed",
                extra={"file_name": source.file_name, "fragments": fragment_count},
            )
            raise TranscriptionFailed(f"Gemini transcription failed: {e}", cause=e) from e

        logger.info(
            "Gemini transcription completed",
            extra={"file_name": source.file_name, "fragments": fragment_count},
        )

    def _inline_part(self, payload: EncodedPayload) -> types.Part:
        """Builds the inline media part. The SDK base64-encodes bytes on the wire."""
        return types.Part(
            inline_data=types.Blob(
                data=base64.b64decode(payload.data),
                mime_type=payload.mime_type,
            )
        )
