"""Converts source files into base64 payloads for inline upload."""

import asyncio
import base64

from transcreva.exceptions import EncodingFailed
from transcreva.logging import setup_logging

from .models import EncodedPayload, SourceFile

logger = setup_logging()


async def encode(source: SourceFile) -> EncodedPayload:
    """
    Reads a source file and encodes its bytes as base64.

    The read runs in a worker thread so the event loop keeps serving
    requests while large files load.

    Args:
        source: The file to encode.

    Returns:
        EncodedPayload with the base64 text and the original media type.

    Raises:
        EncodingFailed: If the file cannot be read.
    """
    try:
        raw = await asyncio.to_thread(source.path.read_bytes)
    except OSError as e:
        logger.exception(
            "Source file read failed",
            extra={"file_name": source.file_name, "path": str(source.path)},
        )
        raise EncodingFailed(source.file_name, e) from e

    data = base64.b64encode(raw).decode("ascii")
    logger.info(
        "Source file encoded",
        extra={
            "file_name": source.file_name,
            "size": len(raw),
            "encoded_size": len(data),
        },
    )
    return EncodedPayload(data=data, mime_type=source.mime_type)
