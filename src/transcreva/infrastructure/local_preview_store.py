"""Temp-file implementation of the PreviewStore interface."""

import shutil
import tempfile
import uuid
from pathlib import Path
from typing import BinaryIO

from transcreva.domain.models import SourceFile
from transcreva.exceptions import PreviewNotFoundError
from transcreva.logging import setup_logging

from .interfaces import PreviewStore

logger = setup_logging()


class LocalPreviewStore(PreviewStore):
    """Keeps uploaded files as temp files until they are released."""

    def __init__(self, directory: Path | None = None):
        self._directory = directory
        self._previews: dict[str, SourceFile] = {}

    def save(self, data: BinaryIO, file_name: str, mime_type: str) -> tuple[str, SourceFile]:
        preview_id = uuid.uuid4().hex
        suffix = Path(file_name).suffix
        if self._directory is not None:
            self._directory.mkdir(parents=True, exist_ok=True)

        temp_file = tempfile.NamedTemporaryFile(
            prefix="preview-", suffix=suffix, dir=self._directory, delete=False
        )
        path = Path(temp_file.name)
        try:
            with temp_file:
                shutil.copyfileobj(data, temp_file)
                size = temp_file.tell()
        except Exception:
            path.unlink(missing_ok=True)
            logger.exception("Preview copy failed", extra={"file_name": file_name})
            raise

        source = SourceFile(file_name=file_name, mime_type=mime_type, size=size, path=path)
        self._previews[preview_id] = source
        logger.info(
            "Preview stored",
            extra={"preview_id": preview_id, "file_name": file_name, "size": size},
        )
        return preview_id, source

    def resolve(self, preview_id: str) -> SourceFile:
        try:
            return self._previews[preview_id]
        except KeyError:
            raise PreviewNotFoundError(preview_id) from None

    def release(self, preview_id: str) -> bool:
        source = self._previews.pop(preview_id, None)
        if source is None:
            return False
        source.path.unlink(missing_ok=True)
        logger.info("Preview released", extra={"preview_id": preview_id})
        return True

    def release_all(self) -> None:
        for preview_id in list(self._previews):
            self.release(preview_id)
