"""Playback endpoint for uploaded files."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from transcreva.dependencies import get_preview_store
from transcreva.exceptions import PreviewNotFoundError
from transcreva.infrastructure.interfaces import PreviewStore

router = APIRouter(prefix="/media", tags=["media"])

PreviewStoreDep = Annotated[PreviewStore, Depends(get_preview_store)]


@router.get("/{preview_id}")
def get_media(preview_id: str, previews: PreviewStoreDep) -> FileResponse:
    """Streams an uploaded file back for local playback."""
    try:
        source = previews.resolve(preview_id)
    except PreviewNotFoundError:
        raise HTTPException(status_code=404, detail="Preview not found")
    return FileResponse(source.path, media_type=source.mime_type)
