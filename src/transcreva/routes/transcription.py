"""Upload, transcription and transcript output endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, UploadFile, status
from fastapi.responses import PlainTextResponse

from transcreva.config import MEGABYTE, UploadConfig
from transcreva.dependencies import get_session, get_upload_config
from transcreva.domain import export_filename, validate_upload
from transcreva.exceptions import AttemptInProgressError, NoFileSelectedError
from transcreva.handlers import TranscriptionSession
from transcreva.logging import setup_logging
from transcreva.response_models import FileSelectionResponse, TranscriptionStateResponse

logger = setup_logging()

router = APIRouter(prefix="/transcription", tags=["transcription"])

SessionDep = Annotated[TranscriptionSession, Depends(get_session)]
UploadConfigDep = Annotated[UploadConfig, Depends(get_upload_config)]

_IN_PROGRESS_DETAIL = "A transcription is already in progress"


def _state_response(session: TranscriptionSession) -> TranscriptionStateResponse:
    state = session.state()
    return TranscriptionStateResponse(
        status=state.status,
        is_transcribing=state.is_transcribing,
        error=state.error,
        file_name=state.file.source.file_name if state.file else None,
        preview_url=state.file.preview_url if state.file else None,
        text=state.text,
        lines=session.lines(),
    )


@router.post("/file", response_model=FileSelectionResponse)
async def select_file(
    file: UploadFile, session: SessionDep, upload_config: UploadConfigDep
) -> FileSelectionResponse:
    """
    Uploads the file to transcribe, replacing any previous selection.

    Type and size checks only produce warnings; the file is always accepted.
    """
    mime_type = file.content_type or "application/octet-stream"
    warnings = validate_upload(mime_type, file.size, upload_config)
    if warnings:
        logger.warning(
            "Upload accepted with warnings",
            extra={"file_name": file.filename, "codes": [w.code for w in warnings]},
        )

    try:
        selected = await session.select_file(file.file, file.filename or "upload", mime_type)
    except AttemptInProgressError:
        raise HTTPException(status_code=409, detail=_IN_PROGRESS_DETAIL)

    source = selected.source
    return FileSelectionResponse(
        file_name=source.file_name,
        mime_type=source.mime_type,
        size_bytes=source.size,
        size_mb=round(source.size / MEGABYTE, 2),
        preview_url=selected.preview_url,
        warnings=warnings,
    )


@router.delete("/file", status_code=status.HTTP_204_NO_CONTENT)
async def clear_file(session: SessionDep) -> Response:
    """Removes the selected file and its transcript."""
    try:
        session.clear_file()
    except AttemptInProgressError:
        raise HTTPException(status_code=409, detail=_IN_PROGRESS_DETAIL)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "",
    response_model=TranscriptionStateResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def start_transcription(session: SessionDep) -> TranscriptionStateResponse:
    """Starts transcribing the selected file. Poll GET /transcription for progress."""
    try:
        session.start()
    except NoFileSelectedError:
        raise HTTPException(status_code=400, detail="No file selected")
    except AttemptInProgressError:
        raise HTTPException(status_code=409, detail=_IN_PROGRESS_DETAIL)
    return _state_response(session)


@router.get("", response_model=TranscriptionStateResponse)
def get_transcription(session: SessionDep) -> TranscriptionStateResponse:
    """Returns the transcript so far, split into display lines."""
    return _state_response(session)


@router.get("/text", response_class=PlainTextResponse)
def copy_transcription(session: SessionDep) -> PlainTextResponse:
    """Returns the verbatim transcript text."""
    return PlainTextResponse(session.text)


@router.get("/download", response_class=PlainTextResponse)
def download_transcription(session: SessionDep) -> PlainTextResponse:
    """Returns the verbatim transcript as a dated text file."""
    text = session.text
    if not text:
        raise HTTPException(status_code=404, detail="No transcript available")
    return PlainTextResponse(
        text,
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )
