"""Naming for downloaded transcripts."""

from datetime import date


def export_filename(today: date | None = None) -> str:
    """Returns the download file name for a transcript saved on ``today``."""
    today = today or date.today()
    return f"transcricao_{today.isoformat()}.txt"
