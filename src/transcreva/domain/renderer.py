"""Parses the accumulated transcript into display lines."""

import re

from .models import DisplayLine

TIMESTAMP_PATTERN = re.compile(r"^(\[\d{2}:\d{2}(?::\d{2})?\])(.*)")


def render(buffer: str) -> list[DisplayLine]:
    """
    Splits a transcript buffer into lines and tags leading timestamps.

    Each newline-delimited segment becomes one line. A segment starting with
    ``[MM:SS]`` or ``[HH:MM:SS]`` yields a timestamp line whose text is the
    remainder after the marker; anything else, empty segments included,
    yields a plain line.

    Args:
        buffer: The verbatim transcript accumulated so far.

    Returns:
        Display lines in buffer order. An empty buffer has no lines.
    """
    if not buffer:
        return []

    lines = []
    for segment in buffer.split("\n"):
        match = TIMESTAMP_PATTERN.match(segment)
        if match:
            lines.append(
                DisplayLine(kind="timestamp", timestamp=match.group(1), text=match.group(2))
            )
        else:
            lines.append(DisplayLine(kind="plain", text=segment))
    return lines
