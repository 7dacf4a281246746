"""Accumulates streamed transcript fragments."""


class TranscriptBuffer:
    """Ordered concatenation of the fragments received for one attempt."""

    def __init__(self):
        self._fragments: list[str] = []

    def append(self, fragment: str) -> None:
        self._fragments.append(fragment)

    def reset(self) -> None:
        self._fragments = []

    @property
    def text(self) -> str:
        return "".join(self._fragments)

    @property
    def fragment_count(self) -> int:
        return len(self._fragments)
