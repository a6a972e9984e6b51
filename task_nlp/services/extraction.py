from typing import Any, NamedTuple


class Extraction(NamedTuple):
    """Outcome of one extractor run: the value it found (or None) and the text left behind."""

    value: Any
    remaining: str

    @property
    def found(self) -> bool:
        return self.value is not None
