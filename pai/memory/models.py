"""Memory file names."""

from enum import StrEnum


class MemoryFile(StrEnum):
    """The three memory files. The set is closed."""

    PREFERENCES = "preferences"
    LEARNINGS = "learnings"
    CONTEXT = "context"

    @property
    def filename(self) -> str:
        return f"{self.value}.md"
