"""File-backed agent memory: three fixed Markdown files."""

from pai.memory.models import MemoryFile
from pai.memory.store import MemoryFileStore

__all__ = ["MemoryFile", "MemoryFileStore"]
