"""MemoryFileStore — persistent memory kept in three local Markdown files.

Reads never fail: a missing or unreadable file reads as empty, because
memory is advisory context. Writes are explicit user intent, so their
errors propagate to the caller.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path

from pai.config import settings
from pai.memory.models import MemoryFile

logger = logging.getLogger(__name__)

MAX_READ_BYTES = 4096  # 4 KB read ceiling, tail is kept

ENTRY_SEPARATOR = "\n\n---\n"
DIGEST_SEPARATOR = "\n\n---\n\n"


class MemoryFileStore:
    """Three-file memory store under a single root directory.

    Singleton accessed via ``MemoryFileStore.get()``.  Pass an explicit
    *root* for test isolation (e.g. ``tmp_path / "pai"``).  The root is
    created lazily on the first write.
    """

    _instance: MemoryFileStore | None = None

    def __init__(self, root: Path | None = None) -> None:
        self._root = root or settings.memory_dir

    @classmethod
    def get(cls) -> MemoryFileStore:
        """Return the shared MemoryFileStore instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def _reset(cls) -> None:
        """Clear the singleton (for tests)."""
        cls._instance = None

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, file: MemoryFile | str) -> Path:
        """Absolute path of a memory file. Unknown names raise ``ValueError``."""
        return self._root / MemoryFile(file).filename

    # -- Reads -----------------------------------------------------------------

    def read(self, file: MemoryFile | str) -> str:
        """Return the file's content, or ``""`` if it is missing or unreadable.

        Content over ``MAX_READ_BYTES`` UTF-8 bytes is cut to its last
        ``MAX_READ_BYTES`` bytes (a split leading character is dropped) and
        prefixed with a marker naming the file. Invalid bytes decode to
        U+FFFD whether or not the file was cut.
        """
        path = self.path_for(file)
        try:
            if not path.exists():
                return ""
            raw = path.read_bytes()
        except OSError:
            logger.warning("Could not read memory file %s", path, exc_info=True)
            return ""

        if len(raw) > MAX_READ_BYTES:
            tail = _decode(_skip_continuation_bytes(raw[-MAX_READ_BYTES:]))
            logger.debug("Memory file %s truncated to last %d bytes", path, MAX_READ_BYTES)
            return f"[truncated — showing last 4KB of {path}]\n\n{tail}"
        return _decode(raw)

    def read_all(self) -> str:
        """Concatenate every non-empty file under a ``## <name>`` heading."""
        parts = []
        for file in MemoryFile:
            content = self.read(file)
            if content:
                parts.append(f"## {file.value}\n\n{content}")
        return DIGEST_SEPARATOR.join(parts)

    def stats(self) -> dict[MemoryFile, int]:
        """Character count per file (0 when missing or unreadable)."""
        counts: dict[MemoryFile, int] = {}
        for file in MemoryFile:
            path = self.path_for(file)
            try:
                counts[file] = len(path.read_text("utf-8")) if path.exists() else 0
            except (OSError, UnicodeDecodeError):
                logger.warning("Could not stat memory file %s", path, exc_info=True)
                counts[file] = 0
        return counts

    # -- Writes ----------------------------------------------------------------

    def append(self, file: MemoryFile | str, content: str) -> Path:
        """Append a timestamped entry to a file, creating it if needed.

        The entry goes out in one write, existing content is never read.
        Raises ``ValueError`` for empty content; ``OSError`` propagates.
        """
        path = self.path_for(file)
        if not content:
            msg = "content is required for append"
            raise ValueError(msg)

        timestamp = datetime.now(UTC).isoformat(timespec="milliseconds")
        entry = f"{ENTRY_SEPARATOR}_{timestamp}_\n\n{content}"

        self._root.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8", newline="") as f:
            f.write(entry)
        logger.info("Appended %d chars to %s", len(content), path)
        return path

    def replace(self, file: MemoryFile | str, content: str) -> Path:
        """Overwrite a file with *content* verbatim.

        Written to a temp file in the same directory and moved into place,
        so readers see either the old or the new content.
        Raises ``ValueError`` for empty content; ``OSError`` propagates.
        """
        path = self.path_for(file)
        if not content:
            msg = "content is required for replace"
            raise ValueError(msg)

        self._root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._root, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
            raise
        logger.info("Replaced %s (%d chars)", path, len(content))
        return path


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def _skip_continuation_bytes(raw: bytes) -> bytes:
    """Drop the tail end of a character split by a byte-offset cut."""
    start = 0
    while start < len(raw) and start < 3 and 0x80 <= raw[start] <= 0xBF:
        start += 1
    return raw[start:]
