"""Memory tool — read, append to, or replace the three memory files."""

import logging
from typing import Literal

from pydantic import Field

from pai.memory.store import MemoryFileStore
from pai.tools.base import ToolParams, ToolResult
from pai.tools.registry import registry

logger = logging.getLogger(__name__)


class MemoryParams(ToolParams):
    action: Literal["read", "append", "replace"] = Field(
        description="read: get file contents. append: add to file. replace: overwrite file.",
    )
    file: Literal["preferences", "learnings", "context"] = Field(
        description="Which memory file to access.",
    )
    content: str | None = Field(
        default=None,
        description="Content to write. Required for append and replace.",
    )


@registry.tool(
    name="memory",
    label="Memory",
    description=(
        "Read or write persistent memory files. Three files: preferences "
        "(tech stack, coding style), learnings (discoveries, append-only), "
        "context (current projects, goals). Use 'read' to check what's stored, "
        "'append' to add to a file, 'replace' to rewrite a file."
    ),
    params_model=MemoryParams,
)
async def memory(action: str, file: str, content: str | None = None) -> ToolResult:
    store = MemoryFileStore.get()

    if action == "read":
        data = store.read(file)
        if not data:
            return ToolResult(
                text=(
                    f"Memory file '{file}' is empty or hasn't been created yet. "
                    "Use append or replace to add content."
                ),
            )
        return ToolResult(text=data)

    if not content:
        return ToolResult(error=f"Error: content is required for {action}.")

    try:
        if action == "append":
            store.append(file, content)
            return ToolResult(text=f"Appended to {file}.")
        store.replace(file, content)
        return ToolResult(text=f"Replaced contents of {file}.")
    except OSError as exc:
        logger.exception("Failed to %s memory file '%s'", action, file)
        return ToolResult(error=f"Memory error: {exc}")
