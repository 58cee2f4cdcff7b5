"""Result and parameter types shared by every tool."""

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel


@dataclass
class ToolResult:
    """Result of a tool execution.

    ``text`` is what the agent reads, ``data`` carries structured
    metadata (e.g. the resolved think mode), and ``error`` marks a
    failure the caller must see.
    """

    text: str | None = None
    data: dict[str, Any] | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_content(self) -> str:
        """Serialize for the host's tool result content field."""
        if self.error:
            return self.error
        if self.text is not None:
            return self.text
        return json.dumps(self.data or {})


class ToolParams(BaseModel):
    """Base class for tool parameter models; the host schema comes from
    ``model_json_schema()``."""
