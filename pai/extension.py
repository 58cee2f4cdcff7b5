"""Extension entry point — wires tools and commands into a host agent."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Protocol

from pai.commands import COMMANDS
from pai.tools import registry

if TYPE_CHECKING:
    from pai.context import CallContext
    from pai.tools.base import ToolResult

logger = logging.getLogger(__name__)

ToolHandler = Callable[[dict[str, Any], "CallContext | None"], Awaitable["ToolResult"]]


class HostAPI(Protocol):
    """The registration surface the host exposes to extensions."""

    def register_tool(self, schema: dict[str, Any], handler: ToolHandler) -> None: ...

    def register_command(
        self,
        name: str,
        description: str,
        handler: Callable[[str, CallContext], Awaitable[str]],
    ) -> None: ...


def _tool_handler(name: str) -> ToolHandler:
    async def handler(arguments: dict[str, Any], ctx: CallContext | None = None) -> ToolResult:
        return await registry.execute(name, arguments, call_context=ctx)

    return handler


def register(host: HostAPI) -> None:
    """Register every tool and command with *host*."""
    for schema in registry.get_schemas():
        host.register_tool(schema, _tool_handler(schema["name"]))
    for name, (description, handler) in COMMANDS.items():
        host.register_command(name, description, handler)
    logger.info(
        "PAI registered %d tools and %d commands", len(registry.tool_names), len(COMMANDS)
    )
