"""Tool registry — the catalog of tools exposed to the host agent.

Tools are async functions registered with ``@registry.tool(...)``. The
registry turns their pydantic params into host schemas and, at call time,
validates arguments and maps every failure to a ``ToolResult`` error so a
tool call never raises into the host.
"""

from __future__ import annotations

import inspect
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from pai.tools.base import ToolParams, ToolResult

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from pai.context import CallContext

logger = logging.getLogger(__name__)

EMPTY_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}}


@dataclass
class ToolDef:
    """A registered tool."""

    name: str
    label: str
    description: str
    handler: Callable[..., Awaitable[ToolResult]]
    params_model: type[ToolParams] | None = None
    wants_context: bool = False

    def schema(self) -> dict[str, Any]:
        """Host-facing schema: name, label, description, input schema."""
        input_schema = (
            self.params_model.model_json_schema() if self.params_model else dict(EMPTY_SCHEMA)
        )
        return {
            "name": self.name,
            "label": self.label,
            "description": self.description,
            "input_schema": input_schema,
        }

    def bind(self, arguments: dict[str, Any], call_context: CallContext | None) -> dict[str, Any]:
        """Validated handler kwargs. Raises ``ValidationError`` on bad arguments."""
        if self.params_model is not None:
            kwargs = self.params_model(**arguments).model_dump()
        else:
            kwargs = dict(arguments)
        if self.wants_context and call_context is not None:
            kwargs["call_context"] = call_context
        return kwargs


class ToolRegistry:
    """Registry of host tools.

    Example::

        @registry.tool(name="memory", label="Memory", description="...",
                       params_model=MemoryParams)
        async def memory(action: str, file: str, content: str | None = None) -> ToolResult:
            ...

    A handler that declares a ``call_context`` parameter receives the
    host's ``CallContext``.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolDef] = {}

    def tool(
        self,
        *,
        name: str,
        description: str,
        label: str = "",
        params_model: type[ToolParams] | None = None,
    ) -> Callable:
        """Decorator to register an async function as a tool."""

        def decorator(fn: Callable[..., Awaitable[ToolResult]]) -> Callable:
            if not inspect.iscoroutinefunction(fn):
                msg = f"Tool handler '{name}' must be an async function"
                raise TypeError(msg)

            self._tools[name] = ToolDef(
                name=name,
                label=label or name.title(),
                description=description,
                handler=fn,
                params_model=params_model,
                wants_context="call_context" in inspect.signature(fn).parameters,
            )
            return fn

        return decorator

    def get(self, name: str) -> ToolDef | None:
        return self._tools.get(name)

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def get_schemas(self) -> list[dict[str, Any]]:
        return [t.schema() for t in self._tools.values()]

    async def execute(
        self,
        name: str,
        arguments: dict[str, Any],
        call_context: CallContext | None = None,
    ) -> ToolResult:
        """Run a tool by name.

        Unknown tools and invalid arguments are usage errors and never reach
        the handler. Handler exceptions become a ``Tool '<name>' failed``
        error carrying the original message.
        """
        tag = _call_tag(name, call_context)
        tool_def = self._tools.get(name)
        if tool_def is None:
            logger.warning("%s: unknown tool", tag)
            return ToolResult(error=f"Unknown tool: {name}")

        try:
            kwargs = tool_def.bind(arguments, call_context)
        except ValidationError as exc:
            logger.warning("%s: rejected arguments %s", tag, arguments)
            return ToolResult(error=f"Invalid arguments for '{name}': {_describe(exc)}")

        logger.info("%s called with %s", tag, arguments)
        t0 = time.monotonic()
        try:
            result = await tool_def.handler(**kwargs)
        except Exception as exc:
            logger.exception("%s failed in %.2fs", tag, time.monotonic() - t0)
            return ToolResult(error=f"Tool '{name}' failed: {exc}")

        elapsed = time.monotonic() - t0
        if result.success:
            logger.info("%s succeeded in %.2fs", tag, elapsed)
        else:
            logger.warning("%s returned error in %.2fs: %s", tag, elapsed, result.error)
        return result


def _call_tag(name: str, call_context: CallContext | None) -> str:
    """Log prefix for one call, e.g. ``tool think [call_1]``."""
    if call_context is not None and call_context.tool_call_id:
        return f"tool {name} [{call_context.tool_call_id}]"
    return f"tool {name}"


def _describe(exc: ValidationError) -> str:
    """One-line summary of a pydantic validation error."""
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}"
        for err in exc.errors()
    )


# Global registry — tool modules register into this one.
registry = ToolRegistry()
