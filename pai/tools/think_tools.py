"""Think tool — structured thinking scaffolds for hard problems."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from pydantic import Field

from pai.memory.store import MemoryFileStore
from pai.think.models import ThinkRequest
from pai.think.orchestrator import think as run_think
from pai.tools.base import ToolParams, ToolResult
from pai.tools.registry import registry

if TYPE_CHECKING:
    from pai.context import CallContext

logger = logging.getLogger(__name__)

ModeChoice = Literal["council", "red_team", "first_principles", "be_creative", "auto"]


class ThinkParams(ToolParams):
    problem: str = Field(description="What needs thinking about.")
    mode: ModeChoice | None = Field(
        default=None,
        description="Thinking mode. Omit or 'auto' for automatic selection.",
    )
    context: str | None = Field(default=None, description="Additional context if needed.")


@registry.tool(
    name="think",
    label="Think",
    description=(
        "Structured thinking for complex problems. Modes: council (multi-perspective "
        "debate), red_team (failure analysis), first_principles (assumption "
        "challenging), be_creative (lateral thinking). Omit mode for auto-selection. "
        "Use for architectural decisions, risk assessment, assumption questioning, "
        "or when stuck. Don't use for simple tasks."
    ),
    params_model=ThinkParams,
)
async def think(
    problem: str,
    mode: str | None = None,
    context: str | None = None,
    call_context: CallContext | None = None,
) -> ToolResult:
    if not problem.strip():
        return ToolResult(error="Error: problem is required.")

    status = call_context.ui if call_context is not None else None
    response = run_think(
        ThinkRequest(problem=problem, mode=mode, context=context),
        store=MemoryFileStore.get(),
        status=status,
    )
    return ToolResult(text=response.text, data={"mode": response.mode.value})
