"""Slash commands: forced-mode think shortcuts and a memory diagnostic."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from pai.memory.store import MemoryFileStore
from pai.think.models import ThinkMode, ThinkRequest
from pai.think.orchestrator import ThinkError, think

if TYPE_CHECKING:
    from pai.context import CallContext

logger = logging.getLogger(__name__)

CommandHandler = Callable[[str, "CallContext"], Awaitable[str]]


async def _forced_think(name: str, mode: ThinkMode, args: str, ctx: CallContext) -> str:
    """Shared pipeline for the shortcut commands."""
    problem = args.strip()
    if not problem:
        return f"Usage: /{name} <problem>"

    logger.info("/%s: %s", name, problem[:80])
    try:
        response = think(
            ThinkRequest(problem=problem, mode=mode),
            store=MemoryFileStore.get(),
            status=ctx.ui,
        )
    except ThinkError as exc:
        return f"Think failed: {exc}"
    return response.text


async def handle_council(args: str, ctx: CallContext) -> str:
    """Handle /council — multi-perspective debate."""
    return await _forced_think("council", ThinkMode.COUNCIL, args, ctx)


async def handle_redteam(args: str, ctx: CallContext) -> str:
    """Handle /redteam — failure analysis."""
    return await _forced_think("redteam", ThinkMode.RED_TEAM, args, ctx)


async def handle_firstprinciples(args: str, ctx: CallContext) -> str:
    """Handle /firstprinciples — assumption audit."""
    return await _forced_think("firstprinciples", ThinkMode.FIRST_PRINCIPLES, args, ctx)


async def handle_creative(args: str, ctx: CallContext) -> str:
    """Handle /creative — lateral thinking."""
    return await _forced_think("creative", ThinkMode.BE_CREATIVE, args, ctx)


async def handle_memory_status(args: str, ctx: CallContext) -> str:
    """Handle /memory-status — size of each memory file, no content."""
    store = MemoryFileStore.get()
    lines = ["**PAI Memory**", f"Directory: {store.root}"]
    for file, count in store.stats().items():
        lines.append(f"{file.value}: {count} chars" if count else f"{file.value}: empty")
    return "\n".join(lines)


COMMANDS: dict[str, tuple[str, CommandHandler]] = {
    "council": ("Multi-perspective debate on a problem", handle_council),
    "redteam": ("Failure and attack analysis of a plan", handle_redteam),
    "firstprinciples": ("Challenge assumptions, rebuild from base truths", handle_firstprinciples),
    "creative": ("Lateral thinking when stuck", handle_creative),
    "memory-status": ("Show which memory files hold content", handle_memory_status),
}


async def run_command(name: str, args: str, ctx: CallContext) -> str:
    """Dispatch a command by name."""
    entry = COMMANDS.get(name)
    if entry is None:
        return f"Unknown command '{name}'. Options: {', '.join(COMMANDS)}"
    _, handler = entry
    return await handler(args, ctx)
