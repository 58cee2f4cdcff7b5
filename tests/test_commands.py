"""Tests for slash commands."""

from unittest.mock import MagicMock, patch

import pytest

from pai.commands import COMMANDS, handle_memory_status, run_command
from pai.context import CallContext
from pai.think.models import ThinkMode
from pai.think.orchestrator import SCAFFOLDS


@pytest.fixture(autouse=True)
def _ensure_store(store):
    """Auto-use the shared store fixture for every test in this file."""


@pytest.fixture
def ctx() -> CallContext:
    return CallContext(ui=MagicMock())


@pytest.mark.parametrize(
    ("name", "title"),
    [
        ("council", "# Council Analysis"),
        ("redteam", "# Failure Analysis"),
        ("firstprinciples", "# First Principles Analysis"),
        ("creative", "# Creative / Lateral Thinking"),
    ],
)
async def test_shortcuts_force_mode(ctx, name: str, title: str) -> None:
    # Keyword-free text would classify as council; the command forces its mode
    text = await run_command(name, "choose a logging library", ctx)
    assert text.startswith(f"{title}\n\n**Problem:** choose a logging library")


async def test_shortcut_ignores_keywords(ctx) -> None:
    text = await run_command("creative", "exploit the race", ctx)
    assert text.startswith("# Creative / Lateral Thinking")


@pytest.mark.parametrize("name", ["council", "redteam", "firstprinciples", "creative"])
async def test_shortcuts_require_text(ctx, name: str) -> None:
    assert await run_command(name, "   ", ctx) == f"Usage: /{name} <problem>"
    ctx.ui.set_status.assert_not_called()


async def test_shortcut_reports_failure(ctx) -> None:
    broken = MagicMock(side_effect=RuntimeError("bad template"))
    with patch.dict(SCAFFOLDS, {ThinkMode.RED_TEAM: broken}):
        text = await run_command("redteam", "ship it", ctx)
    assert text == "Think failed: bad template"


async def test_shortcut_clears_status(ctx) -> None:
    await run_command("council", "anything", ctx)
    assert ctx.ui.set_status.call_args_list[-1].args == ("pai", None)


async def test_memory_status_empty(store, ctx) -> None:
    text = await handle_memory_status("", ctx)
    assert "preferences: empty" in text
    assert "learnings: empty" in text
    assert "context: empty" in text
    assert str(store.root) in text


async def test_memory_status_counts_without_content(store, ctx) -> None:
    store.replace("learnings", "secret-ish note")
    text = await handle_memory_status("", ctx)
    assert "learnings: 15 chars" in text
    assert "preferences: empty" in text
    assert "secret-ish" not in text


async def test_unknown_command(ctx) -> None:
    text = await run_command("summon", "x", ctx)
    assert text.startswith("Unknown command 'summon'")


def test_command_names() -> None:
    assert list(COMMANDS) == ["council", "redteam", "firstprinciples", "creative", "memory-status"]
