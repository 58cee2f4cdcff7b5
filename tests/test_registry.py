"""Tests for the tool registry."""

import logging

import pytest
from pydantic import Field

from pai.context import CallContext
from pai.tools.base import ToolParams, ToolResult
from pai.tools.registry import ToolRegistry


class EchoParams(ToolParams):
    message: str = Field(description="Text to echo back")
    times: int = Field(default=1, description="Repeat count")


@pytest.fixture
def reg() -> ToolRegistry:
    """Fresh registry with one parameterized tool."""
    r = ToolRegistry()

    @r.tool(name="echo", label="Echo!", description="Echo text", params_model=EchoParams)
    async def echo(message: str, times: int = 1) -> ToolResult:
        return ToolResult(text=message * times)

    return r


# -- Registration and schemas ------------------------------------------------


def test_decorator_rejects_sync_function(reg: ToolRegistry) -> None:
    with pytest.raises(TypeError, match="must be an async function"):

        @reg.tool(name="bad", description="Bad")
        def bad() -> ToolResult:
            return ToolResult()


def test_schema_surfaces_label(reg: ToolRegistry) -> None:
    schema = reg.get_schemas()[0]
    assert schema["name"] == "echo"
    assert schema["label"] == "Echo!"
    assert schema["input_schema"]["required"] == ["message"]


def test_label_defaults_to_title_case(reg: ToolRegistry) -> None:
    @reg.tool(name="ping", description="Ping")
    async def ping() -> ToolResult:
        return ToolResult(text="pong")

    assert reg.get("ping").schema() == {
        "name": "ping",
        "label": "Ping",
        "description": "Ping",
        "input_schema": {"type": "object", "properties": {}},
    }


# -- Usage errors ------------------------------------------------------------


async def test_unknown_tool(reg: ToolRegistry) -> None:
    result = await reg.execute("nonexistent", {})
    assert result.error == "Unknown tool: nonexistent"


async def test_invalid_argument_format(reg: ToolRegistry) -> None:
    result = await reg.execute("echo", {"message": "hi", "times": "lots"})
    assert result.is_error
    assert result.error.startswith("Invalid arguments for 'echo': times: ")


async def test_missing_argument_names_field(reg: ToolRegistry) -> None:
    result = await reg.execute("echo", {})
    assert result.error.startswith("Invalid arguments for 'echo': message: Field required")


async def test_invalid_arguments_never_reach_handler() -> None:
    reg = ToolRegistry()
    calls = []

    @reg.tool(name="strict", description="Strict", params_model=EchoParams)
    async def strict(message: str, times: int = 1) -> ToolResult:
        calls.append(message)
        return ToolResult()

    await reg.execute("strict", {"times": 2})
    assert calls == []


# -- Execution ---------------------------------------------------------------


async def test_execute_validated_arguments(reg: ToolRegistry) -> None:
    result = await reg.execute("echo", {"message": "ab", "times": 2})
    assert result.to_content() == "abab"


async def test_handler_exception_carries_message(reg: ToolRegistry) -> None:
    @reg.tool(name="boom", description="Boom")
    async def boom() -> ToolResult:
        msg = "kaboom"
        raise RuntimeError(msg)

    result = await reg.execute("boom", {})
    assert result.error == "Tool 'boom' failed: kaboom"


async def test_call_context_only_for_handlers_that_ask(reg: ToolRegistry) -> None:
    seen = []

    @reg.tool(name="ctx", description="Ctx")
    async def ctx_tool(call_context=None) -> ToolResult:
        seen.append(call_context)
        return ToolResult()

    ctx = CallContext()
    await reg.execute("ctx", {}, call_context=ctx)
    echoed = await reg.execute("echo", {"message": "x"}, call_context=ctx)

    assert seen == [ctx]
    assert echoed.success


async def test_tool_call_id_tags_log_lines(reg: ToolRegistry, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="pai.tools.registry"):
        await reg.execute("echo", {"message": "x"}, call_context=CallContext(tool_call_id="call_7"))
        await reg.execute("echo", {"message": "x"})

    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("tool echo [call_7] called with") for m in messages)
    assert any(m.startswith("tool echo [call_7] succeeded") for m in messages)
    assert any(m.startswith("tool echo called with") for m in messages)


# -- ToolResult --------------------------------------------------------------


def test_tool_result_content() -> None:
    assert ToolResult(text="hi", data={"mode": "council"}).to_content() == "hi"
    assert ToolResult(data={"a": 1}).to_content() == '{"a": 1}'
    assert ToolResult(error="nope").to_content() == "nope"
    assert ToolResult(error="nope").is_error
