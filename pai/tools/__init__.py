"""Tool framework — import tool modules here to register them."""

# Import tool modules so their @registry.tool() decorators execute.
from pai.tools import memory_tools, think_tools  # noqa: F401
from pai.tools.registry import registry

__all__ = ["registry"]
