"""Structured thinking: mode routing and prompt scaffolds."""

from pai.think.models import ThinkMode, ThinkRequest, ThinkResponse
from pai.think.orchestrator import ThinkError, think
from pai.think.router import classify

__all__ = ["ThinkError", "ThinkMode", "ThinkRequest", "ThinkResponse", "classify", "think"]
