"""Data models for the think tool."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel

AUTO = "auto"


class ThinkMode(StrEnum):
    COUNCIL = "council"
    RED_TEAM = "red_team"
    FIRST_PRINCIPLES = "first_principles"
    BE_CREATIVE = "be_creative"


MODE_LABELS: dict[ThinkMode, str] = {
    ThinkMode.COUNCIL: "council",
    ThinkMode.RED_TEAM: "red team",
    ThinkMode.FIRST_PRINCIPLES: "first principles",
    ThinkMode.BE_CREATIVE: "creative",
}


class ThinkRequest(BaseModel):
    """One think invocation. ``mode`` of None or ``"auto"`` means classify."""

    problem: str
    mode: ThinkMode | Literal["auto"] | None = None
    context: str | None = None


@dataclass
class ThinkResponse:
    """Scaffold text plus the mode that produced it."""

    text: str
    mode: ThinkMode
