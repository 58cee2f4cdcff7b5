"""CallContext — carries host call info into tool and command handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class StatusUI(Protocol):
    """The part of the host UI we touch: a keyed status line."""

    def set_status(self, key: str, text: str | None) -> None: ...


@dataclass
class CallContext:
    """Context for a single host invocation.

    Attributes:
        ui: Host status UI, or None when running headless.
        tool_call_id: Host-assigned id for the call; tags the registry's
            call log lines so one invocation can be followed through.
    """

    ui: StatusUI | None = None
    tool_call_id: str = ""
