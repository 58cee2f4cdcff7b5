"""Think orchestration: route, read memory, build the scaffold."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pai.memory.store import MemoryFileStore
from pai.think.models import AUTO, MODE_LABELS, ThinkMode, ThinkRequest, ThinkResponse
from pai.think.modes import be_creative, council, first_principles, red_team
from pai.think.router import classify

if TYPE_CHECKING:
    from collections.abc import Callable

    from pai.context import StatusUI

logger = logging.getLogger(__name__)

STATUS_KEY = "pai"

NO_MEMORY_NOTE = "\n\n[Note: no memory files found — proceeding without stored context]"

SCAFFOLDS: dict[ThinkMode, Callable[[str, str | None, str | None], str]] = {
    ThinkMode.COUNCIL: council.generate,
    ThinkMode.RED_TEAM: red_team.generate,
    ThinkMode.FIRST_PRINCIPLES: first_principles.generate,
    ThinkMode.BE_CREATIVE: be_creative.generate,
}

_missing = set(ThinkMode) - set(SCAFFOLDS)
if _missing:
    msg = f"No scaffold generator for modes: {sorted(_missing)}"
    raise RuntimeError(msg)


class ThinkError(RuntimeError):
    """Unexpected failure while building a scaffold."""


def resolve_mode(request: ThinkRequest) -> ThinkMode:
    """Explicit mode wins; None or ``"auto"`` falls back to classification."""
    if request.mode is not None and request.mode != AUTO:
        return ThinkMode(request.mode)
    return classify(request.problem)


def _set_status(status: StatusUI | None, text: str | None) -> None:
    if status is None:
        return
    try:
        status.set_status(STATUS_KEY, text)
    except Exception:
        logger.warning("Could not update status indicator", exc_info=True)


def _read_memory(store: MemoryFileStore) -> str:
    try:
        return store.read_all()
    except Exception:
        logger.warning("Memory unavailable, continuing without it", exc_info=True)
        return ""


def think(
    request: ThinkRequest,
    store: MemoryFileStore | None = None,
    status: StatusUI | None = None,
) -> ThinkResponse:
    """Build a thinking scaffold for *request*.

    Raises ``ValueError`` for an empty problem and ``ThinkError`` for any
    unexpected failure after that. The status indicator is always cleared
    before returning or raising.
    """
    if not request.problem or not request.problem.strip():
        msg = "problem is required"
        raise ValueError(msg)

    store = store or MemoryFileStore.get()

    try:
        mode = resolve_mode(request)
        _set_status(status, f"PAI: thinking ({MODE_LABELS[mode]})...")

        memory = _read_memory(store)
        scaffold = SCAFFOLDS[mode](request.problem, request.context or None, memory or None)
        if not memory:
            scaffold += NO_MEMORY_NOTE
    except Exception as exc:
        logger.exception("Think failed")
        raise ThinkError(str(exc)) from exc
    finally:
        _set_status(status, None)

    logger.info("Think scaffold built (mode=%s, memory=%s)", mode, bool(memory))
    return ThinkResponse(text=scaffold, mode=mode)
