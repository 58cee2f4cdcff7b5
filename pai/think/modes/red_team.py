"""Red team: failure and attack enumeration."""

from __future__ import annotations

from pai.think.modes.base import build_scaffold

TITLE = "Failure Analysis"

INSTRUCTIONS = """
Identify how this could fail. Be concrete and specific, not generic.

### Failure Modes
List at least 5 specific failure modes or attack vectors. For each:
- **What fails:** Describe the specific failure
- **Worst case:** What happens if this isn't caught?
- **Mitigation:** How to prevent or detect it

### Deal-Breaker
Identify at least one scenario that would **block shipping entirely** if it occurred. Not a minor inconvenience — a real blocker.

### Risk Assessment
Overall narrative: how risky is this? What's the one thing we must get right above all else?
"""


def generate(problem: str, context: str | None = None, memory: str | None = None) -> str:
    return build_scaffold(TITLE, INSTRUCTIONS, problem, context, memory)
