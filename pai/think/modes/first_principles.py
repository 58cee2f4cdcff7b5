"""First principles: audit assumptions, rebuild from base truths."""

from __future__ import annotations

from pai.think.modes.base import build_scaffold

TITLE = "First Principles Analysis"

INSTRUCTIONS = """
Challenge assumptions. Rebuild from ground truth.

### Assumptions
List every assumption we're making about this problem. Include inherited assumptions (things we assume because that's how it's usually done).

### Assumption Audit
For each assumption, mark it:
- **TRUE** — verified, based on evidence
- **INHERITED** — convention or habit, not verified
- **FALSE** — actually wrong

You MUST invalidate at least one assumption. If you can't find one that's false, you haven't looked hard enough.

### Base Truths
What do we actually know for certain? Strip away everything inherited and conventional.

### Rebuilt Reasoning
Starting only from base truths, what approach emerges? How does it differ from the conventional approach?

### Impact
How does this change what we should do? Be specific about what changes and what stays the same.
"""


def generate(problem: str, context: str | None = None, memory: str | None = None) -> str:
    return build_scaffold(TITLE, INSTRUCTIONS, problem, context, memory)
