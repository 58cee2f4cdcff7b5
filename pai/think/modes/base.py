"""Shared scaffold skeleton: title, context, memory, instructions, criteria."""

from __future__ import annotations

SUCCESS_CRITERIA = """## Success Criteria
- [ ] Criterion 1
- [ ] Criterion 2
- [ ] Criterion 3

Define 3-5 bullets for what "done" looks like."""


def build_scaffold(
    title: str,
    instructions: str,
    problem: str,
    context: str | None = None,
    memory: str | None = None,
) -> str:
    """Assemble one scaffold document.

    ``context`` and ``memory`` blocks are included only when non-empty.
    ``instructions`` is the mode-specific body that follows the
    ``## Instructions`` heading.
    """
    sections = [f"# {title}\n\n**Problem:** {problem}"]

    if context:
        sections.append(f"**Additional context:** {context}")
    if memory:
        sections.append(f"**From memory:**\n{memory}")

    sections.append(f"\n## Instructions\n\n{instructions.strip()}\n\n{SUCCESS_CRITERIA}")

    return "\n\n".join(sections)
