"""PAI command-line entry point.

Usage examples:
    # Auto-selected thinking scaffold
    pai think "why do we assume the cache is needed"

    # Forced mode with extra context
    pai think "new login flow" --mode red_team --context "public endpoint"

    # Memory files
    pai memory read learnings
    pai memory append learnings "pytest-asyncio needs asyncio_mode=auto"

    # Slash commands
    pai run council "monorepo or not"
    pai run memory-status
"""

import argparse
import asyncio
import logging
import sys

from pai.commands import COMMANDS, run_command
from pai.config import settings
from pai.context import CallContext
from pai.tools import registry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pai", description="PAI memory and structured thinking.")
    sub = parser.add_subparsers(dest="command", required=True)

    think_p = sub.add_parser("think", help="Build a thinking scaffold for a problem")
    think_p.add_argument("problem")
    think_p.add_argument(
        "--mode",
        choices=["council", "red_team", "first_principles", "be_creative", "auto"],
        default=None,
    )
    think_p.add_argument("--context", default=None)

    mem_p = sub.add_parser("memory", help="Read or write a memory file")
    mem_p.add_argument("action", choices=["read", "append", "replace"])
    mem_p.add_argument("file", choices=["preferences", "learnings", "context"])
    mem_p.add_argument("content", nargs="?", default=None)

    run_p = sub.add_parser("run", help="Run a slash command")
    run_p.add_argument("name", choices=list(COMMANDS))
    run_p.add_argument("text", nargs="*")

    return parser


async def _dispatch(args: argparse.Namespace) -> int:
    ctx = CallContext()

    if args.command == "run":
        print(await run_command(args.name, " ".join(args.text), ctx))
        return 0

    if args.command == "think":
        arguments = {"problem": args.problem, "mode": args.mode, "context": args.context}
    else:
        arguments = {"action": args.action, "file": args.file, "content": args.content}

    result = await registry.execute(args.command, arguments, call_context=ctx)
    if result.is_error:
        print(result.to_content(), file=sys.stderr)
        return 1
    print(result.to_content())
    if result.data and "mode" in result.data:
        logger.info("Resolved mode: %s", result.data["mode"])
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run one PAI operation."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        stream=sys.stderr,
    )
    args = build_parser().parse_args(argv)
    return asyncio.run(_dispatch(args))


if __name__ == "__main__":
    sys.exit(main())
