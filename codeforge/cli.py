"""codeforge command-line driver.

Usage::

    python -m codeforge.cli list
    python -m codeforge.cli generate FunctionGenerator sum.yaml -o src/sum.ts
    python -m codeforge.cli demo

Input files are JSON or YAML mappings matching the agent's input model.
Relative output paths are resolved against ``CODEFORGE_OUTPUT_DIR``.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Optional

from codeforge.agents import create_default_registry
from codeforge.config import Config, ConfigError
from codeforge.core.models import GenerationContext, GenerationResult
from codeforge.core.registry import AgentRegistry
from codeforge.files import FileAccess, LocalFileAccess
from codeforge.utils import (
    InputFileError,
    console,
    load_input_file,
    print_code,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Demo inputs
# ---------------------------------------------------------------------------

DEMO_INPUTS: list[tuple[str, dict[str, Any]]] = [
    (
        "FunctionGenerator",
        {
            "name": "calculateSum",
            "parameters": [
                {"name": "a", "type": "number"},
                {"name": "b", "type": "number"},
            ],
            "returnType": "number",
            "body": "return a + b;",
        },
    ),
    (
        "ClassGenerator",
        {
            "name": "User",
            "properties": [
                {"name": "id", "type": "string", "visibility": "private"},
                {"name": "name", "type": "string", "visibility": "public"},
                {"name": "email", "type": "string", "visibility": "public"},
            ],
            "methods": [
                {"name": "getId", "returnType": "string"},
                {"name": "updateEmail", "parameters": ["email: string"], "returnType": "void"},
            ],
        },
    ),
]


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_list(registry: AgentRegistry) -> int:
    """Print every registered agent."""
    print_summary_table([agent.describe() for agent in registry.get_all()])
    return 0


async def cmd_generate(
    registry: AgentRegistry,
    file_access: FileAccess,
    config: Config,
    agent_name: str,
    input_path: str,
    output: Optional[str] = None,
    force: bool = False,
) -> int:
    """Run one agent on the description stored in *input_path*."""
    agent = registry.get(agent_name)
    if agent is None:
        print_error(f"Unknown agent: {agent_name}")
        print_warning(f"Available agents: {', '.join(registry.list_names())}")
        return 1

    try:
        input_data = await load_input_file(input_path, file_access)
    except InputFileError as exc:
        print_error(str(exc))
        return 1

    context = GenerationContext(metadata={"input_file": input_path})
    if output:
        target = config.resolve_output(output)
        if await file_access.exists(target) and not (force or config.overwrite):
            print_error(f"Refusing to overwrite {target} (use --force)")
            return 1
        context.output_path = target

    result = await agent.generate(input_data, context)
    return _report(agent_name, result)


async def cmd_demo(registry: AgentRegistry) -> int:
    """Generate the bundled example function and class."""
    console.print(f"Registered agents: {', '.join(registry.list_names())}")
    status = 0
    for agent_name, input_data in DEMO_INPUTS:
        agent = registry.get(agent_name)
        if agent is None:
            print_error(f"Unknown agent: {agent_name}")
            status = 1
            continue
        console.rule(f"[bold cyan]{agent_name}[/bold cyan]")
        result = await agent.generate(input_data)
        status = max(status, _report(agent_name, result))
    return status


def _report(agent_name: str, result: GenerationResult) -> int:
    if not result.success:
        print_error(f"{agent_name} failed: {result.error}")
        return 1
    if result.file_path:
        print_success(f"Wrote {result.file_path}")
    else:
        print_code(result.code or "")
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeforge",
        description="codeforge -- template-driven TypeScript code generators",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  codeforge list\n"
            "  codeforge generate FunctionGenerator sum.yaml -o sum.ts\n"
            "  codeforge demo\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the registered agents")

    generate = subparsers.add_parser("generate", help="Run an agent on an input file")
    generate.add_argument("agent", help="Agent name, e.g. FunctionGenerator")
    generate.add_argument("input", help="JSON or YAML description file")
    generate.add_argument(
        "--output", "-o",
        default=None,
        help="Write the code here instead of printing it",
    )
    generate.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite an existing output file",
    )

    subparsers.add_parser("demo", help="Generate the bundled examples")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``codeforge`` / ``python -m codeforge.cli``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
    except ConfigError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    logging.basicConfig(
        level=config.log_level_number,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    file_access = LocalFileAccess(encoding=config.encoding)
    registry = create_default_registry(file_access)

    if args.command == "list":
        status = cmd_list(registry)
    elif args.command == "generate":
        status = asyncio.run(
            cmd_generate(
                registry,
                file_access,
                config,
                args.agent,
                args.input,
                output=args.output,
                force=args.force,
            )
        )
    else:
        status = asyncio.run(cmd_demo(registry))

    logger.debug("Command %s finished with status %d", args.command, status)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
