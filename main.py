#!/usr/bin/env python3
"""YAGOO agent directory CLI."""

import argparse
import logging
import sys
from pydantic import ValidationError
from config.settings import Settings
from orchestrator import DirectoryOrchestrator
from retrieval.catalog import CatalogLoadError
from tools import build_directory_tools


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="YAGOO - find the right AI agent for a task"
    )
    parser.add_argument(
        "--catalog",
        type=str,
        help="Path to catalog YAML (default: bundled catalog or $YAGOO_CATALOG_PATH)"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search agents by task description")
    search.add_argument("query", type=str, help="What you need an agent for")
    search.add_argument("--category", "-c", type=str, help="Category filter")
    search.add_argument("--pricing", "-p", type=str, help="Pricing model filter")
    search.add_argument("--limit", "-n", type=int, help="Maximum results (default: settings default_limit)")

    get = subparsers.add_parser("get", help="Show the full profile of an agent")
    get.add_argument("slug", type=str, help="Agent slug")

    subparsers.add_parser("categories", help="List categories with agent counts")

    compare = subparsers.add_parser("compare", help="Compare 2-5 agents")
    compare.add_argument("slugs", nargs="+", help="Agent slugs")

    subparsers.add_parser("mcp", help="List MCP-enabled agents")

    return parser


def tool_call(args: argparse.Namespace) -> tuple[str, dict]:
    """Map parsed arguments to a tool name and its arguments."""
    if args.command == "search":
        arguments = {"query": args.query}
        if args.limit is not None:
            arguments["limit"] = args.limit
        if args.category:
            arguments["category"] = args.category
        if args.pricing:
            arguments["pricing"] = args.pricing
        return "yagoo_search", arguments
    if args.command == "get":
        return "yagoo_get_agent", {"slug": args.slug}
    if args.command == "categories":
        return "yagoo_list_categories", {}
    if args.command == "compare":
        return "yagoo_compare", {"slugs": args.slugs}
    return "yagoo_list_mcp", {}


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings(catalog_path=args.catalog, verbose=args.verbose)
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        orchestrator = DirectoryOrchestrator(settings=settings)
    except CatalogLoadError as e:
        print(f"Error loading catalog: {e}", file=sys.stderr)
        sys.exit(1)

    tools = build_directory_tools(orchestrator)
    name, arguments = tool_call(args)
    result = tools[name].execute(**arguments)

    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        sys.exit(2)

    print(result.result)


if __name__ == "__main__":
    main()
