"""Command-line interface for the remote tool client."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from .client import RemoteToolClient
from .config import load_config
from .exceptions import ConfigError, RemoteCallError

LOGGER = logging.getLogger("a2a_client.cli")

# Calls made by the smoke command, in order
SMOKE_CALLS = [
    ("echo", {"hello": "world"}),
    ("list_tools", None),
    ("unknown_tool", None),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Call tools on a remote agent")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--base-url", default=None, help="Remote agent URL (omit for mock mode)")
    parser.add_argument("--timeout-ms", type=int, default=None, help="Per-attempt timeout in milliseconds")
    parser.add_argument("--max-retries", type=int, default=None, help="Retries after the first attempt")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    call_parser = subparsers.add_parser("call", help="Invoke a single tool and print the result")
    call_parser.add_argument("tool", help="Tool name")
    call_parser.add_argument("--args", dest="tool_args", default="{}", help="Tool arguments as JSON")
    call_parser.add_argument("--endpoint", default=None, help="Endpoint overriding the base URL for this call")

    subparsers.add_parser("smoke", help="Run echo, list_tools and an unknown tool")

    return parser


def _print_json(value: Any) -> None:
    print(json.dumps(value, indent=2, ensure_ascii=False))


def call(client: RemoteToolClient, args: argparse.Namespace) -> int:
    try:
        tool_args = json.loads(args.tool_args)
    except json.JSONDecodeError as exc:
        print(f"Invalid --args JSON: {exc}", file=sys.stderr)
        return 2

    try:
        result = client.call_tool(args.tool, tool_args, endpoint=args.endpoint)
    except RemoteCallError as exc:
        print(f"Tool call failed after {exc.attempts} attempt(s): {exc}", file=sys.stderr)
        return 1

    _print_json(result)
    return 0


def smoke(client: RemoteToolClient) -> int:
    failures = 0
    for tool_name, tool_args in SMOKE_CALLS:
        print(f"Calling {tool_name}...")
        try:
            _print_json(client.call_tool(tool_name, tool_args))
        except RemoteCallError as exc:
            LOGGER.error("Error calling %s: %s", tool_name, exc)
            failures += 1
    return 1 if failures else 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        config = load_config(
            args.config,
            base_url=args.base_url,
            timeout_ms=args.timeout_ms,
            max_retries=args.max_retries,
        )
    except ConfigError as exc:
        parser.error(str(exc))

    with RemoteToolClient(config) as client:
        if args.command == "call":
            return call(client, args)
        else:
            return smoke(client)


if __name__ == "__main__":
    sys.exit(main())
