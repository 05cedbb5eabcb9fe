# =============================================================================
# travel_tools/common.py  —  Shared plumbing for both FastMCP servers
# =============================================================================
#
# WHAT THIS FILE DOES:
#   - Configures logging for a server process (STDERR only).
#   - Provides the colored request/status/response log helpers.
#   - forward(): runs a tool call through a ToolRegistry with logging.
#   - RegistryTool / register_tools(): publish registry operations on a
#     FastMCP server, advertising each operation's JSON schema.
#   - main(): command-line entry point shared by both servers.
#
# WHY STDERR:
#   With the stdio transport, STDOUT carries the MCP JSON messages.  Any log
#   line on STDOUT would corrupt the protocol stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
# =============================================================================

import argparse
import json
import logging
import sys
from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult

from travel_core.config import Settings
from travel_core.registry import ToolRegistry
from travel_core.schema import ToolDescriptor


_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

_MAX_LOGGED_RESPONSE = 400


def configure_logging(settings: Settings, tag: str) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=f"%(asctime)s [{tag}] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the (truncated) response text in GREEN, then return it."""
    shown = text if len(text) <= _MAX_LOGGED_RESPONSE else text[:_MAX_LOGGED_RESPONSE] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(shown)}{_RESET}")
    return text


async def forward(registry: ToolRegistry, tool_name: str, arguments: Optional[dict]) -> str:
    """Dispatch one tool call and return the response text."""
    _log_request(tool_name, **(arguments if isinstance(arguments, dict) else {}))
    response = await registry.dispatch(tool_name, arguments)
    if response.is_error:
        _log_status("returned an error response")
    return _log_response(tool_name, response.text)


class RegistryTool(Tool):
    """A FastMCP tool backed by one ToolRegistry entry.

    FastMCP hands run() the raw argument bag without validating it, so the
    registry is the only validator and every failure comes back as an
    "Error: ..." text response instead of a protocol error.
    """

    def __init__(self, registry: ToolRegistry, descriptor: ToolDescriptor):
        super().__init__(
            name=descriptor.name,
            description=descriptor.description,
            parameters=descriptor.input_schema(),
        )
        self._registry = registry

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        return ToolResult(content=await forward(self._registry, self.name, arguments))


def register_tools(mcp: FastMCP, registry: ToolRegistry) -> None:
    """Expose every registry operation on ``mcp``."""
    for name in registry.names():
        mcp.add_tool(RegistryTool(registry, registry.get(name)))


def main(mcp: FastMCP, registry: ToolRegistry, argv: Optional[list[str]] = None) -> None:
    """Run ``mcp`` (stdio by default) or print the tool catalogue."""
    parser = argparse.ArgumentParser(prog=registry.name)
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http", "sse"],
        help="MCP transport (default: stdio)",
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument(
        "--list-tools",
        action="store_true",
        help="Print the available tools and their input schemas as JSON, then exit",
    )
    args = parser.parse_args(argv)

    if args.list_tools:
        json.dump(registry.describe(), sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
        return

    logging.info("%s running on %s", registry.name, args.transport)
    if args.transport == "stdio":
        mcp.run()
    else:
        mcp.run(transport=args.transport, host=args.host, port=args.port)
