# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL Givebutter tools)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers one MCP tool per operation in givebutter.operations.  Every
#   tool is the same thin wrapper around givebutter.dispatch.invoke(); the
#   operations differ only in their descriptor (name, schema, verb, path).
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g., "list_campaigns")
#   2. FastMCP routes the call to GivebutterTool.run()
#   3. run() hands the raw arguments to invoke(), which validates them,
#      builds the HTTP request and executes it
#   4. The decoded JSON comes back as ONE text block, pretty-printed
#   5. Any GivebutterError becomes a ToolError with the same message
#
# TOOL ANNOTATIONS:
#   - GET tools       → readOnlyHint
#   - DELETE tools    → destructiveHint
#   - GET / DELETE / restore → idempotentHint
#   Create and update are neither read-only nor idempotent: repeating a
#   create makes a duplicate.
#
# RUNNING THIS SERVER:
#     a) python main.py                (loads .env first)
#     b) python -m tools.mcp_server
#     c) givebutter-mcp                (console script)
# =============================================================================

import json
import logging
import sys
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent, ToolAnnotations

from givebutter import GivebutterError, format_result, invoke, list_operations
from givebutter.config import get_log_level
from givebutter.models import OperationDescriptor
from givebutter.operations.base import input_schema

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: stdout carries the MCP JSON-RPC stream and any stray
# output there would corrupt it.
#
# Colours:
#   CYAN   incoming tool call with its arguments
#   YELLOW intermediate status
#   GREEN  response JSON
#   RED    failed call
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger("givebutter-mcp")


def _log_request(tool_name: str, params: dict[str, Any]) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: Any) -> Any:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


def _log_failure(tool_name: str, exc: Exception) -> None:
    logger.warning(f"{_RED}  ✗ {tool_name} failed: {exc}{_RESET}")


# =============================================================================
# Tool wrapper
# =============================================================================

def tool_annotations(op: OperationDescriptor) -> ToolAnnotations:
    read_only = op.method == "GET"
    return ToolAnnotations(
        readOnlyHint=read_only,
        destructiveHint=op.method == "DELETE",
        idempotentHint=read_only or op.method == "DELETE" or op.path.endswith("/restore"),
        openWorldHint=True,
    )


class GivebutterTool(Tool):
    """An MCP tool backed by one Givebutter operation descriptor."""

    operation: str

    @classmethod
    def from_operation(cls, op: OperationDescriptor) -> "GivebutterTool":
        return cls(
            name=op.name,
            description=op.description,
            parameters=input_schema(op.arguments),
            annotations=tool_annotations(op),
            operation=op.name,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments)
        try:
            payload = await invoke(self.operation, arguments)
        except GivebutterError as exc:
            _log_failure(self.name, exc)
            raise ToolError(str(exc)) from exc

        _log_response(self.name, payload)
        return ToolResult(content=[TextContent(type="text", text=format_result(payload))])


# =============================================================================
# Create the FastMCP server instance
# =============================================================================

def build_server() -> FastMCP:
    """Create a FastMCP server with every Givebutter operation registered."""
    server = FastMCP("givebutter-mcp", version="1.0.0")
    for op in list_operations():
        server.add_tool(GivebutterTool.from_operation(op))
    _log_status(f"Registered {len(list_operations())} Givebutter tools")
    return server


mcp = build_server()


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
