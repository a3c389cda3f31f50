# =============================================================================
# givebutter/__init__.py
# =============================================================================
# Pure request-translation layer for the Givebutter REST API.
#
# Nothing in this package imports FastMCP or MCP types.  The tools/ package
# wraps it for the protocol; this package only knows about operations,
# HTTP requests and API results.
# =============================================================================

from givebutter.dispatch import format_result, invoke
from givebutter.errors import (
    GivebutterError,
    InvalidArgumentError,
    MissingCredentialError,
    RemoteFailureError,
    TransportFailureError,
    UnknownOperationError,
)
from givebutter.operations import get_operation, list_operations

__all__ = [
    "GivebutterError",
    "InvalidArgumentError",
    "MissingCredentialError",
    "RemoteFailureError",
    "TransportFailureError",
    "UnknownOperationError",
    "format_result",
    "get_operation",
    "invoke",
    "list_operations",
]
