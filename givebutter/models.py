# =============================================================================
# givebutter/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses describe everything that flows through one tool call:
#
#   OperationDescriptor  →  what the tool accepts and which endpoint it hits
#   OutboundRequest      →  the fully built HTTP request
#   ApiSuccess / ApiEmpty / ApiFailure  →  what came back
#
# All of them are frozen.  Descriptors are built once at import time; the
# request and result objects live for a single call and are never reused.
# =============================================================================

from dataclasses import dataclass, field
from string import Formatter
from typing import Any, Union

from pydantic import BaseModel

# HTTP verbs that may carry a JSON body.  GET and DELETE never do.
MUTATING_METHODS = frozenset({"POST", "PATCH", "PUT"})


# -----------------------------------------------------------------------------
# OperationDescriptor — static definition of one callable tool
# -----------------------------------------------------------------------------
# `path` is a template such as "/campaigns/{campaign_id}/members/{member_id}".
# Every placeholder must be a required integer field on `arguments`; the
# catalog checks this when the descriptor is registered.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class OperationDescriptor:
    """One Givebutter API action exposed as a tool."""

    name: str                          # Tool name, e.g. "list_campaigns"
    description: str                   # Shown to the agent
    method: str                        # "GET", "POST", "PATCH", "DELETE"
    path: str                          # Path template relative to the API root
    arguments: type[BaseModel]         # Argument schema (pydantic model)

    @property
    def path_params(self) -> tuple[str, ...]:
        """Placeholder names in `path`, in order of appearance."""
        return tuple(
            name for _, name, _, _ in Formatter().parse(self.path) if name
        )

    @property
    def sends_body(self) -> bool:
        return self.method in MUTATING_METHODS


# -----------------------------------------------------------------------------
# OutboundRequest — a request ready for the wire
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class OutboundRequest:
    """A fully built HTTP request against the Givebutter API."""

    method: str
    url: str                           # Absolute URL including query string
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None            # Serialized JSON, or None for no body


# -----------------------------------------------------------------------------
# ApiResult — the three ways a response can be classified
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ApiSuccess:
    """2xx response with a decoded JSON payload."""

    payload: Any


@dataclass(frozen=True)
class ApiEmpty:
    """204 No Content.  The body is never read."""


@dataclass(frozen=True)
class ApiFailure:
    """Non-2xx response, kept verbatim for diagnostics."""

    status: int
    status_text: str
    body: str                          # Raw response text, not reformatted


ApiResult = Union[ApiSuccess, ApiEmpty, ApiFailure]
