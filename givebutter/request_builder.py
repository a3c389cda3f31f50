# =============================================================================
# givebutter/request_builder.py  —  Turn (path, method, body, query) into a request
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Produces an OutboundRequest with the absolute URL, auth headers and
#   serialized body.  It performs no I/O; the only outside input is the API
#   key, which is resolved on every call.
#
# QUERY STRING RULES:
#   - A value of None means "not specified" and the key is dropped.
#   - Falsy values that ARE specified (0, "", False) are kept.
#   - No "?" is appended when nothing is left.
# =============================================================================

import json
from typing import Any, Mapping
from urllib.parse import quote, urlencode

from givebutter.config import API_BASE_URL, get_api_key
from givebutter.models import MUTATING_METHODS, OutboundRequest


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Encode query parameters, skipping unspecified (None) entries.

    Returns the encoded string without a leading "?", or "" when no
    parameter is present.
    """
    if not params:
        return ""
    present = [
        (key, _stringify(value)) for key, value in params.items() if value is not None
    ]
    # %20 rather than "+", so plain percent-decoding restores every value
    return urlencode(present, quote_via=quote)


def build_headers(api_key: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def build_request(
    path: str,
    method: str = "GET",
    body: Mapping[str, Any] | None = None,
    query_params: Mapping[str, Any] | None = None,
) -> OutboundRequest:
    """Build an authenticated request against the Givebutter API.

    Args:
        path: Endpoint path with parameters already substituted
              (e.g., "/contacts/42/restore").
        method: HTTP verb.
        body: JSON body.  Only attached for POST, PATCH and PUT; ignored
              for every other verb.
        query_params: Query parameters; None values are omitted.

    Raises:
        MissingCredentialError: if the API key is not configured.
    """
    method = method.upper()
    headers = build_headers(get_api_key())

    url = f"{API_BASE_URL}{path}"
    query = encode_query(query_params)
    if query:
        url = f"{url}?{query}"

    serialized = None
    if body is not None and method in MUTATING_METHODS:
        serialized = json.dumps(dict(body))

    return OutboundRequest(method=method, url=url, headers=headers, body=serialized)
