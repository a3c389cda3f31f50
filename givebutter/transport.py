# =============================================================================
# givebutter/transport.py  —  Send one request, classify the response
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs a single HTTP exchange with httpx and classifies the outcome:
#
#     2xx (not 204)  →  ApiSuccess(payload)   body decoded as JSON
#     204            →  ApiEmpty()            body never read
#     anything else  →  ApiFailure(...)       raw body kept verbatim
#
#   Network errors and undecodable success bodies raise
#   TransportFailureError.  There is no retry and no timeout override: each
#   call is one exchange with httpx's default timeout.
# =============================================================================

import logging

import httpx

from givebutter.errors import TransportFailureError
from givebutter.models import ApiEmpty, ApiFailure, ApiResult, ApiSuccess, OutboundRequest

logger = logging.getLogger(__name__)


def build_client() -> httpx.AsyncClient:
    """Create the httpx client used for a single call."""
    return httpx.AsyncClient()


def classify_response(response: httpx.Response) -> ApiResult:
    """Map an httpx response onto ApiSuccess / ApiEmpty / ApiFailure."""
    if not response.is_success:
        return ApiFailure(
            status=response.status_code,
            status_text=response.reason_phrase,
            body=response.text,
        )

    if response.status_code == 204:
        return ApiEmpty()

    try:
        return ApiSuccess(payload=response.json())
    except ValueError as exc:
        raise TransportFailureError(
            f"API response could not be parsed as JSON: {response.status_code} "
            f"{response.reason_phrase} - {exc}"
        ) from exc


async def _send(client: httpx.AsyncClient, request: OutboundRequest) -> ApiResult:
    logger.debug("%s %s", request.method, request.url)
    try:
        response = await client.request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
        )
    except httpx.HTTPError as exc:
        raise TransportFailureError(
            f"API request failed: {type(exc).__name__}: {exc}"
        ) from exc

    logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
    return classify_response(response)


async def execute(
    request: OutboundRequest,
    client: httpx.AsyncClient | None = None,
) -> ApiResult:
    """Issue `request` and classify the response.

    Args:
        request: The request built by build_request().
        client: Optional httpx client.  A caller-supplied client is used
                as-is and left open; otherwise one is created and closed
                around this single call.
    """
    if client is not None:
        return await _send(client, request)

    async with build_client() as owned_client:
        return await _send(owned_client, request)
