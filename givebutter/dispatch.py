# =============================================================================
# givebutter/dispatch.py  —  One generic handler for every operation
# =============================================================================
#
# HOW A CALL FLOWS:
#   1. Validate the caller's arguments against the descriptor's model.
#      Nothing else happens if this fails: no credential read, no network.
#   2. Substitute path parameters into the path template.
#   3. Put the remaining *supplied* arguments into the JSON body (POST,
#      PATCH, PUT) or the query string (GET, DELETE).
#   4. Build the request and execute it.
#   5. Raise on failure; otherwise return the payload.  A 204 becomes
#      {"success": true}.
# =============================================================================

import json
from typing import Any, Mapping

import httpx
from pydantic import ValidationError

from givebutter.errors import InvalidArgumentError, RemoteFailureError
from givebutter.models import ApiEmpty, ApiFailure, OperationDescriptor
from givebutter.operations import get_operation
from givebutter.request_builder import build_request
from givebutter.transport import execute

EMPTY_SUCCESS = {"success": True}


def _describe_errors(exc: ValidationError) -> list[str]:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        details.append(f"{location}: {error['msg']}")
    return details


def validate_arguments(
    op: OperationDescriptor, arguments: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Validate `arguments` and return only the fields the caller supplied."""
    try:
        model = op.arguments.model_validate(dict(arguments or {}))
    except ValidationError as exc:
        raise InvalidArgumentError(op.name, _describe_errors(exc)) from exc
    return model.model_dump(exclude_unset=True)


def split_arguments(
    op: OperationDescriptor, values: dict[str, Any]
) -> tuple[str, dict[str, Any] | None, dict[str, Any] | None]:
    """Return (path, body, query_params) for validated `values`."""
    path_values = {name: values[name] for name in op.path_params}
    path = op.path.format(**path_values)

    rest = {key: value for key, value in values.items() if key not in path_values}
    if op.sends_body:
        # Endpoints whose only arguments are path parameters (restore) send no body
        takes_body = bool(op.arguments.model_fields.keys() - path_values.keys())
        return path, (rest if takes_body else None), None
    return path, None, rest


async def invoke(
    operation: str | OperationDescriptor,
    arguments: Mapping[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """Run one operation end to end and return the decoded result.

    Raises:
        UnknownOperationError: `operation` is not in the catalog.
        InvalidArgumentError: arguments fail schema validation.
        MissingCredentialError: GIVEBUTTER_API_KEY is not set.
        RemoteFailureError: the API answered with a non-2xx status.
        TransportFailureError: network error or undecodable body.
    """
    op = get_operation(operation) if isinstance(operation, str) else operation
    values = validate_arguments(op, arguments)
    path, body, query = split_arguments(op, values)

    request = build_request(path, op.method, body=body, query_params=query)
    result = await execute(request, client=client)

    if isinstance(result, ApiFailure):
        raise RemoteFailureError(result.status, result.status_text, result.body)
    if isinstance(result, ApiEmpty):
        return dict(EMPTY_SUCCESS)
    return result.payload


def format_result(payload: Any) -> str:
    """Render a result as the pretty-printed JSON text sent to the agent."""
    return json.dumps(payload, indent=2)
