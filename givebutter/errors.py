# =============================================================================
# givebutter/errors.py  —  Failure taxonomy
# =============================================================================
#
# Every failure a tool call can produce is a GivebutterError.  The MCP layer
# turns these into tool errors using str(exc), so each message must stand on
# its own.
# =============================================================================


class GivebutterError(Exception):
    """Base class for all errors raised by the givebutter package."""


class MissingCredentialError(GivebutterError):
    """The API key environment variable is not set."""


class InvalidArgumentError(GivebutterError):
    """Caller arguments do not match the operation's schema."""

    def __init__(self, operation: str, details: list[str]):
        self.operation = operation
        self.details = details
        super().__init__(f"Invalid arguments for {operation}: {'; '.join(details)}")


class RemoteFailureError(GivebutterError):
    """The API answered with a non-2xx status."""

    def __init__(self, status: int, status_text: str, body: str):
        self.status = status
        self.status_text = status_text
        self.body = body
        super().__init__(f"API request failed: {status} {status_text} - {body}")


class TransportFailureError(GivebutterError):
    """The request never produced a usable response (network or decode error)."""


class UnknownOperationError(GivebutterError, KeyError):
    """No operation is registered under the requested name."""

    def __str__(self) -> str:
        # KeyError.__str__ would wrap the message in quotes
        return str(self.args[0]) if self.args else ""
