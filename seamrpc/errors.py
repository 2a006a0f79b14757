"""
Error codes and local exceptions

Protocol-level failures travel inside response envelopes using the codes
below. Failures that happen before an envelope exists (unreadable request
bodies, unreachable servers, responses that cannot be correlated) are raised
to the caller as exceptions.
"""

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
EXCEPTION = -32099

# Implementation-defined server errors (-32000 to -32099)
RESERVED_PREFIX = -32001
MISMATCHED_VERSION = -32002

MESSAGES = {
    PARSE_ERROR: "Parse error.",
    INVALID_REQUEST: "Invalid request.",
    METHOD_NOT_FOUND: "Method not found.",
    INVALID_PARAMS: "Invalid params.",
    RESERVED_PREFIX: "Illegal method name; Method cannot start with 'rpc.'",
    MISMATCHED_VERSION: "Client/Server JSON-RPC version mismatch; Expected '2.0'",
}


class ServerError(RuntimeError):
    """Raised to the hosting process when the server cannot produce any envelope."""


class InvocationError(RuntimeError):
    """Raised when a call cannot be bound to the target method."""


class ClientError(RuntimeError):
    """Raised when a response cannot be received, decoded or correlated."""


class TransportError(ClientError):
    """Raised when the transport is unreachable or reports a non-success status."""
