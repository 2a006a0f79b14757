"""
Call validation

Classifies raw payloads into a Call, a Batch or a StructuralError, and checks
calls against the JSON-RPC 2.0 envelope rules before they are dispatched.
"""

import json
import re
from dataclasses import dataclass
from typing import Union

from seamrpc.errors import INVALID_REQUEST, MISMATCHED_VERSION, PARSE_ERROR, RESERVED_PREFIX
from seamrpc.rpc.envelope import JSONRPC_VERSION, Batch, Call, ErrorObject, Request, StructuralError

RESERVED_METHOD_PREFIX = "rpc."

# Word characters, optionally in dot-separated segments ("echo", "rpc.discover"),
# with at least one letter or digit
METHOD_NAME_PATTERN = re.compile(r"^(?=[\w.]*[A-Za-z0-9])\w+(\.\w+)*$", re.ASCII)


@dataclass(frozen=True)
class Valid:
    call: Call


@dataclass(frozen=True)
class Invalid:
    call: Call
    error: ErrorObject


Validation = Union[Valid, Invalid]


def parse(raw: Union[str, bytes, None]) -> Request:
    """Decode a request payload.

    Args:
        raw: Request body as text or UTF-8 bytes

    Returns:
        Call for a single request object, Batch for a non-empty array,
        StructuralError when no call can be recovered
    """
    if raw is None:
        return StructuralError.of(INVALID_REQUEST)
    try:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        if not raw.strip():
            return StructuralError.of(INVALID_REQUEST)
        data = json.loads(raw)
    except ValueError:
        return StructuralError.of(PARSE_ERROR)

    if isinstance(data, list):
        if not data:
            return StructuralError.of(INVALID_REQUEST)
        return Batch(tuple(Call.from_json(item) for item in data))
    if isinstance(data, dict):
        return Call.from_json(data)
    return StructuralError.of(INVALID_REQUEST)


def is_valid_method_name(method) -> bool:
    return isinstance(method, str) and METHOD_NAME_PATTERN.match(method) is not None


def validate(call: Call) -> Validation:
    """Check a call; the first failing rule decides the error.

    Order: error already attached, missing version, malformed method name,
    wrong version, reserved method prefix.
    """
    if call.error is not None:
        return Invalid(call, call.error)

    if call.jsonrpc is None or not is_valid_method_name(call.method):
        code = INVALID_REQUEST
    elif call.jsonrpc != JSONRPC_VERSION:
        code = MISMATCHED_VERSION
    elif call.method.startswith(RESERVED_METHOD_PREFIX):
        code = RESERVED_PREFIX
    else:
        return Valid(call)

    invalid = call.with_error(code)
    return Invalid(invalid, invalid.error)


def check_valid(call: Call) -> bool:
    return isinstance(validate(call), Valid)
