"""
JSON-RPC 2.0 Implementation Module

- envelope: calls, batches and structural errors
- validator: payload parsing and envelope rules
- invoker: method registry and parameter binding
- server: dispatcher for single calls and batches
- client: call builder and response correlator

Independent of the transport carrying the payloads.
"""

from seamrpc.rpc.envelope import Batch, Call, Named, Positional, StructuralError
from seamrpc.rpc.validator import check_valid, parse, validate

__all__ = [
    "Batch",
    "Call",
    "Named",
    "Positional",
    "StructuralError",
    "check_valid",
    "parse",
    "validate",
]
