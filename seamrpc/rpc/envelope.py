"""
JSON-RPC 2.0 envelopes

Calls, batches and structural errors as immutable values. Every state change
of a Call (validation failure, invocation result) produces a new Call, so a
Call never carries both a result and an error.
"""

import json
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from seamrpc.errors import INVALID_REQUEST, MESSAGES

JSONRPC_VERSION = "2.0"


def dumps(value: Any) -> str:
    """Serialize to compact JSON, the form used on the wire."""
    return json.dumps(value, separators=(",", ":"))


@dataclass(frozen=True)
class Positional:
    """Parameters passed by position."""
    values: Tuple[Any, ...]

    def to_json(self) -> List[Any]:
        return list(self.values)


@dataclass(frozen=True)
class Named:
    """Parameters passed by name."""
    mapping: Dict[str, Any]

    def to_json(self) -> Dict[str, Any]:
        return dict(self.mapping)


Params = Union[Positional, Named, None]


def params_from_json(value: Any) -> Params:
    """Build the Params variant from a decoded ``params`` member.

    Raises:
        ValueError: params is neither an array nor an object
    """
    if value is None:
        return None
    if isinstance(value, list):
        return Positional(tuple(value))
    if isinstance(value, dict):
        return Named(value)
    raise ValueError(f"params must be an array or an object, got {type(value).__name__}")


def make_params(args: Tuple[Any, ...] = (), kwargs: Optional[Dict[str, Any]] = None) -> Params:
    """Build params from Python call arguments; positional and named cannot be mixed."""
    if args and kwargs:
        raise ValueError("JSON-RPC params are either positional or named, not both")
    if kwargs:
        return Named(dict(kwargs))
    if args:
        return Positional(tuple(args))
    return None


@dataclass(frozen=True)
class ErrorObject:
    code: int
    message: str

    @classmethod
    def of(cls, code: int) -> "ErrorObject":
        return cls(code, MESSAGES[code])

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class Call:
    """One request envelope, plus the error or result attached to it."""
    method: Any = None
    params: Params = None
    id: Any = None
    jsonrpc: Any = JSONRPC_VERSION
    error: Optional[ErrorObject] = None
    result: Any = None

    @classmethod
    def from_json(cls, data: Any) -> "Call":
        """Build a Call from one decoded request object.

        Anything that is not an object, or carries unstructured params, yields
        a Call that already holds an INVALID_REQUEST error.
        """
        if not isinstance(data, dict):
            return cls(error=ErrorObject.of(INVALID_REQUEST))

        call = cls(
            method=data.get("method"),
            id=data.get("id"),
            jsonrpc=data.get("jsonrpc"),
        )
        try:
            params = params_from_json(data.get("params"))
        except ValueError:
            return call.with_error(INVALID_REQUEST)
        return replace(call, params=params)

    def is_batch(self) -> bool:
        return False

    def is_notify(self) -> bool:
        return self.id is None

    def with_error(self, code: int, message: Optional[str] = None) -> "Call":
        if message is None:
            message = MESSAGES[code]
        return replace(self, error=ErrorObject(code, message), result=None)

    def with_result(self, result: Any) -> "Call":
        return replace(self, result=result, error=None)

    def to_response(self) -> Optional[Dict[str, Any]]:
        """Response object for this call; None for a notification that succeeded."""
        if self.error is not None:
            return {"jsonrpc": JSONRPC_VERSION, "error": self.error.to_dict(), "id": self.id}
        if self.is_notify():
            return None
        return {"jsonrpc": JSONRPC_VERSION, "result": self.result, "id": self.id}

    def to_response_json(self) -> Optional[str]:
        response = self.to_response()
        if response is None:
            return None
        return dumps(response)

    def to_request(self) -> Dict[str, Any]:
        """Request object for sending; params and id are left out when absent."""
        request = {"jsonrpc": self.jsonrpc, "method": self.method}
        if self.params is not None:
            request["params"] = self.params.to_json()
        if not self.is_notify():
            request["id"] = self.id
        return request

    def to_json(self) -> str:
        return dumps(self.to_request())


@dataclass(frozen=True)
class Batch:
    """A non-empty, ordered group of calls sent in one payload."""
    calls: Tuple[Call, ...]

    def __post_init__(self):
        if not self.calls:
            raise ValueError("A batch needs at least one call")

    def __iter__(self) -> Iterator[Call]:
        return iter(self.calls)

    def __len__(self) -> int:
        return len(self.calls)

    def is_batch(self) -> bool:
        return True

    def is_notify(self) -> bool:
        return all(call.is_notify() for call in self.calls)

    def to_json(self) -> str:
        return dumps([call.to_request() for call in self.calls])


@dataclass(frozen=True)
class StructuralError:
    """A payload that could not produce any call; answered with a null id."""
    error: ErrorObject

    @classmethod
    def of(cls, code: int) -> "StructuralError":
        return cls(ErrorObject.of(code))

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    def is_batch(self) -> bool:
        return False

    def is_notify(self) -> bool:
        return False

    def to_response_json(self) -> str:
        return dumps({"jsonrpc": JSONRPC_VERSION, "error": self.error.to_dict(), "id": None})


Request = Union[Call, Batch, StructuralError]
