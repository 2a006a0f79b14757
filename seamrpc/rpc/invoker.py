"""
Method invocation

Maps the public methods of an exposed object to callables with a known
minimum arity, and binds call params to them.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from seamrpc.errors import InvocationError
from seamrpc.rpc.envelope import Named, Params, Positional
from seamrpc.rpc.validator import RESERVED_METHOD_PREFIX

logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def required_arity(func: Callable) -> int:
    """Number of positional parameters without a default value."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins expose no signature
        return 0
    return sum(
        1 for p in signature.parameters.values()
        if p.kind in _POSITIONAL_KINDS and p.default is inspect.Parameter.empty
    )


def bind_arguments(params: Params) -> List[Any]:
    """Turn params into positional arguments.

    Named params are not spread over the formal parameters: the method gets
    the whole name/value mapping as its single argument.
    """
    if params is None:
        return []
    if isinstance(params, Named):
        return [dict(params.mapping)]
    if isinstance(params, Positional):
        return list(params.values)
    raise TypeError(f"Unsupported params type: {type(params).__name__}")


def is_public_name(name: str) -> bool:
    return not name.startswith("_") and not name.startswith(RESERVED_METHOD_PREFIX)


@dataclass(frozen=True)
class ExposedMethod:
    name: str
    handler: Callable
    min_arity: int

    @classmethod
    def wrap(cls, name: str, handler: Callable) -> "ExposedMethod":
        return cls(name, handler, required_arity(handler))

    def invoke(self, params: Params) -> Any:
        args = bind_arguments(params)
        if self.min_arity > len(args):
            raise InvocationError("Too few parameters passed.")
        return self.handler(*args)


class MethodRegistry:
    """Dispatchable surface of one exposed object.

    Built once per object: every public callable attribute is registered,
    private ones are remembered only so that calling them can be told apart
    from calling something that does not exist.
    """

    def __init__(self, target: Any = None):
        self.target = target
        self._methods: Dict[str, ExposedMethod] = {}
        if target is not None:
            for name in dir(target):
                if not is_public_name(name):
                    continue
                member = getattr(target, name, None)
                if callable(member):
                    self._methods[name] = ExposedMethod.wrap(name, member)
            logger.debug(f"Exposed {len(self._methods)} methods of {type(target).__name__}")

    def register(self, name: str, handler: Callable) -> None:
        if not is_public_name(name):
            raise ValueError(f"Method name cannot be exposed: {name!r}")
        if not callable(handler):
            raise TypeError(f"Handler for {name!r} is not callable")
        self._methods[name] = ExposedMethod.wrap(name, handler)
        logger.debug(f"Registered RPC method: {name}")

    def names(self) -> List[str]:
        return sorted(self._methods)

    def __contains__(self, name: str) -> bool:
        return name in self._methods

    def exists(self, name: str) -> bool:
        """Whether the name resolves to anything callable, public or not."""
        if name in self._methods:
            return True
        if self.target is None or name.startswith(RESERVED_METHOD_PREFIX):
            return False
        return callable(getattr(self.target, name, None))

    def invoke(self, name: str, params: Params) -> Any:
        """Call a registered method.

        Raises:
            InvocationError: the method is not public or gets too few params
            Exception: anything raised by the method itself
        """
        method = self._methods.get(name)
        if method is None:
            raise InvocationError("Called method is not publicly accessible.")
        return method.invoke(params)
