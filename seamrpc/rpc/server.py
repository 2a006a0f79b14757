"""
JSON-RPC 2.0 server

Dispatches single calls and batches against the public methods of an exposed
object and renders the response text. Protocol errors always come back as
response envelopes; only failures to read the request body are raised.
"""

import logging
import time
from concurrent import futures
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from seamrpc.adapters.adapter_interface import RequestReader
from seamrpc.config import ServerConfig
from seamrpc.errors import EXCEPTION, METHOD_NOT_FOUND, ServerError
from seamrpc.rpc.envelope import Batch, Call, Params, Request, StructuralError
from seamrpc.rpc.invoker import MethodRegistry
from seamrpc.rpc.validator import Invalid, parse, validate
from seamrpc.telemetry.metrics import increment_counter, record_latency
from seamrpc.telemetry.tracer import create_span

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerReply:
    """Response body (None when nothing must be sent) and headers for the transport"""
    body: Optional[str]
    headers: Dict[str, str] = field(default_factory=dict)


class Server:
    """
    JSON-RPC 2.0 server over an exposed object.

    Every public method of the object is callable by name. Named params reach
    the method as one dict argument; positional params are spread.
    """

    def __init__(self, exposed_instance: Any, config: ServerConfig = None):
        """Create a server

        Args:
            exposed_instance: Object whose public methods are dispatchable
            config: Server configuration

        Raises:
            ServerError: exposed_instance is not an object instance
        """
        if exposed_instance is None or isinstance(exposed_instance, type):
            raise ServerError("Server requires an object")

        self.exposed_instance = exposed_instance
        self.config = config or ServerConfig()
        self.methods = MethodRegistry(exposed_instance)

    def register_method(self, name: str, handler: Callable):
        """Expose an extra callable beside the object's own methods"""
        self.methods.register(name, handler)

    def method_exists(self, method: str) -> bool:
        return self.methods.exists(method)

    def invoke_method(self, method: str, params: Params) -> Any:
        return self.methods.invoke(method, params)

    def make_request(self, payload: Union[str, bytes]) -> Request:
        return parse(payload)

    def process(self, reader: RequestReader) -> ServerReply:
        """Read one request from the transport and build the reply

        Raises:
            ServerError: The request body could not be read
        """
        try:
            payload = reader.read_request_body()
        except Exception as e:
            logger.error(f"Unable to read request body: {str(e)}")
            increment_counter("rpc.server.errors", 1, {"type": "read_error"})
            raise ServerError(f"Server unable to read request body.\n{e}") from e

        if payload is None:
            increment_counter("rpc.server.errors", 1, {"type": "read_error"})
            raise ServerError("Server unable to read request body.")

        headers = {}
        if not self.config.test_mode:
            headers["Content-Type"] = self.config.content_type

        return ServerReply(self.handle_payload(payload), headers)

    def handle_payload(self, payload: Union[str, bytes]) -> Optional[str]:
        """Parse a payload and return the response text, or None when there is none"""
        start_time = time.time()
        increment_counter("rpc.server.requests.received", 1)
        logger.debug(f"Received request: {payload[:200]!r}")

        request = self.make_request(payload)
        response = self.handle_request(request)

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.server.request.latency", latency_ms, {"batch": request.is_batch()})
        logger.debug(f"Handled request in {latency_ms:.2f}ms")
        return response

    def handle_request(self, request: Request) -> Optional[str]:
        """Respond to a parsed request

        Structural errors are answered as a single object, never wrapped in an
        array. A batch answers with the array of its non-null responses, or
        None when every element was a successful notification.
        """
        if isinstance(request, StructuralError):
            increment_counter("rpc.server.errors", 1, {"type": "structural", "code": request.code})
            return request.to_response_json()

        if request.is_batch():
            responses = [r for r in self._handle_batch(request) if r is not None]
            if not responses:
                return None
            return "[" + ",".join(responses) + "]"

        return self._respond(self.dispatch(request))

    def dispatch(self, call: Call) -> Call:
        """Validate and invoke one call; returns the call with its error or result"""
        validation = validate(call)
        if isinstance(validation, Invalid):
            increment_counter("rpc.server.errors", 1, {"type": "invalid_request", "code": validation.error.code})
            return validation.call

        if not self.method_exists(call.method):
            increment_counter("rpc.server.errors", 1, {"type": "method_not_found"})
            return call.with_error(METHOD_NOT_FOUND)

        try:
            with create_span("rpc.server.dispatch", {"rpc.method": call.method}):
                increment_counter("rpc.server.method.calls", 1, {"method": call.method})
                result = self.invoke_method(call.method, call.params)
        except Exception as e:
            logger.error(f"Error executing method {call.method}: {str(e)}")
            increment_counter("rpc.server.method.errors", 1, {"method": call.method})
            return call.with_error(EXCEPTION, str(e) or type(e).__name__)

        if call.is_notify():
            increment_counter("rpc.server.notifications", 1, {"method": call.method})
            return call
        return call.with_result(result)

    def _handle_batch(self, batch: Batch) -> List[Optional[str]]:
        def handle_one(call: Call) -> Optional[str]:
            return self._respond(self.dispatch(call))

        workers = min(self.config.batch_workers, len(batch))
        if workers > 1:
            # map() keeps input order
            with futures.ThreadPoolExecutor(max_workers=workers) as executor:
                return list(executor.map(handle_one, batch))
        return [handle_one(call) for call in batch]

    def _respond(self, call: Call) -> Optional[str]:
        try:
            return call.to_response_json()
        except (TypeError, ValueError) as e:
            logger.error(f"Result of {call.method} is not JSON serializable: {str(e)}")
            increment_counter("rpc.server.errors", 1, {"type": "serialization"})
            return call.with_error(EXCEPTION, str(e)).to_response_json()
