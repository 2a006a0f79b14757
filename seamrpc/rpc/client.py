"""
JSON-RPC 2.0 client

Builds calls, notifications and batches, sends them through a transport and
correlates the responses with the calls by id.
"""

import itertools
import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Union

from seamrpc.adapters.adapter_interface import ClientTransport
from seamrpc.errors import ClientError, TransportError
from seamrpc.rpc.envelope import Batch, Call, Params, make_params
from seamrpc.telemetry.metrics import increment_counter, record_latency
from seamrpc.telemetry.tracer import create_span

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientResponse:
    """Caller-facing view of one response: a result or an error code and message"""
    id: Any = None
    result: Any = None
    error_code: Optional[int] = None
    error_message: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error_code is not None

    @classmethod
    def from_outcome(cls, outcome: Dict[str, Any]) -> "ClientResponse":
        error = outcome.get("error")
        if error is not None:
            if not isinstance(error, dict):
                error = {"message": str(error)}
            return cls(
                id=outcome.get("id"),
                error_code=error.get("code"),
                error_message=error.get("message"),
            )
        return cls(id=outcome.get("id"), result=outcome.get("result"))


BatchResponse = Dict[Any, ClientResponse]


class Client:
    """
    JSON-RPC 2.0 client bound to one endpoint.

    Ids come from a per-client counter guarded by a lock, so several threads
    can share one client without colliding ids.
    """

    def __init__(self, uri: str, transport: ClientTransport, first_id: int = 1):
        """Create a client

        Args:
            uri: Endpoint address handed to the transport
            transport: Transport performing the exchange
            first_id: First id handed out by build_call
        """
        self.uri = uri
        self.transport = transport
        self._ids = itertools.count(first_id)
        self._id_lock = threading.Lock()

    def close(self):
        self.transport.close()

    def next_id(self) -> int:
        with self._id_lock:
            return next(self._ids)

    def build_call(self, method: str, params: Params = None) -> Call:
        return Call(method=method, params=params, id=self.next_id())

    def build_notify(self, method: str, params: Params = None) -> Call:
        return Call(method=method, params=params)

    def build_batch(self, calls: Iterable[Call]) -> Batch:
        return Batch(tuple(calls))

    def send(self, payload: str, notify: bool = False) -> Union[ClientResponse, BatchResponse, bool]:
        """Send a serialized request and decode the reply

        Args:
            payload: Serialized call or batch
            notify: Do not wait for a decodable reply

        Returns:
            True for notifications, otherwise the handled response

        Raises:
            TransportError: The transport failed
            ClientError: The reply is not valid JSON
        """
        decoded = self._exchange(payload, notify)
        if notify:
            return True
        return self.handle_response(decoded)

    def _exchange(self, payload: str, notify: bool = False) -> Any:
        start_time = time.time()
        increment_counter("rpc.client.requests", 1, {"notify": notify})
        logger.debug(f"Sending request: {payload[:200]}")

        try:
            with create_span("rpc.client.send", {"rpc.uri": self.uri}):
                body = self.transport.post_json(self.uri, payload)
        except TransportError:
            increment_counter("rpc.client.errors", 1, {"type": "transport"})
            raise
        except Exception as e:
            logger.error(f"Transport failure calling {self.uri}: {str(e)}")
            increment_counter("rpc.client.errors", 1, {"type": "transport"})
            raise TransportError(f"Unable to connect to {self.uri}: {e}") from e

        latency_ms = (time.time() - start_time) * 1000
        record_latency("rpc.client.latency", latency_ms, {"notify": notify})
        logger.debug(f"Received response, latency: {latency_ms:.2f}ms")

        if notify:
            return None

        try:
            return json.loads(body)
        except (TypeError, ValueError) as e:
            increment_counter("rpc.client.errors", 1, {"type": "invalid_response"})
            raise ClientError(f"Unable to decode JSON response: {e}") from e

    def handle_response(self, response: Any) -> Union[ClientResponse, BatchResponse]:
        """Project a decoded response, or a list of them keyed by id

        Raises:
            ClientError: An item is not a response object, or an id repeats
        """
        if not isinstance(response, list):
            return self._project(response)

        responses = {}
        for outcome in response:
            item = self._project(outcome)
            if item.id in responses:
                increment_counter("rpc.client.errors", 1, {"type": "id_mismatch"})
                raise ClientError(f"Duplicate response id: {item.id!r}")
            responses[item.id] = item
        return responses

    def _project(self, outcome: Any) -> ClientResponse:
        if not isinstance(outcome, dict):
            increment_counter("rpc.client.errors", 1, {"type": "invalid_response"})
            raise ClientError(f"Invalid JSON-RPC response: {outcome!r}")
        return ClientResponse.from_outcome(outcome)

    def send_request(self, call: Call) -> ClientResponse:
        """Send one call and check the response belongs to it

        Raises:
            ClientError: The response id does not match the request id
        """
        response = self.send(call.to_json())
        if not isinstance(response, ClientResponse) or response.id != call.id:
            logger.error(f"Response id mismatch: {getattr(response, 'id', None)} != {call.id}")
            increment_counter("rpc.client.errors", 1, {"type": "id_mismatch"})
            raise ClientError("response id does not match request id")
        return response

    def send_notify(self, call: Call) -> bool:
        """Send a notification; nothing is correlated

        Raises:
            ClientError: The call has an id
        """
        if not call.is_notify():
            raise ClientError("Notify requests must not have an id")
        return self.send(call.to_json(), notify=True)

    def send_batch(self, calls: Iterable[Call]) -> Union[BatchResponse, bool]:
        """Send calls as one batch

        Returns:
            True when every call is a notification, otherwise responses keyed by id

        Raises:
            ClientError: The number or the ids of the responses do not match the calls
        """
        batch = self.build_batch(calls)
        if batch.is_notify():
            return self.send(batch.to_json(), notify=True)

        expected_ids = [call.id for call in batch if not call.is_notify()]
        decoded = self._exchange(batch.to_json())
        # Count the outcomes received, before keying them by id
        received = len(decoded) if isinstance(decoded, list) else 1
        if not isinstance(decoded, list) or received != len(expected_ids):
            logger.error(f"Batch size mismatch: sent {len(expected_ids)} calls, received {received} responses")
            increment_counter("rpc.client.errors", 1, {"type": "batch_size_mismatch"})
            raise ClientError(
                f"Batch response size mismatch: expected {len(expected_ids)}, received {received}"
            )
        responses = self.handle_response(decoded)
        if set(responses) != set(expected_ids):
            increment_counter("rpc.client.errors", 1, {"type": "id_mismatch"})
            raise ClientError("response id does not match request id")
        return responses

    def call(self, method: str, *args, **kwargs) -> ClientResponse:
        """Call a remote method; keyword arguments are sent as named params"""
        return self.send_request(self.build_call(method, make_params(args, kwargs)))

    def notify(self, method: str, *args, **kwargs) -> bool:
        """Send a notification for a remote method"""
        return self.send_notify(self.build_notify(method, make_params(args, kwargs)))
