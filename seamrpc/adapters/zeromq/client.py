"""
ZeroMQ client transport

Carries one JSON-RPC exchange over a REQ socket. A fresh socket is used per
exchange: after a timeout a REQ socket cannot send again.
"""

import logging

import zmq

from seamrpc.adapters.adapter_interface import ClientTransport
from seamrpc.errors import TransportError

logger = logging.getLogger(__name__)


class ZeroMQTransport(ClientTransport):
    """REQ socket transport for seamrpc clients"""

    def __init__(self, timeout_ms: int = 5000):
        """
        Args:
            timeout_ms: Send and receive timeout in milliseconds
        """
        self.timeout_ms = timeout_ms
        self.context = zmq.Context()

    def close(self):
        self.context.term()

    def post_json(self, uri: str, payload: str) -> str:
        socket = self.context.socket(zmq.REQ)
        socket.setsockopt(zmq.RCVTIMEO, self.timeout_ms)
        socket.setsockopt(zmq.SNDTIMEO, self.timeout_ms)
        socket.setsockopt(zmq.LINGER, 0)
        try:
            socket.connect(uri)
            socket.send(payload.encode("utf-8"))
            reply = socket.recv()
        except zmq.error.Again as e:
            logger.error(f"Request to {uri} timed out after {self.timeout_ms}ms")
            raise TransportError(f"ZeroMQ request timed out ({self.timeout_ms}ms)") from e
        except zmq.error.ZMQError as e:
            logger.error(f"ZeroMQ error: {str(e)}")
            raise TransportError(f"ZeroMQ connection error: {str(e)}") from e
        finally:
            socket.close()

        return reply.decode("utf-8")
