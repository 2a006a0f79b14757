"""
Transport adapter interfaces

The engine only talks to its transports through these narrow interfaces, so
the underlying mechanism (HTTP, ZeroMQ) can change without touching the
dispatcher or the correlator.
"""

import abc
from typing import Union


class RequestReader(abc.ABC):
    """Server side: source of one request body"""

    @abc.abstractmethod
    def read_request_body(self) -> Union[str, bytes]:
        """Read the complete request body

        Returns:
            Request body as text or raw bytes; bytes are decoded while parsing

        Raises:
            Exception: The body could not be read
        """
        pass


class ClientTransport(abc.ABC):
    """Client side: one blocking request/response exchange"""

    @abc.abstractmethod
    def post_json(self, uri: str, payload: str) -> str:
        """Send a JSON payload and wait for the reply body

        Args:
            uri: Endpoint address
            payload: Serialized request

        Returns:
            str: Response body (may be empty for notifications)

        Raises:
            TransportError: Endpoint unreachable or non-success reply
        """
        pass

    def close(self) -> None:
        """Release transport resources"""
        pass


class StaticBodyReader(RequestReader):
    """Reader over a body that the hosting transport already received"""

    def __init__(self, body):
        self.body = body

    def read_request_body(self) -> Union[str, bytes]:
        # Undecodable bytes are a parse error, not a read failure
        return self.body
