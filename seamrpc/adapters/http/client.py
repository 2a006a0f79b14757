"""
HTTP client transport

POSTs JSON-RPC payloads with httpx and returns the response body.
"""

import logging

import httpx

from seamrpc.adapters.adapter_interface import ClientTransport
from seamrpc.errors import TransportError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class HttpTransport(ClientTransport):
    """httpx transport for seamrpc clients"""

    def __init__(self, timeout_ms: int = 5000, client: httpx.Client = None):
        """
        Args:
            timeout_ms: Request timeout in milliseconds
            client: Preconfigured httpx client (tests, custom TLS)
        """
        self.timeout_ms = timeout_ms
        self.client = client or httpx.Client(timeout=timeout_ms / 1000)

    def close(self):
        self.client.close()

    def post_json(self, uri: str, payload: str) -> str:
        try:
            response = self.client.post(uri, content=payload.encode("utf-8"), headers=JSON_HEADERS)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP {e.response.status_code} from {uri}")
            raise TransportError(f"Server returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"HTTP request to {uri} failed: {str(e)}")
            raise TransportError(f"Unable to connect to {uri}: {str(e)}") from e

        return response.text
