"""
seamrpc - JSON-RPC 2.0 Engine

Implements both roles of a JSON-RPC 2.0 call on top of pluggable transports:

1. Server: parses call envelopes, validates them, dispatches them against the
   public methods of an exposed object and serializes the outcomes.
2. Client: builds calls, notifications and batches, sends them through a
   transport and correlates the responses by id.
3. Adapters:
   - zeromq: REQ/REP sockets
   - http: httpx client transport and a Starlette endpoint

Dispatch and transport calls report OpenTelemetry metrics and spans.
"""

from seamrpc.errors import ClientError, ServerError, TransportError
from seamrpc.rpc.client import Client, ClientResponse
from seamrpc.rpc.server import Server

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ClientError",
    "ClientResponse",
    "Server",
    "ServerError",
    "TransportError",
]
