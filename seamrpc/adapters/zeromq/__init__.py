"""
ZeroMQ Adapter Package

REQ/REP transport for JSON-RPC 2.0 payloads: ZeroMQServer feeds received
payloads to a Server, ZeroMQTransport carries Client requests.
"""

from seamrpc.adapters.zeromq.client import ZeroMQTransport
from seamrpc.adapters.zeromq.server import ZeroMQServer

__all__ = ["ZeroMQServer", "ZeroMQTransport"]
