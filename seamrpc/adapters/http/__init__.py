"""
HTTP Adapter Package

HttpTransport posts JSON-RPC payloads with httpx; create_http_app serves a
seamrpc Server as a Starlette application.
"""

from seamrpc.adapters.http.client import HttpTransport
from seamrpc.adapters.http.server import create_http_app

__all__ = ["HttpTransport", "create_http_app"]
