"""
Transport Adapters Module

Adapters carrying JSON-RPC payloads over concrete transports:
- zeromq: REQ/REP sockets
- http: httpx client transport and Starlette endpoint

Use adapter_factory.AdapterFactory to pick one by name.
"""

from .adapter_interface import ClientTransport, RequestReader, StaticBodyReader

__all__ = [
    "ClientTransport",
    "RequestReader",
    "StaticBodyReader",
]
