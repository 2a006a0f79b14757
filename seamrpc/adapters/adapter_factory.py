"""
Adapter factory

Creates transports, clients and served endpoints by adapter name, so the
transport can be chosen from configuration.
"""

from typing import Any, Dict

from seamrpc.adapters.adapter_interface import ClientTransport
from seamrpc.adapters.http.client import HttpTransport
from seamrpc.adapters.http.server import create_http_app
from seamrpc.adapters.zeromq.client import ZeroMQTransport
from seamrpc.adapters.zeromq.server import ZeroMQServer
from seamrpc.config import ClientConfig
from seamrpc.rpc.client import Client


class AdapterType:
    """Adapter type constants"""
    HTTP = "http"
    ZEROMQ = "zeromq"


class AdapterFactory:
    """Factory for transport adapters"""

    @staticmethod
    def create_transport(adapter_type: str, config: Dict[str, Any] = None) -> ClientTransport:
        """Create a client transport

        Args:
            adapter_type: "http" or "zeromq"
            config: Adapter parameters

        Raises:
            ValueError: Unknown adapter type
        """
        if config is None:
            config = {}

        if adapter_type.lower() == AdapterType.HTTP:
            return HttpTransport(timeout_ms=config.get("timeout_ms", 5000))
        elif adapter_type.lower() == AdapterType.ZEROMQ:
            return ZeroMQTransport(timeout_ms=config.get("timeout_ms", 5000))
        else:
            raise ValueError(f"Invalid adapter type: {adapter_type}")

    @staticmethod
    def create_client(config: ClientConfig = None) -> Client:
        """Create a client from configuration (environment when omitted)"""
        if config is None:
            config = ClientConfig.from_env()
        transport = AdapterFactory.create_transport(config.transport, {"timeout_ms": config.timeout_ms})
        return Client(config.uri, transport)

    @staticmethod
    def create_server(adapter_type: str, server, config: Dict[str, Any] = None):
        """Serve a seamrpc Server over a transport

        Returns:
            ZeroMQServer (call start()) or a Starlette application (run with an ASGI server)

        Raises:
            ValueError: Unknown adapter type
        """
        if config is None:
            config = {}

        if adapter_type.lower() == AdapterType.HTTP:
            return create_http_app(server, path=config.get("path", "/rpc"))
        elif adapter_type.lower() == AdapterType.ZEROMQ:
            return ZeroMQServer(server, bind_address=config.get("bind_address", "tcp://*:5555"))
        else:
            raise ValueError(f"Invalid adapter type: {adapter_type}")
