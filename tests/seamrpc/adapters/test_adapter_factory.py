"""
Tests for the adapter factory
"""
import os
from unittest.mock import patch

import pytest
from starlette.applications import Starlette

from seamrpc.adapters.adapter_factory import AdapterFactory, AdapterType
from seamrpc.adapters.http.client import HttpTransport
from seamrpc.adapters.zeromq.client import ZeroMQTransport
from seamrpc.adapters.zeromq.server import ZeroMQServer
from seamrpc.config import ClientConfig
from seamrpc.rpc.server import Server


class Service:
    def ping(self):
        return "pong"


class TestCreateTransport:
    """Test transport selection"""

    def test_http(self):
        transport = AdapterFactory.create_transport(AdapterType.HTTP, {"timeout_ms": 1500})
        assert isinstance(transport, HttpTransport)
        assert transport.timeout_ms == 1500
        transport.close()

    def test_zeromq_case_insensitive(self):
        transport = AdapterFactory.create_transport("ZeroMQ")
        assert isinstance(transport, ZeroMQTransport)
        transport.close()

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid adapter type"):
            AdapterFactory.create_transport("carrier-pigeon")


class TestCreateClient:
    """Test client creation from configuration"""

    def test_from_config(self):
        client = AdapterFactory.create_client(ClientConfig(uri="tcp://127.0.0.1:5555", transport="zeromq"))
        assert client.uri == "tcp://127.0.0.1:5555"
        assert isinstance(client.transport, ZeroMQTransport)
        client.close()

    def test_from_env(self):
        with patch.dict(os.environ, {"SEAMRPC_URI": "http://rpc.test/rpc", "SEAMRPC_TRANSPORT": "http"}):
            client = AdapterFactory.create_client()
        assert client.uri == "http://rpc.test/rpc"
        assert isinstance(client.transport, HttpTransport)
        client.close()


class TestCreateServer:
    """Test served endpoints"""

    def test_http(self):
        assert isinstance(AdapterFactory.create_server("http", Server(Service())), Starlette)

    def test_zeromq(self):
        zmq_server = AdapterFactory.create_server(
            "zeromq", Server(Service()), {"bind_address": "tcp://127.0.0.1:15585"}
        )
        try:
            assert isinstance(zmq_server, ZeroMQServer)
            assert zmq_server.bind_address == "tcp://127.0.0.1:15585"
        finally:
            zmq_server.stop()

    def test_invalid(self):
        with pytest.raises(ValueError):
            AdapterFactory.create_server("smtp", Server(Service()))
