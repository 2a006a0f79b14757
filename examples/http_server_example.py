#!/usr/bin/env python
"""
HTTP Server Example

Serves the same calculator over HTTP with uvicorn:

    uvicorn examples.http_server_example:app --port 8080
"""

import logging

from seamrpc.adapters.http.server import create_http_app
from seamrpc.config import ServerConfig
from seamrpc.rpc.server import Server

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


class Calculator:

    def add(self, a, b):
        return a + b

    def echo(self, value=None):
        return value


app = create_http_app(Server(Calculator(), ServerConfig.from_env()), path="/rpc")
