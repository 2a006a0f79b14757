#!/usr/bin/env python
"""
ZeroMQ Server Example

Exposes a small calculator object as a JSON-RPC 2.0 server over ZeroMQ.
"""

import logging
import signal
import time

from seamrpc.adapters.zeromq.server import ZeroMQServer
from seamrpc.config import ServerConfig
from seamrpc.rpc.server import Server
from seamrpc.telemetry.metrics import setup_metrics
from seamrpc.telemetry.tracer import setup_tracer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class Calculator:
    """Methods callable over JSON-RPC"""

    def add(self, a, b):
        return a + b

    def divide(self, a, b):
        return a / b

    def describe(self, options):
        # Named params arrive as one dict
        return {"received": sorted(options)}

    def log(self, message):
        logger.info(f"Client says: {message}")


def main():
    """Run ZeroMQ server example"""
    setup_tracer("zeromq-server-example")
    setup_metrics("zeromq-server-example")

    server = Server(Calculator(), ServerConfig.from_env())
    zmq_server = ZeroMQServer(server, bind_address="tcp://*:5555")

    def shutdown(signum, frame):
        logger.info("Received termination signal, stopping server...")
        zmq_server.stop()
        raise SystemExit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    zmq_server.start(threaded=True)
    logger.info(f"Serving methods: {server.methods.names()}")
    while True:
        time.sleep(1)


if __name__ == "__main__":
    main()
