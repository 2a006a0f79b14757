"""
ZeroMQ server adapter

Receives JSON-RPC payloads on a REP socket and answers with the dispatcher's
response text. A REP socket must answer every request, so requests without a
response (notifications) get an empty frame.
"""

import logging
import threading
import time

import zmq

from seamrpc.adapters.adapter_interface import StaticBodyReader
from seamrpc.errors import ServerError
from seamrpc.telemetry.metrics import increment_counter

logger = logging.getLogger(__name__)

EMPTY_REPLY = b""


class ZeroMQServer:
    """
    Serves a seamrpc Server over a ZeroMQ REP socket
    """

    def __init__(self, server, bind_address: str = "tcp://*:5555"):
        """Bind the REP socket

        Args:
            server: seamrpc Server handling the payloads
            bind_address: Request socket bind address
        """
        self.server = server
        self.bind_address = bind_address
        self.running = False
        self.server_thread = None
        self.context = zmq.Context()

        self.socket = self.context.socket(zmq.REP)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.bind(bind_address)

        increment_counter("rpc.server.started", 1)
        logger.info(f"ZeroMQ server bound to {bind_address}")

    def start(self, threaded: bool = True):
        """Start serving

        Args:
            threaded: Run the receive loop in a background thread
        """
        self.running = True

        if threaded:
            self.server_thread = threading.Thread(target=self._run_server)
            self.server_thread.daemon = True
            self.server_thread.start()
            logger.info("ZeroMQ server started in background thread")
        else:
            logger.info("ZeroMQ server started in main thread")
            self._run_server()

    def stop(self):
        """Stop serving and release the socket"""
        self.running = False
        if self.server_thread is not None:
            self.server_thread.join(timeout=1.0)
            self.server_thread = None
        if not self.socket.closed:
            self.socket.close()
        if not self.context.closed:
            self.context.term()
        logger.info("ZeroMQ server stopped")

    def handle_message(self, request_bytes: bytes) -> bytes:
        """Turn one received payload into the reply frame"""
        try:
            reply = self.server.process(StaticBodyReader(request_bytes))
        except ServerError as e:
            logger.error(f"Dropping unreadable request: {str(e)}")
            return EMPTY_REPLY

        if reply.body is None:
            return EMPTY_REPLY
        return reply.body.encode("utf-8")

    def _run_server(self):
        logger.info("ZeroMQ server receiving requests")

        while self.running:
            try:
                request_bytes = self.socket.recv(flags=zmq.NOBLOCK)
            except zmq.error.Again:
                # Nothing queued
                time.sleep(0.001)
                continue
            except zmq.error.ZMQError as e:
                if not self.running:
                    break
                logger.error(f"Error in server loop: {str(e)}")
                increment_counter("rpc.server.errors", 1, {"type": "loop_error"})
                time.sleep(1.0)
                continue

            self.socket.send(self.handle_message(request_bytes))
