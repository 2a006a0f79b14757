#!/usr/bin/env python
"""
ZeroMQ Client Example

Calls the calculator served by zeromq_server_example.py: single calls,
a notification and a batch.
"""

import logging

from seamrpc.adapters.zeromq.client import ZeroMQTransport
from seamrpc.errors import ClientError
from seamrpc.rpc.client import Client
from seamrpc.rpc.envelope import Positional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Run ZeroMQ client example"""
    client = Client("tcp://localhost:5555", ZeroMQTransport(timeout_ms=2000))

    try:
        response = client.call("add", 2, 3)
        logger.info(f"add(2, 3) -> {response.result}")

        response = client.call("describe", verbose=True, depth=2)
        logger.info(f"describe -> {response.result}")

        response = client.call("divide", 1, 0)
        if response.is_error:
            logger.info(f"divide(1, 0) failed: {response.error_code} {response.error_message}")

        client.notify("log", "hello")

        batch = [
            client.build_call("add", Positional((1, 1))),
            client.build_call("missing"),
            client.build_notify("log", Positional(("from batch",))),
        ]
        for request_id, item in client.send_batch(batch).items():
            logger.info(f"batch id={request_id}: result={item.result} error={item.error_message}")

    except ClientError as e:
        logger.error(f"Error occurred while running client: {str(e)}")
    finally:
        client.close()

    logger.info("Client exited")


if __name__ == "__main__":
    main()
