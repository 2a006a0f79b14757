"""
Dispatch performance benchmarks (requires pytest-benchmark)
"""
import json

import pytest

pytest.importorskip("pytest_benchmark")

from seamrpc.rpc.server import Server  # noqa: E402


class Service:
    def echo(self, value):
        return value


@pytest.mark.benchmark
def test_single_call_benchmark(benchmark):
    """Benchmark a single call round through the dispatcher"""
    server = Server(Service())
    payload = json.dumps({"jsonrpc": "2.0", "method": "echo", "params": [{"n": 1}], "id": 1})

    result = benchmark(server.handle_payload, payload)

    assert json.loads(result)["result"] == {"n": 1}


@pytest.mark.benchmark
def test_batch_benchmark(benchmark):
    """Benchmark a 100-element batch"""
    server = Server(Service())
    payload = json.dumps([
        {"jsonrpc": "2.0", "method": "echo", "params": [i], "id": i} for i in range(100)
    ])

    result = benchmark(server.handle_payload, payload)

    assert len(json.loads(result)) == 100
