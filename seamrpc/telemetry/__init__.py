"""
OpenTelemetry Integration Module

- metrics: counters and latency histograms for server dispatch and client sends
- tracer: tracer provider setup and spans around dispatch and transport calls

Until setup_metrics / setup_tracer are called the OpenTelemetry API is a no-op.
"""

from .metrics import setup_metrics, increment_counter, record_latency
from .tracer import setup_tracer, create_span

__all__ = [
    "setup_metrics",
    "increment_counter",
    "record_latency",
    "setup_tracer",
    "create_span",
]
