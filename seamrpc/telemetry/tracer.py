"""
OpenTelemetry Tracing

Tracer provider setup and the spans opened around server dispatch and client
transport calls.
"""

import logging
from typing import Any, Dict

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

logger = logging.getLogger(__name__)

TRACER_NAME = "seamrpc"


def setup_tracer(service_name: str, otlp_endpoint: str = "localhost:4317"):
    """Configure OpenTelemetry tracer

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address
    """
    provider = TracerProvider(sampler=ALWAYS_ON)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    trace.set_tracer_provider(provider)

    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")
    return trace.get_tracer(service_name)


def create_span(name: str, attributes: Dict[str, Any] = None, kind=trace.SpanKind.INTERNAL):
    """Start a span as the current span; use as a context manager

    Args:
        name: Span name
        attributes: Span attributes (None values are dropped)
        kind: Span kind
    """
    tracer = trace.get_tracer(TRACER_NAME)
    attributes = {k: v for k, v in (attributes or {}).items() if v is not None}
    return tracer.start_as_current_span(name, attributes=attributes, kind=kind)
