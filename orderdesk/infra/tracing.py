# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Agentic Middleware for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is part of the orderdesk order-fulfillment service.

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
import os

_tracer_inited = False

def init_tracing(service_name: str = "orderdesk", endpoint: str | None = None):
    global _tracer_inited
    if _tracer_inited:
        return
    endpoint = endpoint or os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT")
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)
    # Without an endpoint spans are still created, just not exported
    if endpoint:
        processor = BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint.rstrip("/") + "/v1/traces"))
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)
    _tracer_inited = True

def get_tracer(name: str = "orderdesk"):
    return trace.get_tracer(name)
