import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

logger = logging.getLogger(__name__)


def setup_tracing(service_name: str, otlp_endpoint: str | None) -> bool:
    """Install a global tracer provider exporting to ``otlp_endpoint``.

    Returns False and leaves the no-op provider in place when no endpoint is set.
    """
    if not otlp_endpoint:
        logger.info("Trace export disabled, no OTLP endpoint configured")
        return False

    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=otlp_endpoint)
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    logger.info("Trace export enabled", extra={"otlp_endpoint": otlp_endpoint})
    return True
