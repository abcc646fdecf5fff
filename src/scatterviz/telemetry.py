import logging
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from scatterviz.config import settings

logger = logging.getLogger(__name__)

SERVICE_NAME = "scatterviz"

def setup_telemetry() -> TracerProvider:
    """Install an SDK tracer provider exporting spans to the console."""
    provider = TracerProvider(resource=Resource.create({"service.name": SERVICE_NAME}))
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)
    logger.info("Tracing enabled with console exporter")
    return provider

def instrument_app(app: FastAPI) -> None:
    """Attach request spans to the FastAPI app when tracing is on."""
    if not settings.ENABLE_TRACING:
        return
    FastAPIInstrumentor.instrument_app(app)
    logger.info("FastAPI instrumentation enabled")
