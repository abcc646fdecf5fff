import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from opentelemetry import trace

from scatterviz.api.router import router as charts_router
from scatterviz.api.demo.router import router as demo_router
from scatterviz.telemetry import setup_telemetry, instrument_app
from scatterviz.config import settings

from dotenv import load_dotenv
load_dotenv()

# Allowed frontend origins (comma-separated env optional)
DEFAULT_CORS = [
    "http://localhost:5173",   # Vite dev
    "http://localhost:4173",   # Vite preview
    "http://localhost:8000",
]
ENV_CORS = os.getenv("CORS_ORIGINS", settings.CORS_ORIGINS)
ALLOWED_ORIGINS = [o.strip() for o in ENV_CORS.split(",") if o.strip()] or DEFAULT_CORS

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    with tracer.start_as_current_span("application_startup") as span:
        span.set_attribute("chart_width", settings.CHART_WIDTH)
        span.set_attribute("chart_height", settings.CHART_HEIGHT)
        logger.info(
            f"Scatterviz starting (default chart {settings.CHART_WIDTH}x{settings.CHART_HEIGHT})"
        )

    try:
        yield
    finally:
        logger.info("Application shutdown completed")

def setup_tracing():
    # Only set up tracing if explicitly enabled
    if settings.ENABLE_TRACING:
        setup_telemetry()

    else:
        # Set a no-op tracer provider to disable tracing
        trace.set_tracer_provider(trace.NoOpTracerProvider())

def create_application() -> FastAPI:
    setup_tracing()
    app = FastAPI(
        title="Scatterviz",
        description="Scatter and bubble chart rendering with K/M-scaled axes",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_app(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "X-Requested-With"],
    )

    app.include_router(charts_router)
    app.include_router(demo_router)

    return app

app = create_application()
