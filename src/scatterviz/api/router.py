from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from opentelemetry import trace
import logging

from scatterviz.api.models import (
    AxisFormatRequest,
    AxisFormatResponse,
    ScatterRequest,
)
from scatterviz.services.scatter_renderer import render_scatter_svg
from scatterviz.util.scales import LinearScale
from scatterviz.util.tick_formatter import ChartDataError, make_formatter
from scatterviz.util.vega_util import VegaUtil

router = APIRouter(prefix="/api/v1/charts", tags=["charts"])
tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"

@router.get("/health")
async def health():
    return {"status": "ok"}

@router.post("/axis-format", response_model=AxisFormatResponse)
async def axis_format(request: AxisFormatRequest):
    """Report the display scale chosen for one field, with sample tick labels."""
    with tracer.start_as_current_span("axis_format_endpoint") as span:
        span.set_attribute("field", request.field)
        try:
            fmt = make_formatter(request.data, request.field)
            ticks = LinearScale(fmt.domain, (0, 1)).nice().ticks()
            return AxisFormatResponse(
                field=fmt.field,
                domain=list(fmt.domain),
                factor=fmt.factor,
                suffix=fmt.suffix,
                label=fmt.label,
                ticks=[fmt.tick_format(t) for t in ticks],
            )
        except ChartDataError as e:
            logger.warning(f"Rejected axis format request for '{request.field}': {e}")
            raise HTTPException(status_code=422, detail=str(e))
        except Exception as e:
            span.set_attribute("error", str(e))
            logger.error(f"Axis format failed for '{request.field}': {e}")
            raise HTTPException(status_code=500, detail=str(e))

@router.post("/scatter.svg")
async def scatter_svg(request: ScatterRequest):
    """Render the scatter/bubble chart as an SVG document."""
    with tracer.start_as_current_span("scatter_svg_endpoint") as span:
        options = request.options.to_chart_options()
        span.set_attribute("record_count", len(request.data))
        span.set_attribute("plot_type", options.plot_type)
        try:
            svg = render_scatter_svg(request.data, options)
            return Response(content=svg, media_type=SVG_MEDIA_TYPE)
        except ChartDataError as e:
            logger.warning(f"Rejected scatter request: {e}")
            raise HTTPException(status_code=422, detail=str(e))
        except Exception as e:
            span.set_attribute("error", str(e))
            logger.error(f"Scatter rendering failed: {e}")
            raise HTTPException(status_code=500, detail=str(e))

@router.post("/scatter/vega")
async def scatter_vega(request: ScatterRequest):
    """Return the scatter/bubble chart as a Vega-Lite specification."""
    with tracer.start_as_current_span("scatter_vega_endpoint") as span:
        options = request.options.to_chart_options()
        span.set_attribute("record_count", len(request.data))
        span.set_attribute("plot_type", options.plot_type)
        try:
            return VegaUtil.build_scatter_spec(request.data, options)
        except ChartDataError as e:
            logger.warning(f"Rejected Vega-Lite request: {e}")
            raise HTTPException(status_code=422, detail=str(e))
        except Exception as e:
            span.set_attribute("error", str(e))
            logger.error(f"Vega-Lite conversion failed: {e}")
            raise HTTPException(status_code=500, detail=str(e))
