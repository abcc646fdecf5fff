"""
Vega util to export a scatter/bubble chart as a Vega-Lite specification.
"""
import math
import re
import logging
from typing import Any, Mapping, Sequence
from opentelemetry import trace

from scatterviz.services.chart_context import (
    BUBBLE_RADIUS_RANGE,
    POINT_RADIUS,
    ChartContext,
    ChartOptions,
    build_chart_context,
)
from scatterviz.util.scales import CATEGORY10
from scatterviz.util.tick_formatter import AxisFormatter
from scatterviz.util.theme import (
    BACKGROUND,
    FONT_FAMILY,
    FONT_SIZE,
    NEON,
    TEXT_COLOR,
    TOOLTIP_BACKGROUND,
)

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

VEGA_LITE_SCHEMA = "https://vega.github.io/schema/vega-lite/v5.json"
BUBBLE_LEGEND_VALUES = [5, 20, 50]
# d3-format writes negatives with U+2212; tooltips use an ASCII hyphen
UNICODE_MINUS = "\u2212"


class VegaUtil:
    """Util to convert chart data to Vega-Lite format."""

    @staticmethod
    def format_column_name(column_name: str) -> str:
        """
        Convert camelCase/variable names to human-readable format.

        Examples:
            lifeExpectancy -> Life Expectancy
            gdp_per_capita -> Gdp Per Capita
            GDP -> GDP
        """
        # Insert space before an uppercase letter that follows a lowercase one
        spaced = re.sub(r'(?<=[a-z0-9])([A-Z])', r' \1', column_name.replace('_', ' '))
        words = spaced.split()

        if not words:
            return column_name

        formatted = ' '.join(w if w.isupper() else w.capitalize() for w in words)
        return formatted.strip()

    @staticmethod
    def _circle_area(radius: float) -> float:
        # Vega-Lite sizes marks by area in square pixels
        return math.pi * radius ** 2

    @staticmethod
    def _axis(fmt: AxisFormatter, **extra: Any) -> dict[str, Any]:
        return {
            "title": fmt.label,
            "labelExpr": f"replace(format(datum.value / {fmt.factor}, '.1f'), '{UNICODE_MINUS}', '-')",
            "tickCount": 10,
            "grid": False,
            **extra,
        }

    @staticmethod
    def _values(ctx: ChartContext) -> list[dict[str, Any]]:
        values = []
        for point in ctx.points:
            values.append({
                "index": point.index,
                "x": point.x,
                "y": point.y,
                "size": point.size,
                "group": point.group,
                "xLabel": ctx.x_fmt.tooltip_format(point.x),
                "yLabel": ctx.y_fmt.tooltip_format(point.y),
            })
        return values

    @staticmethod
    def _encoding(ctx: ChartContext) -> dict[str, Any]:
        opts = ctx.options
        encoding: dict[str, Any] = {
            "x": {
                "field": "x",
                "type": "quantitative",
                "scale": {"domain": list(ctx.x_scale.domain), "nice": False, "zero": False},
                "axis": VegaUtil._axis(ctx.x_fmt, labelAngle=-40),
            },
            "y": {
                "field": "y",
                "type": "quantitative",
                "scale": {"domain": list(ctx.y_scale.domain), "nice": False, "zero": False},
                "axis": VegaUtil._axis(ctx.y_fmt),
            },
            "color": {
                "field": "group",
                "type": "nominal",
                "scale": {"domain": ctx.groups, "range": CATEGORY10},
                "legend": {"title": VegaUtil.format_column_name(opts.group_var)},
            },
            "tooltip": [
                {"field": "group", "type": "nominal", "title": VegaUtil.format_column_name(opts.group_var)},
                {"field": "xLabel", "type": "nominal", "title": opts.xvar},
                {"field": "yLabel", "type": "nominal", "title": opts.yvar},
            ],
        }

        if opts.is_bubble:
            low, high = BUBBLE_RADIUS_RANGE
            encoding["size"] = {
                "field": "size",
                "type": "quantitative",
                "scale": {
                    "type": "sqrt",
                    "domain": list(ctx.r_scale.domain),
                    "range": [VegaUtil._circle_area(low), VegaUtil._circle_area(high)],
                },
                "legend": {"title": opts.sizevar, "values": BUBBLE_LEGEND_VALUES},
            }
        else:
            encoding["size"] = {"value": VegaUtil._circle_area(POINT_RADIUS)}

        return encoding

    @staticmethod
    def _config() -> dict[str, Any]:
        text_style = {"labelFont": FONT_FAMILY, "titleFont": FONT_FAMILY,
                      "labelFontSize": FONT_SIZE, "titleFontSize": FONT_SIZE}
        return {
            "view": {"stroke": None, "fill": BACKGROUND},
            "axis": {
                **text_style,
                "domainColor": NEON,
                "domainWidth": 2,
                "tickColor": NEON,
                "tickWidth": 2,
                "labelColor": TEXT_COLOR,
                "titleColor": NEON,
            },
            "legend": {**text_style, "labelColor": TEXT_COLOR, "titleColor": NEON},
            "tooltip": {"fill": TOOLTIP_BACKGROUND},
        }

    @staticmethod
    def build_scatter_spec(
        data: Sequence[Mapping[str, Any]],
        options: ChartOptions
    ) -> dict[str, Any]:
        """
        Build a Vega-Lite specification for the scatter/bubble chart.

        Args:
            data: Non-empty list of records
            options: Field selection and chart mode

        Returns:
            Vega-Lite spec dict with inline values, K/M-scaled axes and tooltips
        """
        with tracer.start_as_current_span("build_scatter_spec") as span:
            span.set_attribute("plot_type", options.plot_type)

            ctx = build_chart_context(data, options)
            spec = {
                "$schema": VEGA_LITE_SCHEMA,
                "width": ctx.plot_width,
                "height": ctx.plot_height,
                "background": BACKGROUND,
                "padding": {"top": ctx.margin.top, "left": ctx.margin.left,
                            "bottom": ctx.margin.bottom, "right": 40},
                "data": {"values": VegaUtil._values(ctx)},
                "mark": {"type": "circle", "opacity": 0.8},
                "encoding": VegaUtil._encoding(ctx),
                "config": VegaUtil._config(),
            }

            logger.debug(f"Built Vega-Lite scatter spec with {len(ctx.points)} points")
            return spec
