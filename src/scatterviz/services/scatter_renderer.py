"""
Server-side SVG rendering of the scatter/bubble chart.

Produces one standalone SVG document: dark background, glowing axes with
K/M-scaled tick labels, animated markers with native hover tooltips, a
category legend and, in bubble mode, a bubble-size legend.
"""
import logging
from typing import Any, Mapping, Sequence
from opentelemetry import trace
import drawsvg as draw

from scatterviz.services.chart_context import (
    ChartContext,
    ChartOptions,
    build_chart_context,
)
from scatterviz.util.theme import BACKGROUND, FONT_FAMILY, FONT_SIZE, NEON, TEXT_COLOR

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

TICK_SIZE = 6
TICK_PADDING = 3
TICK_COUNT = 10
X_TICK_ROTATION = -40

MARKER_OPACITY = 0.8
GROW_DURATION = "0.8s"

LEGEND_ROW_HEIGHT = 18
LEGEND_SWATCH = 12
BUBBLE_LEGEND_SIZES = [5, 20, 50]
BUBBLE_LEGEND_SPACING = 60

GLOW_FILTER_ID = "glow"
AXIS_STROKE = {"stroke": NEON, "stroke_width": 2, "filter": f"url(#{GLOW_FILTER_ID})"}
GLOW_FILTER = (
    f'<filter id="{GLOW_FILTER_ID}">'
    '<feGaussianBlur stdDeviation="2" result="coloredBlur"/>'
    '<feMerge>'
    '<feMergeNode in="coloredBlur"/>'
    '<feMergeNode in="SourceGraphic"/>'
    '</feMerge>'
    '</filter>'
)


def _text(content: Any, x: float, y: float, fill: str = TEXT_COLOR, **kwargs) -> draw.Text:
    return draw.Text(str(content), FONT_SIZE, x, y, fill=fill, font_family=FONT_FAMILY, **kwargs)


class ScatterRenderer:
    """Draws a ChartContext onto a drawsvg Drawing."""

    def __init__(self, ctx: ChartContext):
        self.ctx = ctx

    def render(self) -> draw.Drawing:
        ctx = self.ctx
        height = ctx.options.height

        drawing = draw.Drawing(
            ctx.outer_width, height, origin=(0, 0),
            style=f"background-color: {BACKGROUND}",
        )
        drawing.append_def(draw.Raw(GLOW_FILTER))
        drawing.append(draw.Rectangle(0, 0, ctx.outer_width, height, fill=BACKGROUND))

        plot = draw.Group(transform=f"translate({ctx.margin.left},{ctx.margin.top})")
        plot.append(draw.Rectangle(0, 0, ctx.plot_width, ctx.plot_height, fill=BACKGROUND))
        plot.append(self._x_axis())
        plot.append(self._y_axis())
        plot.append(self._markers())
        drawing.append(plot)

        for title in self._axis_titles():
            drawing.append(title)

        drawing.append(self._legend())
        if ctx.options.is_bubble:
            drawing.append(self._bubble_legend())

        return drawing

    def _x_axis(self) -> draw.Group:
        ctx = self.ctx
        scale = ctx.x_scale
        r0, r1 = scale.range
        axis = draw.Group(class_="x-axis", transform=f"translate(0,{ctx.plot_height})")
        axis.append(draw.Path(d=f"M{r0},{TICK_SIZE}V0H{r1}V{TICK_SIZE}", fill="none", **AXIS_STROKE))

        for value in scale.ticks(TICK_COUNT):
            tick = draw.Group(class_="tick", transform=f"translate({scale(value)},0)")
            tick.append(draw.Line(0, 0, 0, TICK_SIZE, **AXIS_STROKE))
            tick.append(_text(
                ctx.x_fmt.tick_format(value), 0, TICK_SIZE + TICK_PADDING,
                dy="0.71em", text_anchor="end", transform=f"rotate({X_TICK_ROTATION})",
            ))
            axis.append(tick)
        return axis

    def _y_axis(self) -> draw.Group:
        ctx = self.ctx
        scale = ctx.y_scale
        r0, r1 = scale.range
        axis = draw.Group(class_="y-axis")
        axis.append(draw.Path(d=f"M{-TICK_SIZE},{r0}H0V{r1}H{-TICK_SIZE}", fill="none", **AXIS_STROKE))

        for value in scale.ticks(TICK_COUNT):
            tick = draw.Group(class_="tick", transform=f"translate(0,{scale(value)})")
            tick.append(draw.Line(0, 0, -TICK_SIZE, 0, **AXIS_STROKE))
            tick.append(_text(
                ctx.y_fmt.tick_format(value), -(TICK_SIZE + TICK_PADDING), 0,
                dy="0.32em", text_anchor="end",
            ))
            axis.append(tick)
        return axis

    def _axis_titles(self) -> list:
        ctx = self.ctx
        margin = ctx.margin
        x_title = _text(
            ctx.x_fmt.label, margin.left + ctx.plot_width / 2, ctx.options.height - 15,
            fill=NEON, text_anchor="middle",
        )
        y_title = _text(
            ctx.y_fmt.label, -margin.top - ctx.plot_height / 2, 15,
            fill=NEON, text_anchor="middle", transform="rotate(-90)",
        )
        return [x_title, y_title]

    def _markers(self) -> draw.Group:
        ctx = self.ctx
        markers = draw.Group(class_="markers")
        for point in ctx.points:
            radius = ctx.radius(point)
            circle = draw.Circle(
                ctx.x_scale(point.x), ctx.y_scale(point.y), radius,
                fill=ctx.color(point.group), opacity=MARKER_OPACITY,
            )
            # hover tooltip
            circle.append_title(ctx.tooltip_text(point))
            # grow from nothing to the target radius
            circle.append_anim(draw.Animate("r", GROW_DURATION, from_or_values=0, to=radius))
            markers.append(circle)
        return markers

    def _legend(self) -> draw.Group:
        ctx = self.ctx
        legend = draw.Group(
            class_="legend",
            transform=f"translate({ctx.options.width + 40},{ctx.margin.top})",
        )
        for i, group in enumerate(ctx.groups):
            row = draw.Group(transform=f"translate(0, {i * LEGEND_ROW_HEIGHT})")
            row.append(draw.Rectangle(0, 0, LEGEND_SWATCH, LEGEND_SWATCH, fill=ctx.color(group)))
            row.append(_text(group, 16, 10))
            legend.append(row)
        return legend

    def _bubble_legend(self) -> draw.Group:
        ctx = self.ctx
        legend = draw.Group(
            class_="r-legend",
            transform=f"translate({ctx.margin.left},{ctx.options.height - ctx.margin.bottom + 10})",
        )
        for i, value in enumerate(BUBBLE_LEGEND_SIZES):
            x_offset = i * BUBBLE_LEGEND_SPACING
            legend.append(draw.Circle(x_offset, 20, ctx.r_scale(value), fill=NEON, opacity=0.6))
            legend.append(_text(value, x_offset, 50, text_anchor="middle"))
        legend.append(_text(ctx.options.sizevar, 0, 70, fill=NEON))
        return legend


def render_scatter_svg(data: Sequence[Mapping[str, Any]], options: ChartOptions) -> str:
    """
    Render the chart as an SVG document.

    Args:
        data: Non-empty list of records
        options: Field selection and chart mode

    Returns:
        The SVG markup
    """
    with tracer.start_as_current_span("render_scatter_svg") as span:
        span.set_attribute("xvar", options.xvar)
        span.set_attribute("yvar", options.yvar)

        ctx = build_chart_context(data, options)
        svg = ScatterRenderer(ctx).render().as_svg()

        span.set_attribute("svg_length", len(svg))
        logger.debug(f"Rendered SVG scatter ({len(svg)} chars)")
        return svg
