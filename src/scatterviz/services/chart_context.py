"""
Render-local chart state.

Everything a renderer needs (scales, colors, axis formatters, projected
points) is derived once per render from the dataset and the chart options and
handed to the renderer explicitly.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence
from opentelemetry import trace

from scatterviz.config import settings
from scatterviz.util.scales import (
    CATEGORY10,
    LinearScale,
    OrdinalScale,
    SqrtScale,
    extent,
    unique_in_order,
)
from scatterviz.util.tick_formatter import (
    AxisFormatter,
    ChartDataError,
    coerce_number,
    field_values,
    make_formatter,
)

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

BUBBLE = "bubble"
POINT_RADIUS = 4
BUBBLE_RADIUS_RANGE = (3, 14)
MISSING_GROUP = "(none)"


@dataclass(frozen=True)
class Margin:
    top: int = 30
    right: int = 180
    bottom: int = 90
    left: int = 70


MARGIN = Margin()


@dataclass(frozen=True)
class ChartOptions:
    """Which fields go where, and the chart mode."""
    xvar: str
    yvar: str
    sizevar: Optional[str] = None
    plot_type: str = "scatter"
    group_var: str = "Country"
    width: int = field(default_factory=lambda: settings.CHART_WIDTH)
    height: int = field(default_factory=lambda: settings.CHART_HEIGHT)

    @property
    def is_bubble(self) -> bool:
        # only the literal "bubble" switches modes; anything else is a plain scatter
        return self.plot_type == BUBBLE


@dataclass(frozen=True)
class ChartPoint:
    index: int
    x: float
    y: float
    size: float
    group: str


@dataclass
class ChartContext:
    options: ChartOptions
    points: list[ChartPoint]
    groups: list[str]
    x_scale: LinearScale
    y_scale: LinearScale
    r_scale: SqrtScale
    color: OrdinalScale
    x_fmt: AxisFormatter
    y_fmt: AxisFormatter
    plot_width: float
    plot_height: float
    margin: Margin = MARGIN

    @property
    def outer_width(self) -> float:
        """View box width: the inner width plus room for the legend."""
        return self.options.width + self.margin.right + 40

    def radius(self, point: ChartPoint) -> float:
        if self.options.is_bubble:
            return max(0.0, self.r_scale(point.size))
        return POINT_RADIUS

    def tooltip_text(self, point: ChartPoint) -> str:
        opts = self.options
        return (
            f"{point.group}\n"
            f"{opts.xvar}: {self.x_fmt.tooltip_format(point.x)}\n"
            f"{opts.yvar}: {self.y_fmt.tooltip_format(point.y)}"
        )


def size_value(record: Mapping[str, Any], sizevar: Optional[str]) -> float:
    """Coerced size of a record; missing or non-numeric sizes count as 1."""
    if sizevar is None or sizevar not in record:
        return 1.0
    try:
        size = coerce_number(record[sizevar])
    except ChartDataError:
        logger.debug(f"Non-numeric size {record[sizevar]!r} for '{sizevar}', using 1")
        return 1.0
    return size


def group_value(record: Mapping[str, Any], group_var: str) -> str:
    value = record.get(group_var)
    return MISSING_GROUP if value is None else str(value)


def build_chart_context(data: Sequence[Mapping[str, Any]], options: ChartOptions) -> ChartContext:
    """
    Derive scales, colors and axis formatters for one render.

    Args:
        data: Non-empty list of records
        options: Field selection and chart mode

    Returns:
        ChartContext consumed by the SVG and Vega-Lite renderers

    Raises:
        ChartDataError: on empty data, missing/non-numeric axis values, a plot
            area with no room left inside the margins, or bubble mode without
            a size field
    """
    with tracer.start_as_current_span("build_chart_context") as span:
        span.set_attribute("record_count", len(data))
        span.set_attribute("plot_type", options.plot_type)

        if options.is_bubble and not options.sizevar:
            raise ChartDataError("Bubble charts need a size field")

        plot_width = options.width - MARGIN.left - MARGIN.right
        plot_height = options.height - MARGIN.top - MARGIN.bottom
        if plot_width <= 0 or plot_height <= 0:
            raise ChartDataError(
                f"Chart of {options.width}x{options.height} leaves no room for the plot area"
            )

        xs = field_values(data, options.xvar)
        ys = field_values(data, options.yvar)
        sizes = [size_value(record, options.sizevar) for record in data]
        group_keys = [group_value(record, options.group_var) for record in data]

        points = [
            ChartPoint(index=i, x=x, y=y, size=s, group=g)
            for i, (x, y, s, g) in enumerate(zip(xs, ys, sizes, group_keys))
        ]
        groups = unique_in_order(group_keys)

        ctx = ChartContext(
            options=options,
            points=points,
            groups=groups,
            x_scale=LinearScale(extent(xs), (0, plot_width)).nice(),
            y_scale=LinearScale(extent(ys), (plot_height, 0)).nice(),
            # zero sizes count as 1 for the domain only
            r_scale=SqrtScale(extent(s or 1.0 for s in sizes), BUBBLE_RADIUS_RANGE),
            color=OrdinalScale(groups, CATEGORY10),
            x_fmt=make_formatter(data, options.xvar),
            y_fmt=make_formatter(data, options.yvar),
            plot_width=plot_width,
            plot_height=plot_height,
        )

        span.set_attribute("group_count", len(groups))
        logger.info(
            f"Chart context: {len(points)} points, {len(groups)} groups, "
            f"x factor={ctx.x_fmt.factor}, y factor={ctx.y_fmt.factor}"
        )
        return ctx
