"""
Axis tick formatter.

Picks a display scale (units, thousands or millions) from the extent of a
field and exposes the matching one-decimal formatter, suffix and axis label.
The same formatter is shared by axis ticks and tooltips so both read alike.
"""
import logging
import math
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any, Mapping, Sequence, Tuple
from opentelemetry import trace

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

THOUSAND = 1_000
MILLION = 1_000_000

SUFFIX_NONE = ""
SUFFIX_THOUSANDS = " (Thousands)"
SUFFIX_MILLIONS = " (Millions)"

# wide enough for any finite double printed in fixed notation
_FIXED_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


class ChartDataError(ValueError):
    """Raised when a dataset cannot be turned into a chart."""


def coerce_number(value: Any) -> float:
    """
    Coerce a record value to a finite float.

    Args:
        value: int, float, Decimal or numeric string

    Returns:
        The value as a float

    Raises:
        ChartDataError: if the value is missing, boolean, unparseable or non-finite
    """
    if isinstance(value, bool) or value is None:
        raise ChartDataError(f"Not a numeric value: {value!r}")

    if isinstance(value, Decimal) and value.is_nan():
        raise ChartDataError(f"Non-finite value: {value!r}")

    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except OverflowError:
            raise ChartDataError(f"Value out of float range: {value!r}")
    elif isinstance(value, str):
        clean_val = value.strip()
        if not clean_val:
            raise ChartDataError("Empty string is not a numeric value")
        try:
            number = float(clean_val)
        except ValueError:
            raise ChartDataError(f"Not a numeric value: {value!r}")
    else:
        raise ChartDataError(f"Unsupported value type {type(value).__name__}: {value!r}")

    if not math.isfinite(number):
        raise ChartDataError(f"Non-finite value: {value!r}")
    return number


def field_values(data: Sequence[Mapping[str, Any]], field: str) -> list[float]:
    """Coerce `field` of every record, reporting the offending record on failure."""
    if not data:
        raise ChartDataError(f"Cannot compute values for '{field}' on an empty dataset")

    values = []
    for idx, record in enumerate(data):
        if field not in record:
            raise ChartDataError(f"Record {idx} has no field '{field}'")
        try:
            values.append(coerce_number(record[field]))
        except ChartDataError as e:
            raise ChartDataError(f"Record {idx}, field '{field}': {e}") from e
    return values


def compute_domain(data: Sequence[Mapping[str, Any]], field: str) -> Tuple[float, float]:
    """Return the (min, max) extent of a numeric field across the dataset."""
    values = field_values(data, field)
    return min(values), max(values)


def format_fixed(value: float, digits: int = 1) -> str:
    """
    Fixed-point formatting with halves rounded away from zero.

    Rounding works on the exact binary value of the float, so 0.25 gives
    "0.3" while 0.15 (stored slightly below) gives "0.1". Results that round
    to zero never carry a minus sign.
    """
    if not math.isfinite(value):
        raise ChartDataError(f"Cannot format non-finite value: {value!r}")

    exponent = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(exponent, context=_FIXED_CONTEXT)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:f}"


def select_scale(max_abs: float) -> Tuple[int, str]:
    """Map the largest magnitude on an axis to its (factor, suffix) pair."""
    if max_abs >= MILLION:
        return MILLION, SUFFIX_MILLIONS
    elif max_abs >= THOUSAND:
        return THOUSAND, SUFFIX_THOUSANDS
    return 1, SUFFIX_NONE


@dataclass(frozen=True)
class AxisFormatter:
    """Display scale chosen for one axis."""
    field: str
    domain: Tuple[float, float]
    factor: int
    suffix: str
    label: str

    def tick_format(self, value: float) -> str:
        return format_fixed(value / self.factor)

    def tooltip_format(self, value: float) -> str:
        """Formatted value followed by the scale suffix, e.g. "12.0 (Thousands)"."""
        return f"{self.tick_format(value)}{self.suffix}"


def make_formatter(data: Sequence[Mapping[str, Any]], field: str) -> AxisFormatter:
    """
    Build the formatter for one axis.

    Args:
        data: Non-empty list of records
        field: Numeric field plotted on the axis

    Returns:
        AxisFormatter with the factor, suffix and label for the field
    """
    with tracer.start_as_current_span("make_formatter") as span:
        span.set_attribute("field", field)
        span.set_attribute("record_count", len(data))

        domain = compute_domain(data, field)
        max_abs = max(abs(domain[0]), abs(domain[1]))
        factor, suffix = select_scale(max_abs)

        span.set_attribute("factor", factor)
        logger.debug(f"Axis '{field}': domain={domain}, factor={factor}")

        return AxisFormatter(
            field=field,
            domain=domain,
            factor=factor,
            suffix=suffix,
            label=field + suffix,
        )
