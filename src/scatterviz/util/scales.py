"""
Numeric and categorical scales used by the chart renderers.

Linear and square-root scales map a data domain onto a pixel range, with
"nice" domain rounding and round tick values; the ordinal scale assigns
palette colors to category keys.
"""
import math
import logging
from typing import Any, Hashable, Iterable, List, Optional, Sequence, Tuple

from scatterviz.util.tick_formatter import ChartDataError

logger = logging.getLogger(__name__)

Domain = Tuple[float, float]

CATEGORY10 = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
]

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def _js_round(x: float) -> int:
    # halves go towards +infinity
    return math.floor(x + 0.5)


def extent(values: Iterable[float]) -> Domain:
    """Return (min, max) of the values."""
    values = list(values)
    if not values:
        raise ChartDataError("Cannot compute the extent of an empty sequence")
    return min(values), max(values)


def tick_spec(start: float, stop: float, count: float) -> Tuple[int, int, float]:
    """
    Integer tick indices and increment covering [start, stop].

    Steps are 1, 2 or 5 times a power of ten. A negative increment means the
    ticks are i / -inc (used for fractional steps to limit float error),
    otherwise i * inc.
    """
    step = (stop - start) / max(0, count)
    if not (math.isfinite(step) and step > 0):
        raise ChartDataError(f"Cannot place ticks over [{start}, {stop}]")
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1

    if power < 0:
        inc = 10 ** -power / factor
        i1 = _js_round(start * inc)
        i2 = _js_round(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = 10 ** power * factor
        i1 = _js_round(start / inc)
        i2 = _js_round(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return tick_spec(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: float) -> float:
    return tick_spec(start, stop, count)[2]


def ticks(start: float, stop: float, count: float = 10) -> List[float]:
    """Round tick values between start and stop, both inclusive."""
    if not count > 0:
        return []
    if start == stop:
        return [start]

    reverse = stop < start
    if reverse:
        start, stop = stop, start
    i1, i2, inc = tick_spec(start, stop, count)
    if not i2 >= i1:
        return []

    if inc < 0:
        values = [(i1 + i) / -inc for i in range(i2 - i1 + 1)]
    else:
        values = [(i1 + i) * inc for i in range(i2 - i1 + 1)]
    return values[::-1] if reverse else values


class LinearScale:
    """Continuous linear mapping from a numeric domain to an output range."""

    def __init__(self, domain: Sequence[float], range_: Sequence[float]):
        self.domain: Domain = (float(domain[0]), float(domain[1]))
        self.range: Domain = (float(range_[0]), float(range_[1]))

    def _transform(self, value: float) -> float:
        return value

    def __call__(self, value: float) -> float:
        d0, d1 = (self._transform(d) for d in self.domain)
        r0, r1 = self.range
        span = d1 - d0
        t = (self._transform(value) - d0) / span if span else 0.5
        return r0 * (1 - t) + r1 * t

    def nice(self, count: int = 10) -> "LinearScale":
        """
        Copy of the scale with the domain extended to round tick boundaries.

        The tick increment is recomputed after each widening until it stops
        changing; if it has not settled after ten passes, or the domain is
        degenerate, the domain is kept as is.
        """
        start, stop = self.domain
        reverse = stop < start
        if reverse:
            start, stop = stop, start

        domain = self.domain
        prestep: Optional[float] = None
        for _ in range(10):
            if start == stop or not (math.isfinite(start) and math.isfinite(stop)):
                break
            step = tick_increment(start, stop, count)
            if step == prestep:
                domain = (stop, start) if reverse else (start, stop)
                break
            if step > 0:
                start = math.floor(start / step) * step
                stop = math.ceil(stop / step) * step
            elif step < 0:
                start = math.ceil(start * step) / step
                stop = math.floor(stop * step) / step
            else:
                break
            prestep = step

        return type(self)(domain, self.range)

    def ticks(self, count: int = 10) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(domain={self.domain}, range={self.range})"


class SqrtScale(LinearScale):
    """Square-root scale; used for bubble radii so area tracks the value."""

    def _transform(self, value: float) -> float:
        return math.copysign(math.sqrt(abs(value)), value)


class OrdinalScale:
    """Maps category keys onto a palette in first-seen order, cycling when exhausted."""

    def __init__(self, domain: Iterable[Hashable] = (), palette: Sequence[Any] = CATEGORY10):
        if not palette:
            raise ChartDataError("Ordinal scale needs a non-empty palette")
        self.palette = list(palette)
        self._index: dict = {}
        for key in domain:
            self._index.setdefault(key, len(self._index))

    @property
    def domain(self) -> list:
        return list(self._index)

    def __call__(self, key: Hashable) -> Any:
        if key not in self._index:
            # unknown keys extend the domain, like a data-driven legend
            self._index[key] = len(self._index)
        return self.palette[self._index[key] % len(self.palette)]


def unique_in_order(values: Iterable[Hashable]) -> list:
    """Distinct values, preserving first appearance."""
    return list(dict.fromkeys(values))
