import pytest

from scatterviz.util.scales import (
    CATEGORY10,
    LinearScale,
    OrdinalScale,
    SqrtScale,
    extent,
    tick_increment,
    ticks,
    unique_in_order,
)
from scatterviz.util.tick_formatter import ChartDataError


def test_linear_scale_maps_domain_to_range():
    scale = LinearScale((0, 10), (0, 100))

    assert scale(0) == 0
    assert scale(5) == 50
    assert scale(10) == 100


def test_linear_scale_inverted_range():
    scale = LinearScale((0, 10), (380, 0))

    assert scale(0) == 380
    assert scale(10) == 0


def test_degenerate_domain_maps_to_range_midpoint():
    scale = LinearScale((5, 5), (0, 100))

    assert scale(5) == 50
    assert scale(123) == 50


@pytest.mark.parametrize("domain, expected", [
    ((-200, 500), (-200, 500)),
    ((0.13, 9.7), (0, 10)),
    ((1.2, 9.7), (1, 10)),
    ((100, 2_500_000), (0, 2_600_000)),
    ((3, 3), (3, 3)),
])
def test_nice_extends_to_round_boundaries(domain, expected):
    assert LinearScale(domain, (0, 1)).nice().domain == expected


def test_nice_keeps_range_and_reversed_domain():
    scale = LinearScale((9.7, 0.13), (0, 50)).nice()

    assert scale.domain == (10, 0)
    assert scale.range == (0, 50)


def test_nice_returns_a_new_scale():
    scale = LinearScale((0.13, 9.7), (0, 1))
    scale.nice()

    assert scale.domain == (0.13, 9.7)


def test_ticks_integer_steps():
    assert LinearScale((0, 10), (0, 1)).ticks() == list(range(11))


def test_ticks_fractional_steps():
    assert ticks(0, 1, 5) == [0.0, 0.2, 0.4, 0.6, 0.8, 1.0]


def test_ticks_fifty_step():
    values = ticks(-200, 500, 10)

    assert values[0] == -200
    assert values[-1] == 500
    assert len(values) == 15


def test_ticks_reversed_and_degenerate():
    assert ticks(10, 0, 10) == list(range(10, -1, -1))
    assert ticks(3, 3, 10) == [3]
    assert ticks(0, 10, 0) == []


def test_tick_increment_sign():
    assert tick_increment(0, 10, 10) == 1
    assert tick_increment(0, 1, 10) == -10


def test_domain_wider_than_float_range_is_rejected():
    scale = LinearScale((-1e308, 1e308), (0, 710))

    with pytest.raises(ChartDataError):
        scale.nice()
    with pytest.raises(ChartDataError):
        ticks(-1e308, 1e308, 10)


def test_sqrt_scale():
    scale = SqrtScale((0, 100), (0, 10))

    assert scale(25) == 5
    assert scale(100) == 10


def test_sqrt_scale_degenerate_domain():
    assert SqrtScale((1, 1), (3, 14))(1) == 8.5


def test_ordinal_scale_first_seen_order_and_cycling():
    keys = [f"k{i}" for i in range(11)]
    scale = OrdinalScale(keys, CATEGORY10)

    assert scale("k0") == CATEGORY10[0]
    assert scale("k9") == CATEGORY10[9]
    assert scale("k10") == CATEGORY10[0]


def test_ordinal_scale_appends_unknown_keys():
    scale = OrdinalScale(["a"], ["red", "blue"])

    assert scale("b") == "blue"
    assert scale.domain == ["a", "b"]


def test_ordinal_scale_requires_palette():
    with pytest.raises(ChartDataError):
        OrdinalScale(["a"], [])


def test_extent_and_unique_in_order():
    assert extent([3, -1, 7]) == (-1, 7)
    assert unique_in_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    with pytest.raises(ChartDataError):
        extent([])
