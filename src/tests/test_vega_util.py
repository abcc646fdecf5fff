import math
import pytest

from scatterviz.api.demo.scenes import DEMO_SCENES
from scatterviz.services.chart_context import ChartOptions
from scatterviz.util.scales import CATEGORY10
from scatterviz.util.tick_formatter import ChartDataError
from scatterviz.util.vega_util import VEGA_LITE_SCHEMA, VegaUtil


@pytest.fixture
def world():
    return DEMO_SCENES["population_income_bubble_chart"]["data"]


def test_scatter_spec_shape(world):
    spec = VegaUtil.build_scatter_spec(world, ChartOptions(xvar="GDPPerCapita", yvar="LifeExpectancy"))

    assert spec["$schema"] == VEGA_LITE_SCHEMA
    assert spec["mark"]["type"] == "circle"
    assert spec["width"] == 710
    assert spec["height"] == 380
    assert len(spec["data"]["values"]) == len(world)


def test_axes_use_formatter_labels_and_factor(world):
    spec = VegaUtil.build_scatter_spec(world, ChartOptions(xvar="Population", yvar="GDPPerCapita"))
    x_axis = spec["encoding"]["x"]["axis"]
    y_axis = spec["encoding"]["y"]["axis"]

    assert x_axis["title"] == "Population (Millions)"
    assert x_axis["labelExpr"] == "replace(format(datum.value / 1000000, '.1f'), '\u2212', '-')"
    assert x_axis["labelAngle"] == -40
    assert y_axis["title"] == "GDPPerCapita (Thousands)"
    assert y_axis["labelExpr"] == "replace(format(datum.value / 1000, '.1f'), '\u2212', '-')"


def test_values_carry_preformatted_tooltips(world):
    spec = VegaUtil.build_scatter_spec(world, ChartOptions(xvar="Population", yvar="GDPPerCapita"))
    first = spec["data"]["values"][0]

    assert first["group"] == "United States"
    assert first["xLabel"] == "309.3 (Millions)"
    assert first["yLabel"] == "48.7 (Thousands)"
    assert [t["field"] for t in spec["encoding"]["tooltip"]] == ["group", "xLabel", "yLabel"]


def test_negative_axis_labels_match_tooltip_minus_sign():
    records = [
        {"Country": "Aland", "Balance": -1500, "Growth": -0.5},
        {"Country": "Borduria", "Balance": 2500, "Growth": 1.25},
    ]
    spec = VegaUtil.build_scatter_spec(records, ChartOptions(xvar="Balance", yvar="Growth"))
    first = spec["data"]["values"][0]

    assert first["xLabel"] == "-1.5 (Thousands)"
    assert first["yLabel"] == "-0.5"
    for channel in ("x", "y"):
        label_expr = spec["encoding"][channel]["axis"]["labelExpr"]
        assert label_expr.startswith("replace(format(")
        assert label_expr.endswith(", '\u2212', '-')")


def test_color_follows_group_order(world):
    spec = VegaUtil.build_scatter_spec(world, ChartOptions(xvar="Population", yvar="GDPPerCapita"))
    color = spec["encoding"]["color"]

    assert color["scale"]["domain"][:2] == ["United States", "China"]
    assert color["scale"]["range"] == CATEGORY10


def test_scatter_uses_fixed_marker_area(world):
    spec = VegaUtil.build_scatter_spec(world, ChartOptions(xvar="Population", yvar="GDPPerCapita"))

    assert spec["encoding"]["size"] == {"value": pytest.approx(math.pi * 16)}


def test_bubble_uses_sqrt_size_scale(world):
    options = ChartOptions(**DEMO_SCENES["population_income_bubble_chart"]["options"])
    size = VegaUtil.build_scatter_spec(world, options)["encoding"]["size"]

    assert size["field"] == "size"
    assert size["scale"]["type"] == "sqrt"
    assert size["scale"]["range"] == [pytest.approx(math.pi * 9), pytest.approx(math.pi * 196)]
    assert size["legend"]["title"] == "InternetUsers"


def test_invalid_data_propagates(world):
    with pytest.raises(ChartDataError):
        VegaUtil.build_scatter_spec(world, ChartOptions(xvar="Country", yvar="GDPPerCapita"))


@pytest.mark.parametrize("name, expected", [
    ("lifeExpectancy", "Life Expectancy"),
    ("gdp_per_capita", "Gdp Per Capita"),
    ("GDP", "GDP"),
    ("Country", "Country"),
    ("", ""),
])
def test_format_column_name(name, expected):
    assert VegaUtil.format_column_name(name) == expected
