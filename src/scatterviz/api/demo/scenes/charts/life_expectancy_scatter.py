from .world_indicators import WORLD_INDICATORS

SCENE = {
    "title": "Life expectancy vs income",
    "data": WORLD_INDICATORS,
    "options": {
        "xvar": "GDPPerCapita",
        "yvar": "LifeExpectancy",
        "plot_type": "scatter",
        "group_var": "Country",
    },
    "description": (
        "Scatter chart of GDP per capita (thousands) against life expectancy in years, "
        "one point per country and year (demo data)."
    ),
}
