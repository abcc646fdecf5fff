from .world_indicators import WORLD_INDICATORS

SCENE = {
    "title": "Population vs income, sized by internet adoption",
    "data": WORLD_INDICATORS,
    "options": {
        "xvar": "Population",
        "yvar": "GDPPerCapita",
        "sizevar": "InternetUsers",
        "plot_type": "bubble",
        "group_var": "Country",
    },
    "description": (
        "Bubble chart of population (millions) against GDP per capita (thousands), "
        "with bubble size showing the share of internet users (demo data)."
    ),
}
