from .population_income_bubble_chart import SCENE as population_income_bubble_chart
from .life_expectancy_scatter import SCENE as life_expectancy_scatter

CHART_SCENES = {
    "population_income_bubble_chart": population_income_bubble_chart,
    "life_expectancy_scatter": life_expectancy_scatter,
}
