from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Any

from scatterviz.config import settings
from scatterviz.services.chart_context import ChartOptions

Record = dict[str, Any]

class ChartOptionsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    xvar: str = Field(..., min_length=1, description="Field plotted on the x axis")
    yvar: str = Field(..., min_length=1, description="Field plotted on the y axis")
    sizevar: Optional[str] = Field(None, description="Field driving bubble size")
    plot_type: str = Field("scatter", alias="plotType", description="'bubble' for sized markers")
    group_var: str = Field("Country", alias="groupVar", description="Categorical field used for colors")
    width: Optional[int] = Field(None, gt=0, le=10000)
    height: Optional[int] = Field(None, gt=0, le=10000)

    def to_chart_options(self) -> ChartOptions:
        return ChartOptions(
            xvar=self.xvar,
            yvar=self.yvar,
            sizevar=self.sizevar,
            plot_type=self.plot_type,
            group_var=self.group_var,
            width=self.width or settings.CHART_WIDTH,
            height=self.height or settings.CHART_HEIGHT,
        )

class ScatterRequest(BaseModel):
    data: list[Record] = Field(..., min_length=1)
    options: ChartOptionsRequest

class AxisFormatRequest(BaseModel):
    data: list[Record] = Field(..., min_length=1)
    field: str = Field(..., min_length=1)

class AxisFormatResponse(BaseModel):
    field: str
    domain: list[float]
    factor: int
    suffix: str
    label: str
    ticks: list[str] = Field(default_factory=list, description="Tick labels for the rounded domain")

class DemoSceneSummary(BaseModel):
    name: str
    title: str
    plot_type: str
