"""Chart variants and the capabilities each one declares."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ChartType(StrEnum):
    LINE = "line"
    SCATTER = "scatter"
    BAR = "bar"
    VENN = "venn"
    PIE = "pie"


class ChartVariant(BaseModel):
    tag: str
    supports_grid: bool = False


CHART_VARIANTS: dict[ChartType, ChartVariant] = {
    ChartType.LINE: ChartVariant(tag="LineChart", supports_grid=True),
    ChartType.SCATTER: ChartVariant(tag="ScatterPlot", supports_grid=True),
    ChartType.BAR: ChartVariant(tag="BarChart"),
    ChartType.VENN: ChartVariant(tag="VennDiagram"),
    ChartType.PIE: ChartVariant(tag="PieChart"),
}


def variant_for(chart_type: ChartType) -> ChartVariant:
    return CHART_VARIANTS[chart_type]
