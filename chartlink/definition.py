"""Declarative chart definitions: YAML or JSON files -> configured Chart.

Example:

    type: line
    width: 300
    height: 200
    title: {text: Q1 Report, color: "333333", font_size: 14}
    data: [10, 20, 30]
    legend: [Sales]
    grid: {x_step: 10, y_step: 20}
    fills:
      - {kind: solid, target: bg, color: EFEFEF}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import yaml
from pydantic import BaseModel, Field, ValidationError

from chartlink.charts.chart import Chart
from chartlink.charts.features import (
    ChartAxis,
    Fill,
    LinearGradientFill,
    Marker,
    RangeMarker,
    ShapeMarker,
    SolidFill,
)
from chartlink.charts.types import ChartType
from chartlink.core import FeatureNotSupportedError, Result
from chartlink.data.encoding import Encoding

logger = logging.getLogger(__name__)

FillDef = Annotated[Fill, Field(discriminator="kind")]
MarkerDef = Annotated[Marker, Field(discriminator="kind")]
SeriesDef = list[int | float | None] | list[list[int | float | None]]


class TitleDef(BaseModel):
    text: str
    color: str | None = None
    font_size: int | None = None


class DataDef(BaseModel):
    values: SeriesDef
    encoding: Encoding | None = None
    min_value: float | None = None
    max_value: float | None = None
    missing: float | None = None


class GridDef(BaseModel):
    x_step: float
    y_step: float
    line_segment: float | None = None
    blank_segment: float | None = None


class ChartDefinition(BaseModel):
    type: ChartType
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    title: TitleDef | str | None = None
    data: DataDef | SeriesDef = Field(default_factory=list)
    colors: list[str] | None = None
    legend: list[str] = Field(default_factory=list)
    axes: list[ChartAxis] = Field(default_factory=list)
    fills: list[FillDef] = Field(default_factory=list)
    markers: list[MarkerDef] = Field(default_factory=list)
    grid: GridDef | None = None


def load_definition(path: Path) -> Result[ChartDefinition]:
    """Parse a definition file. `.yaml`/`.yml` are read as YAML, anything else as JSON."""
    result: Result[ChartDefinition] = Result()

    if not path.exists():
        result.error("DEF_NOT_FOUND", f"Definition file not found: {path}")
        return result

    try:
        text = path.read_text()
        raw = yaml.safe_load(text) if path.suffix in (".yaml", ".yml") else json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        logger.warning("Failed to parse chart definition: %s", path)
        result.error("DEF_INVALID", f"Could not parse {path.name}: {e}")
        return result

    return parse_definition(raw, result=result)


def parse_definition(raw: object, *, result: Result[ChartDefinition] | None = None) -> Result[ChartDefinition]:
    result = result if result is not None else Result()
    if not isinstance(raw, dict):
        result.error("DEF_INVALID", "Chart definition must be a mapping")
        return result
    try:
        result.data = ChartDefinition.model_validate(raw)
    except ValidationError as e:
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"])
            result.error("DEF_INVALID", f"{loc}: {err['msg']}")
    return result


def build_chart(definition: ChartDefinition, *, width: int = 300, height: int = 200) -> Result[Chart]:
    """Configure a Chart from a definition.

    width/height are used when the definition leaves them out. A grid on a
    variant without grid support is reported and the chart is built without it.
    """
    result: Result[Chart] = Result()
    chart = Chart(definition.type, definition.width or width, definition.height or height)

    data = definition.data
    if isinstance(data, DataDef):
        chart.set_data(
            data.values,
            scheme=data.encoding,
            min_value=data.min_value,
            max_value=data.max_value,
            missing=data.missing,
        )
    else:
        chart.set_data(data)

    title = definition.title
    if isinstance(title, TitleDef):
        chart.set_title(title.text, title.color, title.font_size)
    elif title is not None:
        chart.set_title(title)

    if definition.colors is not None:
        chart.set_dataset_colors(definition.colors)
    chart.set_legend(definition.legend)

    for axis in definition.axes:
        chart.add_axis(axis)

    for fill in definition.fills:
        if isinstance(fill, SolidFill):
            chart.add_solid_fill(fill)
        elif isinstance(fill, LinearGradientFill):
            chart.add_linear_gradient_fill(fill)
        else:
            chart.add_linear_stripes_fill(fill)

    for marker in definition.markers:
        if isinstance(marker, ShapeMarker):
            chart.add_shape_marker(marker)
        elif isinstance(marker, RangeMarker):
            chart.add_range_marker(marker)
        else:
            chart.add_fill_area(marker)

    if definition.grid is not None:
        grid = definition.grid
        try:
            chart.set_grid(grid.x_step, grid.y_step, grid.line_segment, grid.blank_segment)
        except FeatureNotSupportedError as e:
            result.error(
                "CHART_GRID_UNSUPPORTED",
                str(e),
                hint="Grids are available on line and scatter charts",
            )

    result.data = chart
    return result
