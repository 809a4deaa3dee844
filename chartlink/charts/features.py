"""Chart decorations: axes, fills, markers.

Each feature renders itself to the fragment syntax of its URL parameter.
The chart only concatenates those fragments, so anything implementing
`UrlFragment` (or `AxisFragment` for axes) can be added to a chart.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class UrlFragment(Protocol):
    def url_string(self) -> str: ...


@runtime_checkable
class AxisFragment(Protocol):
    def url_axis_type(self) -> str: ...

    def url_labels(self) -> str | None: ...

    def url_label_positions(self) -> str | None: ...

    def url_range(self) -> str | None: ...

    def url_axis_style(self) -> str | None: ...

    def url_tick_marks(self) -> str | None: ...


def format_number(value: float) -> str:
    """Render a number the way the API expects: integral values without `.0`."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


# --- Fills ---


class FillTarget(StrEnum):
    BACKGROUND = "bg"
    CHART_AREA = "c"
    TRANSPARENCY = "a"


class ColorOffset(BaseModel):
    """A color band: offset is a gradient stop or a stripe width (0..1)."""

    color: str
    offset: float


class SolidFill(BaseModel):
    kind: Literal["solid"] = "solid"
    target: FillTarget = FillTarget.BACKGROUND
    color: str

    def url_string(self) -> str:
        return f"{self.target},s,{self.color}"


class LinearGradientFill(BaseModel):
    kind: Literal["gradient"] = "gradient"
    target: FillTarget = FillTarget.CHART_AREA
    angle: float = 0
    bands: list[ColorOffset] = Field(default_factory=list)

    def add_band(self, color: str, offset: float) -> None:
        self.bands.append(ColorOffset(color=color, offset=offset))

    def url_string(self) -> str:
        parts = [str(self.target), "lg", format_number(self.angle)]
        for band in self.bands:
            parts += [band.color, format_number(band.offset)]
        return ",".join(parts)


class LinearStripesFill(BaseModel):
    kind: Literal["stripes"] = "stripes"
    target: FillTarget = FillTarget.CHART_AREA
    angle: float = 0
    bands: list[ColorOffset] = Field(default_factory=list)

    def add_band(self, color: str, width: float) -> None:
        self.bands.append(ColorOffset(color=color, offset=width))

    def url_string(self) -> str:
        parts = [str(self.target), "ls", format_number(self.angle)]
        for band in self.bands:
            parts += [band.color, format_number(band.offset)]
        return ",".join(parts)


Fill = SolidFill | LinearGradientFill | LinearStripesFill


# --- Markers ---


class ShapeType(StrEnum):
    ARROW = "a"
    CROSS = "c"
    DIAMOND = "d"
    CIRCLE = "o"
    SQUARE = "s"
    VERTICAL_LINE_TO_DATA = "v"
    VERTICAL_LINE_FULL = "V"
    HORIZONTAL_LINE = "h"
    X = "x"


class ShapeMarker(BaseModel):
    """Calls attention to one data point."""

    kind: Literal["shape"] = "shape"
    shape: ShapeType = ShapeType.CIRCLE
    color: str
    dataset_index: int = 0
    data_point: float = 0
    size: int = 5

    def url_string(self) -> str:
        return ",".join(
            [
                str(self.shape),
                self.color,
                str(self.dataset_index),
                format_number(self.data_point),
                str(self.size),
            ]
        )


class RangeMarkerType(StrEnum):
    HORIZONTAL = "r"
    VERTICAL = "R"


class RangeMarker(BaseModel):
    """A colored band across the chart; start/end are fractions of the axis (0..1)."""

    kind: Literal["range"] = "range"
    direction: RangeMarkerType = RangeMarkerType.HORIZONTAL
    color: str
    start: float
    end: float

    def url_string(self) -> str:
        return f"{self.direction},{self.color},0,{format_number(self.start)},{format_number(self.end)}"


class FillArea(BaseModel):
    """Fill between two lines, or under one line when end_line is omitted."""

    kind: Literal["area"] = "area"
    color: str
    start_line: int = 0
    end_line: int | None = None

    def url_string(self) -> str:
        if self.end_line is None:
            return f"B,{self.color},{self.start_line},0,0"
        return f"b,{self.color},{self.start_line},{self.end_line},0"


Marker = ShapeMarker | RangeMarker | FillArea


# --- Axes ---


class AxisType(StrEnum):
    BOTTOM = "x"
    LEFT = "y"
    TOP = "t"
    RIGHT = "r"


class AxisAlignment(StrEnum):
    LEFT = "-1"
    CENTER = "0"
    RIGHT = "1"


class ChartAxis(BaseModel):
    axis_type: AxisType = AxisType.BOTTOM
    labels: list[str] = Field(default_factory=list)
    label_positions: list[float] = Field(default_factory=list)
    range_start: float | None = None
    range_end: float | None = None
    color: str | None = None
    font_size: int | None = None
    alignment: AxisAlignment | None = None
    tick_length: int | None = None

    def add_label(self, text: str, position: float | None = None) -> None:
        self.labels.append(text)
        if position is not None:
            self.label_positions.append(position)

    def set_range(self, start: float, end: float) -> None:
        self.range_start = start
        self.range_end = end

    def url_axis_type(self) -> str:
        return str(self.axis_type)

    def url_labels(self) -> str | None:
        return "|".join(self.labels) if self.labels else None

    def url_label_positions(self) -> str | None:
        if not self.label_positions:
            return None
        return ",".join(format_number(p) for p in self.label_positions)

    def url_range(self) -> str | None:
        if self.range_start is None or self.range_end is None:
            return None
        return f"{format_number(self.range_start)},{format_number(self.range_end)}"

    def url_axis_style(self) -> str | None:
        # Size and alignment are positional after the color
        if self.color is None:
            return None
        parts = [self.color]
        if self.font_size is not None:
            parts.append(str(self.font_size))
            if self.alignment is not None:
                parts.append(str(self.alignment))
        return ",".join(parts)

    def url_tick_marks(self) -> str | None:
        return None if self.tick_length is None else str(self.tick_length)
