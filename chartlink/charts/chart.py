"""Chart: the configuration a chart URL is generated from.

A Chart is built up through setters and adders, then rendered with
`get_url()`. Rendering never mutates the chart, so calling it twice
yields the same URL.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from chartlink.charts.features import AxisFragment, UrlFragment
from chartlink.charts.types import ChartType, ChartVariant, variant_for
from chartlink.core import FeatureNotSupportedError
from chartlink.data.encoding import Encoding, Value, encode
from chartlink.url.assembler import API_BASE, assemble_url
from chartlink.url.collector import collect_url_elements


class GridConfig(BaseModel):
    x_step: float
    y_step: float
    line_segment: float | None = None
    blank_segment: float | None = None

    @property
    def dashed(self) -> bool:
        # Negative lengths (the API's -1) mean "unset"
        return all(v is not None and v >= 0 for v in (self.line_segment, self.blank_segment))


class Chart:
    def __init__(self, chart_type: ChartType, width: int, height: int) -> None:
        self.chart_type = chart_type
        self.width = width
        self.height = height

        self.title: str | None = None
        self.title_style: str | None = None
        self.data: str = encode([])
        self.dataset_colors: list[str] | None = None
        self.legend: list[str] = []
        self.axes: list[AxisFragment] = []
        self.solid_fills: list[UrlFragment] = []
        self.linear_gradient_fills: list[UrlFragment] = []
        self.linear_stripes_fills: list[UrlFragment] = []
        self.shape_markers: list[UrlFragment] = []
        self.range_markers: list[UrlFragment] = []
        self.fill_areas: list[UrlFragment] = []
        self.grid: GridConfig | None = None

    @property
    def variant(self) -> ChartVariant:
        return variant_for(self.chart_type)

    def set_data(
        self,
        data: Iterable[Value] | Iterable[Iterable[Value]],
        *,
        scheme: Encoding | None = None,
        min_value: float | None = None,
        max_value: float | None = None,
        missing: float | None = None,
    ) -> None:
        """Encode and store the chart's data. See `chartlink.data.encoding.encode`."""
        self.data = encode(data, scheme=scheme, min_value=min_value, max_value=max_value, missing=missing)

    def set_title(self, title: str | None, color: str | None = None, font_size: int | None = None) -> None:
        """Set the title, optionally with a color (RRGGBB) and font size in pixels.

        The font size is part of the title style, so it is ignored unless a
        color is given too.
        """
        self.title = title
        if color is None:
            return
        if font_size is None:
            self.title_style = color
        else:
            self.title_style = f"{color},{font_size}"

    def set_dataset_colors(self, colors: Iterable[str]) -> None:
        self.dataset_colors = list(colors)

    def set_legend(self, labels: Iterable[str]) -> None:
        """Append legend labels, one per dataset."""
        self.legend.extend(labels)

    def add_legend(self, label: str) -> None:
        self.legend.append(label)

    def add_axis(self, axis: AxisFragment) -> None:
        self.axes.append(axis)

    def add_solid_fill(self, fill: UrlFragment) -> None:
        self.solid_fills.append(fill)

    def add_linear_gradient_fill(self, fill: UrlFragment) -> None:
        self.linear_gradient_fills.append(fill)

    def add_linear_stripes_fill(self, fill: UrlFragment) -> None:
        self.linear_stripes_fills.append(fill)

    def add_shape_marker(self, marker: UrlFragment) -> None:
        """Call attention to a single data point."""
        self.shape_markers.append(marker)

    def add_range_marker(self, marker: UrlFragment) -> None:
        """Add a colored band across the chart."""
        self.range_markers.append(marker)

    def add_fill_area(self, area: UrlFragment) -> None:
        """Fill between or under lines."""
        self.fill_areas.append(area)

    def set_grid(
        self,
        x_step: float,
        y_step: float,
        line_segment: float | None = None,
        blank_segment: float | None = None,
    ) -> None:
        """Draw grid lines every x_step / y_step (in axis-range units).

        line_segment and blank_segment give the dash pattern. Both must be
        set and non-negative for the pattern to be emitted; pass -1 (or
        leave them out) for solid lines.

        Raises:
            FeatureNotSupportedError: if the chart variant has no grid.
        """
        if not self.variant.supports_grid:
            raise FeatureNotSupportedError(self.variant.tag, "grid")
        self.grid = GridConfig(
            x_step=x_step,
            y_step=y_step,
            line_segment=line_segment,
            blank_segment=blank_segment,
        )

    def url_elements(self) -> list[str]:
        return collect_url_elements(self)

    def get_url(self, base: str | None = None) -> str:
        """Return the full URL describing this chart."""
        return assemble_url(self.url_elements(), base=base or API_BASE)
