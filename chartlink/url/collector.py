"""Walk a chart's configuration and produce its query parameters in API order.

Order: cht, chs, chd, chtt, chts, chco, chf, chdl, axis group (chxt, chxl,
chxp, chxr, chxs, chxtc), chg, chm. A group that was never configured
contributes no parameter at all.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING
from urllib.parse import quote_plus

from chartlink.charts.features import AxisFragment, UrlFragment

if TYPE_CHECKING:
    from chartlink.charts.chart import Chart, GridConfig

logger = logging.getLogger(__name__)


def join_nonempty(items: Iterable[str | None], sep: str) -> str:
    """Join items with sep, skipping None and blank items.

    The result never starts or ends with sep.
    """
    return sep.join(item for item in items if item and item.strip())


def collect_url_elements(chart: Chart) -> list[str]:
    """Return the ordered `key=value` elements for a chart."""
    elements = [
        f"cht={chart.variant.tag}",
        f"chs={chart.width}x{chart.height}",
        f"chd={chart.data}",
    ]

    if chart.title is not None:
        elements.append(f"chtt={_url_text(chart.title)}")
    if chart.title_style is not None:
        elements.append(f"chts={chart.title_style}")

    if chart.dataset_colors is not None:
        # Positional: the nth color belongs to the nth dataset
        elements.append("chco=" + ",".join(chart.dataset_colors))

    fills = [*chart.solid_fills, *chart.linear_gradient_fills, *chart.linear_stripes_fills]
    if fills:
        elements.append("chf=" + _render(fills))

    if chart.legend:
        elements.append("chdl=" + "|".join(_url_text(label) for label in chart.legend))

    if chart.axes:
        elements.extend(_axis_elements(chart.axes))

    if chart.grid is not None:
        elements.append("chg=" + _grid_value(chart.grid))

    markers = [*chart.shape_markers, *chart.range_markers, *chart.fill_areas]
    if markers:
        elements.append("chm=" + _render(markers))

    logger.debug("Collected %d URL elements for %s", len(elements), chart.variant.tag)
    return elements


def _url_text(text: str) -> str:
    """Escape free text for the query string; newlines become the API's `|` line break."""
    return quote_plus(text.replace("\r\n", "|").replace("\n", "|"), safe="|")


def _render(fragments: Iterable[UrlFragment]) -> str:
    return join_nonempty((fragment.url_string() for fragment in fragments), "|")


def _grid_value(grid: GridConfig) -> str:
    values = [grid.x_step, grid.y_step]
    if grid.dashed:
        values += [grid.line_segment, grid.blank_segment]  # type: ignore[list-item]
    return ",".join(str(float(v)) for v in values)


def _indexed(index: int, value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return f"{index},{value}"


def _axis_elements(axes: list[AxisFragment]) -> list[str]:
    """Build the six axis parameters; each is emitted even when its value is empty."""
    types: list[str] = []
    labels: list[str | None] = []
    positions: list[str | None] = []
    ranges: list[str | None] = []
    styles: list[str | None] = []
    ticks: list[str | None] = []

    for index, axis in enumerate(axes):
        types.append(axis.url_axis_type())
        axis_labels = axis.url_labels()
        labels.append(f"{index}:|{axis_labels}" if axis_labels else None)
        positions.append(_indexed(index, axis.url_label_positions()))
        ranges.append(_indexed(index, axis.url_range()))
        styles.append(_indexed(index, axis.url_axis_style()))
        ticks.append(_indexed(index, axis.url_tick_marks()))

    return [
        "chxt=" + join_nonempty(types, ","),
        "chxl=" + join_nonempty(labels, "|"),
        "chxp=" + join_nonempty(positions, "|"),
        "chxr=" + join_nonempty(ranges, "|"),
        "chxs=" + join_nonempty(styles, "|"),
        "chxtc=" + join_nonempty(ticks, "|"),
    ]
