"""End-to-end tests for Chart configuration and URL generation."""

from __future__ import annotations

import pytest

from chartlink.charts.chart import Chart
from chartlink.charts.features import ChartAxis, SolidFill
from chartlink.charts.types import CHART_VARIANTS, ChartType, variant_for
from chartlink.core import FeatureNotSupportedError
from chartlink.data.encoding import Encoding
from chartlink.url.assembler import API_BASE


def test_variant_table() -> None:
    assert variant_for(ChartType.LINE).tag == "LineChart"
    assert variant_for(ChartType.PIE).tag == "PieChart"
    supported = {t for t, v in CHART_VARIANTS.items() if v.supports_grid}
    assert supported == {ChartType.LINE, ChartType.SCATTER}


def test_line_chart_url() -> None:
    chart = Chart(ChartType.LINE, 300, 200)
    chart.set_data([10, 20, 30])
    chart.add_legend("Sales")
    chart.set_title("Q1 Report")
    url = chart.get_url()
    assert url.startswith(f"{API_BASE}?cht=LineChart&chs=300x200&chd=s:KUe&chtt=Q1+Report&chdl=Sales")
    assert url == f"{API_BASE}?cht=LineChart&chs=300x200&chd=s:KUe&chtt=Q1+Report&chdl=Sales"


def test_get_url_is_idempotent(line_chart: Chart) -> None:
    line_chart.set_title("Stable")
    line_chart.add_solid_fill(SolidFill(color="EFEFEF"))
    line_chart.add_axis(ChartAxis(labels=["a"]))
    assert line_chart.get_url() == line_chart.get_url()


def test_get_url_custom_base(line_chart: Chart) -> None:
    assert line_chart.get_url("https://charts.example.test/chart").startswith(
        "https://charts.example.test/chart?cht=LineChart&"
    )


def test_size_is_mutable(line_chart: Chart) -> None:
    line_chart.width = 640
    line_chart.height = 480
    assert "chs=640x480" in line_chart.get_url()


def test_set_data_float_series() -> None:
    chart = Chart(ChartType.BAR, 200, 100)
    chart.set_data([0.0, 100.0])
    assert chart.data == "e:AA.."


def test_set_data_options() -> None:
    chart = Chart(ChartType.BAR, 200, 100)
    chart.set_data([0, 500, 1000], scheme=Encoding.SIMPLE, min_value=0, max_value=1000)
    assert chart.data == "s:Af9"


def test_set_data_replaces_previous(line_chart: Chart) -> None:
    line_chart.set_data([1])
    assert "chd=s:B" in line_chart.get_url()


@pytest.mark.parametrize("chart_type", [ChartType.PIE, ChartType.BAR, ChartType.VENN])
def test_grid_unsupported(chart_type: ChartType) -> None:
    chart = Chart(chart_type, 100, 100)
    with pytest.raises(FeatureNotSupportedError):
        chart.set_grid(10, 20)
    with pytest.raises(FeatureNotSupportedError):
        chart.set_grid(10, 20, 2, 1)
    assert chart.grid is None
    assert "chg=" not in chart.get_url()


def test_grid_supported_on_scatter() -> None:
    chart = Chart(ChartType.SCATTER, 100, 100)
    chart.set_grid(10, 20, 2, 1)
    assert chart.get_url().endswith("&chg=10.0,20.0,2.0,1.0")


def test_grid_reset_drops_dashes(line_chart: Chart) -> None:
    line_chart.set_grid(10, 20, 2, 1)
    line_chart.set_grid(10, 20)
    assert line_chart.get_url().endswith("&chg=10.0,20.0")


def test_shorter_color_list_is_accepted(line_chart: Chart) -> None:
    line_chart.set_data([[1, 2], [3, 4], [5, 6]])
    line_chart.set_dataset_colors(["FF0000"])
    assert "chco=FF0000" in line_chart.get_url()


def test_none_title_is_ignored(line_chart: Chart) -> None:
    line_chart.set_title(None)
    assert "chtt" not in line_chart.get_url()


def test_grid_negative_dash_is_unset(line_chart: Chart) -> None:
    line_chart.set_grid(10, 20, -1, -1)
    assert line_chart.get_url().endswith("&chg=10.0,20.0")


def test_title_font_size_needs_color(line_chart: Chart) -> None:
    line_chart.set_title("Sized", font_size=14)
    url = line_chart.get_url()
    assert "chtt=Sized" in url
    assert "chts=" not in url
