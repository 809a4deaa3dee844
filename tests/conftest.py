"""Shared test fixtures for chartlink tests."""

from __future__ import annotations

import pytest

from chartlink.charts.chart import Chart
from chartlink.charts.types import ChartType


class StubFragment:
    """A collaborator that renders a fixed fragment."""

    def __init__(self, text: str) -> None:
        self.text = text

    def url_string(self) -> str:
        return self.text


@pytest.fixture
def line_chart() -> Chart:
    chart = Chart(ChartType.LINE, 300, 200)
    chart.set_data([10, 20, 30])
    return chart


@pytest.fixture
def stub() -> type[StubFragment]:
    return StubFragment
