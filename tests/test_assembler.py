"""Tests for URL assembly and separator joining."""

from __future__ import annotations

from chartlink.url.assembler import API_BASE, assemble_url
from chartlink.url.collector import join_nonempty


def test_empty_elements_return_endpoint() -> None:
    assert assemble_url([]) == API_BASE


def test_joins_with_ampersand() -> None:
    url = assemble_url(["cht=PieChart", "chs=10x10"], base="http://example.test/chart")
    assert url == "http://example.test/chart?cht=PieChart&chs=10x10"


def test_no_stray_ampersands() -> None:
    url = assemble_url(["a=1"])
    assert url == f"{API_BASE}?a=1"
    assert not url.endswith("&")
    assert "?&" not in url


def test_join_nonempty_skips_blank_items() -> None:
    assert join_nonempty(["a", "", None, " ", "b"], "|") == "a|b"
    assert join_nonempty(["a"], "|") == "a"
    assert join_nonempty([], ",") == ""
