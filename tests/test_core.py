"""Tests for core types: Result[T], Diag and FeatureNotSupportedError."""

from chartlink.core import Diag, FeatureNotSupportedError, Result, Severity


def test_diag_creation() -> None:
    d = Diag(severity=Severity.ERROR, code="DEF_INVALID", message="bad definition")
    assert d.severity == Severity.ERROR
    assert d.code == "DEF_INVALID"
    assert d.hint is None


def test_result_empty_is_ok() -> None:
    r: Result[str] = Result()
    assert r.ok is True
    assert r.data is None
    assert r.diagnostics == []


def test_result_error_helper() -> None:
    r: Result[str] = Result(data="chart")
    r.error("FAIL", "something broke", hint="fix it")
    assert r.ok is False
    assert r.diagnostics[0].severity == Severity.ERROR
    assert r.diagnostics[0].hint == "fix it"


def test_result_holds_arbitrary_objects() -> None:
    class Payload:
        pass

    payload = Payload()
    r: Result[Payload] = Result()
    r.data = payload
    assert r.data is payload


def test_feature_not_supported_error() -> None:
    err = FeatureNotSupportedError("PieChart", "grid")
    assert err.chart_type == "PieChart"
    assert err.feature == "grid"
    assert str(err) == "PieChart does not support grid"
