"""Core types: diagnostics, results, and the feature error raised by charts."""

from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Severity(StrEnum):
    ERROR = "error"


class Diag(BaseModel):
    """A structured diagnostic message."""

    severity: Severity
    code: str
    message: str
    hint: str | None = None


class Result(BaseModel, Generic[T]):  # noqa: UP046 - Pydantic requires Generic[T] subclass
    """Pairs a built value with the diagnostics gathered while building it.

    Loaders return a Result instead of raising, so a caller can report
    every problem in a definition at once.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: T | None = None
    diagnostics: list[Diag] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not any(d.severity == Severity.ERROR for d in self.diagnostics)

    def error(self, code: str, message: str, *, hint: str | None = None) -> None:
        self.diagnostics.append(Diag(severity=Severity.ERROR, code=code, message=message, hint=hint))


class FeatureNotSupportedError(Exception):
    """Raised when a chart variant is asked for a feature it does not declare."""

    def __init__(self, chart_type: str, feature: str) -> None:
        super().__init__(f"{chart_type} does not support {feature}")
        self.chart_type = chart_type
        self.feature = feature
