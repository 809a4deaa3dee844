"""Numeric series -> compact chart-data tokens (simple and extended encodings).

Simple encoding spends one symbol per value (62 levels), extended encoding
spends two symbols per value (4096 levels). Both clamp out-of-range values
to the ends of the scale and reserve `_` for missing points.
"""

from __future__ import annotations

import logging
import math
import string
from collections.abc import Iterable, Sequence
from enum import StrEnum
from numbers import Integral, Real

logger = logging.getLogger(__name__)

SIMPLE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
EXTENDED_ALPHABET = SIMPLE_ALPHABET + "-."

SIMPLE_MAX = len(SIMPLE_ALPHABET) - 1
EXTENDED_MAX = len(EXTENDED_ALPHABET) ** 2 - 1

MISSING_SYMBOL = "_"

# Float series are read as percentages unless a domain is given.
FLOAT_DOMAIN = (0.0, 100.0)

Value = float | int | None


class Encoding(StrEnum):
    SIMPLE = "s"
    EXTENDED = "e"

    @property
    def top(self) -> int:
        return SIMPLE_MAX if self is Encoding.SIMPLE else EXTENDED_MAX


def scale(value: float, lo: float, hi: float, top: int) -> int:
    """Map value from [lo, hi] onto an integer in [0, top], clamping outside.

    Values are compared against the bounds before any arithmetic, so ints too
    large for a float still clamp. Infinite or NaN bounds map to 0.
    """
    if hi <= lo or value <= lo:
        return 0
    if value >= hi:
        return top
    if math.isinf(lo) or math.isinf(hi):
        return 0
    ratio = (value - lo) / (hi - lo)
    if not math.isfinite(ratio):
        return 0
    return math.floor(ratio * top + 0.5)


def _is_missing(value: Value, missing: float | None) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return missing is not None and value == missing


def encode_series(
    values: Iterable[Value],
    scheme: Encoding,
    lo: float,
    hi: float,
    *,
    missing: float | None = None,
) -> str:
    """Encode one series without the scheme tag."""
    symbols: list[str] = []
    for value in values:
        if _is_missing(value, missing):
            symbols.append(MISSING_SYMBOL if scheme is Encoding.SIMPLE else MISSING_SYMBOL * 2)
            continue
        index = scale(value, lo, hi, scheme.top)  # type: ignore[arg-type]
        if scheme is Encoding.SIMPLE:
            symbols.append(SIMPLE_ALPHABET[index])
        else:
            high, low = divmod(index, len(EXTENDED_ALPHABET))
            symbols.append(EXTENDED_ALPHABET[high] + EXTENDED_ALPHABET[low])
    return "".join(symbols)


def _is_nested(data: Sequence[object]) -> bool:
    for item in data:
        if item is None:
            continue
        return isinstance(item, Iterable) and not isinstance(item, (str, bytes))
    return False


def _all_integers(series: list[list[Value]]) -> bool:
    return all(isinstance(v, Integral) for values in series for v in values if v is not None)


def encode(
    data: Iterable[Value] | Iterable[Iterable[Value]],
    *,
    scheme: Encoding | None = None,
    min_value: float | None = None,
    max_value: float | None = None,
    missing: float | None = None,
) -> str:
    """Encode one or more series into a tagged token such as ``s:AZ9`` or ``e:AA..``.

    Integer input defaults to simple encoding over ``[0, 61]`` so that values
    already on the chart's scale pass through unchanged. Any float in the
    input selects extended encoding over ``[0, 100]``. Either default can be
    overridden with ``scheme``, ``min_value`` and ``max_value``.
    """
    items = list(data)
    series: list[list[Value]]
    if _is_nested(items):
        series = [list(s) if s is not None else [] for s in items]  # type: ignore[arg-type]
    else:
        series = [items]  # type: ignore[list-item]

    for values in series:
        for v in values:
            if v is not None and not isinstance(v, Real):
                raise TypeError(f"Cannot encode non-numeric value {v!r}")

    integers = _all_integers(series)
    if scheme is None:
        scheme = Encoding.SIMPLE if integers else Encoding.EXTENDED

    default_lo, default_hi = (0.0, float(scheme.top)) if integers else FLOAT_DOMAIN
    lo = default_lo if min_value is None else float(min_value)
    hi = default_hi if max_value is None else float(max_value)

    logger.debug("Encoding %d series with scheme=%s domain=[%s, %s]", len(series), scheme.name, lo, hi)
    body = ",".join(encode_series(values, scheme, lo, hi, missing=missing) for values in series)
    return f"{scheme.value}:{body}"
