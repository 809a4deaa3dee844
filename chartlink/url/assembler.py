"""Join collected URL elements into the final chart URL."""

from __future__ import annotations

from collections.abc import Sequence

from chartlink.config import DEFAULT_API_BASE

API_BASE = DEFAULT_API_BASE


def assemble_url(elements: Sequence[str], *, base: str = API_BASE) -> str:
    """Prepend the service endpoint and join elements with `&`.

    With no elements the bare endpoint is returned.
    """
    if not elements:
        return base
    return f"{base}?{'&'.join(elements)}"
