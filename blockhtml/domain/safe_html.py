"""
Trusted HTML values.

A rendered block fragment is only ever joined into page output as a
SafeHtml value. Plain strings must pass through `trusted` first, which
marks them safe without escaping.
"""

from __future__ import annotations

from collections.abc import Iterable

from markupsafe import Markup

SafeHtml = Markup


def trusted(value: str) -> SafeHtml:
    """Mark renderer output as already-safe HTML, verbatim."""
    if isinstance(value, Markup):
        return value
    return Markup(value)


def safe_join(fragments: Iterable[SafeHtml]) -> SafeHtml:
    """
    Concatenate trusted fragments with no separator and no escaping.

    Raises:
        TypeError: If any fragment is not SafeHtml.
    """
    parts: list[SafeHtml] = []
    for i, fragment in enumerate(fragments):
        if not isinstance(fragment, Markup):
            raise TypeError(
                f"Fragment {i} is {type(fragment).__name__}, expected SafeHtml"
            )
        parts.append(fragment)
    return Markup("").join(parts)
