"""Selector name helpers."""

from __future__ import annotations

import re

_DASH_FORMAT = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


def is_dash_format(value: str | None) -> bool:
    """Return True if *value* is lowercase alphanumeric segments joined by single hyphens."""
    if not value:
        return False
    return _DASH_FORMAT.fullmatch(value) is not None


def dash_to_pascal(value: str) -> str:
    """Convert ``foo-bar-baz`` to ``FooBarBaz``.

    Callers are expected to validate with :func:`is_dash_format` first; empty
    segments are dropped rather than reported.
    """
    return "".join(segment[0].upper() + segment[1:] for segment in value.split("-") if segment)
