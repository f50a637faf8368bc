"""Text rendering shared by the vector types."""

from __future__ import annotations

import re

from .. import config

# "[[fill]align][sign][width][,][.precision]m"
_MAGNITUDE_SPEC = re.compile(r"^(?P<head>.*?)(?P<precision>\.\d+)?m$", re.DOTALL)


def format_magnitude(magnitude: float, format_spec: str, type_name: str) -> str:
    """Render a magnitude for a ``format()`` spec ending in ``m``.

    The precision defaults to ``config.DEFAULT_MAGNITUDE_DECIMALS`` decimal
    places. Everything before the precision is passed on to float formatting,
    so fill, alignment and width behave as they do for floats.
    """
    match = _MAGNITUDE_SPEC.match(format_spec)
    if match is None:
        raise ValueError(f"Unknown format code {format_spec!r} for object of type {type_name!r}")
    precision = match.group("precision") or f".{config.DEFAULT_MAGNITUDE_DECIMALS}"
    return format(magnitude, f"{match.group('head')}{precision}f")
