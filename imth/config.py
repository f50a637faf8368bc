"""Default configuration values for imth."""

from __future__ import annotations

DEFAULT_MAGNITUDE_DECIMALS = 4
