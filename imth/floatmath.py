"""Scalar helpers with plain IEEE-754 semantics.

Python raises ``ZeroDivisionError`` on float division by zero and
``ValueError`` on math domain errors. These helpers evaluate through numpy
with floating-point warnings silenced, so the results are inf or NaN instead.
"""

from __future__ import annotations

import numpy as np


def div(numerator: float, denominator: float) -> float:
    """Return numerator / denominator, giving +-inf or NaN for a zero denominator."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def atan_ratio(numerator: float, denominator: float) -> float:
    """One-argument arctangent of numerator / denominator (quadrant is not recovered)."""
    return float(np.arctan(div(numerator, denominator)))


def acos(value: float) -> float:
    with np.errstate(invalid="ignore"):
        return float(np.arccos(np.float64(value)))


def sqrt(value: float) -> float:
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(np.float64(value)))
