"""Vectorized reductions over flat integer arrays.

These back both statistics engines.  numpy performs the reductions in
native-width chunks, so the helpers only have to guard the contracts:

- sums and squares are accumulated as ``int64`` and converted to float only
  for the final division and square root
- empty input is valid and yields zeros (or an empty histogram)
- histograms reject negative entries instead of silently dropping them
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

MAX_DISTRIBUTION_VALUE = 1024


@dataclass(frozen=True, slots=True)
class MeanStdDev:
    """Population mean and standard deviation."""

    mean: float
    stddev: float


def _as_int_array(values: npt.ArrayLike) -> np.ndarray:
    array = np.asarray(values, dtype=np.int64)
    if array.ndim != 1:
        raise ValueError(f"expected a flat array, got {array.ndim} dimensions")
    return array


def vector_sum(values: npt.ArrayLike) -> int:
    """Total of all elements; 0 for an empty array."""

    return int(_as_int_array(values).sum())


def mean_and_stddev(values: npt.ArrayLike) -> MeanStdDev:
    """Single-pass population mean and standard deviation.

    Returns ``MeanStdDev(0.0, 0.0)`` for an empty array.
    """

    array = _as_int_array(values)
    if array.size == 0:
        return MeanStdDev(0.0, 0.0)

    total = int(array.sum())
    total_squares = int(np.dot(array, array))
    n = array.size
    mean = total / n
    variance = total_squares / n - mean * mean
    return MeanStdDev(mean, math.sqrt(max(variance, 0.0)))


def distribution(values: npt.ArrayLike, max_value: int) -> list[float]:
    """Probability of each value ``0..max_value``.

    Values above ``max_value`` are counted in the top bin.  Returns an empty
    list for an empty array.

    Raises:
        ValueError: If ``max_value`` is outside ``0..MAX_DISTRIBUTION_VALUE``
            or any element is negative.
    """

    if not 0 <= max_value <= MAX_DISTRIBUTION_VALUE:
        raise ValueError(
            f"max_value must be between 0 and {MAX_DISTRIBUTION_VALUE}, got {max_value}"
        )

    array = _as_int_array(values)
    if array.size == 0:
        return []
    if (array < 0).any():
        raise ValueError(f"distribution values must be non-negative, got {int(array.min())}")

    counts = np.bincount(np.minimum(array, max_value), minlength=max_value + 1)
    return (counts / array.size).tolist()
