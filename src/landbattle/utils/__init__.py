"""Utility functions for the landbattle engine."""

from landbattle.utils.rng import SeededDieRolls
from landbattle.utils.vectorized import (
    MAX_DISTRIBUTION_VALUE,
    MeanStdDev,
    distribution,
    mean_and_stddev,
    vector_sum,
)

__all__ = [
    "MAX_DISTRIBUTION_VALUE",
    "MeanStdDev",
    "SeededDieRolls",
    "distribution",
    "mean_and_stddev",
    "vector_sum",
]
