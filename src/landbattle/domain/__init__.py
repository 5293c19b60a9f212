"""Rules layer for land-battle odds.

This package holds every rule of single-battle resolution and the two
statistics engines built on it:

* Value records and enumerations (see :mod:`models` and :mod:`enums`).
* Rule constants (see :mod:`rules_config`) and the Combat Results Table
  (see :mod:`crt`).
* Pure rule functions: ratio and DRMs (:mod:`ratio`), the CRT outcome
  (:mod:`resolver`) and the full battle resolution (:mod:`battle`).
* Exact enumeration (:mod:`exact`) and Monte Carlo sampling
  (:mod:`monte_carlo`), which share their aggregation (:mod:`aggregate`).
"""

from . import (
    aggregate,
    battle,
    crt,
    enums,
    exact,
    models,
    monte_carlo,
    ratio,
    resolver,
    rules_config,
)

__all__ = [
    "aggregate",
    "battle",
    "crt",
    "enums",
    "exact",
    "models",
    "monte_carlo",
    "ratio",
    "resolver",
    "rules_config",
]
