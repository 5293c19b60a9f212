"""Die-roll source Protocol Interface.

This module defines the protocol (interface) for the randomness consumed by
the Monte Carlo engine.
"""

from typing import Protocol

import numpy.typing as npt


class IDieRollSource(Protocol):
    """Protocol for batch-capable sources of uniform die values.

    The Monte Carlo engine asks for every value it needs in a single call, so
    implementations can generate them in bulk.  Tests inject scripted sources
    to make runs deterministic.
    """

    def roll(self, count: int) -> npt.ArrayLike:
        """Return ``count`` independent values in ``1..6``.

        Args:
            count: Number of die values requested

        Returns:
            Flat array-like of exactly ``count`` integers
        """
        ...
