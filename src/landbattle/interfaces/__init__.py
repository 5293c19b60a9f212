"""Protocol-based interfaces for landbattle collaborators.

This module exports the protocol interfaces, providing a clear contract for
injected collaborators and enabling dependency injection and testing.
"""

from landbattle.interfaces.dice import IDieRollSource
from landbattle.interfaces.stats import IBattleStatsService

__all__ = [
    "IBattleStatsService",
    "IDieRollSource",
]
