"""Exception hierarchy for the tournament engine.

"Not found" conditions in the elimination tree (searching, deleting or
returning a person to an eliminated district) are simulation outcomes and
never raise.  The exceptions below signal invariant violations or bad
input, and are meant to fail loudly.
"""

from __future__ import annotations


class GamesError(Exception):
    """Base exception for all engine errors."""


class PopulationError(GamesError):
    """A population container does not hold what the caller claims it does."""


class DuelError(GamesError):
    """A duel pair is structurally inconsistent."""


class DataFormatError(GamesError):
    """Setup data does not match the expected format."""


class DistrictNotFoundError(GamesError, KeyError):
    """A district requested for admission is not waiting in the catalog."""
