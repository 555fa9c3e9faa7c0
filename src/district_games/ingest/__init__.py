"""Setup record schemas.

The token-stream parser lives in :mod:`district_games.ingest.loader`; it is
not re-exported here because it depends on the engine package.
"""

from __future__ import annotations

from district_games.ingest.schema import ELIGIBLE_MAX_AGE, ELIGIBLE_MIN_AGE, DistrictRecord, Parity, Person

__all__ = [
    "ELIGIBLE_MAX_AGE",
    "ELIGIBLE_MIN_AGE",
    "DistrictRecord",
    "Parity",
    "Person",
]
