"""Uniform integer random sources.

The engine never touches a process-wide random state.  Every consumer
receives a :class:`UniformSource` explicitly, so identical seeds and
identical setup data always replay the same tournament.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

#: Seed used when the caller does not pick one.
DEFAULT_SEED: int = 2023


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for a stream of uniformly distributed integers."""

    def next_uniform(self, bound: int) -> int:
        """Return an integer drawn uniformly from ``[0, bound)``."""
        ...


class GeneratorSource:
    """:class:`UniformSource` backed by a NumPy :class:`numpy.random.Generator`.

    Args:
        seed: Seed for ``np.random.default_rng``.  Ignored when *rng* is given.
        rng: Pre-built generator to draw from.
    """

    def __init__(self, seed: int = DEFAULT_SEED, rng: np.random.Generator | None = None) -> None:
        self._seed = seed
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def next_uniform(self, bound: int) -> int:
        """Return an integer drawn uniformly from ``[0, bound)``.

        Raises:
            ValueError: If *bound* is not positive.
        """
        if bound <= 0:
            msg = f"bound must be positive, got {bound}"
            raise ValueError(msg)
        return int(self._rng.integers(0, bound))
