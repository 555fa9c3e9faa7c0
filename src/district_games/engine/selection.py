"""Dueler selection over the elimination tree.

Each call to :func:`select_duelers` picks at most one odd-parity and one
even-parity contestant, from different districts, using this precedence:

1. first eligible odd person in pre-order (no district excluded);
2. first eligible even person in pre-order, excluding the odd pick's district;
3. if step 1 found nobody, a uniform random odd person from the first
   non-excluded district (pre-order) with a non-empty odd population,
   excluding the even pick's district;
4. if step 2 found nobody, the same for even, excluding the odd pick's
   district.

Exclusion is applied per district while traversing, before the traversal
stops at its first match.  Each pick leaves its population container as
soon as it is found.  Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from district_games.engine.errors import DuelError
from district_games.engine.population import District
from district_games.engine.random_source import UniformSource
from district_games.engine.tree import EliminationTree
from district_games.ingest.schema import Parity, Person

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuelPair:
    """Up to one odd-parity and one even-parity contestant for a single duel.

    Both sides absent is a legal value meaning "no duel possible".

    Attributes:
        odd: Odd-parity contestant, or ``None``.
        even: Even-parity contestant, or ``None``.

    Raises:
        DuelError: If a contestant sits on the wrong side or both
            contestants come from the same district.
    """

    odd: Person | None = None
    even: Person | None = None

    def __post_init__(self) -> None:
        if self.odd is not None and self.odd.parity is not Parity.ODD:
            msg = f"Person {self.odd.person_id} is not odd-parity"
            raise DuelError(msg)
        if self.even is not None and self.even.parity is not Parity.EVEN:
            msg = f"Person {self.even.person_id} is not even-parity"
            raise DuelError(msg)
        if self.odd is not None and self.even is not None and self.odd.district_id == self.even.district_id:
            msg = f"Both contestants come from district {self.odd.district_id}"
            raise DuelError(msg)

    @property
    def is_duel(self) -> bool:
        """``True`` when both sides are present."""
        return self.odd is not None and self.even is not None

    @property
    def is_empty(self) -> bool:
        return self.odd is None and self.even is None

    @property
    def lone_contestant(self) -> Person | None:
        """The single present contestant of a bye, else ``None``."""
        if self.is_duel:
            return None
        return self.odd if self.odd is not None else self.even


def select_duelers(tree: EliminationTree, rng: UniformSource) -> DuelPair:
    """Pick and remove the next pair of contestants from *tree*.

    Args:
        tree: Elimination tree of active districts.
        rng: Source for the random fallback picks.

    Returns:
        :class:`DuelPair` of the picks; either side may be ``None``.
    """
    odd = _take(tree, Parity.ODD, exclude=None, rng=None)
    even = _take(tree, Parity.EVEN, exclude=_district_of(odd), rng=None)

    if odd is None:
        odd = _take(tree, Parity.ODD, exclude=_district_of(even), rng=rng)
    if even is None:
        even = _take(tree, Parity.EVEN, exclude=_district_of(odd), rng=rng)

    logger.debug(
        "selected odd=%s even=%s",
        odd.person_id if odd is not None else None,
        even.person_id if even is not None else None,
    )
    return DuelPair(odd=odd, even=even)


def _district_of(person: Person | None) -> int | None:
    return person.district_id if person is not None else None


def _take(
    tree: EliminationTree,
    parity: Parity,
    *,
    exclude: int | None,
    rng: UniformSource | None,
) -> Person | None:
    """Find a contestant in pre-order and remove it from its district.

    ``rng=None`` runs the eligible-only search; otherwise a uniform pick is
    made in the first district that can supply one.
    """
    for node in tree.iter_preorder():
        person = _find_in_district(node.district, parity, exclude, rng)
        if person is not None:
            node.district.remove_person(person)
            return person
    return None


def _find_in_district(
    district: District,
    parity: Parity,
    exclude: int | None,
    rng: UniformSource | None,
) -> Person | None:
    if district.district_id == exclude:
        return None
    population = district.population(parity)
    if rng is None:
        for person in population:
            if person.eligible:
                return person
        return None
    if not population:
        return None
    return population[rng.next_uniform(len(population))]
