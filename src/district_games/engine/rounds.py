"""Duel resolution and district elimination."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from district_games.engine.duel import DuelRule
from district_games.engine.errors import DuelError, PopulationError
from district_games.engine.random_source import UniformSource
from district_games.engine.selection import DuelPair
from district_games.engine.tree import EliminationTree
from district_games.ingest.schema import Person

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuelOutcome:
    """Result of resolving one :class:`DuelPair`.

    Attributes:
        pair: The pair that was resolved.
        winner: Contestant returned to its district (the lone contestant
            of a bye), or ``None`` for an empty pair.
        loser: Contestant removed from the simulation, or ``None``.
        eliminated_district: Id of the district deleted from the tree as a
            consequence of the duel, if any.
    """

    pair: DuelPair
    winner: Person | None = None
    loser: Person | None = None
    eliminated_district: int | None = None

    @property
    def is_bye(self) -> bool:
        return self.winner is not None and self.loser is None


class RoundController:
    """Resolves duels against an :class:`EliminationTree`.

    Args:
        tree: Tree of active districts; mutated on elimination.
        rule: Duel outcome rule.
        rng: Random source handed to *rule*.
    """

    def __init__(self, tree: EliminationTree, rule: DuelRule, rng: UniformSource) -> None:
        self._tree = tree
        self._rule = rule
        self._rng = rng

    @property
    def rule(self) -> DuelRule:
        return self._rule

    def resolve_duel(self, pair: DuelPair) -> DuelOutcome:
        """Resolve *pair*: return the winner home and eliminate the loser's district if it is spent.

        A pair with a single contestant is a bye: that contestant goes back
        to its district with no elimination check.  An empty pair is a
        no-op.

        Raises:
            PopulationError: If either contestant is still present in its
                district, i.e. the pair was not produced by selection.  The
                check runs before anything is mutated.
            DuelError: If the rule returns someone outside the pair.
        """
        for contestant in (pair.odd, pair.even):
            if contestant is not None:
                self._ensure_detached(contestant)

        if pair.odd is None or pair.even is None:
            lone = pair.lone_contestant
            if lone is None:
                return DuelOutcome(pair=pair)
            self._send_back(lone)
            logger.debug("bye for person %d of district %d", lone.person_id, lone.district_id)
            return DuelOutcome(pair=pair, winner=lone)

        odd, even = pair.odd, pair.even
        winner = self._rule.winner(odd, even, self._rng)
        if winner is odd:
            loser = even
        elif winner is even:
            loser = odd
        else:
            msg = f"Duel rule {self._rule.name!r} returned a person outside the pair"
            raise DuelError(msg)

        self._send_back(winner)
        eliminated = self._check_district(loser.district_id)
        logger.debug(
            "%s (district %d) beat %s (district %d)",
            winner.full_name,
            winner.district_id,
            loser.full_name,
            loser.district_id,
        )
        return DuelOutcome(pair=pair, winner=winner, loser=loser, eliminated_district=eliminated)

    def _ensure_detached(self, person: Person) -> None:
        district = self._tree.find(person.district_id)
        if district is not None and person in district:
            msg = f"Person {person.person_id} was never taken out of district {district.district_id}"
            raise PopulationError(msg)

    def _send_back(self, person: Person) -> None:
        district = self._tree.find(person.district_id)
        if district is None:
            logger.debug("district %d already eliminated; dropping person %d", person.district_id, person.person_id)
            return
        district.add_person(person)

    def _check_district(self, district_id: int) -> int | None:
        district = self._tree.find(district_id)
        if district is None or district.is_viable:
            return None
        self._tree.delete(district_id)
        logger.info("district %d eliminated", district_id)
        return district_id
