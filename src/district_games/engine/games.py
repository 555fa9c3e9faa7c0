"""Tournament facade: admission, selection, resolution and the round loop.

:class:`HungerGames` ties the catalog, the elimination tree, the dueler
selection engine and the round controller together behind a single
object, and adds a :meth:`HungerGames.play` loop that runs rounds until a
single district is left or no further duel can be arranged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from district_games.engine.catalog import DistrictCatalog
from district_games.engine.duel import DuelRuleNotFoundError, get_duel_rule
from district_games.engine.errors import DistrictNotFoundError
from district_games.engine.population import District
from district_games.engine.random_source import DEFAULT_SEED, GeneratorSource, UniformSource
from district_games.engine.rounds import DuelOutcome, RoundController
from district_games.engine.selection import DuelPair, select_duelers
from district_games.engine.tree import EliminationTree, TreeNode
from district_games.utils.logger import VERBOSE

if TYPE_CHECKING:
    from district_games.ingest.loader import GamesSetup

logger = logging.getLogger(__name__)


class GamesConfig(BaseModel):
    """Validated tournament settings.

    Attributes:
        seed: Non-negative seed for the default random source.
        duel_rule: Name of a registered duel rule.
        max_rounds: Optional cap on rounds played by :meth:`HungerGames.play`.
    """

    model_config = ConfigDict(frozen=True)

    seed: int = Field(default=DEFAULT_SEED, ge=0)
    duel_rule: str = "effectiveness"
    max_rounds: int | None = Field(default=None, ge=1)

    @field_validator("duel_rule")
    @classmethod
    def _check_duel_rule(cls, value: str) -> str:
        try:
            get_duel_rule(value)
        except DuelRuleNotFoundError as exc:
            raise ValueError(str(exc.args[0])) from None
        return value


@dataclass(frozen=True)
class RoundRecord:
    """One played round."""

    round_number: int
    outcome: DuelOutcome


@dataclass(frozen=True)
class DistrictStanding:
    """Population counts of an active district."""

    district_id: int
    odd_count: int
    even_count: int

    @property
    def total(self) -> int:
        return self.odd_count + self.even_count


@dataclass
class TournamentResult:
    """Summary of a :meth:`HungerGames.play` run.

    Attributes:
        rounds: Rounds played during this run, in order.
        survivors: Ids of the districts still in the tree (ascending).
        champion: The sole surviving district, or ``None``.
        stop_reason: ``"champion"``, ``"empty"``, ``"bye"``, ``"no_duel"``
            or ``"max_rounds"``.
    """

    rounds: list[RoundRecord] = field(default_factory=list)
    survivors: list[int] = field(default_factory=list)
    champion: int | None = None
    stop_reason: str = ""

    @property
    def eliminated(self) -> list[int]:
        """District ids in elimination order."""
        return [r.outcome.eliminated_district for r in self.rounds if r.outcome.eliminated_district is not None]


class HungerGames:
    """Elimination tournament over a catalog of districts.

    Args:
        catalog: Districts waiting for admission.  Admission moves them out
            of the catalog and into the elimination tree.
        config: Tournament settings (defaults to :class:`GamesConfig`).
        rng: Random source; defaults to a :class:`GeneratorSource` seeded
            with ``config.seed``.
    """

    def __init__(
        self,
        catalog: DistrictCatalog,
        config: GamesConfig | None = None,
        rng: UniformSource | None = None,
    ) -> None:
        self._config = config if config is not None else GamesConfig()
        self._catalog = catalog
        self._tree = EliminationTree()
        self._rng = rng if rng is not None else GeneratorSource(self._config.seed)
        rule = get_duel_rule(self._config.duel_rule)()
        self._controller = RoundController(self._tree, rule, self._rng)
        self._rounds_played = 0

    @classmethod
    def from_setup(cls, setup: GamesSetup, config: GamesConfig | None = None) -> HungerGames:
        """Build a game whose catalog holds every district of *setup*."""
        from district_games.ingest.loader import build_catalog

        return cls(build_catalog(setup), config=config)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def config(self) -> GamesConfig:
        return self._config

    @property
    def catalog(self) -> tuple[District, ...]:
        """Districts not yet admitted, in catalog order."""
        return tuple(self._catalog)

    @property
    def root(self) -> TreeNode | None:
        return self._tree.root

    @property
    def tree(self) -> EliminationTree:
        return self._tree

    @property
    def rounds_played(self) -> int:
        return self._rounds_played

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def admit_district(self, district: District | int) -> None:
        """Move *district* (or the district with that id) from the catalog into the tree.

        Raises:
            DistrictNotFoundError: If the district is not in the catalog.
        """
        district_id = district if isinstance(district, int) else district.district_id
        waiting = self._catalog.get(district_id)
        if waiting is None:
            msg = f"District {district_id} is not waiting in the catalog"
            raise DistrictNotFoundError(msg)
        self._tree.insert(waiting)
        self._catalog.remove(waiting)
        logger.log(VERBOSE, "district %d admitted", district_id)

    def admit_all(self) -> None:
        """Admit every catalog district in catalog order."""
        for district in self._catalog:
            self.admit_district(district)
        logger.info("%d districts admitted", len(self._tree))

    def find_district(self, district_id: int) -> District | None:
        return self._tree.find(district_id)

    def eliminate_district(self, district_id: int) -> None:
        """Remove *district_id* from the tree if present."""
        self._tree.delete(district_id)

    def select_duelers(self) -> DuelPair:
        return select_duelers(self._tree, self._rng)

    def resolve_duel(self, pair: DuelPair) -> DuelOutcome:
        return self._controller.resolve_duel(pair)

    # ------------------------------------------------------------------
    # Round loop
    # ------------------------------------------------------------------

    def play_round(self) -> RoundRecord | None:
        """Select and resolve one pair.

        Returns:
            The :class:`RoundRecord`, or ``None`` when selection came back
            empty and no round was played.
        """
        pair = self.select_duelers()
        if pair.is_empty:
            return None
        outcome = self.resolve_duel(pair)
        self._rounds_played += 1
        logger.log(
            VERBOSE,
            "round %d: winner=%s eliminated=%s",
            self._rounds_played,
            outcome.winner.full_name if outcome.winner is not None else None,
            outcome.eliminated_district,
        )
        return RoundRecord(round_number=self._rounds_played, outcome=outcome)

    def play(self, max_rounds: int | None = None) -> TournamentResult:
        """Play rounds until one district remains or no duel is possible.

        Every full duel removes its loser from the simulation for good, so
        the loop always terminates.  A bye ends the run because repeating
        it would not change the outcome.

        Args:
            max_rounds: Cap on rounds for this call; defaults to
                ``config.max_rounds``.
        """
        limit = max_rounds if max_rounds is not None else self._config.max_rounds
        result = TournamentResult()

        while True:
            if len(self._tree) <= 1:
                result.stop_reason = "champion" if len(self._tree) == 1 else "empty"
                break
            if limit is not None and len(result.rounds) >= limit:
                result.stop_reason = "max_rounds"
                break
            record = self.play_round()
            if record is None:
                result.stop_reason = "no_duel"
                break
            result.rounds.append(record)
            if record.outcome.is_bye:
                result.stop_reason = "bye"
                break

        result.survivors = self._tree.district_ids()
        if len(result.survivors) == 1:
            result.champion = result.survivors[0]
        logger.info(
            "tournament stopped after %d rounds (%s); survivors: %s",
            len(result.rounds),
            result.stop_reason,
            result.survivors,
        )
        return result

    def standings(self) -> list[DistrictStanding]:
        """Population counts of every active district, by ascending id."""
        return [
            DistrictStanding(
                district_id=d.district_id,
                odd_count=len(d.odd_population),
                even_count=len(d.even_population),
            )
            for d in self._tree.in_order()
        ]
