"""Tournament engine: populations, elimination tree, selection and duels."""

from __future__ import annotations

from district_games.engine.catalog import DistrictCatalog
from district_games.engine.duel import (
    DuelRule,
    DuelRuleNotFoundError,
    EffectivenessRule,
    WeightedRule,
    get_duel_rule,
    list_duel_rules,
    register_duel_rule,
)
from district_games.engine.errors import (
    DataFormatError,
    DistrictNotFoundError,
    DuelError,
    GamesError,
    PopulationError,
)
from district_games.engine.games import (
    DistrictStanding,
    GamesConfig,
    HungerGames,
    RoundRecord,
    TournamentResult,
)
from district_games.engine.population import District
from district_games.engine.random_source import DEFAULT_SEED, GeneratorSource, UniformSource
from district_games.engine.rounds import DuelOutcome, RoundController
from district_games.engine.selection import DuelPair, select_duelers
from district_games.engine.tree import EliminationTree, TreeNode

__all__ = [
    "DEFAULT_SEED",
    "DataFormatError",
    "District",
    "DistrictCatalog",
    "DistrictNotFoundError",
    "DistrictStanding",
    "DuelError",
    "DuelOutcome",
    "DuelPair",
    "DuelRule",
    "DuelRuleNotFoundError",
    "EffectivenessRule",
    "EliminationTree",
    "GamesConfig",
    "GamesError",
    "GeneratorSource",
    "HungerGames",
    "PopulationError",
    "RoundController",
    "RoundRecord",
    "TournamentResult",
    "TreeNode",
    "UniformSource",
    "WeightedRule",
    "get_duel_rule",
    "list_duel_rules",
    "register_duel_rule",
    "select_duelers",
]
