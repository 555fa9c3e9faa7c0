"""Simulation pipeline orchestration.

Assembles loading, admission, the round loop and the Rich report into
``prepare_games()`` / ``run_simulation()``, consumed by the Typer CLI
entry point.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from district_games.engine.games import GamesConfig, HungerGames, TournamentResult
from district_games.ingest.loader import load_setup


def prepare_games(
    setup_file: Path,
    config: GamesConfig,
    admit: Sequence[int] | None = None,
) -> HungerGames:
    """Load *setup_file* and admit districts.

    Args:
        setup_file: Path of the setup token file.
        config: Tournament settings.
        admit: District ids to admit, in admission order.  ``None`` admits
            the whole catalog in catalog order.

    Raises:
        FileNotFoundError, DataFormatError: From loading.
        DistrictNotFoundError: If an id in *admit* is not in the catalog.
    """
    games = HungerGames.from_setup(load_setup(setup_file), config=config)
    if admit is None:
        games.admit_all()
    else:
        for district_id in admit:
            games.admit_district(district_id)
    return games


def standings_table(games: HungerGames, title: str = "Standings") -> Table:
    """Render the active districts of *games* as a Rich table."""
    table = Table(title=title)
    table.add_column("District", style="cyan", justify="right")
    table.add_column("Odd", justify="right")
    table.add_column("Even", justify="right")
    table.add_column("Total", style="green", justify="right")
    for standing in games.standings():
        table.add_row(
            str(standing.district_id),
            str(standing.odd_count),
            str(standing.even_count),
            str(standing.total),
        )
    return table


def run_simulation(
    games: HungerGames,
    *,
    max_rounds: int | None = None,
    console: Console | None = None,
) -> TournamentResult:
    """Play the tournament and print a summary.

    Args:
        games: Game with districts already admitted.
        max_rounds: Optional round cap for this run.
        console: Rich Console for terminal output.  Defaults to a fresh
            ``Console()``; pass ``Console(quiet=True)`` to suppress output.
    """
    _console = console or Console()

    result = games.play(max_rounds=max_rounds)

    summary = Table(title="Tournament Results")
    summary.add_column("Field", style="cyan")
    summary.add_column("Value", style="green")
    summary.add_row("Seed", str(games.config.seed))
    summary.add_row("Duel rule", games.config.duel_rule)
    summary.add_row("Rounds played", str(len(result.rounds)))
    summary.add_row("Stopped because", result.stop_reason)
    summary.add_row("Eliminated", ", ".join(str(d) for d in result.eliminated) or "-")
    summary.add_row("Champion", str(result.champion) if result.champion is not None else "-")
    _console.print(summary)
    _console.print(standings_table(games, title="Surviving Districts"))

    return result


def inspect_games(games: HungerGames, console: Console | None = None) -> None:
    """Print the admitted districts and whatever is left in the catalog."""
    _console = console or Console()
    _console.print(standings_table(games, title="Admitted Districts"))
    _console.print(f"Tree height: {games.tree.height()}")
    waiting = ", ".join(str(d.district_id) for d in games.catalog)
    _console.print(f"Waiting in catalog: {waiting or '-'}")
