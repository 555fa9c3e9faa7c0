"""Typer CLI application for district-games."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from district_games.engine.errors import DataFormatError, DistrictNotFoundError
from district_games.engine.games import GamesConfig, HungerGames
from district_games.utils.logger import configure_logging

app = typer.Typer(help="District elimination tournament CLI")
console = Console()


@app.callback()
def _callback() -> None:
    """district-games: admit districts and run the elimination tournament."""


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error: {escape(message)}[/red]")
    return typer.Exit(code=1)


def _parse_admit(admit: str | None) -> list[int] | None:
    """Parse a comma-separated admission order such as ``"5,3,8"``."""
    if admit is None:
        return None
    try:
        return [int(part) for part in admit.split(",") if part.strip()]
    except ValueError:
        raise _fail(f"--admit must be a comma-separated list of district ids, got {admit!r}") from None


def _build_config(
    config_path: Path | None,
    seed: int | None,
    rule: str | None,
    max_rounds: int | None,
) -> GamesConfig:
    """Merge the optional JSON config file with command-line overrides.

    Command-line options win over the file, which wins over defaults.
    """
    values: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise _fail(f"Config file not found: {config_path}")
        try:
            loaded = json.loads(config_path.read_text())
        except json.JSONDecodeError as exc:
            raise _fail(f"Invalid JSON in config file {config_path}: {exc}") from None
        if not isinstance(loaded, dict):
            raise _fail(f"Config file must hold a JSON object, got {type(loaded).__name__}: {config_path}")
        values.update(loaded)
    overrides = {"seed": seed, "duel_rule": rule, "max_rounds": max_rounds}
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return GamesConfig(**values)
    except ValidationError as exc:
        raise _fail(f"Invalid configuration: {exc.errors()[0]['msg']}") from None


def _prepare(setup_file: Path, config: GamesConfig, admit: list[int] | None) -> HungerGames:
    from district_games.cli.simulate import prepare_games

    try:
        return prepare_games(setup_file, config, admit)
    except FileNotFoundError:
        raise _fail(f"Setup file not found: {setup_file}") from None
    except DataFormatError as exc:
        raise _fail(str(exc)) from None
    except DistrictNotFoundError as exc:
        raise _fail(str(exc.args[0])) from None


@app.command()
def simulate(  # noqa: PLR0913
    setup_file: Path = typer.Argument(..., help="Setup token file (districts, then people)"),
    seed: int | None = typer.Option(None, "--seed", help="Random seed (default 2023)"),
    rule: str | None = typer.Option(None, "--rule", help="Registered duel rule name"),
    max_rounds: int | None = typer.Option(None, "--max-rounds", help="Stop after this many rounds"),
    admit: str | None = typer.Option(None, "--admit", help="Comma-separated admission order (default: all)"),
    config: Path | None = typer.Option(None, "--config", help="Path to JSON config override"),
    log_level: str | None = typer.Option(None, "--log-level", help="QUIET | NORMAL | VERBOSE | DEBUG"),
) -> None:
    """Run the elimination tournament and print the results."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise _fail(str(exc)) from None

    games_config = _build_config(config, seed, rule, max_rounds)
    games = _prepare(setup_file, games_config, _parse_admit(admit))

    from district_games.cli.simulate import run_simulation

    run_simulation(games, console=console)


@app.command()
def inspect(
    setup_file: Path = typer.Argument(..., help="Setup token file (districts, then people)"),
    admit: str | None = typer.Option(None, "--admit", help="Comma-separated admission order (default: all)"),
    log_level: str | None = typer.Option(None, "--log-level", help="QUIET | NORMAL | VERBOSE | DEBUG"),
) -> None:
    """Admit districts and show the tree without playing."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise _fail(str(exc)) from None

    games = _prepare(setup_file, GamesConfig(), _parse_admit(admit))

    from district_games.cli.simulate import inspect_games

    inspect_games(games, console=console)
