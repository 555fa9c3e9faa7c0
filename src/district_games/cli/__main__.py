"""Entry point for ``python -m district_games.cli``."""

from __future__ import annotations

from district_games.cli.main import app

app()
