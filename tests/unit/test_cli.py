"""Tests for the Typer CLI (``python -m district_games.cli``)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from district_games.cli.main import app

runner = CliRunner()


class TestSimulate:
    def test_sample_run(self, sample_setup_file: Path) -> None:
        result = runner.invoke(app, ["simulate", str(sample_setup_file), "--log-level", "QUIET"])
        assert result.exit_code == 0, f"CLI failed: {result.output}"
        assert "Tournament Results" in result.output
        assert "Surviving Districts" in result.output
        assert "bye" in result.output

    def test_custom_admission_order(self, sample_setup_file: Path) -> None:
        result = runner.invoke(
            app,
            ["simulate", str(sample_setup_file), "--admit", "8,9", "--log-level", "QUIET"],
        )
        assert result.exit_code == 0, f"CLI failed: {result.output}"

    def test_config_file_and_overrides(self, sample_setup_file: Path, tmp_path: Path) -> None:
        config_path = tmp_path / "games.json"
        config_path.write_text(json.dumps({"duel_rule": "weighted", "seed": 7}))
        result = runner.invoke(
            app,
            [
                "simulate",
                str(sample_setup_file),
                "--config",
                str(config_path),
                "--max-rounds",
                "1",
                "--log-level",
                "QUIET",
            ],
        )
        assert result.exit_code == 0, f"CLI failed: {result.output}"
        assert "weighted" in result.output
        assert "max_rounds" in result.output

    @pytest.mark.parametrize("payload", ["[1]", "3", '"seed"'])
    def test_config_must_be_an_object(self, sample_setup_file: Path, tmp_path: Path, payload: str) -> None:
        config_path = tmp_path / "games.json"
        config_path.write_text(payload)
        result = runner.invoke(app, ["simulate", str(sample_setup_file), "--config", str(config_path)])
        assert result.exit_code == 1
        assert "must hold a JSON object" in result.output

    def test_invalid_json_config(self, sample_setup_file: Path, tmp_path: Path) -> None:
        config_path = tmp_path / "games.json"
        config_path.write_text("{seed: 1")
        result = runner.invoke(app, ["simulate", str(sample_setup_file), "--config", str(config_path)])
        assert result.exit_code == 1
        assert "Invalid JSON in config file" in result.output

    def test_missing_setup_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["simulate", str(tmp_path / "missing.in"), "--log-level", "QUIET"])
        assert result.exit_code == 1
        assert "Setup file not found" in result.output

    def test_malformed_setup_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.in"
        path.write_text("2\n1\n")
        result = runner.invoke(app, ["simulate", str(path), "--log-level", "QUIET"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unknown_rule(self, sample_setup_file: Path) -> None:
        result = runner.invoke(app, ["simulate", str(sample_setup_file), "--rule", "coin_flip"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_negative_seed(self, sample_setup_file: Path) -> None:
        result = runner.invoke(app, ["simulate", str(sample_setup_file), "--seed", "-1", "--log-level", "QUIET"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Invalid configuration" in result.output

    def test_unknown_district_in_admission_order(self, sample_setup_file: Path) -> None:
        result = runner.invoke(app, ["simulate", str(sample_setup_file), "--admit", "5,42", "--log-level", "QUIET"])
        assert result.exit_code == 1
        assert "District 42" in result.output

    def test_bad_admission_list(self, sample_setup_file: Path) -> None:
        result = runner.invoke(app, ["simulate", str(sample_setup_file), "--admit", "5,x"])
        assert result.exit_code == 1
        assert "--admit" in result.output

    def test_bad_log_level(self, sample_setup_file: Path) -> None:
        result = runner.invoke(app, ["simulate", str(sample_setup_file), "--log-level", "TRACE"])
        assert result.exit_code == 1
        assert "Unknown log level" in result.output


class TestInspect:
    def test_lists_admitted_and_waiting(self, sample_setup_file: Path) -> None:
        result = runner.invoke(app, ["inspect", str(sample_setup_file), "--admit", "5,3,8", "--log-level", "QUIET"])
        assert result.exit_code == 0, f"CLI failed: {result.output}"
        assert "Admitted Districts" in result.output
        assert "Tree height: 2" in result.output
        assert "Waiting in catalog: 1, 4, 7, 9" in result.output
