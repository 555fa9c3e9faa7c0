"""Unit tests for district_games.ingest.loader."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from district_games.engine.errors import DataFormatError
from district_games.ingest.loader import GamesSetup, build_catalog, load_setup, parse_setup
from district_games.ingest.schema import DistrictRecord, Parity


class TestParseSetup:
    def test_sample_counts(self, sample_setup_text: str) -> None:
        setup = parse_setup(sample_setup_text)
        assert [d.district_id for d in setup.districts] == [5, 3, 8, 1, 4, 7, 9]
        assert len(setup.people) == 14

    def test_person_fields(self, sample_setup_text: str) -> None:
        katniss = parse_setup(sample_setup_text).people[0]
        assert katniss.person_id == 0
        assert katniss.full_name == "Katniss Everdeen"
        assert katniss.birth_month == 5
        assert katniss.parity is Parity.ODD
        assert katniss.age == 16
        assert katniss.eligible
        assert katniss.district_id == 5
        assert katniss.effectiveness == 40

    def test_person_ids_follow_input_order(self, sample_setup_text: str) -> None:
        people = parse_setup(sample_setup_text).people
        assert [p.person_id for p in people] == list(range(14))

    def test_line_breaks_do_not_matter(self) -> None:
        setup = parse_setup("2 1 2 1 Ann Lee 3 15 2 10")
        assert [d.district_id for d in setup.districts] == [1, 2]
        assert setup.people[0].district_id == 2

    def test_empty_sections(self) -> None:
        setup = parse_setup("0\n0\n")
        assert setup == GamesSetup()

    def test_truncated_input(self) -> None:
        with pytest.raises(DataFormatError, match="Unexpected end of input while reading an age"):
            parse_setup("1\n1\n1\nAnn Lee 3")

    def test_missing_people_count(self) -> None:
        with pytest.raises(DataFormatError, match="number of people"):
            parse_setup("2\n1 2\n")

    def test_non_integer_token(self) -> None:
        with pytest.raises(DataFormatError, match="Expected an integer for a district id"):
            parse_setup("1\nfive\n0\n")

    def test_negative_count(self) -> None:
        with pytest.raises(DataFormatError, match="non-negative"):
            parse_setup("-1\n0\n")

    def test_invalid_birth_month(self) -> None:
        with pytest.raises(DataFormatError, match="Invalid Person record"):
            parse_setup("1\n1\n1\nAnn Lee 13 15 1 10\n")

    def test_trailing_data(self) -> None:
        with pytest.raises(DataFormatError, match="trailing data"):
            parse_setup("1\n1\n0\nextra\n")


class TestLoadSetup:
    def test_reads_file(self, sample_setup_file: Path) -> None:
        assert len(load_setup(sample_setup_file).districts) == 7

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_setup(tmp_path / "nope.in")


class TestBuildCatalog:
    def test_people_distributed_by_parity(self, sample_setup_text: str) -> None:
        catalog = build_catalog(parse_setup(sample_setup_text))
        assert catalog.district_ids() == [5, 3, 8, 1, 4, 7, 9]
        district_5 = catalog.get(5)
        assert district_5 is not None
        assert [p.first_name for p in district_5.odd_population] == ["Katniss"]
        assert [p.first_name for p in district_5.even_population] == ["Peeta"]
        district_9 = catalog.get(9)
        assert district_9 is not None
        assert district_9.even_population == []

    def test_unknown_district_is_skipped_with_warning(
        self,
        sample_setup_text: str,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="district_games"):
            catalog = build_catalog(parse_setup(sample_setup_text))
        assert sum(d.size for d in catalog) == 13
        assert "1 people reference unknown districts" in caplog.text

    def test_duplicate_district_rejected(self) -> None:
        setup = GamesSetup(districts=[DistrictRecord(district_id=1), DistrictRecord(district_id=1)])
        with pytest.raises(DataFormatError, match="already in the catalog"):
            build_catalog(setup)
