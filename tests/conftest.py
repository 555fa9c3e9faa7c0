"""Shared pytest fixtures for the district_games test suite.

Fixtures defined here are available to all tests without explicit imports.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from district_games.engine.population import District
from district_games.ingest.schema import Person

PersonFactory = Callable[..., Person]

#: Seven districts and fourteen people.  District 9 has no even population;
#: the person in district 42 references a district that does not exist.
SAMPLE_SETUP = """\
7
5 3 8 1 4 7 9
14
Katniss Everdeen 5 16 5 40
Peeta Mellark 4 16 5 35
Haymitch Abernathy 7 40 3 60
Effie Trinket 2 39 3 20
Finnick Odair 1 24 8 80
Annie Cresta 6 22 8 30
Johanna Mason 9 25 1 70
Blight Woods 10 33 1 50
Beetee Latier 11 50 4 45
Wiress Nuts 12 48 4 45
Rue Barley 3 12 7 25
Thresh Field 8 18 7 65
Cato Hadley 3 18 9 90
Lost Soul 1 30 42 10
"""


@pytest.fixture(autouse=True)
def _reset_district_games_logger() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` (e.g. via the CLI)."""
    yield
    root = logging.getLogger("district_games")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def make_person() -> PersonFactory:
    """Return a factory building :class:`Person` records with unique ids.

    ``birth_month`` picks the parity: odd months land in the odd population.
    """
    counter = iter(range(10_000))

    def _make(  # noqa: PLR0913
        district_id: int,
        birth_month: int = 1,
        age: int = 30,
        effectiveness: int = 50,
        first_name: str = "Test",
        last_name: str = "Person",
        person_id: int | None = None,
    ) -> Person:
        return Person(
            person_id=next(counter) if person_id is None else person_id,
            first_name=first_name,
            last_name=last_name,
            birth_month=birth_month,
            age=age,
            district_id=district_id,
            effectiveness=effectiveness,
        )

    return _make


@pytest.fixture
def make_district(make_person: PersonFactory) -> Callable[..., District]:
    """Return a factory building a district with *n_odd* / *n_even* adults."""

    def _make(district_id: int, n_odd: int = 1, n_even: int = 1) -> District:
        district = District(district_id)
        for _ in range(n_odd):
            district.add_person(make_person(district_id, birth_month=1))
        for _ in range(n_even):
            district.add_person(make_person(district_id, birth_month=2))
        return district

    return _make


@pytest.fixture
def sample_setup_text() -> str:
    return SAMPLE_SETUP


@pytest.fixture
def sample_setup_file(tmp_path: Path) -> Path:
    """Write :data:`SAMPLE_SETUP` into an isolated temporary directory."""
    path = tmp_path / "panem.in"
    path.write_text(SAMPLE_SETUP)
    return path
