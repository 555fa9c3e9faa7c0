"""Setup file parsing.

Setup files are whitespace-separated token streams::

    <number of districts>
    <district id> ...
    <number of people>
    <first> <last> <birth month> <age> <district id> <effectiveness>   (per person)

Line breaks carry no meaning; only token order matters.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

from pydantic import ValidationError

from district_games.engine.catalog import DistrictCatalog
from district_games.engine.errors import DataFormatError
from district_games.engine.population import District
from district_games.ingest.schema import DistrictRecord, Person

logger = logging.getLogger(__name__)

_M = TypeVar("_M", DistrictRecord, Person)


@dataclass(frozen=True)
class GamesSetup:
    """Parsed setup data, in input order."""

    districts: list[DistrictRecord] = field(default_factory=list)
    people: list[Person] = field(default_factory=list)


class _Tokens:
    """Cursor over the token stream with descriptive failures."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())
        self._position = 0

    def next_str(self, what: str) -> str:
        try:
            token = next(self._tokens)
        except StopIteration:
            msg = f"Unexpected end of input while reading {what} (token {self._position + 1})"
            raise DataFormatError(msg) from None
        self._position += 1
        return token

    def next_int(self, what: str) -> int:
        token = self.next_str(what)
        try:
            return int(token)
        except ValueError:
            msg = f"Expected an integer for {what} at token {self._position}, got {token!r}"
            raise DataFormatError(msg) from None

    def remaining(self) -> list[str]:
        return list(self._tokens)


def parse_setup(text: str) -> GamesSetup:
    """Parse setup *text* into records.

    Raises:
        DataFormatError: If the token stream is truncated, holds a
            non-integer where an integer is required, has trailing data, or
            a record fails validation.
    """
    tokens = _Tokens(text)

    n_districts = tokens.next_int("the number of districts")
    if n_districts < 0:
        msg = f"Number of districts must be non-negative, got {n_districts}"
        raise DataFormatError(msg)
    districts = [_validate(DistrictRecord, district_id=tokens.next_int("a district id")) for _ in range(n_districts)]

    n_people = tokens.next_int("the number of people")
    if n_people < 0:
        msg = f"Number of people must be non-negative, got {n_people}"
        raise DataFormatError(msg)
    people: list[Person] = []
    for person_id in range(n_people):
        people.append(
            _validate(
                Person,
                person_id=person_id,
                first_name=tokens.next_str("a first name"),
                last_name=tokens.next_str("a last name"),
                birth_month=tokens.next_int("a birth month"),
                age=tokens.next_int("an age"),
                district_id=tokens.next_int("a person's district id"),
                effectiveness=tokens.next_int("an effectiveness score"),
            )
        )

    leftover = tokens.remaining()
    if leftover:
        msg = f"Unexpected trailing data after {n_people} people: {' '.join(leftover[:6])}"
        raise DataFormatError(msg)

    return GamesSetup(districts=districts, people=people)


def load_setup(path: Path) -> GamesSetup:
    """Read and parse the setup file at *path*.

    Raises:
        FileNotFoundError: If *path* does not exist.
        DataFormatError: See :func:`parse_setup`.
    """
    if not path.exists():
        msg = f"Setup file not found: {path}"
        raise FileNotFoundError(msg)
    setup = parse_setup(path.read_text())
    logger.info("loaded %d districts and %d people from %s", len(setup.districts), len(setup.people), path)
    return setup


def build_catalog(setup: GamesSetup) -> DistrictCatalog:
    """Create the districts of *setup* and distribute its people by parity.

    People whose district is not listed are skipped with a warning.

    Raises:
        DataFormatError: If a district id is listed twice.
    """
    catalog = DistrictCatalog()
    for record in setup.districts:
        try:
            catalog.add(District(record.district_id))
        except ValueError as exc:
            raise DataFormatError(str(exc)) from exc

    skipped = 0
    for person in setup.people:
        district = catalog.get(person.district_id)
        if district is None:
            skipped += 1
            continue
        district.add_person(person)
    if skipped:
        logger.warning("%d people reference unknown districts and were skipped", skipped)
    return catalog


def _validate(model: type[_M], **values: object) -> _M:
    try:
        return model.model_validate(values)
    except ValidationError as exc:
        msg = f"Invalid {model.__name__} record {values}: {exc.errors()[0]['msg']}"
        raise DataFormatError(msg) from exc
