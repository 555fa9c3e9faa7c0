"""Per-district population containers.

A :class:`District` owns two disjoint, insertion-ordered populations of
:class:`~district_games.ingest.schema.Person` records split by parity.
Removal is by ``person_id`` rather than object identity, so equal-looking
records never get confused with each other.
"""

from __future__ import annotations

from district_games.engine.errors import PopulationError
from district_games.ingest.schema import Parity, Person


class District:
    """An administrative unit holding an odd and an even population.

    A district stays viable while both populations are non-empty.
    """

    def __init__(self, district_id: int) -> None:
        self._district_id = district_id
        self._populations: dict[Parity, list[Person]] = {Parity.ODD: [], Parity.EVEN: []}

    def __repr__(self) -> str:
        return (
            f"District(district_id={self._district_id}, "
            f"odd={len(self.odd_population)}, even={len(self.even_population)})"
        )

    def __contains__(self, person: object) -> bool:
        """``True`` if a person with the same ``person_id`` sits in the matching population."""
        if not isinstance(person, Person):
            return False
        return any(p.person_id == person.person_id for p in self._populations[person.parity])

    @property
    def district_id(self) -> int:
        return self._district_id

    @property
    def odd_population(self) -> list[Person]:
        return self._populations[Parity.ODD]

    @property
    def even_population(self) -> list[Person]:
        return self._populations[Parity.EVEN]

    def population(self, parity: Parity) -> list[Person]:
        """Return the live container for *parity* (mutations are visible)."""
        return self._populations[parity]

    @property
    def is_viable(self) -> bool:
        """``True`` while both populations are non-empty."""
        return bool(self.odd_population) and bool(self.even_population)

    @property
    def size(self) -> int:
        return len(self.odd_population) + len(self.even_population)

    def add_person(self, person: Person) -> None:
        """Append *person* to the population matching its parity.

        Raises:
            PopulationError: If the person belongs to another district or is
                already present in this one.
        """
        if person.district_id != self._district_id:
            msg = f"Person {person.person_id} belongs to district {person.district_id}, not {self._district_id}"
            raise PopulationError(msg)
        if person in self:
            msg = f"Person {person.person_id} is already in district {self._district_id}"
            raise PopulationError(msg)
        self._populations[person.parity].append(person)

    def remove_person(self, person: Person) -> None:
        """Remove *person* (matched by ``person_id``) from its population.

        Raises:
            PopulationError: If the person is not present.
        """
        container = self._populations[person.parity]
        for idx, candidate in enumerate(container):
            if candidate.person_id == person.person_id:
                del container[idx]
                return
        msg = f"Person {person.person_id} is not in the {person.parity} population of district {self._district_id}"
        raise PopulationError(msg)
