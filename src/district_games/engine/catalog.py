"""Ordered holding list of districts that have not been admitted yet."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from district_games.engine.population import District


class DistrictCatalog:
    """Districts waiting for admission, in their original order."""

    def __init__(self, districts: Iterable[District] = ()) -> None:
        self._districts: list[District] = []
        for district in districts:
            self.add(district)

    def __iter__(self) -> Iterator[District]:
        return iter(list(self._districts))

    def __len__(self) -> int:
        return len(self._districts)

    def __contains__(self, district_id: object) -> bool:
        return any(d.district_id == district_id for d in self._districts)

    def add(self, district: District) -> None:
        """Append *district*; duplicate ids are rejected with ``ValueError``."""
        if district.district_id in self:
            msg = f"District {district.district_id} is already in the catalog"
            raise ValueError(msg)
        self._districts.append(district)

    def get(self, district_id: int) -> District | None:
        for district in self._districts:
            if district.district_id == district_id:
                return district
        return None

    def remove(self, district: District) -> None:
        """Drop *district* from the catalog; a no-op if it is not there."""
        self._districts = [d for d in self._districts if d.district_id != district.district_id]

    def district_ids(self) -> list[int]:
        return [d.district_id for d in self._districts]
