"""Pydantic v2 schema models for the setup records.

Defines the immutable input records, ``DistrictRecord`` and ``Person``,
that the setup collaborator hands to the engine.  A ``Person`` never
changes after creation; duels only move it between population
containers.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field

#: Inclusive lower bound of the eligibility (tessera) age range.
ELIGIBLE_MIN_AGE: int = 12

#: Exclusive upper bound of the eligibility (tessera) age range.
ELIGIBLE_MAX_AGE: int = 18


class Parity(StrEnum):
    """Population a person belongs to, derived from birth month."""

    ODD = "odd"
    EVEN = "even"


class DistrictRecord(BaseModel):
    """A district as listed in the setup data."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    district_id: int = Field(..., ge=0, alias="DistrictID")


class Person(BaseModel):
    """A single person living in a district.

    ``person_id`` is the stable handle used for identity-based removal from
    population containers; the loader assigns it in input order.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    person_id: int = Field(..., ge=0, alias="PersonID")
    first_name: str = Field(..., min_length=1, alias="FirstName")
    last_name: str = Field(..., min_length=1, alias="LastName")
    birth_month: int = Field(..., ge=1, le=12, alias="BirthMonth")
    age: int = Field(..., ge=0, alias="Age")
    district_id: int = Field(..., ge=0, alias="DistrictID")
    effectiveness: int = Field(..., alias="Effectiveness")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def eligible(self) -> bool:
        """``True`` when the person gets selection priority (12 <= age < 18)."""
        return ELIGIBLE_MIN_AGE <= self.age < ELIGIBLE_MAX_AGE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def parity(self) -> Parity:
        """Odd or even population, by birth month."""
        return Parity.EVEN if self.birth_month % 2 == 0 else Parity.ODD

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
