# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: the PeopleFinder result set, NO FastAPI dependency.

Wire shape of a response body:

    resultSet
        search_time
        totalResultsAvailable
        totalResultsReturned
        firstResultPosition
        result_serial
        result[]
            surname[] givenname[] fullname[] title[] dept[]* affiliation[]
            email[] room[]* building[]* campus[] id telephone[]* office[]*

Keys marked * are only present for some people. Lists almost never hold
more than one entry.
"""

from enum import Enum
from typing import Any, List, Optional, Set, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field as PydanticField,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)


class Field(str, Enum):
    """Every datum a PeopleFinder record can carry."""
    SURNAME = "surname"
    GIVENNAME = "givenname"
    FULLNAME = "fullname"
    TITLE = "title"
    DEPT = "dept"
    AFFILIATION = "affiliation"
    EMAIL = "email"
    ROOM = "room"
    BUILDING = "building"
    CAMPUS = "campus"
    ID = "id"
    TELEPHONE = "telephone"
    OFFICE = "office"


_STRING_LIST = TypeAdapter(List[StrictStr])
_SCALAR_ID = TypeAdapter(Union[StrictStr, StrictInt])


class Person(BaseModel):
    """One matched record. Each key is decoded on its own; bad shapes land in ``malformed``."""
    surname: Optional[List[str]] = None
    givenname: Optional[List[str]] = None
    fullname: Optional[List[str]] = None
    title: Optional[List[str]] = None
    dept: Optional[List[str]] = None
    affiliation: Optional[List[str]] = None
    email: Optional[List[str]] = None
    room: Optional[List[str]] = None
    building: Optional[List[str]] = None
    campus: Optional[List[str]] = None
    id: Optional[str] = None
    telephone: Optional[List[str]] = None
    office: Optional[List[str]] = None
    malformed: Set[str] = PydanticField(default_factory=set)

    @classmethod
    def from_record(cls, record: Any) -> "Person":
        if isinstance(record, Person):
            return record
        if not isinstance(record, dict):
            return cls(malformed={f.value for f in Field})

        decoded: dict[str, Any] = {}
        malformed: set[str] = set()
        for field in Field:
            if field.value not in record:
                continue
            raw = record[field.value]
            try:
                if field is Field.ID:
                    decoded[field.value] = str(_SCALAR_ID.validate_python(raw))
                else:
                    decoded[field.value] = _STRING_LIST.validate_python(raw)
            except ValidationError:
                malformed.add(field.value)
        return cls(malformed=malformed, **decoded)

    def value(self, field: Field, field_index: int = 0) -> str:
        """Return one datum. KeyError if absent or malformed, IndexError if out of range."""
        if field.value in self.malformed:
            raise KeyError(f"'{field.value}' has an unexpected shape")
        raw = getattr(self, field.value)
        if raw is None:
            raise KeyError(f"'{field.value}' is not defined")
        if field is Field.ID:
            return raw
        if field_index < 0 or field_index >= len(raw):
            raise IndexError(f"'{field.value}' has no entry {field_index}")
        return raw[field_index]

    def as_fields(self) -> dict[str, Any]:
        """Well-formed keys only, keyed by wire name."""
        return {
            f.value: getattr(self, f.value)
            for f in Field
            if getattr(self, f.value) is not None
        }


class ResultSet(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    search_time: Optional[Any] = None
    total_results_available: int = PydanticField(..., ge=0, alias="totalResultsAvailable")
    total_results_returned: Optional[int] = PydanticField(default=None, alias="totalResultsReturned")
    first_result_position: Optional[int] = PydanticField(default=None, alias="firstResultPosition")
    result_serial: Optional[Any] = None
    people: List[Person] = PydanticField(default_factory=list, alias="result")

    @field_validator("total_results_returned", "first_result_position", mode="before")
    @classmethod
    def lenient_counts(cls, v: Any) -> Optional[int]:
        # Informational only; a bad value must not fail the whole lookup.
        try:
            return int(v) if v is not None else None
        except (TypeError, ValueError):
            return None

    @field_validator("people", mode="before")
    @classmethod
    def decode_people(cls, v: Any) -> List[Person]:
        if not isinstance(v, list):
            return []
        return [Person.from_record(record) for record in v]

    def person(self, position: int) -> Person:
        """0-based access into the returned records."""
        if position < 0 or position >= len(self.people):
            raise IndexError(f"no result at position {position}")
        return self.people[position]


class DirectoryResponse(BaseModel):
    """Top-level body returned by the PeopleFinder JSON endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    result_set: ResultSet = PydanticField(..., alias="resultSet")
