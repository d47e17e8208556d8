# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
One call per PeopleFinder field.

Each function queries PeopleFinder and returns the requested datum, or raises
the classified error (EmptyResultSet, ResultPositionOutOfBounds,
MultipleResults, FieldUndefined, TransportFailure).

    result_position  optional 1-based index of the desired result; 0 picks
                     the only result and fails if there is more than one
    field_index      optional 0-based index within the field's values
"""
from typing import Union

from peoplefinder.core.dependencies import get_field_selector
from peoplefinder.models.domain import Field


def get(field: Union[Field, str], query: str, result_position: int = 0, field_index: int = 0) -> str:
    return get_field_selector().select(field, query, result_position, field_index).unwrap()


def get_surname(query: str, result_position: int = 0, field_index: int = 0) -> str:
    return get(Field.SURNAME, query, result_position, field_index)


def get_givenname(query: str, result_position: int = 0, field_index: int = 0) -> str:
    return get(Field.GIVENNAME, query, result_position, field_index)


def get_fullname(query: str, result_position: int = 0, field_index: int = 0) -> str:
    return get(Field.FULLNAME, query, result_position, field_index)


def get_title(query: str, result_position: int = 0, field_index: int = 0) -> str:
    return get(Field.TITLE, query, result_position, field_index)


def get_dept(query: str, result_position: int = 0, field_index: int = 0) -> str:
    """Not defined for every person."""
    return get(Field.DEPT, query, result_position, field_index)


def get_affiliation(query: str, result_position: int = 0, field_index: int = 0) -> str:
    return get(Field.AFFILIATION, query, result_position, field_index)


def get_email(query: str, result_position: int = 0, field_index: int = 0) -> str:
    return get(Field.EMAIL, query, result_position, field_index)


def get_room(query: str, result_position: int = 0, field_index: int = 0) -> str:
    """Not defined for every person."""
    return get(Field.ROOM, query, result_position, field_index)


def get_building(query: str, result_position: int = 0, field_index: int = 0) -> str:
    """Not defined for every person."""
    return get(Field.BUILDING, query, result_position, field_index)


def get_campus(query: str, result_position: int = 0, field_index: int = 0) -> str:
    return get(Field.CAMPUS, query, result_position, field_index)


def get_id(query: str, result_position: int = 0, field_index: int = 0) -> str:
    """The id is a scalar; ``field_index`` is accepted but ignored."""
    return get(Field.ID, query, result_position, field_index)


def get_telephone(query: str, result_position: int = 0, field_index: int = 0) -> str:
    """Not defined for every person."""
    return get(Field.TELEPHONE, query, result_position, field_index)


def get_office(query: str, result_position: int = 0, field_index: int = 0) -> str:
    """Not defined for every person."""
    return get(Field.OFFICE, query, result_position, field_index)
