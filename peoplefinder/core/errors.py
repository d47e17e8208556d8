# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Error taxonomy for PeopleFinder lookups.

Every error carries the request that produced it (field, query, result
position, field index) so its message is diagnosable on its own:

    <reason> field=<name>; query=<value>; resultPosition=<n>; fieldIndex=<n>.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    EMPTY_RESULT_SET = "empty_result_set"
    RESULT_POSITION_OUT_OF_BOUNDS = "result_position_out_of_bounds"
    MULTIPLE_RESULTS = "multiple_results"
    FIELD_UNDEFINED = "field_undefined"
    TRANSPORT_FAILURE = "transport_failure"


class PeopleFinderError(Exception):
    """Base class; subclasses fix ``kind`` and ``reason``."""

    kind: ErrorKind
    reason: str = "PeopleFinder lookup failed."

    def __init__(self, field: Any, query: str, result_position: int, field_index: int,
                 reason: Optional[str] = None) -> None:
        self.field = getattr(field, "value", field)
        self.query = query
        self.result_position = result_position
        self.field_index = field_index
        if reason is not None:
            self.reason = reason
        super().__init__(self.parameterized_message())

    def parameterized_message(self) -> str:
        return (
            f"{self.reason} field={self.field}; query={self.query}; "
            f"resultPosition={self.result_position}; fieldIndex={self.field_index}."
        )

    def as_detail(self) -> Dict[str, Any]:
        return {
            "error": self.kind.value,
            "message": self.parameterized_message(),
            "field": self.field,
            "query": self.query,
            "result_position": self.result_position,
            "field_index": self.field_index,
        }


class EmptyResultSet(PeopleFinderError):
    kind = ErrorKind.EMPTY_RESULT_SET
    reason = "The result set was empty."


class ResultPositionOutOfBounds(PeopleFinderError):
    kind = ErrorKind.RESULT_POSITION_OUT_OF_BOUNDS
    reason = "The requested result position was greater than the number of results available."


class MultipleResults(PeopleFinderError):
    kind = ErrorKind.MULTIPLE_RESULTS
    reason = "The requested result position was default, and there was more than one result."


class FieldUndefined(PeopleFinderError):
    kind = ErrorKind.FIELD_UNDEFINED
    reason = "Field not defined in PeopleFinder for requested result."


class TransportFailure(PeopleFinderError):
    kind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, field: Any, query: str, result_position: int, field_index: int,
                 cause: BaseException) -> None:
        self.cause = cause
        # keep the message on one line; httpx status errors span several
        lines = str(cause).strip().splitlines()
        summary = lines[0].rstrip(".") if lines else type(cause).__name__
        super().__init__(
            field, query, result_position, field_index,
            reason=f"PeopleFinder request failed: {summary}.",
        )
        self.__cause__ = cause


class DirectoryRequestError(Exception):
    """Raised by the directory client when the endpoint cannot be queried or decoded."""
