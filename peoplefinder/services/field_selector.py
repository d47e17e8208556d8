# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Field selection over a PeopleFinder result set.

Checks run in a fixed order so the caller gets the earliest applicable
failure:

    empty ─► position out of bounds ─► ambiguous default ─► field lookup

The bounds check compares the raw 1-based position, before it is
decremented, and runs before the ambiguity check.
"""

from dataclasses import dataclass
from typing import Optional, Union

from peoplefinder.core.errors import (
    DirectoryRequestError,
    EmptyResultSet,
    ErrorKind,
    FieldUndefined,
    MultipleResults,
    PeopleFinderError,
    ResultPositionOutOfBounds,
    TransportFailure,
)
from peoplefinder.core.logging import get_logger
from peoplefinder.metrics import SELECTIONS
from peoplefinder.models.domain import Field, ResultSet
from peoplefinder.services.directory_client import DirectoryClient

logger = get_logger(__name__)


@dataclass(frozen=True)
class SelectionRequest:
    field: Field
    query: str
    result_position: int = 0
    field_index: int = 0


@dataclass(frozen=True)
class Selection:
    """Outcome of a selection: exactly one of ``value`` / ``error`` is set."""
    request: SelectionRequest
    value: Optional[str] = None
    error: Optional[PeopleFinderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        return self.value


def _fail(error_cls, request: SelectionRequest) -> Selection:
    return Selection(
        request=request,
        error=error_cls(request.field, request.query, request.result_position, request.field_index),
    )


def select_from(result_set: ResultSet, request: SelectionRequest) -> Selection:
    """Pick one datum out of an already-fetched result set."""
    total = result_set.total_results_available
    position = request.result_position

    if total == 0:
        return _fail(EmptyResultSet, request)

    if position > total:
        return _fail(ResultPositionOutOfBounds, request)

    if position == 0 and total > 1:
        return _fail(MultipleResults, request)

    # 1-based → 0-based; an unspecified position addresses the sole result
    if position != 0:
        position -= 1

    try:
        value = result_set.person(position).value(request.field, request.field_index)
    except LookupError:
        return _fail(FieldUndefined, request)
    return Selection(request=request, value=value)


class FieldSelector:
    """Fetches a result set and selects one field from it. Stateless across calls."""

    def __init__(self, client: DirectoryClient) -> None:
        self._client = client

    @property
    def client(self) -> DirectoryClient:
        return self._client

    def search(self, query: str) -> ResultSet:
        return self._client.search(query)

    def select(
        self,
        field: Union[Field, str],
        query: str,
        result_position: int = 0,
        field_index: int = 0,
    ) -> Selection:
        """Fetch ``query`` and select one datum.

        ``field`` may be a Field or its wire name; an unknown name raises
        ValueError before any request is made. Every lookup outcome, including
        transport failures, comes back as a Selection.
        """
        field = Field(field)
        request = SelectionRequest(field, query, result_position, field_index)
        try:
            result_set = self._client.search(query)
        except DirectoryRequestError as exc:
            selection = Selection(
                request=request,
                error=TransportFailure(
                    request.field, query, result_position, field_index, cause=exc
                ),
            )
        else:
            selection = select_from(result_set, request)

        self._record(selection)
        return selection

    def _record(self, selection: Selection) -> None:
        request = selection.request
        outcome = "ok" if selection.ok else selection.kind.value
        SELECTIONS.labels(field=request.field.value, outcome=outcome).inc()
        if selection.ok:
            logger.debug("Selected %s for query=%s", request.field.value, request.query)
        elif selection.kind is ErrorKind.TRANSPORT_FAILURE:
            logger.warning("%s", selection.error)
        else:
            logger.info("%s", selection.error)
