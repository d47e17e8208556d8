# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: PeopleFinder lookups.
Thin HTTP layer: delegates ALL selection logic to FieldSelector.
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from peoplefinder.core.dependencies import get_field_selector
from peoplefinder.core.errors import DirectoryRequestError, ErrorKind
from peoplefinder.models.domain import Field
from peoplefinder.schemas import ErrorResponse, LookupResponse, PersonOut, SearchResponse
from peoplefinder.services.field_selector import FieldSelector

router = APIRouter(prefix="/api/v1", tags=["PeopleFinder"])

STATUS_BY_KIND = {
    ErrorKind.EMPTY_RESULT_SET: 404,
    ErrorKind.FIELD_UNDEFINED: 404,
    ErrorKind.RESULT_POSITION_OUT_OF_BOUNDS: 400,
    ErrorKind.MULTIPLE_RESULTS: 409,
    ErrorKind.TRANSPORT_FAILURE: 502,
}


@router.get("/fields", response_model=list[str])
def list_fields():
    return [f.value for f in Field]


@router.get("/people/search", response_model=SearchResponse,
            responses={502: {"model": ErrorResponse}})
def search_people(
    q: str = Query(..., description="PeopleFinder query string"),
    selector: FieldSelector = Depends(get_field_selector),
):
    """Every record a query matched, so callers can pick a result position."""
    try:
        result_set = selector.search(q)
    except DirectoryRequestError as exc:
        raise HTTPException(status_code=502, detail=f"PeopleFinder request failed: {exc}")
    return SearchResponse(
        query=q,
        total_results_available=result_set.total_results_available,
        total_results_returned=result_set.total_results_returned,
        first_result_position=result_set.first_result_position,
        search_time=result_set.search_time,
        people=[
            PersonOut(position=i, fields=p.as_fields(), malformed=sorted(p.malformed))
            for i, p in enumerate(result_set.people, start=1)
        ],
    )


@router.get(
    "/people/{field}",
    response_model=LookupResponse,
    responses={code: {"model": ErrorResponse} for code in (400, 404, 409, 502)},
)
def lookup_field(
    field: Field,
    q: str = Query(..., description="PeopleFinder query string"),
    result_position: int = Query(default=0, ge=0, description="1-based result; 0 = the only result"),
    field_index: int = Query(default=0, ge=0, description="0-based entry within the field"),
    selector: FieldSelector = Depends(get_field_selector),
):
    """Extract a single datum for the person matched by ``q``."""
    selection = selector.select(field, q, result_position, field_index)
    if not selection.ok:
        raise HTTPException(
            status_code=STATUS_BY_KIND[selection.kind],
            detail=selection.error.as_detail(),
        )
    return LookupResponse(
        field=field.value, query=q,
        result_position=result_position, field_index=field_index,
        value=selection.value,
    )
