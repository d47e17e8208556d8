# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas: API contract definitions.
Used ONLY at the controller (HTTP) boundary.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LookupResponse(BaseModel):
    field: str = Field(..., examples=["surname"])
    query: str = Field(..., examples=["jsmith"])
    result_position: int = Field(..., ge=0, examples=[0])
    field_index: int = Field(..., ge=0, examples=[0])
    value: str = Field(..., examples=["Smith"])


class PersonOut(BaseModel):
    position: int
    fields: Dict[str, Any]
    malformed: List[str] = []


class SearchResponse(BaseModel):
    query: str
    total_results_available: int
    total_results_returned: Optional[int] = None
    first_result_position: Optional[int] = None
    search_time: Optional[Any] = None
    people: List[PersonOut]


class ErrorDetail(BaseModel):
    error: str
    message: str
    field: Optional[str] = None
    query: Optional[str] = None
    result_position: Optional[int] = None
    field_index: Optional[int] = None


class ErrorResponse(BaseModel):
    detail: ErrorDetail
