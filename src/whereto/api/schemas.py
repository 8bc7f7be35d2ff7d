"""Request schemas for the whereto API."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from whereto.core.models import FindFlightsQuery
from whereto.pipeline.results import QueryValidation

_REQUIRED_STRINGS = ("origin", "destination", "carrier")


class FindFlightsParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    origin: StrictStr = Field(..., min_length=1)
    destination: StrictStr = Field(..., min_length=1)
    carrier: StrictStr = Field(..., min_length=1)
    max_hours: Optional[float] = Field(None, allow_inf_nan=False)

    @field_validator("max_hours", mode="before")
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_query(self) -> FindFlightsQuery:
        return FindFlightsQuery(
            origin=self.origin,
            destination=self.destination,
            carrier=self.carrier,
            max_hours=self.max_hours,
        )


class ScheduleSelection(BaseModel):
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    carrier: str = Field(..., min_length=1)
    departureTime: str
    arrivalTime: str


class SaveSelectionPayload(BaseModel):
    selections: List[ScheduleSelection] = Field(..., min_length=1)


def _error_message(field_name: str) -> str:
    if field_name in _REQUIRED_STRINGS:
        return f"{field_name} is required and must be string"
    return f"{field_name} must be a number"


def validate_find_flights(params: Mapping[str, Any]) -> QueryValidation:
    """Check raw query parameters, returning the query or the first error."""
    try:
        parsed = FindFlightsParams.model_validate(dict(params))
    except PydanticValidationError as exc:
        failed = {str(error["loc"][0]) for error in exc.errors() if error.get("loc")}
        for name in _REQUIRED_STRINGS + ("max_hours",):
            if name in failed:
                return QueryValidation(error=_error_message(name))
        return QueryValidation(error="Invalid query parameters")
    return QueryValidation(query=parsed.to_query())
