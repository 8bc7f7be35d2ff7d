"""Search outcomes and validation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from whereto.core.errors import NotFoundError, ValidationError, WheretoError
from whereto.core.models import FindFlightsQuery, ScoredSchedule


@dataclass(frozen=True)
class QueryValidation:
    query: Optional[FindFlightsQuery] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_error(self) -> WheretoError:
        return ValidationError(self.error or "Invalid query")


@dataclass
class SearchOutcome:
    query: FindFlightsQuery
    schedules: List[ScoredSchedule] = field(default_factory=list)
    route_found: bool = True

    @property
    def ok(self) -> bool:
        return self.route_found

    def as_error(self) -> WheretoError:
        return NotFoundError("No flight schedules available")
