"""Shared domain models for flight schedule ranking."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

AirportCode = str
CarrierCode = str
Route = Tuple[AirportCode, AirportCode]


@dataclass(frozen=True)
class Schedule:
    origin: AirportCode
    destination: AirportCode
    carrier: CarrierCode
    departure_time: datetime
    arrival_time: datetime

    @property
    def route(self) -> Route:
        return self.origin, self.destination


@dataclass(frozen=True)
class ScoredSchedule(Schedule):
    flight_hours: int
    score: float


@dataclass(frozen=True)
class FindFlightsQuery:
    origin: AirportCode
    destination: AirportCode
    carrier: CarrierCode | None = None
    max_hours: float | None = None
