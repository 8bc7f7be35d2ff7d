"""Export helpers for scored schedules."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from whereto.core.models import Schedule, ScoredSchedule
from whereto.core.normalization import format_timestamp


def serialize_schedule(schedule: Schedule) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "origin": schedule.origin,
        "destination": schedule.destination,
        "carrier": schedule.carrier,
        "departureTime": format_timestamp(schedule.departure_time),
        "arrivalTime": format_timestamp(schedule.arrival_time),
    }
    if isinstance(schedule, ScoredSchedule):
        payload["flightHours"] = schedule.flight_hours
        payload["score"] = schedule.score
    return payload


def serialize_schedules(schedules: Iterable[Schedule]) -> List[Dict[str, Any]]:
    return [serialize_schedule(schedule) for schedule in schedules]


def serialize_codes(codes: Iterable[str]) -> List[str]:
    return sorted(codes)
