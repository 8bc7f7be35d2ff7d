from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from whereto.core.models import Schedule

T0 = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)


def make_schedule(
    carrier: str = "XX",
    hours: float = 5,
    origin: str = "LOS",
    destination: str = "ABV",
    departure: datetime = T0,
) -> Schedule:
    return Schedule(
        origin=origin,
        destination=destination,
        carrier=carrier,
        departure_time=departure,
        arrival_time=departure + timedelta(hours=hours),
    )


class FixedDistanceSource:
    def __init__(self, distance: float = 300, per_route: dict | None = None):
        self.distance = distance
        self.per_route = per_route or {}
        self.calls: list[tuple[str, str]] = []

    def __call__(self, origin: str, destination: str) -> float:
        self.calls.append((origin, destination))
        return self.per_route.get((origin, destination), self.distance)


@pytest.fixture
def distance_source() -> FixedDistanceSource:
    return FixedDistanceSource()
