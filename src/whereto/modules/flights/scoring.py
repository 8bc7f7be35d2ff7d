"""Scoring and ranking of same-route flight schedules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from whereto.core.models import Schedule, ScoredSchedule
from whereto.core.normalization import whole_hours_between
from whereto.modules.distances.estimator import DistanceEstimator

PREFERRED_CARRIER_FACTOR = 0.9
DEFAULT_CARRIER_FACTOR = 1.0


@dataclass(frozen=True)
class CarrierWeights:
    preferred: float = PREFERRED_CARRIER_FACTOR
    default: float = DEFAULT_CARRIER_FACTOR


def carrier_factor(
    carrier: str,
    preferred_carrier: Optional[str],
    weights: CarrierWeights | None = None,
) -> float:
    weights = weights or CarrierWeights()
    if preferred_carrier is not None and carrier == preferred_carrier:
        return weights.preferred
    return weights.default


def score_schedule(
    schedule: Schedule,
    distance: float,
    preferred_carrier: Optional[str] = None,
    weights: CarrierWeights | None = None,
) -> ScoredSchedule:
    flight_hours = whole_hours_between(schedule.departure_time, schedule.arrival_time)
    score = flight_hours * carrier_factor(schedule.carrier, preferred_carrier, weights) + distance
    return ScoredSchedule(
        origin=schedule.origin,
        destination=schedule.destination,
        carrier=schedule.carrier,
        departure_time=schedule.departure_time,
        arrival_time=schedule.arrival_time,
        flight_hours=flight_hours,
        score=score,
    )


def rank(
    schedules: Sequence[Schedule],
    estimator: DistanceEstimator,
    preferred_carrier: Optional[str] = None,
    max_hours: Optional[float] = None,
    weights: CarrierWeights | None = None,
) -> List[ScoredSchedule]:
    """Score a single-route batch and sort it best-first.

    All schedules must share the first schedule's origin and destination: the
    distance is looked up once and applied to every element. Schedules longer
    than ``max_hours`` are dropped (the bound is inclusive). Ties keep their
    input order.
    """
    if not schedules:
        return []
    first = schedules[0]
    distance = estimator.distance_between(first.origin, first.destination)

    scored = [score_schedule(schedule, distance, preferred_carrier, weights) for schedule in schedules]
    if max_hours is not None:
        scored = [item for item in scored if item.flight_hours <= max_hours]
    return sorted(scored, key=lambda item: item.score)
