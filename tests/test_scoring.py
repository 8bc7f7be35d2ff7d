from __future__ import annotations

import pytest

from conftest import FixedDistanceSource, make_schedule
from whereto.core.models import ScoredSchedule
from whereto.modules.distances.estimator import DistanceEstimator
from whereto.modules.flights.scoring import carrier_factor, rank, score_schedule


def _estimator(distance: float = 300) -> DistanceEstimator:
    return DistanceEstimator(FixedDistanceSource(distance))


def test_preferred_carrier_discount_orders_ties_on_duration():
    schedules = [make_schedule("X", 5), make_schedule("Y", 5)]

    ranked = rank(schedules, _estimator(300), preferred_carrier="Y")

    assert [item.carrier for item in ranked] == ["Y", "X"]
    assert ranked[0].score == pytest.approx(304.5)
    assert ranked[1].score == pytest.approx(305.0)
    assert all(item.flight_hours == 5 for item in ranked)


def test_rank_without_cap_keeps_every_schedule_sorted():
    schedules = [make_schedule("A", 7), make_schedule("B", 2), make_schedule("C", 4)]

    ranked = rank(schedules, _estimator())

    assert len(ranked) == len(schedules)
    assert [item.carrier for item in ranked] == ["B", "C", "A"]
    scores = [item.score for item in ranked]
    assert scores == sorted(scores)


def test_equal_scores_keep_input_order():
    schedules = [make_schedule(carrier, 3) for carrier in ("A", "B", "C", "D")]

    ranked = rank(schedules, _estimator())

    assert [item.carrier for item in ranked] == ["A", "B", "C", "D"]


def test_max_hours_is_inclusive():
    schedules = [make_schedule("LONG", 10), make_schedule("EDGE", 8), make_schedule("SHORT", 3)]

    ranked = rank(schedules, _estimator(), max_hours=8)

    assert [item.carrier for item in ranked] == ["SHORT", "EDGE"]


def test_zero_max_hours_is_a_real_cap():
    schedules = [make_schedule("A", 1), make_schedule("B", 0.5)]

    ranked = rank(schedules, _estimator(), max_hours=0)

    assert [item.carrier for item in ranked] == ["B"]


def test_negative_flight_hours_are_scored_not_rejected():
    schedules = [make_schedule("FWD", 2), make_schedule("BACK", -3)]

    ranked = rank(schedules, _estimator(300), max_hours=1)

    assert len(ranked) == 1
    assert ranked[0].carrier == "BACK"
    assert ranked[0].flight_hours == -3
    assert ranked[0].score == pytest.approx(297.0)


def test_partial_hours_truncate():
    scored = score_schedule(make_schedule("A", 5.9), distance=100)
    assert scored.flight_hours == 5

    scored = score_schedule(make_schedule("A", -1.5), distance=100)
    assert scored.flight_hours == -1


def test_distance_looked_up_once_per_batch():
    source = FixedDistanceSource(250)
    schedules = [make_schedule(carrier, 4) for carrier in ("A", "B", "C")]

    ranked = rank(schedules, DistanceEstimator(source))

    assert source.calls == [("LOS", "ABV")]
    assert all(item.score == pytest.approx(254.0) for item in ranked)


def test_empty_batch_returns_empty_without_distance_lookup():
    source = FixedDistanceSource()
    assert rank([], DistanceEstimator(source)) == []
    assert source.calls == []


def test_scoring_returns_new_records():
    original = make_schedule("A", 5)

    ranked = rank([original], _estimator())

    assert isinstance(ranked[0], ScoredSchedule)
    assert ranked[0] is not original
    assert not hasattr(original, "score")
    assert ranked[0].departure_time == original.departure_time


def test_carrier_factor_without_preference():
    assert carrier_factor("A", None) == 1.0
    assert carrier_factor("A", "A") == 0.9
    assert carrier_factor("A", "a") == 1.0
