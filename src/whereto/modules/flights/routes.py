"""Route filtering over the full schedule dataset."""

from __future__ import annotations

from typing import Iterable, List

from whereto.core.models import Schedule


def schedules_for_route(all_schedules: Iterable[Schedule], origin: str, destination: str) -> List[Schedule]:
    """Schedules flying exactly origin -> destination, in dataset order.

    An empty list is a valid answer; callers decide whether that is an error.
    """
    return [
        schedule
        for schedule in all_schedules
        if schedule.origin == origin and schedule.destination == destination
    ]
