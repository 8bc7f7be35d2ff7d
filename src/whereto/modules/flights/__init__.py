"""Flights module."""

from whereto.modules.flights.routes import schedules_for_route
from whereto.modules.flights.scoring import rank, score_schedule

__all__ = ["rank", "schedules_for_route", "score_schedule"]
