"""Whereto: rank flight schedules for a route."""

__version__ = "0.1.0"
