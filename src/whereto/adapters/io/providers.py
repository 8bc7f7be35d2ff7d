"""Schedule data providers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Protocol

from whereto.core.errors import ProviderError
from whereto.core.models import Schedule
from whereto.core.normalization import parse_timestamp

LOG = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("origin", "destination", "carrier", "departureTime", "arrivalTime")


class ScheduleProvider(Protocol):
    def fetch_all_schedules(self) -> List[Schedule]:
        ...


def schedule_from_record(record: Dict[str, Any]) -> Schedule:
    if not isinstance(record, dict):
        raise ValueError(f"schedule record must be an object, got {type(record).__name__}")
    missing = [name for name in _REQUIRED_FIELDS if record.get(name) in (None, "")]
    if missing:
        raise ValueError(f"schedule record is missing {', '.join(missing)}")
    return Schedule(
        origin=str(record["origin"]),
        destination=str(record["destination"]),
        carrier=str(record["carrier"]),
        departure_time=parse_timestamp(record["departureTime"]),
        arrival_time=parse_timestamp(record["arrivalTime"]),
    )


def schedules_from_records(records: Iterable[Dict[str, Any]]) -> List[Schedule]:
    return [schedule_from_record(record) for record in records]


class JsonScheduleProvider:
    """Reads the full dataset from a JSON array on every call."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def fetch_all_schedules(self) -> List[Schedule]:
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
            if not isinstance(payload, list):
                raise ValueError("schedule dataset must be a JSON array")
            schedules = schedules_from_records(payload)
        except (OSError, ValueError) as exc:
            LOG.exception("Failed to read schedules from %s", self.path)
            raise ProviderError(f"Unable to load flight schedules: {exc}") from exc
        LOG.debug("Loaded %d schedules from %s", len(schedules), self.path)
        return schedules


class InMemoryScheduleProvider:
    def __init__(self, schedules: Iterable[Schedule]) -> None:
        self._schedules = list(schedules)
        self.calls = 0

    def fetch_all_schedules(self) -> List[Schedule]:
        self.calls += 1
        return list(self._schedules)
