"""Airport and carrier directories derived from the schedule dataset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable

from whereto.adapters.io.providers import ScheduleProvider
from whereto.adapters.storage.cache import MemoCache
from whereto.core.models import Schedule

LOG = logging.getLogger(__name__)

_SNAPSHOT_KEY = "directory"


@dataclass(frozen=True)
class DirectorySnapshot:
    airports: FrozenSet[str]
    carriers: FrozenSet[str]

    @staticmethod
    def from_schedules(schedules: Iterable[Schedule]) -> "DirectorySnapshot":
        airports = set()
        carriers = set()
        for schedule in schedules:
            airports.add(schedule.origin)
            airports.add(schedule.destination)
            carriers.add(schedule.carrier)
        return DirectorySnapshot(airports=frozenset(airports), carriers=frozenset(carriers))


class DirectoryCache:
    """Unique airport and carrier codes, scanned once and never invalidated.

    Both sets come from a single provider call on first use. Concurrent first
    calls may scan twice; the first snapshot stored is the one returned.
    """

    def __init__(self, provider: ScheduleProvider) -> None:
        self.provider = provider
        self._cache: MemoCache[str, DirectorySnapshot] = MemoCache()

    def _scan(self) -> DirectorySnapshot:
        snapshot = DirectorySnapshot.from_schedules(self.provider.fetch_all_schedules())
        LOG.info(
            "Directory built: %d airports, %d carriers",
            len(snapshot.airports),
            len(snapshot.carriers),
        )
        return snapshot

    def snapshot(self) -> DirectorySnapshot:
        return self._cache.get_or_compute(_SNAPSHOT_KEY, self._scan)

    def list_airports(self) -> FrozenSet[str]:
        return self.snapshot().airports

    def list_carriers(self) -> FrozenSet[str]:
        return self.snapshot().carriers
