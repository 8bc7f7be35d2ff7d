"""Flight search wiring: dataset -> route filter -> ranking."""

from __future__ import annotations

import logging
from typing import FrozenSet, Optional

from whereto.adapters.io.providers import JsonScheduleProvider, ScheduleProvider
from whereto.core.config import Settings, load_settings
from whereto.core.models import FindFlightsQuery
from whereto.modules.directory.catalog import DirectoryCache
from whereto.modules.distances.estimator import DistanceEstimator
from whereto.modules.distances.sources import CoordinateDistanceSource, DistanceSource, RandomDistanceSource
from whereto.modules.flights.routes import schedules_for_route
from whereto.modules.flights.scoring import rank
from whereto.pipeline.results import SearchOutcome

LOG = logging.getLogger(__name__)


class FlightSearch:
    def __init__(
        self,
        provider: ScheduleProvider,
        estimator: Optional[DistanceEstimator] = None,
        directory: Optional[DirectoryCache] = None,
    ) -> None:
        self.provider = provider
        self.estimator = estimator or DistanceEstimator()
        self.directory = directory or DirectoryCache(provider)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "FlightSearch":
        settings = settings or load_settings()
        source: DistanceSource
        if settings.coordinates_file is not None:
            source = CoordinateDistanceSource.from_json(settings.coordinates_file)
        else:
            source = RandomDistanceSource(settings.distance_min, settings.distance_max)
        return cls(
            provider=JsonScheduleProvider(settings.data_file),
            estimator=DistanceEstimator(source, symmetric=settings.symmetric_distances),
        )

    def find_flights(self, query: FindFlightsQuery) -> SearchOutcome:
        all_schedules = self.provider.fetch_all_schedules()
        matching = schedules_for_route(all_schedules, query.origin, query.destination)
        if not matching:
            LOG.info("No schedules for %s-%s", query.origin, query.destination)
            return SearchOutcome(query=query, route_found=False)
        ranked = rank(
            matching,
            self.estimator,
            preferred_carrier=query.carrier,
            max_hours=query.max_hours,
        )
        LOG.debug(
            "Ranked %d of %d schedules for %s-%s",
            len(ranked),
            len(matching),
            query.origin,
            query.destination,
        )
        return SearchOutcome(query=query, schedules=ranked)

    def list_airports(self) -> FrozenSet[str]:
        return self.directory.list_airports()

    def list_carriers(self) -> FrozenSet[str]:
        return self.directory.list_carriers()
