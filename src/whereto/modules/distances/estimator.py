"""Memoized airport-pair distance lookups."""

from __future__ import annotations

import logging
from typing import Optional

from whereto.adapters.storage.cache import MemoCache
from whereto.core.models import Route
from whereto.modules.distances.sources import DistanceSource, RandomDistanceSource

LOG = logging.getLogger(__name__)


class DistanceEstimator:
    """Distances keyed by ordered airport pair, cached for the process lifetime.

    ``(A, B)`` and ``(B, A)`` are separate entries and each is computed on its
    own first lookup. With ``symmetric=True`` the pair is sorted before the
    lookup so both directions share one entry.
    """

    def __init__(
        self,
        source: Optional[DistanceSource] = None,
        *,
        symmetric: bool = False,
        cache: Optional[MemoCache[Route, float]] = None,
    ) -> None:
        self.source = source or RandomDistanceSource()
        self.symmetric = symmetric
        self.cache: MemoCache[Route, float] = cache if cache is not None else MemoCache()

    def _key(self, code_a: str, code_b: str) -> Route:
        if self.symmetric and code_b < code_a:
            return code_b, code_a
        return code_a, code_b

    def _compute(self, key: Route) -> float:
        distance = self.source(*key)
        if distance < 0:
            raise ValueError(f"distance source returned {distance} for {key[0]}-{key[1]}")
        LOG.debug("Computed distance %s-%s = %s", key[0], key[1], distance)
        return distance

    def distance_between(self, code_a: str, code_b: str) -> float:
        key = self._key(code_a, code_b)
        return self.cache.get_or_compute(key, lambda: self._compute(key))
