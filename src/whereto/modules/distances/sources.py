"""Distance sources backing the distance estimator."""

from __future__ import annotations

import json
import math
import random
from pathlib import Path
from typing import Mapping, Optional, Protocol, Tuple

from whereto.core.errors import ValidationError

EARTH_RADIUS_KM = 6371


class DistanceSource(Protocol):
    def __call__(self, origin: str, destination: str) -> float:
        ...


class RandomDistanceSource:
    """Stand-in source returning a bounded pseudo-random integer distance."""

    def __init__(self, low: int = 200, high: int = 500, seed: Optional[int] = None) -> None:
        if low < 0 or high < low:
            raise ValueError(f"invalid distance range [{low}, {high}]")
        self.low = low
        self.high = high
        self._rng = random.Random(seed)

    def __call__(self, origin: str, destination: str) -> float:
        return self._rng.randint(self.low, self.high)


class CoordinateDistanceSource:
    """Great-circle distance in km between airports with known coordinates."""

    def __init__(self, coordinates: Mapping[str, Tuple[float, float]]) -> None:
        self.coordinates = dict(coordinates)

    @classmethod
    def from_json(cls, path: Path) -> "CoordinateDistanceSource":
        """Load a JSON object mapping airport code to [lat, lon]."""
        with Path(path).open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        if not isinstance(payload, dict):
            raise ValueError(f"{path} must hold a JSON object of airport coordinates")
        coordinates = {}
        for code, point in payload.items():
            if not isinstance(point, (list, tuple)) or len(point) != 2:
                raise ValueError(f"coordinates for {code} must be [lat, lon]")
            coordinates[str(code)] = (float(point[0]), float(point[1]))
        return cls(coordinates)

    @staticmethod
    def _haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
        dlon = lon2 - lon1
        dlat = lat2 - lat1
        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))

    def __call__(self, origin: str, destination: str) -> float:
        missing = [code for code in (origin, destination) if code not in self.coordinates]
        if missing:
            raise ValidationError(f"No coordinates for airport(s): {', '.join(missing)}")
        lat1, lon1 = self.coordinates[origin]
        lat2, lon2 = self.coordinates[destination]
        return self._haversine(lat1, lon1, lat2, lon2)
