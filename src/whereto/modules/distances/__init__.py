"""Distances module."""

from whereto.modules.distances.estimator import DistanceEstimator
from whereto.modules.distances.sources import CoordinateDistanceSource, DistanceSource, RandomDistanceSource

__all__ = ["CoordinateDistanceSource", "DistanceEstimator", "DistanceSource", "RandomDistanceSource"]
