"""
Euclidean strategy for numeric vectors.

The classic K-means setting: distance is the Euclidean norm of the
difference and the centroid is the componentwise mean.
"""

from typing import Any, Sequence

from ..base.interfaces import ClusteringStrategy
from ..distances.euclidean import euclidean_distance
from ..updates.mean import mean_centroid


class EuclideanStrategy(ClusteringStrategy):
    """Euclidean distance with mean centroids."""

    def distance(self, a: Any, b: Any) -> float:
        return euclidean_distance(a, b)

    def centroid(self, points: Sequence[Any], indices: Sequence[int], size: int) -> Any:
        return mean_centroid(points, indices, size)

    def __repr__(self) -> str:
        return "EuclideanStrategy()"
