"""Distance functions for the clustering engine."""

from .euclidean import (
    as_tensor,
    euclidean_distance,
    squared_euclidean_distance,
    weighted_euclidean
)

__all__ = [
    'as_tensor',
    'euclidean_distance',
    'squared_euclidean_distance',
    'weighted_euclidean'
]
