"""Centroid computations for the clustering engine."""

from .mean import mean_centroid, rounded_mean_centroid

__all__ = [
    'mean_centroid',
    'rounded_mean_centroid'
]
