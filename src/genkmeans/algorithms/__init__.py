"""Clustering engine implementations."""

from .kmeans import KMeans
from .builder import ClusteringBuilder, create_kmeans, create_color_kmeans

__all__ = [
    'KMeans',
    'ClusteringBuilder',
    'create_kmeans',
    'create_color_kmeans'
]
