"""
genkmeans: generic, pluggable K-means clustering.

Clusters any indexable collection of values, given a distance function and
a centroid function for the value type. Ready-made strategies cover numeric
vectors (Euclidean distance, mean centroid) and RGB colors.

Example usage:
    >>> from genkmeans import KMeans, EuclideanStrategy
    >>>
    >>> points = [(0, 0), (0, 1), (10, 10), (10, 11), (10, 9)]
    >>> kmeans = KMeans(strategy=EuclideanStrategy(), initial_centroids=[0, 2])
    >>> clusters = kmeans.run(points, k=2)
    >>> [cluster.members for cluster in clusters]
    [(2, 3, 4), (0, 1)]

    >>> # Any point type works with two plain functions
    >>> kmeans = KMeans(distance_fn=lambda a, b: abs(a - b),
    ...                 centroid_fn=lambda pts, idx, n: sum(pts[i] for i in idx) / n,
    ...                 random_state=0)
    >>> clusters = kmeans.run([1.0, 1.2, 9.0, 9.5], k=2)
"""

__version__ = '0.1.0'

# Import main algorithms
from .algorithms.kmeans import KMeans
from .algorithms.builder import ClusteringBuilder, create_kmeans, create_color_kmeans

# Core data structures and contracts
from .base import (
    BaseKMeans,
    Cluster,
    IterationRecord,
    ClusteringStrategy,
    FunctionStrategy,
    IterationListener,
    ClusteringError,
    InvalidConfiguration,
    StrategyError,
    EmptyClusterError,
    NotFittedError,
    ConvergenceWarning
)

# Ready-made strategies
from .strategies import EuclideanStrategy, ColorStrategy
from .distances import euclidean_distance, squared_euclidean_distance
from .updates import mean_centroid, rounded_mean_centroid

# Reporting
from .visualization import (
    plot_clusters_2d,
    plot_convergence,
    format_clusters,
    PrintingListener
)

__all__ = [
    # Algorithms
    'KMeans',
    'BaseKMeans',

    # Builder
    'ClusteringBuilder',
    'create_kmeans',
    'create_color_kmeans',

    # Core data structures and contracts
    'Cluster',
    'IterationRecord',
    'ClusteringStrategy',
    'FunctionStrategy',
    'IterationListener',

    # Errors
    'ClusteringError',
    'InvalidConfiguration',
    'StrategyError',
    'EmptyClusterError',
    'NotFittedError',
    'ConvergenceWarning',

    # Strategies
    'EuclideanStrategy',
    'ColorStrategy',
    'euclidean_distance',
    'squared_euclidean_distance',
    'mean_centroid',
    'rounded_mean_centroid',

    # Visualization
    'plot_clusters_2d',
    'plot_convergence',
    'format_clusters',
    'PrintingListener',

    # Version
    '__version__'
]
