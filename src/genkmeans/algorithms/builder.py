"""
Builder pattern for configuring K-means engines.

Provides a fluent interface for assembling a KMeans instance from a
strategy, an initialization mode, a stopping threshold and a listener.
"""

from typing import Any, Callable, Optional, Sequence, Union
import torch

from .kmeans import KMeans
from ..base.clustering_base import BaseKMeans, Listener
from ..base.interfaces import ClusteringStrategy, FunctionStrategy
from ..strategies import EuclideanStrategy, ColorStrategy


class ClusteringBuilder:
    """Fluent builder for K-means engines.

    Examples
    --------
    >>> kmeans = (ClusteringBuilder()
    ...     .with_euclidean_strategy()
    ...     .with_random_init(random_state=0)
    ...     .with_shift_convergence(0.001)
    ...     .with_error_scoring()
    ...     .build(n_clusters=4))

    >>> kmeans = (ClusteringBuilder()
    ...     .with_functions(my_distance, my_centroid)
    ...     .with_fixed_init([0, 10, 20])
    ...     .build(n_clusters=3))
    """

    def __init__(self):
        """Initialize builder with defaults."""
        self._strategy: ClusteringStrategy = EuclideanStrategy()
        self._initial_centroids: Optional[Sequence[int]] = None
        self._random_state = None
        self._init_method = 'rejection'
        self._min_centroid_shift = BaseKMeans.DEFAULT_MIN_CENTROID_SHIFT
        self._compute_error = False
        self._empty_cluster = 'raise'
        self._max_iter: Optional[int] = None
        self._listener: Optional[Listener] = None
        self._verbose = 0

    def with_strategy(self, strategy: ClusteringStrategy) -> 'ClusteringBuilder':
        """Set the distance/centroid strategy."""
        self._strategy = strategy
        return self

    def with_functions(self, distance_fn: Callable[[Any, Any], float],
                       centroid_fn: Callable[[Sequence[Any], Sequence[int], int], Any]) -> 'ClusteringBuilder':
        """Use two plain functions as the strategy."""
        return self.with_strategy(FunctionStrategy(distance_fn, centroid_fn))

    def with_euclidean_strategy(self) -> 'ClusteringBuilder':
        """Euclidean distance with mean centroids."""
        return self.with_strategy(EuclideanStrategy())

    def with_color_strategy(self) -> 'ClusteringBuilder':
        """RGB distance with rounded mean centroids."""
        return self.with_strategy(ColorStrategy())

    def with_random_init(self, random_state: Optional[Union[int, torch.Generator]] = None,
                         method: str = 'rejection') -> 'ClusteringBuilder':
        """Pick starting centers at random."""
        self._initial_centroids = None
        self._random_state = random_state
        self._init_method = method
        return self

    def with_fixed_init(self, indices: Sequence[int]) -> 'ClusteringBuilder':
        """Start from the points at the given indices."""
        self._initial_centroids = list(indices)
        return self

    def with_shift_convergence(self, min_shift: float) -> 'ClusteringBuilder':
        """Stop once every center moves less than ``min_shift``."""
        self._min_centroid_shift = min_shift
        return self

    def with_error_scoring(self, enabled: bool = True) -> 'ClusteringBuilder':
        """Compute the SSE of each cluster every iteration."""
        self._compute_error = enabled
        return self

    def with_empty_cluster_policy(self, policy: str) -> 'ClusteringBuilder':
        """Set the empty cluster policy ('raise', 'keep' or 'delegate')."""
        self._empty_cluster = policy
        return self

    def with_max_iter(self, max_iter: Optional[int]) -> 'ClusteringBuilder':
        """Set maximum iterations (None for unbounded)."""
        self._max_iter = max_iter
        return self

    def with_listener(self, listener: Optional[Listener]) -> 'ClusteringBuilder':
        """Set the per-iteration listener."""
        self._listener = listener
        return self

    def with_verbose(self, verbose: int) -> 'ClusteringBuilder':
        """Set verbosity level."""
        self._verbose = verbose
        return self

    def build(self, n_clusters: int = BaseKMeans.DEFAULT_N_CLUSTERS) -> KMeans:
        """Build the clustering engine.

        Parameters
        ----------
        n_clusters : int
            Number of clusters

        Returns
        -------
        algorithm : KMeans
            The configured engine
        """
        return KMeans(
            n_clusters=n_clusters,
            strategy=self._strategy,
            min_centroid_shift=self._min_centroid_shift,
            compute_error=self._compute_error,
            initial_centroids=self._initial_centroids,
            random_state=self._random_state,
            init_method=self._init_method,
            empty_cluster=self._empty_cluster,
            max_iter=self._max_iter,
            iteration_listener=self._listener,
            verbose=self._verbose
        )


def create_kmeans(n_clusters: int = BaseKMeans.DEFAULT_N_CLUSTERS, **kwargs) -> KMeans:
    """Create a Euclidean K-means engine.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    **kwargs : dict
        Builder settings, applied through the matching ``with_<key>``
        method (e.g. ``max_iter=50``, ``verbose=1``, ``fixed_init=[0, 2]``)

    Returns
    -------
    algorithm : KMeans
        K-means engine
    """
    builder = ClusteringBuilder()
    builder.with_euclidean_strategy()

    _apply(builder, kwargs)
    return builder.build(n_clusters)


def create_color_kmeans(n_clusters: int = BaseKMeans.DEFAULT_N_CLUSTERS, **kwargs) -> KMeans:
    """Create an engine for dominant color finding.

    Colors are RGB integer triples; cluster errors are computed by default.

    Parameters
    ----------
    n_clusters : int
        Number of colors to find
    **kwargs : dict
        Builder settings, as for :func:`create_kmeans`

    Returns
    -------
    algorithm : KMeans
        Color clustering engine
    """
    builder = ClusteringBuilder()
    builder.with_color_strategy()
    builder.with_error_scoring()

    _apply(builder, kwargs)
    return builder.build(n_clusters)


def _apply(builder: ClusteringBuilder, settings: dict) -> None:
    for key, value in settings.items():
        method = getattr(builder, f'with_{key}', None)
        if method is None:
            raise TypeError(f"Unknown builder setting: {key}")
        method(value)
