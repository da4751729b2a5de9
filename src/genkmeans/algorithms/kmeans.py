"""
K-means clustering with injected strategies.

The engine from :mod:`genkmeans.base.clustering_base` configured with a
strategy object or a pair of plain functions instead of subclass overrides.
"""

from typing import Any, Callable, Optional, Sequence

from ..base.clustering_base import BaseKMeans
from ..base.exceptions import InvalidConfiguration
from ..base.interfaces import ClusteringStrategy, FunctionStrategy


class KMeans(BaseKMeans):
    """K-means over any point type.

    Partitions the data into K clusters by assigning each point to the
    nearest center and moving each center to the centroid of its members,
    until no center moves by ``min_centroid_shift`` or more.

    Parameters
    ----------
    n_clusters : int, default=3
        Number of clusters used when ``run`` is called without ``k``
    strategy : ClusteringStrategy, optional
        Object providing ``distance`` and ``centroid``
    distance_fn : callable, optional
        ``distance_fn(a, b) -> float``, used with ``centroid_fn`` when no
        strategy is given
    centroid_fn : callable, optional
        ``centroid_fn(points, indices, size) -> point``
    min_centroid_shift : float, default=0.01
        Convergence threshold on the largest center movement
    compute_error : bool, default=False
        Compute each cluster's SSE after every iteration
    initial_centroids : list of int, optional
        Fixed starting point indices, one per cluster
    random_state : int or torch.Generator, optional
        Random seed for reproducibility
    **kwargs
        Further engine options (init_method, empty_cluster, max_iter,
        iteration_listener, verbose)

    Attributes
    ----------
    clusters_ : list of Cluster
        Fitted clusters, largest first
    labels_ : Tensor of shape (n_samples,)
        Position in ``clusters_`` of each training point
    inertia_ : float
        Sum of squared distances to the cluster centers
    n_iter_ : int
        Number of iterations run
    history_ : list of IterationRecord
        Per-iteration summary of the last run
    """

    def __init__(self,
                 n_clusters: int = BaseKMeans.DEFAULT_N_CLUSTERS,
                 strategy: Optional[ClusteringStrategy] = None,
                 distance_fn: Optional[Callable[[Any, Any], float]] = None,
                 centroid_fn: Optional[Callable[[Sequence[Any], Sequence[int], int], Any]] = None,
                 min_centroid_shift: float = BaseKMeans.DEFAULT_MIN_CENTROID_SHIFT,
                 compute_error: bool = False,
                 initial_centroids: Optional[Sequence[int]] = None,
                 random_state=None,
                 **kwargs):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            min_centroid_shift=min_centroid_shift,
            compute_error=compute_error,
            initial_centroids=initial_centroids,
            random_state=random_state,
            **kwargs
        )
        self.strategy = self._resolve_strategy(strategy, distance_fn, centroid_fn)

    @staticmethod
    def _resolve_strategy(strategy: Optional[ClusteringStrategy],
                          distance_fn: Optional[Callable],
                          centroid_fn: Optional[Callable]) -> ClusteringStrategy:
        if strategy is not None:
            if distance_fn is not None or centroid_fn is not None:
                raise InvalidConfiguration("Pass either a strategy or distance_fn/centroid_fn, not both")
            if not isinstance(strategy, ClusteringStrategy):
                raise InvalidConfiguration(f"strategy must be a ClusteringStrategy, got {type(strategy)}")
            return strategy

        if distance_fn is None or centroid_fn is None:
            raise InvalidConfiguration("K-means needs a strategy or both distance_fn and centroid_fn")
        return FunctionStrategy(distance_fn, centroid_fn)

    def distance(self, a: Any, b: Any) -> float:
        return self.strategy.distance(a, b)

    def centroid(self, points: Sequence[Any], indices: Sequence[int], size: int) -> Any:
        return self.strategy.centroid(points, indices, size)

    def get_params(self, deep: bool = True):
        params = super().get_params(deep)
        params['strategy'] = self.strategy
        return params

    def set_params(self, **params) -> 'KMeans':
        strategy = params.pop('strategy', None)
        if strategy is not None:
            self.strategy = self._resolve_strategy(strategy, None, None)
        super().set_params(**params)
        return self

    def __repr__(self) -> str:
        return (f"KMeans(n_clusters={self.n_clusters}, strategy={self.strategy!r}, "
                f"min_centroid_shift={self.min_centroid_shift})")
