"""
Base class for the generic K-means clustering engine.

Provides the iterative skeleton (initialize, assign, recompute, score,
notify, check convergence) over an arbitrary point type. Subclasses supply
the distance and centroid computations.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Sequence, Union
import time
import warnings

import torch
from torch import Tensor

from .data_structures import Cluster, IterationRecord, sort_by_size
from .exceptions import (
    InvalidConfiguration, EmptyClusterError, NotFittedError, ConvergenceWarning
)
from .interfaces import IterationListener, InitializationStrategy
from ..initialization.random import RandomInit
from ..initialization.fixed import FixedIndicesInit
from ..utils.convergence import CentroidShift, IterationCap
from ..utils.metrics import cluster_sse, inertia, labels_from_clusters, total_sse
from ..utils.validation import (
    validate_points, check_n_clusters, check_min_shift, check_max_iter
)

Listener = Union[IterationListener, Callable[[List[Cluster], int], Any]]


class BaseKMeans(ABC):
    """Generic K-means over any point type.

    Points are assigned to the cluster whose center is nearest according to
    :meth:`distance`; centers are recomputed with :meth:`centroid` until the
    largest center movement of an iteration drops below
    ``min_centroid_shift``.

    Subclasses need to specify:
    - distance(a, b)
    - centroid(points, indices, size)
    """

    DEFAULT_N_CLUSTERS = 3
    DEFAULT_MIN_CENTROID_SHIFT = 0.01
    EMPTY_CLUSTER_POLICIES = ('raise', 'keep', 'delegate')

    def __init__(self,
                 n_clusters: int = DEFAULT_N_CLUSTERS,
                 min_centroid_shift: float = DEFAULT_MIN_CENTROID_SHIFT,
                 compute_error: bool = False,
                 initial_centroids: Optional[Sequence[int]] = None,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 init_method: str = 'rejection',
                 empty_cluster: str = 'raise',
                 max_iter: Optional[int] = None,
                 iteration_listener: Optional[Listener] = None,
                 verbose: int = 0):
        """
        Args:
            n_clusters: Number of clusters K used when run() gets no k
            min_centroid_shift: Stop once every center moved less than this
            compute_error: Score each cluster (SSE) after every iteration
            initial_centroids: Fixed point indices used as starting centers
            random_state: Seed or generator for random center selection
            init_method: 'rejection' or 'permutation' random sampling
            empty_cluster: What to do when a cluster loses all members:
                'raise' an EmptyClusterError, 'keep' the previous center, or
                'delegate' to centroid() with an empty index list
            max_iter: Optional iteration cap, None runs until convergence
            iteration_listener: Listener object or callable(clusters, iteration)
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
        """
        if empty_cluster not in self.EMPTY_CLUSTER_POLICIES:
            raise InvalidConfiguration(f"empty_cluster must be one of "
                                       f"{self.EMPTY_CLUSTER_POLICIES}, got '{empty_cluster}'")
        if init_method not in RandomInit.METHODS:
            raise InvalidConfiguration(f"Unknown init method: {init_method}")

        self.n_clusters = n_clusters
        self.min_centroid_shift = check_min_shift(min_centroid_shift)
        self.compute_error = bool(compute_error)
        self.initial_centroids = None if initial_centroids is None else list(initial_centroids)
        self.random_state = random_state
        self.init_method = init_method
        self.empty_cluster = empty_cluster
        self.max_iter = check_max_iter(max_iter)
        self.verbose = verbose
        self.iteration_listener: Optional[Listener] = None
        self.set_iteration_listener(iteration_listener)

        # Algorithm state
        self.fitted_ = False
        self.clusters_: Optional[List[Cluster]] = None
        self.labels_: Optional[Tensor] = None
        self.n_iter_ = 0
        self.history_: List[IterationRecord] = []
        self._inertia: Optional[float] = None

    @abstractmethod
    def distance(self, a: Any, b: Any) -> float:
        """Distance between two points (or a point and a center)."""
        pass

    @abstractmethod
    def centroid(self, points: Sequence[Any], indices: Sequence[int], size: int) -> Any:
        """New center for the points at ``indices``."""
        pass

    def cluster_error(self, cluster: Cluster, points: Sequence[Any]) -> float:
        """Error of one cluster. Default is SSE against its current center.

        Override to score clusters differently.
        """
        return cluster_sse(cluster, points, self.distance)

    def set_iteration_listener(self, listener: Optional[Listener]) -> None:
        """Register the per-iteration listener (None removes it)."""
        if listener is not None and not (isinstance(listener, IterationListener)
                                         or callable(listener)):
            raise TypeError(f"listener must be an IterationListener or callable, got {type(listener)}")
        self.iteration_listener = listener

    def run(self, points: Sequence[Any], k: Optional[int] = None) -> List[Cluster]:
        """Cluster ``points`` into ``k`` groups.

        Args:
            points: Indexable sequence of points, not modified
            k: Number of clusters (defaults to ``n_clusters``)

        Returns:
            The K clusters sorted by descending size
        """
        points = validate_points(points)
        k = check_n_clusters(self.n_clusters if k is None else k, len(points))

        clusters = self._kmeans(points, k)

        return sort_by_size(clusters)

    def find_clusters(self, points: Sequence[Any], k: Optional[int] = None) -> List[Cluster]:
        """Alias of :meth:`run`."""
        return self.run(points, k)

    def _create_initialization(self) -> InitializationStrategy:
        """Initialization strategy for one run.

        A fresh generator is built from an int seed on every run, so the same
        engine replays identically.
        """
        if self.initial_centroids is not None:
            return FixedIndicesInit(self.initial_centroids)
        return RandomInit(self.random_state, method=self.init_method)

    def _kmeans(self, points: Sequence[Any], k: int) -> List[Cluster]:
        """Internal loop implementing the alternating assign/update steps."""
        if self.verbose:
            print(f"Initializing {k} clusters...")

        start_time = time.time()
        initial_indices = self._create_initialization().select(points, k)

        clusters = [Cluster(points[index]) for index in initial_indices]

        shift_criterion = CentroidShift(self.min_centroid_shift)
        cap_criterion = IterationCap(self.max_iter)

        self.n_iter_ = 0
        self.history_ = []

        iteration = 1
        while True:
            iter_start_time = time.time()

            # Assignment step
            self._assign(points, clusters)

            # Update step
            max_shift = self._update_centers(points, clusters, iteration)

            if self.compute_error:
                self._score(points, clusters)

            self._notify(clusters, iteration)

            state = {'iteration': iteration, 'max_shift': max_shift}
            converged = shift_criterion.check(state)
            capped = not converged and cap_criterion.check(state)

            self.history_.append(IterationRecord(
                iteration=iteration,
                max_shift=max_shift,
                sizes=[cluster.size() for cluster in clusters],
                total_error=total_sse(clusters) if self.compute_error else None,
                metadata={'converged': converged}
            ))
            self.n_iter_ = iteration

            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
                print(f"Iteration {iteration:3d}: max shift = {max_shift:.6f} ({iter_time:.3f}s)")

            iteration += 1

            if converged:
                if self.verbose:
                    print(f"Converged at iteration {self.n_iter_}")
                break

            if capped:
                warnings.warn(f"Failed to converge after {self.max_iter} iterations "
                              f"(max shift {max_shift:.6f})", ConvergenceWarning)
                break

        if self.verbose:
            print(f"Total clustering time: {time.time() - start_time:.3f}s")

        return clusters

    def _assign(self, points: Sequence[Any], clusters: List[Cluster]) -> None:
        """Rebuild every membership from scratch, in point order."""
        for cluster in clusters:
            cluster.clear_members()

        for index in range(len(points)):
            nearest = self._nearest(points[index], clusters)
            clusters[nearest].add_member(index)

    def _nearest(self, point: Any, clusters: List[Cluster]) -> int:
        """Position of the nearest cluster; the first one wins ties."""
        nearest = 0
        smallest = float('inf')
        for position, cluster in enumerate(clusters):
            distance = float(self.distance(point, cluster.center))
            if distance < smallest:
                nearest = position
                smallest = distance
        return nearest

    def _update_centers(self, points: Sequence[Any], clusters: List[Cluster],
                        iteration: int) -> float:
        """Recompute every center and return the largest movement."""
        max_shift = 0.0
        for position, cluster in enumerate(clusters):
            old_center = cluster.center

            if cluster.size() == 0 and self.empty_cluster != 'delegate':
                if self.empty_cluster == 'raise':
                    raise EmptyClusterError(
                        f"Cluster {position} has no members at iteration {iteration}",
                        details={'cluster': position, 'iteration': iteration}
                    )
                # 'keep': center stays, shift is zero
                continue

            members = cluster.members
            new_center = self.centroid(points, members, len(members))
            cluster.center = new_center

            shift = float(self.distance(old_center, new_center))
            max_shift = max(max_shift, shift)

        return max_shift

    def _score(self, points: Sequence[Any], clusters: List[Cluster]) -> None:
        """Store the error of every cluster against its new center."""
        for cluster in clusters:
            cluster.error = self.cluster_error(cluster, points)

    def _notify(self, clusters: List[Cluster], iteration: int) -> None:
        listener = self.iteration_listener
        if listener is None:
            return
        if isinstance(listener, IterationListener):
            listener.on_iteration_finished(clusters, iteration)
        else:
            listener(clusters, iteration)

    def fit(self, X: Sequence[Any], y: Any = None) -> 'BaseKMeans':
        """Fit the clustering model.

        Args:
            X: Point set
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        clusters = self.run(X)
        self.clusters_ = clusters
        self.labels_ = labels_from_clusters(clusters, len(X))
        self._inertia = total_sse(clusters)
        if self._inertia is None:
            self._inertia = inertia(X, clusters, self.distance)
        self.fitted_ = True
        return self

    def fit_predict(self, X: Sequence[Any], y: Any = None) -> Tensor:
        """Fit and return cluster labels (positions in ``clusters_``)."""
        self.fit(X)
        return self.labels_

    def predict(self, X: Sequence[Any]) -> Tensor:
        """Predict the nearest fitted cluster for new points.

        Args:
            X: Point set

        Returns:
            (n,) long tensor of positions in ``clusters_``
        """
        if not self.fitted_:
            raise NotFittedError("Model must be fitted before calling predict")

        X = validate_points(X)
        labels = [self._nearest(X[index], self.clusters_) for index in range(len(X))]
        return torch.tensor(labels, dtype=torch.long)

    @property
    def cluster_centers_(self) -> List[Any]:
        """Centers of the fitted clusters, in ``clusters_`` order."""
        if not self.fitted_:
            raise NotFittedError("Model must be fitted first")
        return [cluster.center for cluster in self.clusters_]

    @property
    def inertia_(self) -> float:
        """Sum of squared distances of the fitted points to their centers."""
        if not self.fitted_:
            raise NotFittedError("Model must be fitted first")
        return self._inertia

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'min_centroid_shift': self.min_centroid_shift,
            'compute_error': self.compute_error,
            'initial_centroids': self.initial_centroids,
            'random_state': self.random_state,
            'init_method': self.init_method,
            'empty_cluster': self.empty_cluster,
            'max_iter': self.max_iter,
            'verbose': self.verbose
        }

    def set_params(self, **params) -> 'BaseKMeans':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise InvalidConfiguration(f"Invalid parameter '{key}' for {self.__class__.__name__}")
            if key == 'min_centroid_shift':
                value = check_min_shift(value)
            elif key == 'max_iter':
                value = check_max_iter(value)
            elif key == 'empty_cluster' and value not in self.EMPTY_CLUSTER_POLICIES:
                raise InvalidConfiguration(f"empty_cluster must be one of "
                                           f"{self.EMPTY_CLUSTER_POLICIES}, got '{value}'")
            elif key == 'init_method' and value not in RandomInit.METHODS:
                raise InvalidConfiguration(f"Unknown init method: {value}")
            elif key == 'initial_centroids' and value is not None:
                value = list(value)
            setattr(self, key, value)
        return self
