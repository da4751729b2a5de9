"""
Core interfaces for the genkmeans clustering engine.

This module defines the abstract base classes for the pluggable parts of
the algorithm, so a clustering use case is configuration rather than a
subclass of the engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Sequence

from .data_structures import Cluster


class ClusteringStrategy(ABC):
    """Capability set {distance, centroid} over an opaque point type.

    The distance should be non-negative and symmetric for the convergence
    check to be meaningful.
    """

    @abstractmethod
    def distance(self, a: Any, b: Any) -> float:
        """Distance between two points.

        Args:
            a: First value
            b: Second value

        Returns:
            Non-negative distance
        """
        pass

    @abstractmethod
    def centroid(self, points: Sequence[Any], indices: Sequence[int], size: int) -> Any:
        """Compute the representative value of a group of points.

        Args:
            points: Full point set
            indices: Indices of the members of the group
            size: Number of members (``len(indices)``)

        Returns:
            New centroid, of the same type as the points
        """
        pass


class FunctionStrategy(ClusteringStrategy):
    """Strategy built from two plain callables."""

    def __init__(self,
                 distance_fn: Callable[[Any, Any], float],
                 centroid_fn: Callable[[Sequence[Any], Sequence[int], int], Any]):
        """
        Args:
            distance_fn: ``distance_fn(a, b) -> float``
            centroid_fn: ``centroid_fn(points, indices, size) -> T``
        """
        if not callable(distance_fn) or not callable(centroid_fn):
            raise TypeError("distance_fn and centroid_fn must be callable")
        self.distance_fn = distance_fn
        self.centroid_fn = centroid_fn

    def distance(self, a: Any, b: Any) -> float:
        return self.distance_fn(a, b)

    def centroid(self, points: Sequence[Any], indices: Sequence[int], size: int) -> Any:
        return self.centroid_fn(points, indices, size)

    def __repr__(self) -> str:
        return (f"FunctionStrategy(distance_fn={getattr(self.distance_fn, '__name__', self.distance_fn)}, "
                f"centroid_fn={getattr(self.centroid_fn, '__name__', self.centroid_fn)})")


class IterationListener(ABC):
    """Receives a notification after every finished iteration.

    Called synchronously by the engine, after error scoring and before the
    convergence check. Exceptions raised here abort the run.
    """

    @abstractmethod
    def on_iteration_finished(self, clusters: List[Cluster], iteration: int) -> None:
        """
        Args:
            clusters: Live cluster list, in engine order (not yet sorted)
            iteration: 1-based iteration number
        """
        pass


class InitializationStrategy(ABC):
    """Chooses the point indices used as starting centroids."""

    @abstractmethod
    def select(self, points: Sequence[Any], n_clusters: int) -> List[int]:
        """Select initial centroid indices.

        Args:
            points: Point set
            n_clusters: Number of clusters K

        Returns:
            List of K distinct indices into ``points``
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
