"""
Exception hierarchy for genkmeans.

All errors raised by the library derive from ClusteringError. Configuration
problems are also ValueErrors so callers catching the builtin keep working.
"""

from typing import Any, Dict, Optional


class ClusteringError(Exception):
    """Base exception for all clustering errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'details': self.details,
        }


class InvalidConfiguration(ClusteringError, ValueError):
    """Invalid engine configuration or run arguments.

    Raised for a wrong number of fixed initial centroids, k <= 0,
    k larger than the number of points, an empty point set, unknown
    policies and non-positive thresholds.
    """


class StrategyError(ClusteringError):
    """Failure raised by a distance or centroid strategy."""


class EmptyClusterError(StrategyError):
    """A cluster lost all of its members and no centroid can be computed."""


class NotFittedError(ClusteringError, RuntimeError):
    """Estimator used before fit() was called."""


class ConvergenceWarning(UserWarning):
    """Iteration cap reached before the centroids settled."""
