"""Utility functions for genkmeans."""

from .convergence import (
    CentroidShift,
    IterationCap
)

from .metrics import (
    cluster_sse,
    total_sse,
    inertia,
    labels_from_clusters,
    check_partition,
    cluster_sizes
)

from .validation import (
    validate_points,
    check_n_clusters,
    check_min_shift,
    check_max_iter,
    check_random_state,
    validate_initial_indices
)

__all__ = [
    # Convergence criteria
    'CentroidShift',
    'IterationCap',

    # Metrics
    'cluster_sse',
    'total_sse',
    'inertia',
    'labels_from_clusters',
    'check_partition',
    'cluster_sizes',

    # Validation
    'validate_points',
    'check_n_clusters',
    'check_min_shift',
    'check_max_iter',
    'check_random_state',
    'validate_initial_indices'
]
