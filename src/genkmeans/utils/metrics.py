"""
Clustering quality metrics and partition checks.

All functions work on Cluster objects and a caller-supplied distance
function, so they apply to any point type.
"""

from typing import Any, Callable, List, Optional, Sequence
import torch
from torch import Tensor

from ..base.data_structures import Cluster


def cluster_sse(cluster: Cluster, points: Sequence[Any],
                distance_fn: Callable[[Any, Any], float]) -> float:
    """Sum of squared errors of one cluster.

    The error of a member is its distance to the cluster center.

    Args:
        cluster: Cluster to score
        points: Point set the member indices refer to
        distance_fn: Distance between two points

    Returns:
        SSE (0.0 for an empty cluster)
    """
    center = cluster.center
    sse = 0.0
    for index in cluster.members:
        distance = float(distance_fn(center, points[index]))
        sse += distance * distance
    return sse


def total_sse(clusters: List[Cluster]) -> Optional[float]:
    """Sum of the stored cluster errors, or None if any cluster is unscored."""
    total = 0.0
    for cluster in clusters:
        if cluster.error is None:
            return None
        total += cluster.error
    return total


def inertia(points: Sequence[Any], clusters: List[Cluster],
            distance_fn: Callable[[Any, Any], float]) -> float:
    """Compute the within-cluster sum of squares of a clustering.

    Unlike total_sse this recomputes from the members and ignores stored
    errors.

    Returns:
        Total inertia (lower is better)
    """
    return sum(cluster_sse(cluster, points, distance_fn) for cluster in clusters)


def labels_from_clusters(clusters: List[Cluster], n_points: int) -> Tensor:
    """Build a label vector from cluster memberships.

    Args:
        clusters: Clusters; the label of a point is the position of its
            cluster in this list
        n_points: Size of the point set

    Returns:
        (n_points,) long tensor; -1 marks unassigned points
    """
    labels = torch.full((n_points,), -1, dtype=torch.long)
    for label, cluster in enumerate(clusters):
        members = cluster.members
        if members:
            labels[torch.tensor(members, dtype=torch.long)] = label
    return labels


def check_partition(clusters: List[Cluster], n_points: int) -> bool:
    """Check that memberships form an exact partition of ``range(n_points)``.

    Every index must appear in exactly one cluster, exactly once.
    """
    counts = torch.zeros(n_points, dtype=torch.long)
    for cluster in clusters:
        for index in cluster.members:
            if not 0 <= index < n_points:
                return False
            counts[index] += 1
    return bool((counts == 1).all())


def cluster_sizes(clusters: List[Cluster]) -> List[int]:
    """Sizes of the clusters in list order."""
    return [cluster.size() for cluster in clusters]
