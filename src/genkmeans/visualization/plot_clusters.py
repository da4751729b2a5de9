"""
Cluster visualization utilities.

Plots 2D clustering results from Cluster objects: members colored per
cluster, centers marked on top.
"""

from typing import Any, List, Optional, Sequence
import matplotlib.pyplot as plt
import numpy as np

from ..base.data_structures import Cluster
from ..distances.euclidean import as_tensor


def _to_numpy_2d(points: Sequence[Any]) -> np.ndarray:
    """Stack numeric points into an (n, d) array."""
    return np.stack([as_tensor(point).cpu().numpy() for point in points])


def plot_clusters_2d(points: Sequence[Any],
                     clusters: List[Cluster],
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List[Any]] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_centers: bool = True,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        points: Point set with two numeric coordinates per point
        clusters: Clusters whose members index into ``points``
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centers
        center_size: Size of center markers
        point_size: Size of data points
        show_centers: Whether to draw cluster centers
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    X = _to_numpy_2d(points)
    if X.ndim != 2 or X.shape[1] != 2:
        raise ValueError(f"Expected 2D points, got shape {X.shape}")

    n_clusters = len(clusters)

    # Default colors
    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(n_clusters)]

    for i, cluster in enumerate(clusters):
        members = list(cluster.members)
        if not members:
            continue
        ax.scatter(X[members, 0], X[members, 1],
                   c=[colors[i % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {i} (n={cluster.size()})')

    if show_centers and clusters:
        centers = _to_numpy_2d([cluster.center for cluster in clusters])
        ax.scatter(centers[:, 0], centers[:, 1],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centers',
                   zorder=10)

    ax.set_xlabel('Feature 1')
    ax.set_ylabel('Feature 2')

    if title:
        ax.set_title(title)

    if show_legend:
        ax.legend()

    return ax


def plot_convergence(history: Sequence[Any], ax: Optional[plt.Axes] = None,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot the maximum centroid shift per iteration.

    Args:
        history: ``history_`` of a fitted engine (IterationRecord list)
        ax: Matplotlib axes (created if None)
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))

    iterations = [record.iteration for record in history]
    shifts = [record.max_shift for record in history]
    ax.plot(iterations, shifts, marker='o')
    ax.set_xlabel('Iteration')
    ax.set_ylabel('Max centroid shift')

    if title:
        ax.set_title(title)

    return ax
