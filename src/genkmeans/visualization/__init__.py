"""Visualization and reporting utilities for clustering results."""

from .plot_clusters import (
    plot_clusters_2d,
    plot_convergence
)
from .report import (
    format_cluster,
    format_clusters,
    PrintingListener
)

__all__ = [
    'plot_clusters_2d',
    'plot_convergence',
    'format_cluster',
    'format_clusters',
    'PrintingListener'
]
