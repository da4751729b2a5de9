"""
Text reporting of clustering results.
"""

from typing import Callable, List, Optional

from ..base.data_structures import Cluster
from ..base.interfaces import IterationListener


def format_cluster(cluster: Cluster, prefix: str = '') -> str:
    """One-line summary: ``<prefix>Cluster [center], size=N, sse=E``."""
    return f"{prefix}Cluster [{cluster.center}], size={cluster.size()}, sse={cluster.error}"


def format_clusters(clusters: List[Cluster], iteration: Optional[int] = None) -> List[str]:
    """Summary lines for a cluster list, prefixed with ``<iteration>:`` if given."""
    prefix = '' if iteration is None else f"{iteration}:"
    return [format_cluster(cluster, prefix) for cluster in clusters]


class PrintingListener(IterationListener):
    """Prints every cluster after each iteration."""

    def __init__(self, write: Callable[[str], None] = print):
        """
        Args:
            write: Line sink, ``print`` by default
        """
        self.write = write

    def on_iteration_finished(self, clusters: List[Cluster], iteration: int) -> None:
        for line in format_clusters(clusters, iteration):
            self.write(line)
