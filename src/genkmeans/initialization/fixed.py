"""
Initialization from caller-chosen point indices.

Useful for warm starts, reproducible tests, or when good starting points
are already known.
"""

from typing import Any, List, Sequence

from ..base.interfaces import InitializationStrategy
from ..utils.validation import validate_initial_indices


class FixedIndicesInit(InitializationStrategy):
    """Initialize from a fixed list of point indices.

    The list must hold exactly K distinct, in-range indices; anything else
    raises InvalidConfiguration when the run starts.
    """

    def __init__(self, indices: Sequence[int]):
        """
        Args:
            indices: Point indices to use as starting centroids
        """
        self.indices = list(indices)

    def select(self, points: Sequence[Any], n_clusters: int) -> List[int]:
        """Return the fixed indices after validating them against the run."""
        return validate_initial_indices(self.indices, n_clusters, len(points))

    def __repr__(self) -> str:
        return f"FixedIndicesInit(indices={self.indices})"
