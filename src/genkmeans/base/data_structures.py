"""
Core data structures for the genkmeans clustering engine.

Clusters do not hold the data itself, only indices into the caller's
point set, so any indexable sequence of any point type can be clustered.
"""

from typing import Any, Generic, List, Optional, Tuple, TypeVar
from dataclasses import dataclass, field

T = TypeVar('T')


class Cluster(Generic[T]):
    """A centroid plus the indices of the points currently assigned to it.

    The engine owns and mutates clusters during a run: membership is cleared
    and rebuilt each iteration, the center is replaced after each
    recomputation and the error is refreshed when scoring is enabled. The
    object itself lives for the whole run and is handed to the caller at the
    end.
    """

    def __init__(self, center: T):
        """
        Args:
            center: Initial centroid value
        """
        self._center = center
        self._indices: List[int] = []
        self._error: Optional[float] = None

    def clear_members(self) -> None:
        """Remove all member indices."""
        self._indices.clear()

    def add_member(self, index: int) -> None:
        """Append a point index. No duplicate check is done."""
        self._indices.append(index)

    @property
    def members(self) -> Tuple[int, ...]:
        """Member indices in assignment order (read-only copy)."""
        return tuple(self._indices)

    @property
    def center(self) -> T:
        """Current centroid."""
        return self._center

    @center.setter
    def center(self, value: T):
        self._center = value

    @property
    def error(self) -> Optional[float]:
        """Error score (SSE by default), or None if it was never computed."""
        return self._error

    @error.setter
    def error(self, value: Optional[float]):
        self._error = None if value is None else float(value)

    def size(self) -> int:
        """Number of members."""
        return len(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __repr__(self) -> str:
        return f"Cluster(center={self._center!r}, size={len(self._indices)}, error={self._error})"


@dataclass
class IterationRecord:
    """Summary of one finished iteration, kept in the engine history.

    Used for debugging and for inspecting how fast a run converged.
    """
    iteration: int
    max_shift: float
    sizes: List[int]
    total_error: Optional[float] = None
    metadata: dict = field(default_factory=dict)

    @property
    def converged(self) -> bool:
        """Whether this iteration met the stopping threshold."""
        return bool(self.metadata.get('converged', False))


def sort_by_size(clusters: List[Cluster[Any]]) -> List[Cluster[Any]]:
    """Return clusters sorted by descending size.

    ``sorted`` is stable, so clusters of equal size keep their relative
    order.
    """
    return sorted(clusters, key=lambda cluster: cluster.size(), reverse=True)
