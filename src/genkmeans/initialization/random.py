"""
Random initialization strategy.

Selects random points from the dataset as initial cluster centers.
"""

from typing import Any, List, Optional, Sequence, Union
import torch

from ..base.interfaces import InitializationStrategy
from ..base.exceptions import InvalidConfiguration
from ..utils.validation import check_random_state


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Selects n_clusters distinct indices uniformly at random, without
    replacement. Two sampling methods give the same distribution:

    - 'rejection': draw an index, discard it if already chosen, repeat
    - 'permutation': take the first n_clusters entries of a random
      permutation, bounded O(n) time even when K is close to n
    """

    METHODS = ('rejection', 'permutation')

    def __init__(self, random_state: Optional[Union[int, torch.Generator]] = None,
                 method: str = 'rejection'):
        """
        Args:
            random_state: Seed or generator; seeded runs are reproducible
            method: 'rejection' or 'permutation'
        """
        if method not in self.METHODS:
            raise InvalidConfiguration(f"Unknown init method: {method}")
        self.generator = check_random_state(random_state)
        self.method = method

    def select(self, points: Sequence[Any], n_clusters: int) -> List[int]:
        """Select random initial centroid indices.

        Args:
            points: Point set
            n_clusters: Number of clusters

        Returns:
            List of n_clusters distinct indices
        """
        n_points = len(points)

        if n_clusters > n_points:
            raise InvalidConfiguration(f"Cannot create {n_clusters} clusters from {n_points} points")

        if self.method == 'permutation':
            return torch.randperm(n_points, generator=self.generator)[:n_clusters].tolist()

        indices: List[int] = []
        chosen = set()
        while len(indices) < n_clusters:
            candidate = int(torch.randint(n_points, (1,), generator=self.generator).item())
            if candidate in chosen:
                continue
            chosen.add(candidate)
            indices.append(candidate)

        return indices
