"""
Input validation utilities.

Provides functions for validating the point set, the cluster count and the
configuration values before a clustering run starts, so bad input fails
fast instead of looping forever or dividing by zero.
"""

from numbers import Integral, Real
from typing import Any, Optional, Sequence, Union, List
import torch

from ..base.exceptions import InvalidConfiguration


def validate_points(points: Sequence[Any]) -> Sequence[Any]:
    """Validate a point set.

    Any sized, indexable sequence is accepted (list, tuple, numpy array,
    torch tensor). The values themselves are opaque and are not inspected.

    Args:
        points: Point set

    Returns:
        The same object, unchanged

    Raises:
        InvalidConfiguration: If points is not indexable or is empty
    """
    if points is None:
        raise InvalidConfiguration("points must not be None")

    if not hasattr(points, '__len__') or not hasattr(points, '__getitem__'):
        raise InvalidConfiguration(f"points must be an indexable sequence, got {type(points)}")

    if len(points) == 0:
        raise InvalidConfiguration("Cannot cluster an empty point set")

    return points


def check_n_clusters(n_clusters: int, n_samples: int) -> int:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of samples

    Returns:
        n_clusters as a plain int

    Raises:
        InvalidConfiguration: If invalid
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, Integral):
        raise InvalidConfiguration(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters <= 0:
        raise InvalidConfiguration(f"n_clusters must be positive, got {n_clusters}",
                                   details={'n_clusters': int(n_clusters)})

    if n_clusters > n_samples:
        raise InvalidConfiguration(f"n_clusters ({n_clusters}) cannot be larger than "
                                   f"n_samples ({n_samples})",
                                   details={'n_clusters': int(n_clusters), 'n_samples': n_samples})

    return int(n_clusters)


def check_min_shift(min_shift: float) -> float:
    """Validate the convergence threshold.

    Raises:
        InvalidConfiguration: If not a positive finite number
    """
    if isinstance(min_shift, bool) or not isinstance(min_shift, Real):
        raise InvalidConfiguration(f"min_centroid_shift must be a number, got {type(min_shift)}")

    value = float(min_shift)
    # A zero threshold can never be satisfied by "shift < threshold"
    if not value > 0.0 or value == float('inf'):
        raise InvalidConfiguration(f"min_centroid_shift must be positive and finite, got {min_shift}")
    return value


def check_max_iter(max_iter: Optional[int]) -> Optional[int]:
    """Validate the optional iteration cap (None means unbounded)."""
    if max_iter is None:
        return None
    if isinstance(max_iter, bool) or not isinstance(max_iter, Integral) or max_iter <= 0:
        raise InvalidConfiguration(f"max_iter must be a positive int or None, got {max_iter!r}")
    return int(max_iter)


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create generator from random state.

    Args:
        random_state: None for a nondeterministic generator, an int seed,
            or an existing generator (used as is)

    Returns:
        Generator
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, Integral) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")


def validate_initial_indices(indices: Sequence[int], n_clusters: int,
                             n_samples: int) -> List[int]:
    """Validate caller-fixed initial centroid indices.

    Args:
        indices: Point indices to use as starting centroids
        n_clusters: Number of clusters K
        n_samples: Number of points

    Returns:
        Indices as a list of plain ints

    Raises:
        InvalidConfiguration: If the count differs from K, an index is out
            of range, or an index is repeated
    """
    indices = list(indices)

    if len(indices) != n_clusters:
        raise InvalidConfiguration(f"Initial centroids length ({len(indices)}) differs from "
                                   f"k={n_clusters}",
                                   details={'n_initial': len(indices), 'n_clusters': n_clusters})

    validated = []
    for position, index in enumerate(indices):
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise InvalidConfiguration(f"initial_centroids[{position}] must be int, got {type(index)}")
        if not 0 <= index < n_samples:
            raise InvalidConfiguration(f"initial_centroids[{position}]={index} is out of range "
                                       f"for {n_samples} points")
        validated.append(int(index))

    if len(set(validated)) != len(validated):
        raise InvalidConfiguration(f"Initial centroid indices must be distinct, got {validated}")

    return validated
