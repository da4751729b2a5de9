"""
Euclidean distance between numeric points.

Points may be tuples, lists, numpy arrays or torch tensors; anything
``torch.as_tensor`` accepts.
"""

from typing import Any
import torch
from torch import Tensor


def as_tensor(value: Any) -> Tensor:
    """Convert a numeric point to a float64 tensor."""
    if isinstance(value, Tensor):
        return value.detach().to(dtype=torch.float64)
    return torch.as_tensor(value, dtype=torch.float64)


def squared_euclidean_distance(a: Any, b: Any) -> float:
    """Squared Euclidean distance ||a - b||².

    Args:
        a: First point
        b: Second point

    Returns:
        Squared distance as a Python float
    """
    a, b = as_tensor(a), as_tensor(b)
    if a.shape != b.shape:
        raise ValueError(f"Point shapes differ: {tuple(a.shape)} vs {tuple(b.shape)}")
    diff = a - b
    return float(torch.sum(diff * diff))


def euclidean_distance(a: Any, b: Any) -> float:
    """Euclidean distance ||a - b||.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance as a Python float
    """
    return squared_euclidean_distance(a, b) ** 0.5


def weighted_euclidean(weights: Any):
    """Build a Euclidean distance with per-feature weights.

    Computes sqrt(sum_i w_i * (a_i - b_i)²).

    Args:
        weights: (d,) feature weights, non-negative

    Returns:
        ``distance(a, b) -> float``
    """
    w = as_tensor(weights)
    if (w < 0).any():
        raise ValueError("Feature weights must be non-negative")

    def distance(a: Any, b: Any) -> float:
        diff = as_tensor(a) - as_tensor(b)
        return float(torch.sum(w * diff * diff)) ** 0.5

    return distance
