"""
Mean centroid computation for numeric points.
"""

from typing import Any, Sequence
import numpy as np
import torch
from torch import Tensor

from ..base.exceptions import EmptyClusterError
from ..distances.euclidean import as_tensor


def _member_sum(points: Sequence[Any], indices: Sequence[int], size: int) -> Tensor:
    if size == 0 or len(indices) == 0:
        raise EmptyClusterError("Cannot compute the mean of an empty cluster")
    return torch.stack([as_tensor(points[index]) for index in indices]).sum(dim=0)


def _like(template: Any, value: Tensor) -> Any:
    """Return ``value`` in the container type of ``template``."""
    if isinstance(template, Tensor):
        if value.is_floating_point() and template.is_floating_point():
            return value.to(dtype=template.dtype, device=template.device)
        return value.to(device=template.device)
    if isinstance(template, np.ndarray):
        return value.numpy()
    # scalar points, e.g. plain floats
    if value.dim() == 0:
        return value.item()
    return tuple(value.tolist())


def mean_centroid(points: Sequence[Any], indices: Sequence[int], size: int) -> Any:
    """Componentwise mean of the member points.

    Args:
        points: Full point set
        indices: Member indices
        size: Number of members

    Returns:
        Mean point: a tensor or array for tensor/array points, otherwise a
        tuple of floats

    Raises:
        EmptyClusterError: If there are no members
    """
    mean = _member_sum(points, indices, size) / size
    return _like(points[indices[0]], mean)


def rounded_mean_centroid(points: Sequence[Any], indices: Sequence[int], size: int) -> Any:
    """Componentwise mean rounded half up to integers.

    Used for integer-valued points such as RGB colors.
    """
    mean = _member_sum(points, indices, size) / size
    rounded = torch.floor(mean + 0.5).to(torch.long)
    return _like(points[indices[0]], rounded)
