"""Ready-made distance/centroid strategies."""

from .euclidean import EuclideanStrategy
from .color import ColorStrategy, rgb_from_int, rgb_to_hex

__all__ = [
    'EuclideanStrategy',
    'ColorStrategy',
    'rgb_from_int',
    'rgb_to_hex'
]
