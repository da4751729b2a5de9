"""
Color clustering strategy.

Finds dominant colors: colors are (red, green, blue) integer triples,
distance is Euclidean in RGB space and the centroid is the per-channel mean
rounded to the nearest integer, so centers are real colors as well.
"""

from typing import Any, Sequence, Tuple

from ..base.interfaces import ClusteringStrategy
from ..distances.euclidean import euclidean_distance
from ..updates.mean import rounded_mean_centroid

RGB = Tuple[int, int, int]


def rgb_from_int(value: int) -> RGB:
    """Split a packed 0xRRGGBB integer into its channels.

    Any alpha byte above bit 24 is ignored.
    """
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def rgb_to_hex(color: Sequence[int]) -> str:
    """Format an RGB triple as ``#rrggbb``."""
    r, g, b = (int(channel) for channel in color)
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"Channel value out of range: {channel}")
    return f"#{r:02x}{g:02x}{b:02x}"


class ColorStrategy(ClusteringStrategy):
    """Euclidean RGB distance with rounded mean centroids."""

    def distance(self, a: Any, b: Any) -> float:
        return euclidean_distance(a, b)

    def centroid(self, points: Sequence[Any], indices: Sequence[int], size: int) -> Any:
        return rounded_mean_centroid(points, indices, size)

    def __repr__(self) -> str:
        return "ColorStrategy()"
