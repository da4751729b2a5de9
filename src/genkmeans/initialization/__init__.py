"""Initialization strategies for the clustering engine."""

from .random import RandomInit
from .fixed import FixedIndicesInit

__all__ = [
    'RandomInit',
    'FixedIndicesInit'
]
