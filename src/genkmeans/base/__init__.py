"""Base classes and interfaces for the genkmeans clustering engine."""

from .exceptions import (
    ClusteringError,
    InvalidConfiguration,
    StrategyError,
    EmptyClusterError,
    NotFittedError,
    ConvergenceWarning
)

from .data_structures import (
    Cluster,
    IterationRecord,
    sort_by_size
)

from .interfaces import (
    ClusteringStrategy,
    FunctionStrategy,
    IterationListener,
    InitializationStrategy,
    ConvergenceCriterion
)

from .clustering_base import BaseKMeans

__all__ = [
    # Exceptions
    'ClusteringError',
    'InvalidConfiguration',
    'StrategyError',
    'EmptyClusterError',
    'NotFittedError',
    'ConvergenceWarning',

    # Data structures
    'Cluster',
    'IterationRecord',
    'sort_by_size',

    # Interfaces
    'ClusteringStrategy',
    'FunctionStrategy',
    'IterationListener',
    'InitializationStrategy',
    'ConvergenceCriterion',

    # Base algorithm
    'BaseKMeans'
]
