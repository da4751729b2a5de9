"""
Convergence criteria for the clustering loop.

The engine stops when the largest centroid movement of an iteration falls
below a threshold. An optional iteration cap can be combined with it.
"""

from typing import Any, Dict, Optional

from ..base.interfaces import ConvergenceCriterion


class CentroidShift(ConvergenceCriterion):
    """Convergence based on the largest per-cluster centroid movement.

    Converged as soon as ``max_shift < min_shift``. Equality does not count.
    """

    def __init__(self, min_shift: float = 0.01):
        """
        Args:
            min_shift: Threshold on the maximum centroid shift
        """
        super().__init__()
        self.min_shift = min_shift

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if centroids have settled."""
        max_shift = float(current_state['max_shift'])
        converged = max_shift < self.min_shift

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history) + 1),
            'max_shift': max_shift,
            'converged': converged
        })

        return converged


class IterationCap(ConvergenceCriterion):
    """Stops once a fixed number of iterations has run.

    Used as a safety net next to CentroidShift; reaching the cap is not a
    real convergence, so ``reached`` is tracked separately.
    """

    def __init__(self, max_iter: Optional[int] = None):
        """
        Args:
            max_iter: Maximum number of iterations, None for no cap
        """
        super().__init__()
        self.max_iter = max_iter
        self.reached = False

    def check(self, current_state: Dict[str, Any]) -> bool:
        if self.max_iter is None:
            return False
        self.reached = current_state['iteration'] >= self.max_iter
        return self.reached

    def reset(self):
        super().reset()
        self.reached = False
