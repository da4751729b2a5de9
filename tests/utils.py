# tests/utils.py
"""
Small, reusable helpers used across the genkmeans test suite.

Functions:
- assert_partition(clusters, n): every index in [0, n) in exactly one cluster.
- membership_sets(clusters): frozensets of members, order-free comparison.
- snapshot(clusters): plain-data copy of cluster state (centers, members, errors).
- perm_invariant_accuracy(y_pred, split_index): best accuracy over label swap for 2-way splits.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from typing import Any, Dict, FrozenSet, List, Sequence, Tuple

import numpy as np
import torch


def assert_partition(clusters: Sequence[Any], n_points: int) -> None:
    """Fail unless memberships cover range(n_points) exactly once each."""
    seen: List[int] = []
    for cluster in clusters:
        seen.extend(cluster.members)
    assert sorted(seen) == list(range(n_points)), f"not a partition: {sorted(seen)}"


def membership_sets(clusters: Sequence[Any]) -> set[FrozenSet[int]]:
    """Set of member-index sets, ignoring cluster order."""
    return {frozenset(cluster.members) for cluster in clusters}


def _plain(value: Any) -> Any:
    if isinstance(value, torch.Tensor):
        return tuple(value.detach().cpu().reshape(-1).tolist())
    if isinstance(value, np.ndarray):
        return tuple(value.reshape(-1).tolist())
    return value


def snapshot(clusters: Sequence[Any]) -> List[Tuple[Any, Tuple[int, ...], Any]]:
    """Copy (center, members, error) of every cluster into plain data."""
    return [(_plain(c.center), tuple(c.members), c.error) for c in clusters]


def perm_invariant_accuracy(y_pred: np.ndarray, split_index: int) -> float:
    """
    Best accuracy over label swaps for 2-way synthetic datasets where the
    first `split_index` points belong to class 0 and the rest to class 1.
    """
    y_pred = np.asarray(y_pred)
    if y_pred.ndim != 1:
        raise ValueError(f"y_pred must be 1D, got shape {y_pred.shape}")
    n = y_pred.size
    if not (0 <= split_index <= n):
        raise ValueError(f"split_index must be in [0, {n}], got {split_index}")

    first = y_pred[:split_index]
    second = y_pred[split_index:]

    acc_a = (np.sum(first == 0) + np.sum(second == 1)) / max(1, n)
    acc_b = (np.sum(first == 1) + np.sum(second == 0)) / max(1, n)

    return float(max(acc_a, acc_b))


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] run {"n":400,"K":3} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """Print timing in a compact, machine-readable single line."""
    meta_str = ""
    if meta:
        try:
            meta_str = " " + json.dumps(meta, separators=(",", ":"))
        except TypeError:
            meta_str = " " + repr(meta)
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
