# tests/test_empty_cluster.py
"""
Empty cluster policies.

Two identical starting centers make the second cluster lose every point in
the first iteration (ties go to the first cluster).
"""

from __future__ import annotations

import pytest

from genkmeans import KMeans, EuclideanStrategy, EmptyClusterError, mean_centroid, euclidean_distance

POINTS = [(0.0, 0.0), (0.0, 0.0), (5.0, 5.0)]


def test_raise_policy():
    kmeans = KMeans(n_clusters=2, strategy=EuclideanStrategy(), initial_centroids=[0, 1])
    with pytest.raises(EmptyClusterError) as excinfo:
        kmeans.run(POINTS)
    assert excinfo.value.details == {'cluster': 1, 'iteration': 1}


def test_keep_policy_recovers():
    kmeans = KMeans(n_clusters=2, strategy=EuclideanStrategy(),
                    initial_centroids=[0, 1], empty_cluster='keep')
    clusters = kmeans.run(POINTS)

    assert [c.members for c in clusters] == [(0, 1), (2,)]
    assert clusters[0].center == pytest.approx((0.0, 0.0))
    assert clusters[1].center == pytest.approx((5.0, 5.0))
    assert kmeans.n_iter_ == 3
    # the empty cluster contributes no movement in iteration 1
    assert kmeans.history_[0].sizes == [3, 0]


def test_delegate_policy_with_mean_raises():
    kmeans = KMeans(n_clusters=2, strategy=EuclideanStrategy(),
                    initial_centroids=[0, 1], empty_cluster='delegate')
    with pytest.raises(EmptyClusterError):
        kmeans.run(POINTS)


def test_delegate_policy_with_custom_centroid():
    calls = []

    def centroid(points, indices, size):
        calls.append(size)
        if size == 0:
            return (100.0, 100.0)
        return mean_centroid(points, indices, size)

    kmeans = KMeans(n_clusters=2, distance_fn=euclidean_distance, centroid_fn=centroid,
                    initial_centroids=[0, 1], empty_cluster='delegate')
    clusters = kmeans.run(POINTS)

    assert 0 in calls
    assert [c.size() for c in clusters] == [3, 0]
    assert clusters[1].center == (100.0, 100.0)
    assert clusters[0].center == pytest.approx((5.0 / 3.0, 5.0 / 3.0))
