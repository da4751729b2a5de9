# tests/test_visualization.py
"""
Plotting and text reporting smoke tests (headless Agg backend).
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
import torch

from genkmeans import (
    Cluster, PrintingListener, create_kmeans, format_clusters, plot_clusters_2d, plot_convergence
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_plot_clusters_2d_returns_axes(scenario_points):
    kmeans = create_kmeans(2, fixed_init=[0, 2]).fit(scenario_points)
    ax = plot_clusters_2d(scenario_points, kmeans.clusters_, title="scenario")

    assert ax.get_title() == "scenario"
    # one scatter per cluster plus the centers
    assert len(ax.collections) == 3


def test_plot_clusters_2d_tensor_points():
    X = torch.tensor([[0.0, 0.0], [1.0, 1.0], [9.0, 9.0]])
    a = Cluster(X[0])
    a.add_member(0)
    a.add_member(1)
    b = Cluster(X[2])
    b.add_member(2)

    fig, ax = plt.subplots()
    assert plot_clusters_2d(X, [a, b], ax=ax, show_legend=False) is ax


def test_plot_clusters_2d_rejects_3d():
    cluster = Cluster((0.0, 0.0, 0.0))
    cluster.add_member(0)
    with pytest.raises(ValueError, match="Expected 2D points"):
        plot_clusters_2d([(0.0, 0.0, 0.0)], [cluster])


def test_plot_convergence(scenario_points):
    kmeans = create_kmeans(2, fixed_init=[0, 1]).fit(scenario_points)
    ax = plot_convergence(kmeans.history_)
    xs, _ = ax.lines[0].get_data()
    assert list(xs) == [record.iteration for record in kmeans.history_]


def test_format_clusters():
    cluster = Cluster((1.0, 2.0))
    cluster.add_member(4)
    cluster.error = 0.5

    assert format_clusters([cluster]) == ["Cluster [(1.0, 2.0)], size=1, sse=0.5"]
    assert format_clusters([cluster], iteration=3) == ["3:Cluster [(1.0, 2.0)], size=1, sse=0.5"]


def test_printing_listener_reports_every_iteration(scenario_points):
    lines = []
    kmeans = create_kmeans(2, fixed_init=[0, 2], error_scoring=True,
                           listener=PrintingListener(write=lines.append))
    kmeans.run(scenario_points)

    assert len(lines) == 2 * kmeans.n_iter_
    assert lines[0].startswith("1:Cluster [")
    assert lines[-1].startswith(f"{kmeans.n_iter_}:Cluster [")
    assert all("size=" in line and "sse=" in line for line in lines)
