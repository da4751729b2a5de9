import pytest

from genkmeans import create_color_kmeans, PrintingListener
from genkmeans.strategies import rgb_to_hex
from utils import assert_partition, time_block
from data_gen import make_color_pixels, DEFAULT_PALETTE


def test_dominant_colors_found(seed_all):
    pixels = make_color_pixels(counts=(60, 30, 10), noise=8, seed=seed_all)
    kmeans = create_color_kmeans(3, fixed_init=[0, 60, 90])

    with time_block("dominant_colors", {"n": len(pixels), "K": 3}):
        clusters = kmeans.run(pixels)

    assert [c.size() for c in clusters] == [60, 30, 10]
    assert_partition(clusters, len(pixels))
    assert set(clusters[0].members) == set(range(60))

    for cluster, base in zip(clusters, DEFAULT_PALETTE):
        center = cluster.center
        assert isinstance(center, tuple) and len(center) == 3
        assert all(isinstance(channel, int) for channel in center)
        assert all(abs(c - b) <= 8 for c, b in zip(center, base))
        assert cluster.error is not None and cluster.error > 0.0
        rgb_to_hex(center)


def test_dominant_colors_with_random_init(seed_all):
    pixels = make_color_pixels(counts=(50, 50), palette=((250, 250, 250), (5, 5, 5)),
                               noise=4, seed=seed_all)
    lines = []
    # noisy pixels can repeat, so two identical starting colors are possible
    kmeans = create_color_kmeans(2, random_init=seed_all, empty_cluster_policy="keep",
                                 listener=PrintingListener(write=lines.append))

    clusters = kmeans.run(pixels)

    assert sorted(c.size() for c in clusters) == [50, 50]
    assert lines and lines[0].startswith("1:Cluster [")
    assert kmeans.history_[-1].total_error == pytest.approx(sum(c.error for c in clusters))
