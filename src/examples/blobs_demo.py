"""
Demo of Euclidean K-means on 2D blobs.

Generates Gaussian blobs, clusters them with a seeded engine, compares the
result for two initialization methods and plots the clusters and the
convergence curve.
"""

import torch
import matplotlib.pyplot as plt

# Add parent directory to path for imports
import sys
sys.path.append('..')

from genkmeans import create_kmeans, plot_clusters_2d, plot_convergence


def generate_blobs(n_per_cluster=150, centers=((0.0, 0.0), (6.0, 1.0), (2.0, 7.0)),
                   spread=1.0, seed=42):
    """Generate isotropic Gaussian blobs as an (n, 2) tensor."""
    torch.manual_seed(seed)

    data = []
    for center in centers:
        data.append(torch.tensor(center) + spread * torch.randn(n_per_cluster, 2))

    X = torch.cat(data, dim=0)
    return X[torch.randperm(len(X))]


def main():
    X = generate_blobs()

    results = {}
    for method in ('rejection', 'permutation'):
        kmeans = create_kmeans(n_clusters=3, random_init=0, error_scoring=True, verbose=1)
        kmeans.set_params(init_method=method)
        kmeans.fit(X)
        results[method] = kmeans
        print(f"{method:>11}: {kmeans.n_iter_} iterations, inertia={kmeans.inertia_:.2f}, "
              f"sizes={[c.size() for c in kmeans.clusters_]}")

    kmeans = results['rejection']

    fig, axes = plt.subplots(1, 2, figsize=(13, 5))
    plot_clusters_2d(X, kmeans.clusters_, ax=axes[0], title='K-means clusters')
    plot_convergence(kmeans.history_, ax=axes[1], title='Max centroid shift')
    plt.tight_layout()
    plt.show()


if __name__ == '__main__':
    main()
