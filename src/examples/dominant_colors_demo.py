"""
Demo of dominant color finding with genkmeans.

This example shows how to:
1. Build a synthetic "image" as a list of RGB pixels
2. Cluster the pixels into K dominant colors, printing every iteration
3. Print the final colors with their share and SSE
"""

import torch

# Add parent directory to path for imports
import sys
sys.path.append('..')

from genkmeans import create_color_kmeans, PrintingListener
from genkmeans.strategies import rgb_to_hex


def generate_pixels(width=40, height=30, palette=((200, 30, 30), (20, 160, 40), (30, 40, 220)),
                    noise=12.0, seed=7):
    """Generate pixels drawn around a few base colors.

    Returns a list of (r, g, b) integer tuples, one per pixel.
    """
    generator = torch.Generator()
    generator.manual_seed(seed)

    base = torch.tensor(palette, dtype=torch.float32)
    n_pixels = width * height

    # Uneven color shares so the size ordering is visible
    weights = torch.linspace(3.0, 1.0, len(palette))
    choice = torch.multinomial(weights, n_pixels, replacement=True, generator=generator)

    pixels = base[choice] + noise * torch.randn(n_pixels, 3, generator=generator)
    pixels = pixels.round().clamp(0, 255).to(torch.long)

    return [tuple(pixel) for pixel in pixels.tolist()]


def main(k=3):
    pixels = generate_pixels()

    kmeans = create_color_kmeans(n_clusters=k, random_init=0, listener=PrintingListener())
    clusters = kmeans.run(pixels)

    print(f"\nDominant colors after {kmeans.n_iter_} iterations:")
    for cluster in clusters:
        share = 100.0 * cluster.size() / len(pixels)
        print(f"  {rgb_to_hex(cluster.center)}  {share:5.1f}%  sse={cluster.error:.1f}")


if __name__ == '__main__':
    main()
