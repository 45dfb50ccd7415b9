# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Deterministic k-means clustering for LAB pixel sets.

K-means initialization is the only source of randomness in the color
core. It is driven by a seeded generator so that the same pixels always
produce the same clusters.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray


def kmeans(
    data: NDArray[np.float64],
    k: int,
    max_iter: int = 100,
    seed: Optional[int] = 42,
) -> tuple[NDArray[np.float64], NDArray[np.int64]]:
    """
    Vectorized k-means (Lloyd's algorithm).

    Uses k-means++ initialization over the unique points for better
    convergence. ``k`` is reduced to the number of unique points when
    there are fewer, so a uniform region yields a single exact cluster.

    Args:
        data: Array of shape (N, D)
        k: Number of clusters
        max_iter: Maximum iterations
        seed: Random seed (None for nondeterministic runs)

    Returns:
        (centroids, labels) where:
        - centroids: (k', D) array of cluster centers, k' <= k
        - labels: (N,) array of cluster assignments

    Raises:
        ValueError: if ``data`` is empty or ``k`` < 1
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")

    data = np.asarray(data, dtype=np.float64)
    rng = np.random.default_rng(seed)
    n, d = data.shape

    # Find unique points to avoid issues with duplicates
    unique_data = np.unique(data, axis=0)
    n_unique = len(unique_data)

    k = min(k, n_unique)
    if k == 0:
        raise ValueError("No valid data points for clustering")

    centroids = np.empty((k, d), dtype=np.float64)

    # First centroid: random unique point
    centroids[0] = unique_data[rng.integers(n_unique)]

    # Remaining centroids: weighted by squared distance to nearest chosen one
    for i in range(1, k):
        dists = np.min(
            np.sum(
                (unique_data[:, np.newaxis, :] - centroids[np.newaxis, :i, :]) ** 2,
                axis=2,
            ),
            axis=1,
        )
        total = dists.sum()
        if total == 0:
            centroids[i] = unique_data[rng.integers(n_unique)]
        else:
            centroids[i] = unique_data[rng.choice(n_unique, p=dists / total)]

    labels = np.full(n, -1, dtype=np.int64)

    for _ in range(max_iter):
        old_labels = labels

        # (N, k) squared distances
        dists = np.sum(
            (data[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2,
            axis=2
        )
        labels = np.argmin(dists, axis=1)

        if np.array_equal(labels, old_labels):
            break

        # Empty clusters keep their previous center
        for j in range(k):
            members = labels == j
            if np.any(members):
                centroids[j] = data[members].mean(axis=0)

    return centroids, labels


def largest_cluster(labels: NDArray[np.int64], k: int) -> tuple[int, NDArray[np.int64]]:
    """
    Index of the most populated cluster and the per-cluster counts.

    Ties go to the lowest cluster index.

    Args:
        labels: (N,) cluster assignments from kmeans()
        k: Number of clusters (length of the centroid array)

    Returns:
        (index, counts) where counts has shape (k,)
    """
    counts = np.bincount(labels, minlength=k)
    return int(np.argmax(counts)), counts
