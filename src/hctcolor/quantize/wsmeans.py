from __future__ import annotations

"""Weighted k-means refinement of quantized colors (WSMeans).

Distinct pixel colors are clustered in L*a*b*, each weighted by its pixel
count. Iteration starts from the given seed colors (normally Wu's), moves
every color to its nearest centroid, recomputes centroids as weighted
means, and stops when nothing moves or the iteration cap is reached.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from common import settings

from .lab import argb_from_point, lab_points

logger = logging.getLogger(__name__)

MAX_COLORS = 256
# A color moves only when its distance improves by more than this (in ΔE).
MIN_MOVEMENT_DISTANCE = 3.0


@dataclass
class QuantizerResult:
    """Outcome of a quantizer run.

    Attributes
    ----------
    color_to_count:
        Cluster color (ARGB) to the number of input pixels it represents,
        most populous first. Keys are unique.
    input_pixel_to_cluster_pixel:
        Each distinct input pixel to the cluster color it was assigned to.
    """

    color_to_count: Dict[int, int] = field(default_factory=dict)
    input_pixel_to_cluster_pixel: Dict[int, int] = field(default_factory=dict)


@njit(cache=True, fastmath=False)
def _reassign(
    points: np.ndarray,
    clusters: np.ndarray,
    cluster_indices: np.ndarray,
    min_movement: float,
) -> bool:
    """Move points to their nearest cluster in place; True if any moved.

    Candidates are pruned with the triangle inequality: a cluster whose
    squared distance from the current one is at least 4x the point's own
    squared distance cannot be nearer.
    """
    k = clusters.shape[0]
    between = np.zeros((k, k), dtype=np.float64)
    for i in range(k):
        for j in range(i + 1, k):
            d0 = clusters[i, 0] - clusters[j, 0]
            d1 = clusters[i, 1] - clusters[j, 1]
            d2 = clusters[i, 2] - clusters[j, 2]
            d = d0 * d0 + d1 * d1 + d2 * d2
            between[i, j] = d
            between[j, i] = d
    order = np.empty((k, k), dtype=np.int64)
    for i in range(k):
        order[i] = np.argsort(between[i], kind="mergesort")

    moved = False
    for p in range(points.shape[0]):
        prev = cluster_indices[p]
        d0 = points[p, 0] - clusters[prev, 0]
        d1 = points[p, 1] - clusters[prev, 1]
        d2 = points[p, 2] - clusters[prev, 2]
        previous_distance = d0 * d0 + d1 * d1 + d2 * d2
        minimum_distance = previous_distance
        new_index = -1
        for n in range(k):
            j = order[prev, n]
            if between[prev, j] >= 4.0 * previous_distance:
                # Sorted row: every remaining cluster is at least as far.
                break
            d0 = points[p, 0] - clusters[j, 0]
            d1 = points[p, 1] - clusters[j, 1]
            d2 = points[p, 2] - clusters[j, 2]
            distance = d0 * d0 + d1 * d1 + d2 * d2
            if distance < minimum_distance:
                minimum_distance = distance
                new_index = j
        if new_index != -1:
            change = abs(np.sqrt(minimum_distance) - np.sqrt(previous_distance))
            if change > min_movement:
                moved = True
                cluster_indices[p] = new_index
    return moved


def quantize_wsmeans(
    input_pixels: Sequence[int],
    starting_clusters: Sequence[int],
    max_colors: int,
    *,
    max_iterations: Optional[int] = None,
    seed: Optional[int] = None,
) -> QuantizerResult:
    """Cluster ``input_pixels`` into at most ``max_colors`` colors.

    Parameters
    ----------
    input_pixels:
        ARGB pixels. Duplicates add weight.
    starting_clusters:
        Initial centroids as ARGB. When empty, random L*a*b* centroids are
        drawn instead.
    max_colors:
        Upper bound on the number of clusters, capped at 256.
    max_iterations:
        Iteration cap; defaults to ``HCT_WSMEANS_MAX_ITERATIONS``.
    seed:
        Seed of the initial random assignment; defaults to
        ``HCT_WSMEANS_SEED``. The same seed gives the same result.

    Returns
    -------
    QuantizerResult
        Clusters that received pixels. Clusters that end on the same ARGB
        are merged and their counts summed, so the counts always add up to
        ``len(input_pixels)``.
    """
    if max_colors <= 0 or len(input_pixels) == 0:
        return QuantizerResult()
    max_colors = min(max_colors, MAX_COLORS)
    cfg = settings.get()
    if max_iterations is None:
        max_iterations = cfg.WSMEANS_MAX_ITERATIONS
    if seed is None:
        seed = cfg.WSMEANS_SEED

    pixel_to_count: Dict[int, int] = {}
    for raw in input_pixels:
        pixel = int(raw)
        pixel_to_count[pixel] = pixel_to_count.get(pixel, 0) + 1
    pixels = list(pixel_to_count)
    counts = np.asarray([pixel_to_count[p] for p in pixels], dtype=np.float64)
    points = lab_points(pixels)

    cluster_count = min(max_colors, len(points))
    if len(starting_clusters) > 0:
        cluster_count = min(cluster_count, len(starting_clusters))

    rng = np.random.default_rng(seed)
    clusters = lab_points(starting_clusters[:cluster_count])
    if len(starting_clusters) == 0:
        clusters = np.column_stack(
            (
                rng.random(cluster_count) * 100.0,
                rng.random(cluster_count) * 200.0 - 100.0,
                rng.random(cluster_count) * 200.0 - 100.0,
            )
        )
    cluster_indices = rng.integers(0, cluster_count, size=len(points)).astype(np.int64)

    pixel_count_sums = np.zeros(cluster_count, dtype=np.float64)
    iteration = 0
    for iteration in range(max_iterations):
        moved = _reassign(points, clusters, cluster_indices, MIN_MOVEMENT_DISTANCE)
        if not moved and iteration != 0:
            break

        pixel_count_sums = np.bincount(cluster_indices, weights=counts, minlength=cluster_count)
        sums = np.column_stack(
            [
                np.bincount(cluster_indices, weights=points[:, c] * counts, minlength=cluster_count)
                for c in range(3)
            ]
        )
        populated = pixel_count_sums > 0
        clusters = np.zeros((cluster_count, 3), dtype=np.float64)
        clusters[populated] = sums[populated] / pixel_count_sums[populated, None]
    logger.debug(
        "wsmeans: %d distinct colors, %d clusters, stopped at iteration %d",
        len(points),
        cluster_count,
        iteration,
    )

    cluster_argbs = [argb_from_point(c) for c in clusters]
    color_to_count: Dict[int, int] = {}
    for argb, count in zip(cluster_argbs, pixel_count_sums):
        if count == 0:
            continue
        color_to_count[argb] = color_to_count.get(argb, 0) + int(count)
    color_to_count = dict(sorted(color_to_count.items(), key=lambda kv: kv[1], reverse=True))

    input_pixel_to_cluster_pixel = {
        pixel: cluster_argbs[index] for pixel, index in zip(pixels, cluster_indices.tolist())
    }
    return QuantizerResult(color_to_count, input_pixel_to_cluster_pixel)


__all__ = ["QuantizerResult", "quantize_wsmeans", "MIN_MOVEMENT_DISTANCE"]
