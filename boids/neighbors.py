"""Nearest-neighbor queries against the previous-frame flock snapshot."""

import math
import numpy as np
from numba import njit
from typing import List, NamedTuple


class NeighborRecord(NamedTuple):
    """One entry of a neighborhood: distance to the subject and slot index."""
    distance: float
    index: int


# ============================================================================
# NUMBA JIT-COMPILED DISTANCE KERNELS
# ============================================================================

@njit(cache=True)
def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    dz = a[2] - b[2]
    return math.sqrt(dx * dx + dy * dy + dz * dz)


@njit(cache=True)
def distances_from(point: np.ndarray, positions: np.ndarray) -> np.ndarray:
    """Distance from `point` to every row of `positions`."""
    n = positions.shape[0]
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        out[i] = distance(point, positions[i])
    return out


@njit(cache=True)
def nearest_k(
    point: np.ndarray,
    positions: np.ndarray,
    subject_index: int,
    k: int
):
    """
    K nearest rows of `positions`, skipping `subject_index`.

    Candidates are visited in index order and inserted only ahead of strictly
    farther entries, so equal distances keep ascending index order.

    Returns:
        (distances, indices) arrays of length k, nearest first
    """
    dists = distances_from(point, positions)
    best_dist = np.full(k, np.inf)
    best_idx = np.full(k, -1, dtype=np.int64)
    filled = 0

    for j in range(positions.shape[0]):
        if j == subject_index:
            continue

        d = dists[j]
        if filled == k and d >= best_dist[k - 1]:
            continue

        slot = filled if filled < k else k - 1
        while slot > 0 and best_dist[slot - 1] > d:
            best_dist[slot] = best_dist[slot - 1]
            best_idx[slot] = best_idx[slot - 1]
            slot -= 1
        best_dist[slot] = d
        best_idx[slot] = j

        if filled < k:
            filled += 1

    return best_dist, best_idx


# ============================================================================
# PYTHON API
# ============================================================================

def find_neighbors(
    position: np.ndarray,
    previous_positions: np.ndarray,
    k: int,
    subject_index: int = -1
) -> List[NeighborRecord]:
    """
    Find the K boids closest to `position` in the previous-frame snapshot.

    Args:
        position: Subject position
        previous_positions: (N, 3) positions from the last published frame
        k: Neighborhood size
        subject_index: Slot of the subject in the snapshot, excluded from the
            result; -1 if the subject is not part of the snapshot

    Returns:
        K records sorted by distance, ties ordered by index

    Raises:
        ValueError: if fewer than K other boids exist
    """
    count = previous_positions.shape[0]
    others = count - 1 if 0 <= subject_index < count else count
    if k < 1 or k > others:
        raise ValueError(f"neighborhood size {k} invalid for {others} other boids")

    dists, idxs = nearest_k(
        np.ascontiguousarray(position, dtype=np.float64),
        np.ascontiguousarray(previous_positions, dtype=np.float64),
        subject_index,
        k
    )
    return [NeighborRecord(float(d), int(i)) for d, i in zip(dists, idxs)]
