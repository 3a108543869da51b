"""Discrete Fréchet distance between ordered point sequences."""

import numpy as np

from ...utils.geometry import as_coordinates


def discrete_frechet(p, q) -> float:
    """
    Discrete Fréchet distance between two curves.

    Fills the n x m coupling table where each cell holds the larger of the
    current point distance and the smallest admissible predecessor.

    Args:
        p: First curve (Curve or (n, 2) array-like)
        q: Second curve (Curve or (m, 2) array-like)

    Returns:
        Distance, or ``inf`` if either curve is empty
    """
    p = as_coordinates(p)
    q = as_coordinates(q)
    n, m = len(p), len(q)
    if n == 0 or m == 0:
        return float("inf")

    dist = np.linalg.norm(p[:, None, :] - q[None, :, :], axis=-1).tolist()

    table = [[0.0] * m for _ in range(n)]
    table[0][0] = dist[0][0]
    for j in range(1, m):
        table[0][j] = max(table[0][j - 1], dist[0][j])
    for i in range(1, n):
        prev = table[i - 1]
        row = table[i]
        d_row = dist[i]
        row[0] = max(prev[0], d_row[0])
        for j in range(1, m):
            row[j] = max(min(prev[j], row[j - 1], prev[j - 1]), d_row[j])

    return float(table[n - 1][m - 1])


def discrete_frechet_batch(ps, q) -> np.ndarray:
    """
    Discrete Fréchet distance of many curves against one reference.

    The recurrence is evaluated row by row for every query at once, keeping
    only two rows of the table per query. Each entry equals
    ``discrete_frechet(ps[k], q)``.

    Args:
        ps: Query curves stacked as an array of shape (k, n, 2)
        q: Reference curve, (m, 2) array-like or Curve

    Returns:
        Array of shape (k,) with one distance per query
    """
    ps = np.asarray(ps, dtype=float)
    q = as_coordinates(q)
    if ps.ndim != 3 or ps.shape[-1] != 2:
        raise ValueError(f"Expected query stack of shape (k, n, 2), got {ps.shape}")
    k, n = ps.shape[0], ps.shape[1]
    m = len(q)
    if n == 0 or m == 0:
        return np.full(k, np.inf)

    def row_distances(i: int) -> np.ndarray:
        return np.linalg.norm(ps[:, i, None, :] - q[None, :, :], axis=-1)

    prev = np.maximum.accumulate(row_distances(0), axis=1)
    for i in range(1, n):
        d_row = row_distances(i)
        row = np.empty_like(d_row)
        row[:, 0] = np.maximum(prev[:, 0], d_row[:, 0])
        for j in range(1, m):
            best = np.minimum(np.minimum(prev[:, j], row[:, j - 1]), prev[:, j - 1])
            row[:, j] = np.maximum(best, d_row[:, j])
        prev = row

    return prev[:, m - 1]
