"""Agreement between two rankings of the same network."""

from __future__ import annotations

import numpy as np
from scipy.stats import spearmanr

from .centrality import CentralityRank


def _aligned_scores(a: CentralityRank, b: CentralityRank) -> tuple[np.ndarray, np.ndarray]:
    b_scores = {c.vertex: c.score for c in b}
    common = [c for c in a if c.vertex in b_scores]
    x = np.array([float(c.score) for c in common], dtype=np.float64)
    y = np.array([float(b_scores[c.vertex]) for c in common], dtype=np.float64)
    return x, y


def spearman_rho(a: CentralityRank, b: CentralityRank) -> float:
    """Spearman rank correlation of the scores of vertices present in both rankings.

    Returns nan when fewer than two vertices are shared or a score vector is constant.
    """
    x, y = _aligned_scores(a, b)
    if len(x) < 2 or np.all(x == x[0]) or np.all(y == y[0]):
        return float("nan")
    rho, _ = spearmanr(x, y)
    return float(rho)


def overlap_at_k(a: CentralityRank, b: CentralityRank, k: int) -> float:
    """Fraction of the top-``k`` vertices that the two rankings share."""
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")
    pred = set(a.top(k).vertices())
    truth = set(b.top(k).vertices())
    return len(pred & truth) / float(k)
