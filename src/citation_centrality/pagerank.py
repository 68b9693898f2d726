from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from .centrality import Centrality, CentralityRank
from .network import CitationNetwork

logger = logging.getLogger(__name__)

DAMPING_FACTOR = 0.85
TOLERANCE = 1e-9
MAX_ITERATIONS = 100
# Two PageRank scores closer than this compare equal.
EPSILON = 1e-12


@dataclass(frozen=True)
class PageRankConfig:
    """Parameters of the PageRank power iteration.

    damping:
        Probability of following a citation rather than jumping uniformly.
    tol:
        L1 convergence tolerance; iteration stops once the total absolute
        change of all scores drops below it.
    max_iter:
        Iteration cap. Reaching it is not an error: the last scores are kept.
    """

    damping: float = DAMPING_FACTOR
    tol: float = TOLERANCE
    max_iter: int = MAX_ITERATIONS

    def __post_init__(self) -> None:
        if not 0.0 <= float(self.damping) <= 1.0:
            raise ValueError(f"damping must be in [0, 1], got {self.damping}")
        if float(self.tol) <= 0:
            raise ValueError(f"tol must be positive, got {self.tol}")
        if int(self.max_iter) < 0:
            raise ValueError(f"max_iter must be non-negative, got {self.max_iter}")


class PageRankCentrality(Centrality):
    """PageRank of a single paper."""

    __slots__ = ("_pagerank",)

    def __init__(self, vertex: int, pagerank: float) -> None:
        super().__init__(vertex)
        self._pagerank = float(pagerank)

    @property
    def score(self) -> float:
        return self._pagerank

    pagerank = score

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return abs(self._pagerank - other._pagerank) <= EPSILON

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"vertex {self.vertex}: PageRank {self._pagerank}"


def pagerank_iterate(
    p: np.ndarray,
    src: np.ndarray,
    dst: np.ndarray,
    out_degree: np.ndarray,
    *,
    damping: float = DAMPING_FACTOR,
) -> Tuple[np.ndarray, float]:
    """Perform one PageRank step.

    Parameters
    ----------
    p:
        Current scores (length n), indexed by dense node index.
    src, dst:
        Edge endpoints as dense indices; edge k goes from src[k] to dst[k].
    out_degree:
        Number of outgoing edges per node. Nodes with zero out-degree are
        sinks; their mass is spread uniformly over all nodes.
    damping:
        Damping factor in [0, 1].

    Returns
    -------
    new: np.ndarray
        Updated scores. ``p`` itself is left untouched.
    delta: float
        L1 distance between ``new`` and ``p``.
    """
    n = p.shape[0]
    sinks = out_degree <= 0
    sink_mass = float(p[sinks].sum()) / n

    share = np.zeros(n, dtype=np.float64)
    np.divide(p, out_degree, out=share, where=~sinks)

    inbound = np.zeros(n, dtype=np.float64)
    np.add.at(inbound, dst, share[src])

    new = (1.0 - float(damping)) / n + float(damping) * (inbound + sink_mass)
    delta = float(np.abs(new - p).sum())
    return new, delta


def _index_network(network: CitationNetwork) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Map node ids onto 0..n-1 and build the edge and out-degree arrays."""
    node_ids = np.fromiter(network.nodes(), dtype=np.int64, count=network.size())
    id_to_idx = {int(v): i for i, v in enumerate(node_ids)}

    m = network.num_edges()
    src = np.empty(m, dtype=np.int64)
    dst = np.empty(m, dtype=np.int64)
    for k, (from_, to) in enumerate(network.edges()):
        src[k] = id_to_idx[from_]
        dst[k] = id_to_idx[to]

    out_degree = np.array([network.out_degree(int(v)) for v in node_ids], dtype=np.float64)
    return node_ids, src, dst, out_degree


def pagerank_scores(
    network: CitationNetwork,
    config: Optional[PageRankConfig] = None,
) -> Tuple[Dict[int, float], int, bool]:
    """Run the PageRank iteration on ``network``.

    Returns the score of every vertex, the number of iterations performed,
    and whether the tolerance was reached before the iteration cap.
    """
    config = config or PageRankConfig()
    n = network.size()
    if n == 0:
        return {}, 0, True

    node_ids, src, dst, out_degree = _index_network(network)
    p = np.full(n, 1.0 / n, dtype=np.float64)

    converged = False
    iterations = 0
    delta = float("inf")
    while not converged and iterations < int(config.max_iter):
        p, delta = pagerank_iterate(p, src, dst, out_degree, damping=config.damping)
        iterations += 1
        converged = delta < float(config.tol)
        logger.debug("PageRank iteration %d: delta=%.3e", iterations, delta)

    if converged:
        logger.info("PageRank converged after %d iterations (delta=%.3e)", iterations, delta)
    else:
        logger.info("PageRank stopped at the %d-iteration cap (delta=%.3e)", iterations, delta)

    return {int(v): float(s) for v, s in zip(node_ids, p)}, iterations, converged


def calculate_pagerank_centrality(
    network: CitationNetwork,
    config: Optional[PageRankConfig] = None,
) -> CentralityRank[PageRankCentrality]:
    """Rank every node of ``network`` by PageRank, highest first."""
    scores, _, _ = pagerank_scores(network, config)
    return CentralityRank.from_unsorted(
        PageRankCentrality(vertex, score) for vertex, score in scores.items()
    )
