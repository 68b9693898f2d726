"""Centrality rankings for directed citation networks.

This package provides:
- a reverse-adjacency citation network with forward out-degree counts,
- in-degree centrality,
- PageRank with sink-node mass redistribution,
- a ranking container with top-N truncation shared by both metrics.
"""

from .network import CitationNetwork
from .centrality import Centrality, CentralityRank
from .degree import DegreeCentrality, calculate_degree_centrality
from .pagerank import (
    PageRankCentrality,
    PageRankConfig,
    calculate_pagerank_centrality,
    pagerank_iterate,
    pagerank_scores,
)
from .loader import load_network, read_edge_list
from .compare import overlap_at_k, spearman_rho

__all__ = [
    "CitationNetwork",
    "Centrality",
    "CentralityRank",
    "DegreeCentrality",
    "calculate_degree_centrality",
    "PageRankCentrality",
    "PageRankConfig",
    "calculate_pagerank_centrality",
    "pagerank_iterate",
    "pagerank_scores",
    "load_network",
    "read_edge_list",
    "overlap_at_k",
    "spearman_rho",
]
