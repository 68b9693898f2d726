from __future__ import annotations

import logging

from .centrality import Centrality, CentralityRank
from .network import CitationNetwork

logger = logging.getLogger(__name__)


class DegreeCentrality(Centrality):
    """In-degree of a paper: how many times it is cited in the network."""

    __slots__ = ("_in_degree",)

    def __init__(self, vertex: int, in_degree: int) -> None:
        super().__init__(vertex)
        self._in_degree = int(in_degree)

    @property
    def score(self) -> int:
        return self._in_degree

    in_degree = score

    def __str__(self) -> str:
        return f"vertex {self.vertex}: in-degree {self._in_degree}"


def calculate_degree_centrality(network: CitationNetwork) -> CentralityRank[DegreeCentrality]:
    """Rank every node of ``network`` by in-degree, highest first."""
    logger.debug("Calculating in-degree centrality for %r", network)
    return CentralityRank.from_unsorted(
        DegreeCentrality(vertex, len(network.in_edges(vertex)))
        for vertex in network.nodes()
    )
