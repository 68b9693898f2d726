from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple


class CitationNetwork:
    """A directed citation graph stored as reverse adjacency.

    An edge ``from_ -> to`` means paper ``from_`` cites paper ``to``. For every
    node the network keeps the list of papers citing it (its predecessors),
    together with a forward counter of how many citations the node makes.
    Parallel edges are kept: citing the same paper twice counts twice.
    """

    def __init__(self) -> None:
        self._in_edges: Dict[int, List[int]] = {}
        self._out_degree: Dict[int, int] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]]) -> "CitationNetwork":
        network = cls()
        for from_, to in edges:
            network.add_edge(from_, to)
        return network

    def add_edge(self, from_: int, to: int) -> None:
        """Record that paper ``from_`` cites paper ``to``."""
        self._in_edges.setdefault(to, []).append(from_)
        self._in_edges.setdefault(from_, [])
        self._out_degree[from_] = self._out_degree.get(from_, 0) + 1
        self._out_degree.setdefault(to, 0)

    def size(self) -> int:
        return len(self._in_edges)

    def num_edges(self) -> int:
        return sum(len(preds) for preds in self._in_edges.values())

    def nodes(self) -> Iterator[int]:
        return iter(self._in_edges)

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(from_, to)`` once per inserted edge."""
        for to, preds in self._in_edges.items():
            for from_ in preds:
                yield from_, to

    def in_edges(self, node: int) -> List[int]:
        """Papers citing ``node``; raises KeyError for an unknown node."""
        try:
            return self._in_edges[node]
        except KeyError:
            raise KeyError(f"node {node} is not in the network") from None

    def out_degree(self, node: int) -> int:
        try:
            return self._out_degree[node]
        except KeyError:
            raise KeyError(f"node {node} is not in the network") from None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, node: object) -> bool:
        return node in self._in_edges

    def __repr__(self) -> str:
        return f"CitationNetwork(nodes={self.size()}, edges={self.num_edges()})"
