"""Scored nodes and the ranking container shared by every centrality metric."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, List, TypeVar, Union

import pandas as pd


class Centrality(ABC):
    """Centrality score of a single paper.

    Subclasses pick the score type: in-degree is an int, PageRank a float.
    Entries compare and order by score only, never by vertex.
    """

    __slots__ = ("_vertex",)

    def __init__(self, vertex: int) -> None:
        self._vertex = int(vertex)

    @property
    def vertex(self) -> int:
        return self._vertex

    @property
    @abstractmethod
    def score(self) -> Union[int, float]:
        ...

    def __lt__(self, other: "Centrality") -> bool:
        if not isinstance(other, Centrality):
            return NotImplemented
        return self.score < other.score

    def __gt__(self, other: "Centrality") -> bool:
        if not isinstance(other, Centrality):
            return NotImplemented
        return self.score > other.score

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.score == other.score

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertex={self.vertex}, score={self.score!r})"


C = TypeVar("C", bound=Centrality)


class CentralityRank(Generic[C]):
    """Centrality entries of a network, sorted by descending score.

    The entries are taken as given; callers are expected to pass them
    already sorted. Order among equal scores is unspecified.
    """

    def __init__(self, ranks: Iterable[C]) -> None:
        self._ranks: List[C] = list(ranks)

    @classmethod
    def from_unsorted(cls, entries: Iterable[C]) -> "CentralityRank[C]":
        return cls(sorted(entries, key=lambda c: c.score, reverse=True))

    def top(self, n: int) -> "CentralityRank[C]":
        """Return a new rank holding the first ``n`` entries."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return CentralityRank(self._ranks[:n])

    def __getitem__(self, index: int) -> C:
        return self._ranks[index]

    def __len__(self) -> int:
        return len(self._ranks)

    def __iter__(self) -> Iterator[C]:
        return iter(self._ranks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CentralityRank):
            return NotImplemented
        return self._ranks == other._ranks

    __hash__ = None  # type: ignore[assignment]

    def vertices(self) -> List[int]:
        return [c.vertex for c in self._ranks]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "vertex": [c.vertex for c in self._ranks],
                "score": [c.score for c in self._ranks],
            }
        )

    def __str__(self) -> str:
        return "".join(f"{c}\n" for c in self._ranks)

    def __repr__(self) -> str:
        return f"CentralityRank({len(self._ranks)} entries)"
