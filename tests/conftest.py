"""
Shared citation networks for the test suite.
"""

import pytest

from citation_centrality import CitationNetwork


@pytest.fixture
def chain_network():
    """0 cites 1, 2, 3; 1 cites 2, 3; 2 cites 3."""
    return CitationNetwork.from_edges([(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])


@pytest.fixture
def small_network():
    """0 cites 1 and 2; 1 cites 2. Node 2 is a sink."""
    return CitationNetwork.from_edges([(0, 1), (0, 2), (1, 2)])


@pytest.fixture
def cyclic_network():
    """A few cycles, a sink, a parallel edge and a dangling citer."""
    return CitationNetwork.from_edges([
        (1, 2), (2, 3), (3, 1),
        (3, 4), (4, 5), (5, 4),
        (6, 4), (6, 4), (7, 1),
        (2, 8),
    ])
