import math

import pytest

from citation_centrality import (
    CentralityRank,
    DegreeCentrality,
    PageRankCentrality,
    calculate_degree_centrality,
    calculate_pagerank_centrality,
    overlap_at_k,
    spearman_rho,
)


def test_degree_and_pagerank_agree_on_chain(chain_network):
    degree = calculate_degree_centrality(chain_network)
    pagerank = calculate_pagerank_centrality(chain_network)
    assert spearman_rho(degree, pagerank) == pytest.approx(1.0)
    assert overlap_at_k(degree, pagerank, 2) == 1.0


def test_reversed_scores_anticorrelate():
    a = CentralityRank([DegreeCentrality(1, 3), DegreeCentrality(2, 2), DegreeCentrality(3, 1)])
    b = CentralityRank([PageRankCentrality(3, 0.5), PageRankCentrality(2, 0.3), PageRankCentrality(1, 0.2)])
    assert spearman_rho(a, b) == pytest.approx(-1.0)
    assert overlap_at_k(a, b, 1) == 0.0
    assert overlap_at_k(a, b, 3) == 1.0


def test_constant_scores_give_nan():
    a = CentralityRank([DegreeCentrality(1, 1), DegreeCentrality(2, 1)])
    b = CentralityRank([DegreeCentrality(1, 2), DegreeCentrality(2, 1)])
    assert math.isnan(spearman_rho(a, b))


def test_overlap_rejects_non_positive_k(chain_network):
    degree = calculate_degree_centrality(chain_network)
    with pytest.raises(ValueError):
        overlap_at_k(degree, degree, 0)
