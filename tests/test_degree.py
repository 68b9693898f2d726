from citation_centrality import CitationNetwork, calculate_degree_centrality


def test_calculate_degree_centrality(chain_network):
    ranks = calculate_degree_centrality(chain_network)
    assert [(r.vertex, r.score) for r in ranks] == [(3, 3), (2, 2), (1, 1), (0, 0)]


def test_parallel_citations_count_twice():
    network = CitationNetwork.from_edges([(1, 2), (1, 2), (3, 4)])
    ranks = calculate_degree_centrality(network)
    assert ranks[0].vertex == 2
    assert ranks[0].score == 2


def test_one_entry_per_node(cyclic_network):
    ranks = calculate_degree_centrality(cyclic_network)
    assert sorted(ranks.vertices()) == sorted(cyclic_network.nodes())
    assert sum(r.score for r in ranks) == cyclic_network.num_edges()
    scores = [r.score for r in ranks]
    assert scores == sorted(scores, reverse=True)


def test_rerun_is_identical(cyclic_network):
    first = calculate_degree_centrality(cyclic_network)
    second = calculate_degree_centrality(cyclic_network)
    assert [(r.vertex, r.score) for r in first] == [(r.vertex, r.score) for r in second]


def test_empty_network():
    assert len(calculate_degree_centrality(CitationNetwork())) == 0


def test_top_render(chain_network):
    ranks = calculate_degree_centrality(chain_network)
    assert str(ranks.top(2)) == "vertex 3: in-degree 3\nvertex 2: in-degree 2\n"
