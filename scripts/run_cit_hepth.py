#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import matplotlib.pyplot as plt

from citation_centrality import (
    PageRankConfig,
    calculate_degree_centrality,
    calculate_pagerank_centrality,
    load_network,
    overlap_at_k,
    spearman_rho,
)
from citation_centrality.loader import SNAP_HEADER_LINES
from citation_centrality.pagerank import DAMPING_FACTOR, MAX_ITERATIONS, TOLERANCE


def main() -> None:
    ap = argparse.ArgumentParser(description="Rank papers of a SNAP citation network by in-degree and PageRank.")

    ap.add_argument("--data", default="data/cit-HepTh.txt", help="Edge-list file (may be gzipped).")
    ap.add_argument("--skip-rows", type=int, default=SNAP_HEADER_LINES, help="Header lines to skip before the edge list.")
    ap.add_argument("--top", type=int, default=5, help="How many papers to print per ranking.")
    ap.add_argument("--outputs-dir", default=None, help="Directory to save CSV/figures (optional).")

    ap.add_argument("--damping", type=float, default=DAMPING_FACTOR, help="PageRank damping factor.")
    ap.add_argument("--max-iter", type=int, default=MAX_ITERATIONS, help="Max power iterations.")
    ap.add_argument("--tol", type=float, default=TOLERANCE, help="Power iteration L1 tolerance.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every PageRank iteration.")

    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = PageRankConfig(damping=args.damping, tol=args.tol, max_iter=args.max_iter)
    network = load_network(args.data, skip_rows=args.skip_rows)

    degree_ranks = calculate_degree_centrality(network)
    print(f"Degree Centrality Scores: \n{degree_ranks.top(args.top)}")
    pagerank_ranks = calculate_pagerank_centrality(network, config)
    print(f"PageRank Centrality Scores: \n{pagerank_ranks.top(args.top)}")

    print(f"Spearman rho (in-degree vs PageRank): {spearman_rho(degree_ranks, pagerank_ranks):.4f}")
    print(f"overlap@{args.top}: {overlap_at_k(degree_ranks, pagerank_ranks, max(args.top, 1)):.2f}")

    if args.outputs_dir is None:
        return

    outputs_dir = Path(args.outputs_dir)
    (outputs_dir / "figures").mkdir(parents=True, exist_ok=True)

    degree_ranks.to_frame().rename(columns={"score": "in_degree"}).to_csv(
        outputs_dir / "degree_ranking.csv", index=False
    )
    pagerank_ranks.to_frame().rename(columns={"score": "pagerank"}).to_csv(
        outputs_dir / "pagerank_ranking.csv", index=False
    )

    # Figure: in-degree vs PageRank per paper
    merged = degree_ranks.to_frame().merge(
        pagerank_ranks.to_frame(), on="vertex", suffixes=("_degree", "_pagerank")
    )
    plt.figure()
    plt.scatter(merged["score_degree"], merged["score_pagerank"], s=4, alpha=0.5)
    plt.xscale("symlog")
    plt.yscale("log")
    plt.xlabel("In-degree")
    plt.ylabel("PageRank")
    plt.title("PageRank vs in-degree")
    plt.tight_layout()
    fig = outputs_dir / "figures" / "pagerank_vs_in_degree.png"
    plt.savefig(fig, dpi=300, bbox_inches="tight")
    plt.close()

    print("Saved:", outputs_dir / "degree_ranking.csv")
    print("Saved:", outputs_dir / "pagerank_ranking.csv")
    print("Saved figure:", fig)


if __name__ == "__main__":
    main()
