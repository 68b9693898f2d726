from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

from .network import CitationNetwork

logger = logging.getLogger(__name__)

# SNAP citation files (e.g. cit-HepTh.txt) open with a 4-line "#" header.
SNAP_HEADER_LINES = 4


def read_edge_list(path: Union[str, Path], skip_rows: int = SNAP_HEADER_LINES) -> pd.DataFrame:
    """Read a whitespace-separated ``from to`` edge list into a DataFrame.

    Compressed files (``.gz``, ``.bz2``, ...) are decompressed transparently.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Edge list not found: {path}")

    try:
        return pd.read_csv(
            path,
            sep=r"\s+",
            skiprows=int(skip_rows),
            header=None,
            names=["from", "to"],
            usecols=[0, 1],
            dtype=np.int64,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame({"from": [], "to": []}, dtype=np.int64)
    except ValueError as e:
        raise ValueError(f"{path}: expected two integer node ids per line ({e})") from e


def load_network(path: Union[str, Path], skip_rows: int = SNAP_HEADER_LINES) -> CitationNetwork:
    """Load a citation network from an edge-list file."""
    df = read_edge_list(path, skip_rows=skip_rows)
    network = CitationNetwork.from_edges(
        zip(df["from"].tolist(), df["to"].tolist())
    )
    logger.info("Loaded %r from %s", network, path)
    return network
