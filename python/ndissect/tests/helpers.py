#!/usr/bin/env python3
# =============================================================================
#     File: helpers.py
#  Created: 2025-07-09 09:12
#   Author: Bernie Roesler
#
"""Helper functions for the ndissect tests."""
# =============================================================================

import itertools

import pytest

import matplotlib.pyplot as plt
import numpy as np

from pathlib import Path
from scipy import sparse

import ndissect


# -----------------------------------------------------------------------------
#         Graph Generators
# -----------------------------------------------------------------------------
def random_graph(rng, N, d):
    """Create a random undirected graph with edge density `d`."""
    mask = np.triu(rng.random((N, N)) < d, k=1)
    A = sparse.csr_array(mask.astype(float))
    return sparse.csr_array(A + A.T)


def generate_random_graphs(seed=565656, N_trials=50, N_max=40, d_scale=0.3):
    """Generate a list of random undirected graphs with at most N_max nodes."""
    rng = np.random.default_rng(seed)
    for trial in range(N_trials):
        N = rng.integers(1, N_max, endpoint=True)
        d = d_scale * rng.random()  # density
        A = random_graph(rng, N, d)
        yield pytest.param(
            A,
            id=f"random_{trial:02d}::{A.shape}::{A.nnz}",
            marks=pytest.mark.random
        )


def generate_random_bisections(seed=565656, N_trials=50, N_max=30):
    """Generate random graphs, each with a random two-way labelling."""
    rng = np.random.default_rng(seed)
    for trial in range(N_trials):
        N = rng.integers(2, N_max, endpoint=True)
        A = random_graph(rng, N, 0.5 * rng.random())
        labels = rng.integers(1, 2, size=N, endpoint=True)
        yield pytest.param(
            A, labels,
            id=f"random_{trial:02d}::{A.shape}::{A.nnz}",
            marks=pytest.mark.random
        )


def generate_random_bipartite(seed=565656, N_trials=50, N_max=6):
    """Generate small random bipartite graphs as biadjacency matrices."""
    rng = np.random.default_rng(seed)
    for trial in range(N_trials):
        Na, Nb = rng.integers(1, N_max, size=2, endpoint=True)
        B = sparse.csr_array(rng.random((Na, Nb)) < rng.random())
        yield pytest.param(
            B,
            id=f"random_{trial:02d}::{B.shape}::{B.nnz}",
            marks=pytest.mark.random
        )


def path_graph(N):
    """Create the adjacency matrix of a path on N vertices."""
    return ndissect.build_adjacency([(i, i+1) for i in range(N - 1)], N)


def index_median(A, coords=None):
    """Bisect a graph at the median vertex index."""
    N = A.shape[0]
    return np.where(np.arange(N) < (N + 1) // 2, 1, 2)


# -----------------------------------------------------------------------------
#         Checks
# -----------------------------------------------------------------------------
def has_edges_between(A, a, b):
    """Check if any edge of `A` joins a vertex of `a` to a vertex of `b`."""
    a = np.asarray(a, dtype=int)
    b = np.asarray(b, dtype=int)
    if a.size == 0 or b.size == 0:
        return False
    return sparse.csr_array(A)[a][:, b].nnz > 0


def min_vertex_cover_size(B):
    """Compute the size of a minimum vertex cover by exhaustive search."""
    B = sparse.coo_array(B)
    Na, Nb = B.shape
    edges = list(zip(B.row.tolist(), (Na + B.col).tolist()))

    if not edges:
        return 0

    for k in range(1, Na + Nb + 1):
        for cover in itertools.combinations(range(Na + Nb), k):
            cover = set(cover)
            if all(u in cover or v in cover for u, v in edges):
                return k


# -----------------------------------------------------------------------------
#         Test Classes
# -----------------------------------------------------------------------------
class BaseGraphPlot:
    """An abstract base class for tests that require a plot."""

    # Default values for parameters
    _nrows = 1
    _ncols = 1
    _fig_dir = Path('test_graphs')
    _fig_title = ''

    @pytest.fixture(scope='class', autouse=True)
    def setup_plot(self, request):
        """Set up the figure for plotting across tests."""
        cls = request.cls

        cls.make_figures = request.config.getoption('--make-figures')

        if not cls.make_figures:
            yield  # skip the setup if not making figures
            return

        cls.fig, cls.axs = plt.subplots(
            num=1,
            nrows=cls._nrows,
            ncols=cls._ncols,
            clear=True,
            squeeze=False
        )
        cls.fig.suptitle(cls._fig_title)
        cls.fig.set_size_inches((4 * cls._ncols, 4 * cls._nrows))

        def finalize_plot():
            """Finalize the plot after all tests."""
            fig_dir = Path('test_figures') / cls._fig_dir
            fig_dir.mkdir(parents=True, exist_ok=True)

            figure_path = fig_dir / f"{cls.__name__}.pdf"
            print(f"Saving figure to {figure_path}")
            cls.fig.savefig(figure_path)

            plt.close(cls.fig)
            del cls.fig
            del cls.axs

        # Make sure to finalize the plot after all tests
        request.addfinalizer(finalize_plot)

        # Run the tests
        yield

# =============================================================================
# =============================================================================
