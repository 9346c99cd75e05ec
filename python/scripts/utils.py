#!/usr/bin/env python3
# =============================================================================
#     File: utils.py
#  Created: 2025-07-12 15:40
#   Author: Bernie Roesler
# =============================================================================

"""Utilities for timing and comparing fill-reducing orderings."""

import gc
import timeit
import tracemalloc

import numpy as np
from scipy import sparse

import ndissect


def measure_perf(func, N_repeats=5, N_samples=None):
    """Measure the time and peak memory of computing an ordering.

    Parameters
    ----------
    func : callable
        A function of no arguments that returns a permutation vector.
    N_repeats : int, optional
        The number of timing runs.
    N_samples : int, optional
        The number of calls in each run. If None, it is chosen by
        `timeit.Timer.autorange`.

    Returns
    -------
    time : float
        The minimum time per call in seconds.
    peak_mb : float
        The peak memory usage of one call in megabytes.
    """
    timer = timeit.Timer(func)
    if N_samples is None:
        N_samples, _ = timer.autorange()
    ts = np.array(timer.repeat(repeat=N_repeats, number=N_samples)) / N_samples

    gc.collect()
    tracemalloc.start()

    try:
        func()
    finally:
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

    return np.min(ts), peak / (1024**2)


def rcm(A):
    """Compute the reverse Cuthill-McKee ordering of the graph of `A`."""
    S = sparse.csr_matrix(ndissect.adjacency_structure(A))
    return sparse.csgraph.reverse_cuthill_mckee(S, symmetric_mode=True)


def ordering_quality(A, p):
    """Compute the fill, profile, and bandwidth of `A` under the ordering `p`.

    Returns
    -------
    result : dict
        The quality metrics, keyed by name.
    """
    S = ndissect.adjacency_structure(A)
    Sp = S[p][:, p]
    return dict(
        fill=ndissect.symbolic_fill(S, p),
        profile=ndissect.profile(Sp),
        bandwidth=ndissect.bandwidth(Sp),
    )


# =============================================================================
# =============================================================================
