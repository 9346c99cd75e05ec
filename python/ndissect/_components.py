#!/usr/bin/env python3
# =============================================================================
#     File: _components.py
#  Created: 2025-07-02 11:05
#   Author: Bernie Roesler
#
"""
Connected components of an undirected graph.
"""
# =============================================================================

import numpy as np

from scipy.sparse import csgraph


def connected_components(A):
    """Split the graph of a symmetric matrix into its connected components.

    Components are numbered in order of their smallest vertex, which is the
    order a breadth-first search started from vertex 0, 1, ... discovers them.

    Parameters
    ----------
    A : (N, N) sparse array
        The adjacency structure of an undirected graph.

    Returns
    -------
    components : list of ndarray of int
        The vertices of each component, in ascending order. Every vertex of
        `A` appears in exactly one component.
    """
    N = A.shape[0]

    if N == 0:
        return []

    Nc, labels = csgraph.connected_components(A, directed=False)

    # Group the vertices by label without looping over the components
    p = np.argsort(labels, kind='stable')
    r = np.r_[0, np.cumsum(np.bincount(labels, minlength=Nc))]

    return [p[r[k]:r[k+1]] for k in range(Nc)]


# =============================================================================
# =============================================================================
