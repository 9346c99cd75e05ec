#!/usr/bin/env python3
# =============================================================================
#     File: _separator.py
#  Created: 2025-07-03 14:37
#   Author: Bernie Roesler
#
"""
Minimum vertex separators from a two-way partition of a graph.

Given a bisection ``(a, b)`` of the vertices of a graph, the edges in
``A[a][:, b]`` form an edge separator. The vertices incident to those edges
(the *border*) induce a bipartite graph. A minimum vertex cover of that
bipartite graph is a minimum node separator for the bisection, and by König's
theorem it has the same size as a maximum matching of the border graph.
"""
# =============================================================================

from collections import deque

import numpy as np

from scipy import sparse
from scipy.sparse import csgraph

from ._bisection import bisect
from .utils import adjacency_structure


def border_graph(A, a, b):
    """Compute the border of a bisection and its bipartite graph.

    Parameters
    ----------
    A : (N, N) sparse array
        The symmetric adjacency structure of the graph.
    a, b : ndarray of int
        The indices of the two sides of the bisection.

    Returns
    -------
    a_border : ndarray of int
        Vertices of `a` with at least one neighbor in `b`.
    b_border : ndarray of int
        Vertices of `b` with at least one neighbor in `a`.
    B : (len(a_border), len(b_border)) csr_array of bool
        The biadjacency matrix of the border graph. Row `i` is vertex
        ``a_border[i]`` and column `j` is vertex ``b_border[j]``.

    Notes
    -----
    In the combined numbering of the border graph used by `maximum_matching`
    and `vertex_cover`, the side `a` vertices are ``0..Na-1`` and the side `b`
    vertices are ``Na..Na+Nb-1``, where ``Na = len(a_border)``.
    """
    a = np.asarray(a, dtype=np.intp)
    b = np.asarray(b, dtype=np.intp)

    if a.size == 0 or b.size == 0:
        empty = np.array([], dtype=np.intp)
        return empty, empty.copy(), sparse.csr_array((0, 0), dtype=bool)

    # The cross block holds every cut edge
    C = sparse.coo_array(A[a][:, b])
    C.eliminate_zeros()

    ia = np.unique(C.row)
    ib = np.unique(C.col)

    B = sparse.csr_array(C.tocsr()[ia][:, ib], dtype=bool)
    B.sort_indices()

    return a[ia], b[ib], B


def maximum_matching(B):
    """Compute a maximum cardinality matching of a bipartite graph.

    The matching is computed with the Hopcroft-Karp algorithm, in
    :math:`O(|E| \\sqrt{|V|})` time.

    Parameters
    ----------
    B : (Na, Nb) sparse array
        The biadjacency matrix of the bipartite graph.

    Returns
    -------
    mate : (Na + Nb,) ndarray of int
        ``mate[u]`` is the vertex matched to `u` in the combined numbering of
        the border graph, or -1 if `u` is unmatched.
    """
    Na, Nb = B.shape
    mate = np.full(Na + Nb, -1, dtype=np.intp)

    if Na == 0 or Nb == 0 or B.nnz == 0:
        return mate

    G = sparse.csr_matrix(B, dtype=np.float64)

    # Column matched to each row, or -1
    cols = csgraph.maximum_bipartite_matching(G, perm_type='column')

    rows = np.flatnonzero(cols >= 0)
    mate[rows] = Na + cols[rows]
    mate[Na + cols[rows]] = rows

    return mate


def vertex_cover(B, mate):
    r"""Compute a minimum vertex cover of a bipartite graph.

    This function uses the constructive proof of König's theorem. Let `U` be
    the unmatched vertices of side `a`, and `Z` the vertices reachable from `U`
    by alternating paths (non-matching edge from side `a`, matching edge from
    side `b`). Then

    .. math::
        K = (A \setminus Z) \cup (B \cap Z)

    is a minimum vertex cover, with :math:`|K|` equal to the size of the
    matching.

    Parameters
    ----------
    B : (Na, Nb) sparse array
        The biadjacency matrix of the bipartite graph.
    mate : (Na + Nb,) ndarray of int
        A maximum matching, as returned by `maximum_matching`.

    Returns
    -------
    cover_a : ndarray of int
        Indices of the side `a` vertices in the cover, in ``0..Na-1``.
    cover_b : ndarray of int
        Indices of the side `b` vertices in the cover, in ``0..Nb-1``.
    """
    Na, Nb = B.shape
    B = sparse.csr_array(B)
    Bt = sparse.csr_array(B.T)

    def neighbors(u):
        if u < Na:
            return Na + B.indices[B.indptr[u]:B.indptr[u+1]]
        v = u - Na
        return Bt.indices[Bt.indptr[v]:Bt.indptr[v+1]]

    visited = np.zeros(Na + Nb, dtype=bool)

    # Each entry is (vertex, expect a matching edge next)
    queue = deque()

    for u in range(Na):
        if mate[u] == -1:
            visited[u] = True
            queue.append((u, False))

    while queue:
        u, matched_edge = queue.popleft()
        for v in neighbors(u):
            if visited[v]:
                continue
            if (mate[u] == v) == matched_edge:
                visited[v] = True
                queue.append((v, not matched_edge))

    cover_a = np.flatnonzero((mate[:Na] != -1) & ~visited[:Na])
    cover_b = np.flatnonzero(visited[Na:])

    return cover_a, cover_b


def vertex_separator(A, a, b):
    """Convert a bisection into a minimum node separator.

    The inputs `a` and `b` are a partition of the vertices of `A` (or of
    a subset of them). The result `s` is a minimum vertex cover of the edges
    of ``A[a][:, b]``, so that no edge of `A` joins ``a_s`` and ``b_s``.

    Parameters
    ----------
    A : (N, N) sparse array
        The symmetric adjacency structure of the graph.
    a, b : ndarray of int
        The indices of the two sides of the bisection.

    Returns
    -------
    s : ndarray of int
        The indices of the node separator.
    a_s, b_s : ndarray of int
        The sets `a` and `b` with `s` removed, in their original order.
    """
    a = np.asarray(a, dtype=np.intp)
    b = np.asarray(b, dtype=np.intp)

    a_border, b_border, B = border_graph(A, a, b)

    if B.nnz == 0:
        # No cut edges, so the two sides are already separated
        return np.array([], dtype=np.intp), a, b

    mate = maximum_matching(B)
    cover_a, cover_b = vertex_cover(B, mate)

    s = np.r_[a_border[cover_a], b_border[cover_b]].astype(np.intp)

    w = np.ones(A.shape[0], dtype=bool)
    w[s] = False
    a_s = a[w[a]]
    b_s = b[w[b]]

    return s, a_s, b_s


def node_separator(A, method=None, coords=None):
    """Find a node separator of the graph of a symmetric matrix.

    The permutation ``p = np.r_[a, b, s]`` is a one-level dissection of `A`.

    Parameters
    ----------
    A : (N, N) sparse array or array_like
        A square matrix. Only its symmetric structure is used.
    method : callable, optional
        The bisection method, called as ``method(A)`` or
        ``method(A, coords)``. It must return a label in ``{1, 2}`` for each
        vertex. Defaults to `part_spectral`.
    coords : (N, d) ndarray, optional
        Vertex coordinates for geometric bisection methods.

    Returns
    -------
    s : ndarray of int
        The indices of the node separator.
    a, b : ndarray of int
        The indices of the two parts, with `s` removed.
    """
    A = adjacency_structure(A)
    labels = bisect(A, method, coords)
    a = np.flatnonzero(labels == 1)
    b = np.flatnonzero(labels == 2)
    return vertex_separator(A, a, b)


# =============================================================================
# =============================================================================
