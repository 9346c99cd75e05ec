#!/usr/bin/env python3
# =============================================================================
#     File: utils.py
#  Created: 2025-07-02 10:21
#   Author: Bernie Roesler
#
"""
Utility functions for building and inspecting graphs.
"""
# =============================================================================

import numpy as np

from scipy import sparse


def adjacency_structure(A):
    """Compute the symmetric structure of a matrix.

    Only the non-zero pattern of `A` is used. The result is the pattern of
    `A + A.T` with the diagonal removed, so that it is the adjacency matrix of
    an undirected graph without self-loops.

    Parameters
    ----------
    A : (N, N) sparse array or array_like
        A square matrix.

    Returns
    -------
    S : (N, N) csr_array of bool
        The symmetric adjacency structure of `A`.
    """
    if not sparse.issparse(A):
        A = np.asarray(A)

    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"Matrix must be square, got {A.shape}.")

    N = A.shape[0]
    C = sparse.coo_array(A)

    # Drop explicit zeros and the diagonal before symmetrising
    keep = (C.data != 0) & (C.row != C.col)
    rows = np.r_[C.row[keep], C.col[keep]]
    cols = np.r_[C.col[keep], C.row[keep]]

    S = sparse.coo_array(
        (np.ones(rows.size, dtype=bool), (rows, cols)),
        shape=(N, N)
    ).tocsr()
    S.sum_duplicates()
    S.sort_indices()
    return S


def build_adjacency(edges, N):
    """Build the adjacency matrix of an undirected graph from an edge list.

    Parameters
    ----------
    edges : (E, 2) array_like of int
        Each row ``(u, v)`` is an edge of the graph.
    N : int
        The number of vertices.

    Returns
    -------
    A : (N, N) csr_array of float
        The symmetric adjacency matrix, with unit entries.
    """
    edges = np.asarray(edges, dtype=int).reshape(-1, 2)
    rows = np.r_[edges[:, 0], edges[:, 1]]
    cols = np.r_[edges[:, 1], edges[:, 0]]
    A = sparse.coo_array(
        (np.ones(rows.size), (rows, cols)),
        shape=(N, N)
    ).tocsr()
    # Duplicate edges sum on conversion
    A.data[:] = 1.0
    return A


def example_graph(name):
    r"""Create one of the small example graphs, with vertex coordinates.

    The ``'network'`` graph has 10 vertices in three loosely coupled groups:

    .. code-block:: python
        array([[0, 1, 1, 0, 0, 1, 0, 0, 1, 1],
               [1, 0, 1, 0, 0, 0, 0, 0, 0, 0],
               [1, 1, 0, 0, 0, 0, 0, 0, 0, 0],
               [0, 0, 0, 0, 1, 1, 0, 0, 0, 0],
               [0, 0, 0, 1, 0, 1, 0, 0, 0, 0],
               [1, 0, 0, 1, 1, 0, 1, 1, 0, 0],
               [0, 0, 0, 0, 0, 1, 0, 1, 0, 0],
               [0, 0, 0, 0, 0, 1, 1, 0, 0, 0],
               [1, 0, 0, 0, 0, 0, 0, 0, 0, 1],
               [1, 0, 0, 0, 0, 0, 0, 0, 1, 0]])

    The ``'triangles'`` graph is a 6-vertex triangular mesh.

    Parameters
    ----------
    name : str in {'network', 'triangles'}
        The graph to build.

    Returns
    -------
    A : (N, N) csr_array
        The adjacency matrix.
    coords : (N, 2) ndarray
        The vertex coordinates.
    """
    match name:
        case 'network':
            edges = [(0, 1), (0, 2), (0, 5), (0, 8), (0, 9), (1, 2),
                     (3, 4), (3, 5), (4, 5), (5, 6), (5, 7), (6, 7),
                     (8, 9)]
            x = [3, 1, 2, 4, 5, 3, 2, 1, 5, 4]
            y = [2, 1, 1, 5, 5, 4, 5, 5, 1, 1]
        case 'triangles':
            edges = [(0, 1), (0, 2), (0, 3), (1, 2), (1, 4), (2, 5),
                     (3, 4), (3, 5), (4, 5)]
            x = [2, 4, 4, 0, 6, 6]
            y = [3, 2, 4, 3, 0, 6]
        case _:
            raise ValueError(f"Invalid graph name '{name}'")

    coords = np.c_[x, y].astype(float)
    return build_adjacency(edges, coords.shape[0]), coords


def grid_graph(nx, ny=None):
    """Create the 5-point stencil graph of an `nx`-by-`ny` grid.

    Vertices are numbered row by row, ``k = i * nx + j`` for row `i` and
    column `j`.

    Parameters
    ----------
    nx : int
        Number of grid points in the x direction.
    ny : int, optional
        Number of grid points in the y direction. Defaults to `nx`.

    Returns
    -------
    A : (N, N) csr_array
        The adjacency matrix, with ``N = nx * ny``.
    coords : (N, 2) ndarray
        The grid point coordinates.
    """
    if ny is None:
        ny = nx

    k = np.arange(nx * ny).reshape(ny, nx)
    horiz = np.c_[k[:, :-1].ravel(), k[:, 1:].ravel()]
    vert = np.c_[k[:-1, :].ravel(), k[1:, :].ravel()]

    jj, ii = np.meshgrid(np.arange(nx), np.arange(ny))
    coords = np.c_[jj.ravel(), ii.ravel()].astype(float)

    return build_adjacency(np.r_[horiz, vert], nx * ny), coords


def count_edge_cut(A, labels):
    """Count the number of edges joining vertices with different labels.

    Parameters
    ----------
    A : (N, N) sparse array or array_like
        Adjacency matrix of the graph.
    labels : (N,) array_like
        The part of each vertex.

    Returns
    -------
    result : int
        The number of cut edges.
    """
    labels = np.asarray(labels)
    S = sparse.triu(adjacency_structure(A), format='coo')
    return int(np.count_nonzero(labels[S.row] != labels[S.col]))


def inv_permute(p):
    """Compute the inverse of a permutation vector."""
    p = np.asarray(p)
    pinv = np.empty_like(p)
    pinv[p] = np.arange(p.size)
    return pinv


def is_valid_permutation(p, N=None):
    """Check if a vector is a valid permutation of ``range(N)``."""
    p = np.asarray(p)
    if N is None:
        N = p.size
    return p.ndim == 1 and np.array_equal(np.sort(p), np.arange(N))


# =============================================================================
# =============================================================================
