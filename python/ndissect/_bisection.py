#!/usr/bin/env python3
# =============================================================================
#     File: _bisection.py
#  Created: 2025-07-03 09:48
#   Author: Bernie Roesler
#
"""
Two-way graph partitioning methods.

Every method returns a label vector with one entry per vertex, where label 1
is the first part and label 2 is the second part. Geometric methods take the
vertex coordinates as a second argument.
"""
# =============================================================================

import warnings

import numpy as np
from scipy import linalg as la
from scipy import sparse
from scipy.sparse import csgraph, linalg as spla

from .utils import adjacency_structure, count_edge_cut


class BisectionWarning(UserWarning):
    """A bisection method returned an unusable partition."""


# Graphs at most this size use a dense eigensolver
_DENSE_EIG_MAX = 100


def bisect(A, method=None, coords=None):
    """Call a bisection method with or without coordinates.

    Parameters
    ----------
    A : (N, N) sparse array
        Adjacency matrix of the graph.
    method : callable, optional
        The bisection method. Defaults to `part_spectral`.
    coords : (N, d) ndarray, optional
        Vertex coordinates. If given, the method is called as
        ``method(A, coords)``, otherwise as ``method(A)``.

    Returns
    -------
    labels : ndarray
        The flattened label vector returned by `method`.
    """
    if method is None:
        method = part_spectral

    if coords is None:
        labels = method(A)
    else:
        labels = method(A, coords)

    return np.asarray(labels).ravel()


def _labels(N, a):
    """Build a label vector with label 1 on `a` and label 2 elsewhere."""
    labels = np.full(N, 2, dtype=int)
    labels[a] = 1
    return labels


def partition(coords, v):
    """Split a set of points by the median of their projection on `v`.

    Points that project exactly onto the median are assigned to the first
    part until it holds ``ceil(N / 2)`` points.

    Parameters
    ----------
    coords : (N, d) array_like
        The point coordinates.
    v : (d,) array_like
        The projection direction.

    Returns
    -------
    a, b : ndarray of int
        The indices of the points in each part.
    """
    coords = np.asarray(coords, dtype=float)
    N = coords.shape[0]

    dotprod = coords @ np.asarray(v, dtype=float).ravel()
    split = np.median(dotprod)

    a = np.flatnonzero(dotprod < split)
    b = np.flatnonzero(dotprod > split)
    c = np.flatnonzero(dotprod == split)

    if c.size > 0:
        nca = int(min(max(np.ceil(N / 2) - a.size, 0), c.size))
        a = np.sort(np.r_[a, c[:nca]])
        b = np.sort(np.r_[b, c[nca:]])

    return a, b


def part_coordinate(A, coords):
    """Bisect a graph along the coordinate axis giving the smallest edge cut.

    Parameters
    ----------
    A : (N, N) sparse array
        Adjacency matrix of the graph.
    coords : (N, d) array_like
        Vertex coordinates.

    Returns
    -------
    labels : (N,) ndarray of int
        The part, 1 or 2, of each vertex.
    """
    coords = np.asarray(coords, dtype=float)
    N, d = coords.shape

    best_cut = np.inf
    labels = np.ones(N, dtype=int)

    for k in range(d):
        a, _ = partition(coords, np.eye(d)[k])
        trial = _labels(N, a)
        cut = count_edge_cut(A, trial)
        if cut < best_cut:
            best_cut = cut
            labels = trial

    return labels


def part_inertial(A, coords):
    """Bisect a graph with the inertial method.

    The vertices are split by a hyperplane through the center of mass of the
    coordinates, normal to the principal axis of inertia, which is the
    direction in which the point cloud is most elongated.

    Parameters
    ----------
    A : (N, N) sparse array
        Adjacency matrix of the graph. It is not used.
    coords : (N, d) array_like
        Vertex coordinates.

    Returns
    -------
    labels : (N,) ndarray of int
        The part, 1 or 2, of each vertex.
    """
    coords = np.asarray(coords, dtype=float)
    N = coords.shape[0]

    X = coords - coords.mean(axis=0)

    # Eigenvector of the largest eigenvalue of the scatter matrix
    _, V = la.eigh(X.T @ X)
    v = V[:, -1]

    a, _ = partition(coords, v)
    return _labels(N, a)


def fiedler(A):
    """Compute the Fiedler vector of a connected graph.

    The Fiedler vector is the eigenvector corresponding to the second smallest
    eigenvalue of the Laplacian of the graph of `A + A.T`.

    Parameters
    ----------
    A : (N, N) sparse array
        Adjacency matrix of a connected graph.

    Returns
    -------
    p : (N,) ndarray
        The permutation vector obtained when `v` is sorted.
    v : (N,) ndarray
        The Fiedler vector of the graph.
    d : float
        The second smallest eigenvalue of the Laplacian.
    """
    S = adjacency_structure(A).astype(float)
    N = S.shape[0]

    if N < 2:
        return np.arange(N), np.zeros(N), 0.0

    L = sparse.csr_array(csgraph.laplacian(S))

    if N <= _DENSE_EIG_MAX:
        λ, x = la.eigh(L.toarray())
    else:
        # Fixed starting vector for reproducible results
        v0 = np.random.default_rng(1234).standard_normal(N)
        try:
            λ, x = spla.eigsh(
                L, k=2, which='SA', v0=v0, tol=np.sqrt(np.finfo(float).eps)
            )
        except spla.ArpackNoConvergence:
            λ, x = la.eigh(L.toarray())

    # Take the second smallest eigenvalue and its eigenvector
    i = np.argsort(λ)[1]
    d = λ[i]
    v = x[:, i]
    p = np.argsort(v, kind='stable')

    return p, v, d


def part_spectral(A):
    """Bisect a graph around the median of its Fiedler vector.

    Parameters
    ----------
    A : (N, N) sparse array
        Adjacency matrix of the graph.

    Returns
    -------
    labels : (N,) ndarray of int
        The part, 1 or 2, of each vertex.
    """
    _, v, _ = fiedler(A)
    return np.where(v > np.median(v), 2, 1)


def recursive_bisection(method, k, A, coords=None, minpoints=8):
    """Partition a graph into `k` parts by recursive bisection.

    If `k` is not a power of 2, it is rounded up to the next power of 2.

    Parameters
    ----------
    method : callable
        The bisection method, as for `bisect`.
    k : int
        The number of parts.
    A : (N, N) sparse array
        Adjacency matrix of the graph.
    coords : (N, d) array_like, optional
        Vertex coordinates, required by geometric methods.
    minpoints : int, optional
        Parts with fewer vertices are not bisected further.

    Returns
    -------
    labels : (N,) ndarray of int
        The part of each vertex, numbered from 1.
    """
    if k < 1:
        raise ValueError(f"k must be a positive integer, got {k}.")

    levels = np.log2(k)

    if not float(levels).is_integer():
        warnings.warn(
            f"log2({k}) is not an integer. Rounding up to the closest integer.",
            BisectionWarning,
            stacklevel=2
        )

    levels = int(np.ceil(levels))

    A = adjacency_structure(A)
    if coords is not None:
        coords = np.asarray(coords, dtype=float)

    return _recursive_bisection(method, levels, A, coords, minpoints)


def _recursive_bisection(method, levels, A, coords, minpoints):
    """Recursively bisect the graph of `A` for the given number of levels."""
    N = A.shape[0]

    if N < minpoints or levels < 1:
        return np.ones(N, dtype=int)

    labels = bisect(A, method, coords)

    if levels == 1:
        return labels.astype(int)

    parts = []
    for label in (1, 2):
        idx = np.flatnonzero(labels == label)
        sub_coords = None if coords is None else coords[idx]
        parts.append(
            (idx, _recursive_bisection(method, levels - 1,
                                       A[idx][:, idx], sub_coords, minpoints))
        )

    (idx1, p1), (idx2, p2) = parts

    p = np.zeros(N, dtype=int)
    p[idx1] = p1
    p[idx2] = p2 + p1.max(initial=0)

    return p


# =============================================================================
# =============================================================================
