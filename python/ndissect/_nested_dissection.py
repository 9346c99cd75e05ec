#!/usr/bin/env python3
# =============================================================================
#     File: _nested_dissection.py
#  Created: 2025-07-05 10:03
#   Author: Bernie Roesler
#
"""
Nested dissection ordering of a sparse, symmetric matrix.

The graph is split into its connected components. Each component is bisected
by a pluggable method, the bisection is turned into a minimum node separator,
and the two halves left after removing the separator are ordered recursively.
The ordering of a component is ``[half_1, half_2, separator]``. Components
with at most `minsep` vertices are ordered by a leaf ordering instead.

Pending subgraphs are kept on an explicit stack, so the depth of the
dissection is not bounded by the Python recursion limit.
"""
# =============================================================================

import warnings

import numpy as np

from ._bisection import BisectionWarning, bisect, part_spectral
from ._components import connected_components
from ._ordering import amd
from ._separator import vertex_separator
from .utils import adjacency_structure


class PermutationWarning(UserWarning):
    """An ordering of a subgraph was not a permutation of its vertices."""


def nested_dissection(
    A,
    method=None,
    coords=None,
    minsep=5,
    leaf_order=None,
    verbose=False,
    callback=None
):
    """Compute a nested dissection ordering of a symmetric matrix.

    The result is always a valid permutation of ``range(N)``. A bisection
    method that puts every vertex on one side causes that subgraph to be
    ordered as a leaf, and any subgraph whose assembled ordering is not
    a permutation of its vertices is given its natural ordering, with
    a `PermutationWarning`.

    Parameters
    ----------
    A : (N, N) sparse array or array_like
        A square matrix. Only the structure of `A + A.T` is used.
    method : callable, optional
        The bisection method, called as ``method(A_sub)``, or as
        ``method(A_sub, coords_sub)`` if `coords` is given. It must return one
        label in ``{1, 2}`` for each vertex of the subgraph. Defaults to
        `part_spectral`.
    coords : (N, d) array_like, optional
        Vertex coordinates, sliced along with `A` at every level.
    minsep : int, optional
        Connected subgraphs with at most `minsep` vertices are not dissected
        further, but ordered with `leaf_order`.
    leaf_order : callable, optional
        The ordering used on the leaves, called as ``leaf_order(A_sub)``.
        Defaults to `amd`.
    verbose : bool, optional
        If True, print the size of each split.
    callback : callable, optional
        Called as ``callback(A_sub, coords_sub, labels)`` after each
        bisection, before recursing on the two halves. `coords_sub` is None if
        no coordinates were given.

    Returns
    -------
    p : (N,) ndarray of int
        The permutation vector, such that ``A[p][:, p]`` is the reordered
        matrix.
    """
    A = adjacency_structure(A)
    N = A.shape[0]

    if coords is not None:
        coords = np.asarray(coords, dtype=float)
        if coords.ndim == 1:
            coords = coords[:, np.newaxis]
        if coords.shape[0] != N:
            raise ValueError(
                f"coords must have {N} rows, got {coords.shape[0]}."
            )

    if minsep < 0:
        raise ValueError(f"minsep must be non-negative, got {minsep}.")

    opts = dict(
        method=part_spectral if method is None else method,
        minsep=minsep,
        leaf_order=amd if leaf_order is None else leaf_order,
        verbose=verbose,
        callback=callback
    )

    return _nested_dissection(A, coords, **opts)


class _Subgraph:
    """A pending subgraph of the dissection.

    Attributes
    ----------
    idx : ndarray of int
        The vertices of the subgraph, in ascending order.
    connected : bool
        If True, the subgraph is one connected component, and it is bisected.
        Otherwise it is first split into its connected components.
    parts : list or None
        The pieces of the ordering once the subgraph has been split. Each
        piece is a child `_Subgraph` or an array of vertices.
    p : ndarray of int or None
        The ordering of `idx`, once every piece has been ordered.
    """

    def __init__(self, idx, connected=False):
        self.idx = idx
        self.connected = connected
        self.parts = None
        self.p = None


def _nested_dissection(A, coords, **opts):
    """Order the graph of `A` with an explicit stack of pending subgraphs."""
    root = _Subgraph(np.arange(A.shape[0]))
    stack = [root]

    while stack:
        node = stack[-1]
        if node.parts is None:
            node.parts = _split(A, coords, node, **opts)
            # Push the children so that the first one is ordered first
            stack.extend(part for part in reversed(node.parts)
                         if isinstance(part, _Subgraph))
        else:
            stack.pop()
            node.p = _assemble(node)

    return root.p


def _split(A, coords, node, method, minsep, leaf_order, verbose, callback):
    """Split a subgraph into the pieces of its ordering."""
    idx = node.idx
    N = idx.size
    A_sub = A[idx][:, idx]

    if not node.connected:
        # Order each component as a contiguous block, in discovery order
        return [_Subgraph(idx[c], connected=True)
                for c in connected_components(A_sub)]

    if N <= minsep:
        return [idx[_leaf(A_sub, leaf_order)]]

    sub_coords = None if coords is None else coords[idx]
    labels = bisect(A_sub, method, sub_coords)

    if labels.size != N:
        warnings.warn(
            f"Bisection returned {labels.size} labels for {N} vertices; "
            "ordering the subgraph as a leaf.",
            BisectionWarning,
            stacklevel=4
        )
        return [idx[_leaf(A_sub, leaf_order)]]

    a = np.flatnonzero(labels == 1)
    b = np.flatnonzero(labels == 2)

    if a.size == 0 or b.size == 0:
        # Degenerate bisection, so no progress can be made
        return [idx[_leaf(A_sub, leaf_order)]]

    s, a_s, b_s = vertex_separator(A_sub, a, b)

    if callback is not None:
        callback(A_sub, sub_coords, labels)

    if verbose:
        print(f"N = {N:d}: |a| = {a_s.size:d}, |b| = {b_s.size:d}, "
              f"|s| = {s.size:d}")

    return [_Subgraph(idx[a_s]), _Subgraph(idx[b_s]), idx[s]]


def _assemble(node):
    """Concatenate the ordered pieces of a subgraph."""
    pieces = [part.p if isinstance(part, _Subgraph) else part
              for part in node.parts]
    p = np.concatenate([np.array([], dtype=np.intp)] + pieces).astype(np.intp)

    if not node.connected:
        return p

    return _check_ordering(p, node.idx, stacklevel=5)


def _leaf(A, leaf_order):
    """Order a small graph with the leaf ordering, in local indices."""
    p = np.asarray(leaf_order(A), dtype=np.intp).ravel()
    return _check_ordering(p, np.arange(A.shape[0]), stacklevel=6)


def _check_ordering(p, idx, stacklevel):
    """Return `p` if it is an ordering of the sorted vertices `idx`.

    Otherwise warn, and return `idx` itself, the natural ordering of the
    subgraph. `stacklevel` points the warning at the caller of
    `nested_dissection`.
    """
    if p.ndim == 1 and np.array_equal(np.sort(p), idx):
        return p

    warnings.warn(
        f"Wrong permutation length {p.size} (expected {idx.size}) or repeated "
        "entries; using the natural ordering of the subgraph.",
        PermutationWarning,
        stacklevel=stacklevel
    )

    return idx


# =============================================================================
# =============================================================================
