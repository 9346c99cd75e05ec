#!/usr/bin/env python3
# =============================================================================
#     File: plot.py
#  Created: 2025-07-08 13:27
#   Author: Bernie Roesler
#
"""
Functions for plotting partitioned graphs and reordered matrices.
"""
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np

from matplotlib.collections import LineCollection
from scipy import sparse

from ._ordering import symbolic_fill
from .utils import adjacency_structure


def draw_graph(A, coords, labels=None, ax=None, **kwargs):
    """Draw a graph with its vertices colored by part.

    Edges inside a part are drawn thick, in the color of the part. Edges
    between parts (the edge cut) are drawn thin and gray.

    Parameters
    ----------
    A : (N, N) sparse array or array_like
        Adjacency matrix of the graph.
    coords : (N, 2) array_like
        Vertex coordinates. Only the first two columns are used.
    labels : (N,) array_like, optional
        The part of each vertex. If None, all vertices are in one part.
    ax : matplotlib.axes.Axes, optional
        Axes object to plot on. If `None`, the current axes are used.
    **kwargs
        Additional keyword arguments passed to `matplotlib.axes.Axes.scatter`.

    Returns
    -------
    ax : matplotlib.axes.Axes
        The Axes object used for plotting.
    """
    if ax is None:
        ax = plt.gca()

    S = sparse.triu(adjacency_structure(A), format='coo')
    coords = np.asarray(coords, dtype=float)
    N = coords.shape[0]

    if labels is None:
        labels = np.ones(N, dtype=int)

    labels = np.asarray(labels)
    parts, idx = np.unique(labels, return_inverse=True)
    colors = np.array([f"C{k % 10}" for k in range(parts.size)])

    segments = np.stack([coords[S.row, :2], coords[S.col, :2]], axis=1)
    is_cut = labels[S.row] != labels[S.col]

    ax.add_collection(
        LineCollection(segments[is_cut], colors='gray', linewidths=0.5)
    )
    ax.add_collection(
        LineCollection(segments[~is_cut], colors=colors[idx[S.row[~is_cut]]],
                       linewidths=1.5)
    )

    opts = dict(s=20, zorder=3)
    opts.update(kwargs)
    ax.scatter(coords[:, 0], coords[:, 1], c=colors[idx], **opts)

    ax.set_aspect('equal')
    ax.autoscale_view()
    ax.set_title(f"{N} vertices, {parts.size} parts, "
                 f"edge cut: {np.count_nonzero(is_cut)}")

    return ax


def ndspy(A, p, ax=None, **kwargs):
    """Plot the structure of a symmetric matrix under an ordering.

    Parameters
    ----------
    A : (N, N) sparse array or array_like
        A square matrix. Only the structure of `A + A.T` is plotted.
    p : (N,) array_like of int
        The permutation vector.
    ax : matplotlib.axes.Axes, optional
        Axes object to plot on. If `None`, the current axes are used.
    **kwargs
        Additional keyword arguments passed to `matplotlib.axes.Axes.spy`.

    Returns
    -------
    ax : matplotlib.axes.Axes
        The Axes object used for plotting.
    """
    if ax is None:
        ax = plt.gca()

    p = np.asarray(p)
    S = adjacency_structure(A)
    N = S.shape[0]
    S = S + sparse.eye_array(N, dtype=bool)

    opts = dict(markersize=1)
    opts.update(kwargs)
    ax.spy(S[p][:, p], **opts)

    ax.set_xlabel(f"{S.shape}, nnz = {S.nnz}, fill = {symbolic_fill(A, p)}")

    return ax


# =============================================================================
# =============================================================================
