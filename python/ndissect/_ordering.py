#!/usr/bin/env python3
# =============================================================================
#     File: _ordering.py
#  Created: 2025-07-04 16:12
#   Author: Bernie Roesler
#
"""
Approximate minimum degree ordering, and measures of the quality of an
ordering.
"""
# =============================================================================

import numpy as np

from scipy import sparse
from sksparse.amd import amd as sk_amd
from sksparse.cholmod import symbfact

from .utils import adjacency_structure


def _cholesky_structure(A):
    """Compute the structure of `A + A.T` with a full diagonal, in CSC form."""
    S = adjacency_structure(A)
    N = S.shape[0]
    C = sparse.csc_array(S + sparse.eye_array(N, dtype=bool), dtype=float)
    C.sort_indices()
    return C


def amd(A):
    """Compute an approximate minimum degree ordering of a symmetric matrix.

    This ordering is the default for the leaves of `nested_dissection`.

    Parameters
    ----------
    A : (N, N) sparse array or array_like
        A square matrix. Only the structure of `A + A.T` is used.

    Returns
    -------
    p : (N,) ndarray of int
        The permutation vector.
    """
    C = _cholesky_structure(A)

    if C.shape[0] == 0:
        return np.array([], dtype=np.intp)

    return np.asarray(sk_amd(C), dtype=np.intp)


def symbolic_fill(A, p=None):
    """Count the fill-in of a Cholesky factorization of a permuted matrix.

    The fill-in is the number of off-diagonal entries of the Cholesky factor
    `L` of ``A[p][:, p]`` that are not entries of the lower triangle of
    ``A[p][:, p]``, assuming no numerical cancellation.

    Parameters
    ----------
    A : (N, N) sparse array or array_like
        A square matrix. Only the structure of `A + A.T` is used.
    p : (N,) array_like of int, optional
        The permutation vector. Defaults to the natural ordering.

    Returns
    -------
    result : int
        The number of fill-in entries.
    """
    C = _cholesky_structure(A)
    N = C.shape[0]

    if N == 0:
        return 0

    if p is not None:
        p = np.asarray(p)
        C = sparse.csc_array(C[p[:, np.newaxis], p])
        C.sort_indices()

    # Column counts of L, including the diagonal
    lnz = int(symbfact(C)[0].sum())

    return lnz - N - (C.nnz - N) // 2


def diag_dist(A):
    """Compute the distance to the diagonal of the first non-zero in each column.

    Parameters
    ----------
    A : (N, N) sparse array or array_like
        A square matrix. Only the structure of `A + A.T` is used.

    Returns
    -------
    result : (N,) ndarray
        The distance to the diagonal of the first non-zero in each column.
    """
    # The diagonal guarantees that every column has at least one entry
    S = _cholesky_structure(A)
    N = S.shape[0]

    return np.arange(N) - S.indices[S.indptr[:-1]]


def profile(A):
    r"""Compute the profile of a sparse, symmetric matrix.

    The matrix *profile*, also called the *envelope*, is a measure of how close
    the entries of `A` are to the diagonal. It is defined as:

    .. math::
        \text{profile}(A) = \sum_{j=0}^{N-1} (j - \min \mathcal{A}_{*j})

    See Also
    --------
    bandwidth : Compute the bandwidth of a sparse matrix.
    """
    return int(np.sum(diag_dist(A)))


def bandwidth(A):
    r"""Compute the bandwidth of a sparse, symmetric matrix.

    .. math::
        \text{bandwidth}(A) = \max_j (j - \min \mathcal{A}_{*j})

    See Also
    --------
    profile : Compute the profile of a sparse matrix.
    """
    return int(np.max(diag_dist(A), initial=0))


# =============================================================================
# =============================================================================
