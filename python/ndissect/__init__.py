#!/usr/bin/env python3
# =============================================================================
#     File: __init__.py
#  Created: 2025-07-02 10:14
#   Author: Bernie Roesler
#
"""
ndissect: Nested dissection orderings of sparse, symmetric matrices.

This module computes fill-reducing orderings by recursively bisecting the
graph of a matrix, converting each bisection into a minimum node separator
via a maximum matching of the border graph (König's theorem), and ordering
the separator last.

Example usage:
    import ndissect
    A, coords = ndissect.grid_graph(10)
    p = ndissect.nested_dissection(A, ndissect.part_coordinate, coords)
    print(ndissect.symbolic_fill(A, p))

Author: Bernie Roesler
Date: 2025-07-02
Version: 0.1
"""
# =============================================================================

from ._bisection import (
    BisectionWarning,
    bisect,
    fiedler,
    part_coordinate,
    part_inertial,
    part_spectral,
    partition,
    recursive_bisection,
)
from ._components import connected_components
from ._nested_dissection import PermutationWarning, nested_dissection
from ._ordering import (
    amd,
    bandwidth,
    diag_dist,
    profile,
    symbolic_fill,
)
from ._separator import (
    border_graph,
    maximum_matching,
    node_separator,
    vertex_cover,
    vertex_separator,
)
from .utils import (
    adjacency_structure,
    build_adjacency,
    count_edge_cut,
    example_graph,
    grid_graph,
    inv_permute,
    is_valid_permutation,
)

__all__ = [
    'BisectionWarning',
    'PermutationWarning',
    'adjacency_structure',
    'amd',
    'bandwidth',
    'bisect',
    'border_graph',
    'build_adjacency',
    'connected_components',
    'count_edge_cut',
    'diag_dist',
    'example_graph',
    'fiedler',
    'grid_graph',
    'inv_permute',
    'is_valid_permutation',
    'maximum_matching',
    'nested_dissection',
    'node_separator',
    'part_coordinate',
    'part_inertial',
    'part_spectral',
    'partition',
    'profile',
    'recursive_bisection',
    'symbolic_fill',
    'vertex_cover',
    'vertex_separator',
]

# =============================================================================
# =============================================================================
