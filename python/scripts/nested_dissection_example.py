#!/usr/bin/env python3
# =============================================================================
#     File: nested_dissection_example.py
#  Created: 2025-07-12 14:02
#   Author: Bernie Roesler
#
"""Walk through one level of nested dissection on the example graphs."""
# =============================================================================

import matplotlib.pyplot as plt
import numpy as np

import ndissect
from ndissect.plot import draw_graph, ndspy


SAVE_FIG = False

A, coords = ndissect.example_graph('network')

print("A:")
print(A.toarray().astype(int))

# Compute the Fiedler vector of the graph
p, v, d = ndissect.fiedler(A)

print("--- Fiedler vector:")
print(f"   permutation: {p}")
print(f"Fiedler vector: {v}")
print(f"    eigenvalue: {d}")


# Bisect the graph
labels = ndissect.part_spectral(A)
a = np.flatnonzero(labels == 1)
b = np.flatnonzero(labels == 2)

print("--- Bisection:")
print(f"a: {a}")
print(f"b: {b}")
print(f"edge cut: {ndissect.count_edge_cut(A, labels)}")


# Get a node separator from the bisection
S = ndissect.adjacency_structure(A)
a_border, b_border, B = ndissect.border_graph(S, a, b)
mate = ndissect.maximum_matching(B)
s, a_s, b_s = ndissect.vertex_separator(S, a, b)

print("--- Node separator:")
print(f"a border: {a_border}")
print(f"b border: {b_border}")
print(f"matching: {mate}")
print(f"s: {s}")
print(f"a_s: {a_s}")
print(f"b_s: {b_s}")


# Directly get a node separator
s_, a_s_, b_s_ = ndissect.node_separator(A)

print("--- Node separator (direct):")
print(f"s_: {s_}")
print(f"a_s_: {a_s_}")
print(f"b_s_: {b_s_}")

np.testing.assert_array_equal(s, s_)
np.testing.assert_array_equal(a_s, a_s_)
np.testing.assert_array_equal(b_s, b_s_)


# Compute the nested dissection ordering of A
p = ndissect.nested_dissection(A, minsep=2, verbose=True)

print("--- Nested dissection ordering:")
print(f"p: {p}")
print(f"fill: {ndissect.symbolic_fill(A, p)} (natural {ndissect.symbolic_fill(A)})")


# -----------------------------------------------------------------------------
#         Plot a grid
# -----------------------------------------------------------------------------
G, G_coords = ndissect.grid_graph(30)

p_coord = ndissect.nested_dissection(G, ndissect.part_coordinate, G_coords)
p_spectral = ndissect.nested_dissection(G)

fig, axs = plt.subplots(num=1, ncols=4, clear=True)
fig.set_size_inches(16, 4, forward=True)

draw_graph(A, coords, labels, ax=axs[0])
ndspy(G, np.arange(G.shape[0]), ax=axs[1])
ndspy(G, p_coord, ax=axs[2])
ndspy(G, p_spectral, ax=axs[3])

axs[1].set_title('Natural')
axs[2].set_title('Coordinate ND')
axs[3].set_title('Spectral ND')

plt.show()

if SAVE_FIG:
    fig.savefig('nested_dissection_example.pdf')

# =============================================================================
# =============================================================================
