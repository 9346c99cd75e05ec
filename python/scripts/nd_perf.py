#!/usr/bin/env python3
# =============================================================================
#     File: nd_perf.py
#  Created: 2025-07-12 16:05
#   Author: Bernie Roesler
#
"""
Compare the run time and fill of nested dissection orderings of square grids
against the natural and reverse Cuthill-McKee orderings.
"""
# =============================================================================

from functools import partial
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from tqdm import tqdm

import ndissect
from utils import measure_perf, ordering_quality, rcm

FORCE_UPDATE = False
SAVE_FIGS = False

DATA_PATH = Path(__file__).absolute().parent.parent.parent / "plots"
DATA_PATH.mkdir(parents=True, exist_ok=True)

Ns = np.r_[5, 10, 15, 20, 30, 40, 50]  # grid sizes

df_file = DATA_PATH / "nd_perf.pkl"

# -----------------------------------------------------------------------------
#         Run Tests
# -----------------------------------------------------------------------------
if not FORCE_UPDATE and df_file.exists():
    print("Loading existing results...")
    df = pd.read_pickle(df_file)
else:
    print(f"Running benchmarks for {df_file}...")

    results = []

    for n in tqdm(Ns):
        A, coords = ndissect.grid_graph(n)
        N = A.shape[0]

        order_funcs = {
            "natural": partial(np.arange, N),
            "rcm": partial(rcm, A),
            "amd": partial(ndissect.amd, A),
            "nd_coordinate": partial(
                ndissect.nested_dissection, A, ndissect.part_coordinate, coords
            ),
            "nd_spectral": partial(ndissect.nested_dissection, A),
        }

        for name, func in tqdm(order_funcs.items(), leave=False):
            time, peak_mem = measure_perf(func, N_repeats=3, N_samples=1)
            p = func()
            assert ndissect.is_valid_permutation(p, N)
            results.append(
                {
                    "ordering": name,
                    "N": N,
                    "time": time,
                    "memory": peak_mem,
                    **ordering_quality(A, p),
                }
            )

    df = pd.DataFrame(results).set_index(["ordering", "N"]).sort_index()
    df.columns.name = "metric"

    df.to_pickle(df_file)


# -----------------------------------------------------------------------------
#        Plot the results
# -----------------------------------------------------------------------------
fig, axs = plt.subplots(num=1, ncols=3, sharex=True, clear=True)
fig.set_size_inches((12, 4), forward=True)

for ax, col in zip(axs, ["time", "fill", "bandwidth"]):
    sns.lineplot(
        ax=ax,
        data=df.reset_index(),
        x="N",
        y=col,
        hue="ordering",
        style="ordering",
        markers=True,
        dashes=False,
        legend=(col == "fill"),
    )
    ax.grid(True, which="both")
    ax.set(xscale="log", yscale="log", xlabel="Number of Vertices (N)")

fig.tight_layout()

if SAVE_FIGS:
    fig_file = DATA_PATH / "nd_perf.pdf"
    fig.savefig(fig_file)
    print(f"Saved figure to {fig_file}")

plt.show()

# =============================================================================
# =============================================================================
