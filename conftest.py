#!/usr/bin/env python3
# =============================================================================
#     File: conftest.py
#  Created: 2025-07-09 09:05
#   Author: Bernie Roesler
#
"""
Configuration file for pytest to set up the ndissect test environment.
"""
# =============================================================================

import matplotlib

# Figures are only ever saved to files
matplotlib.use('Agg')


def pytest_addoption(parser):
    """Add command-line options for pytest."""
    parser.addoption(
        "--make-figures",
        action="store_true",
        default=False,
        help="Draw graphs and orderings, and save them to test_figures/."
    )


def pytest_configure(config):
    """Register the custom markers."""
    config.addinivalue_line(
        "markers",
        "random: tests parametrized over randomly generated graphs"
    )

# =============================================================================
# =============================================================================
