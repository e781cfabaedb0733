"""
Benchmarks package for AVL trees.

This package contains ASV benchmarks for performance testing of:
- AVLTree construction via put()
- get() with configurable hit ratios
- remove() of existing keys
- select() / rank() order statistics

The benchmarks use deterministic test data so that runs are comparable.
"""

# Import benchmark utilities for easier access
from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]
