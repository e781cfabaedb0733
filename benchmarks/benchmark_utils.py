"""
Benchmarking utilities for AVL trees.

This module provides common utilities and base classes for ASV benchmarking
that work with ASV's built-in timing and stabilization mechanisms.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable.

Logging:
    Benchmarks should be run with logging at INFO level or higher to avoid
    performance contamination from verbose debug output.
"""

import gc
import logging
import random
from typing import List, Tuple

import numpy as np

from avl_trees.avl_tree_base import AVLTree
from benchmarks.config import BenchmarkConfig

# Default seed for deterministic benchmarking - can be overridden via environment variable
DEFAULT_BENCHMARK_SEED = BenchmarkConfig.from_env().seed


class BenchmarkUtils:
    """Utility class for ASV benchmarking operations."""

    @staticmethod
    def check_logging_level():
        """
        Raise if the library logger is at DEBUG or lower, since rotation
        debug output would dominate the measured time.
        """
        avl_logger = logging.getLogger("avl_trees")
        effective_level = avl_logger.getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"Logging level is set to {logging.getLevelName(effective_level)}. "
                "Benchmarks require logging to be at INFO level or higher to avoid "
                "performance contamination from verbose debug output."
            )

    @staticmethod
    def generate_deterministic_keys(size: int,
                                    seed: int = None,
                                    key_range: Tuple[int, int] = (1, 1000000),
                                    distribution: str = 'uniform') -> List[int]:
        """
        Generate deterministic, duplicate-free keys for benchmarking.

        Args:
            size: Number of keys to generate
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            key_range: Range of key values (min, max)
            distribution: Distribution type ('uniform', 'clustered', 'sequential')

        Returns:
            List of deterministic keys
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        random.seed(seed)
        np.random.seed(seed)

        min_key, max_key = key_range

        if distribution == 'uniform':
            population = np.arange(min_key, max_key + 1)
            return np.random.choice(population, size=size, replace=False).tolist()
        elif distribution == 'clustered':
            # A few hot spots, deduplicated and padded with uniform keys
            cluster_centers = np.linspace(min_key, max_key, 5, dtype=int)
            cluster_size = size // 5
            keys = np.empty(0, dtype=int)

            for center in cluster_centers:
                cluster_keys = np.random.normal(center, (max_key - min_key) // 20, cluster_size)
                cluster_keys = np.clip(cluster_keys, min_key, max_key).astype(int)
                keys = np.concatenate([keys, cluster_keys])

            unique_keys = np.unique(keys)
            if len(unique_keys) >= size:
                chosen = unique_keys[:size]
            else:
                remaining = np.setdiff1d(np.arange(min_key, max_key + 1), unique_keys)
                additional_needed = size - len(unique_keys)
                if len(remaining) < additional_needed:
                    raise ValueError("Not enough unique keys available to generate desired size")
                pad = np.random.choice(remaining, size=additional_needed, replace=False)
                chosen = np.concatenate([unique_keys, pad])
            # np.unique sorts; shuffle so inserts are not sequential
            np.random.shuffle(chosen)
            return chosen.tolist()
        elif distribution == 'sequential':
            return list(range(min_key, min_key + size))
        else:
            raise ValueError(f"Unknown distribution: {distribution}")

    @staticmethod
    def create_tree(keys: List[int]) -> AVLTree:
        """Build an AVLTree holding ``value_<key>`` under each key."""
        tree = AVLTree()
        for key in keys:
            tree.put(key, f"value_{key}")
        return tree

    @staticmethod
    def create_lookup_keys(insert_keys: List[int],
                           hit_ratio: float = 0.8,
                           seed: int = None,
                           num_lookups: int = 1000) -> List[int]:
        """
        Create keys for lookup operations with specified hit ratio.

        Args:
            insert_keys: Keys that were inserted (for hits)
            hit_ratio: Ratio of lookups that should be hits (0.0 to 1.0)
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            num_lookups: Number of lookup keys to generate

        Returns:
            List of lookup keys
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        rng = random.Random(seed)

        if not insert_keys:
            return [rng.randint(1, 1000000) for _ in range(num_lookups)]

        num_hits = int(num_lookups * hit_ratio)
        num_misses = num_lookups - num_hits

        hit_keys = rng.choices(insert_keys, k=num_hits) if num_hits > 0 else []

        insert_keys_set = set(insert_keys)
        max_key = max(insert_keys)
        miss_keys = []
        while len(miss_keys) < num_misses:
            key = rng.randint(max_key + 1, max_key * 2 + 1)
            if key not in insert_keys_set:
                miss_keys.append(key)

        lookup_keys = hit_keys + miss_keys
        rng.shuffle(lookup_keys)
        return lookup_keys


class BaseBenchmark:
    """Base class for ASV benchmarks.

    Ensures the logging level is appropriate and that garbage collection is
    re-enabled after each timed section.
    """

    params = []
    param_names = []

    # Let ASV handle timing optimization automatically
    warmup_time = 0.1
    sample_time = 0.4

    def setup(self, *params):
        """Setup method called before each benchmark.

        Subclasses should call super().setup(*params) first, prepare test
        data, then call gc.collect() and gc.disable().
        """
        BenchmarkUtils.check_logging_level()

    def teardown(self, *params):
        """Re-enable garbage collection after measurement completes."""
        if not gc.isenabled():
            gc.enable()
