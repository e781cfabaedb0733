"""
ASV benchmarks for AVLTree operations.

Covers full construction via put(), get() with hit and miss lookups,
remove() of stored keys and the select()/rank() order statistics.
"""

import gc

from benchmarks.benchmark_utils import BaseBenchmark, BenchmarkUtils


class AVLTreePutBenchmarks(BaseBenchmark):
    """Benchmarks for AVLTree construction via sequential puts."""

    params = [
        [100, 1000, 10_000],                     # tree size
        ['uniform', 'sequential', 'clustered'],  # data distributions
    ]
    param_names = ['size', 'distribution']

    min_run_count = 5

    def setup(self, size, distribution):
        super().setup(size, distribution)
        self.keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=42 + size,
            distribution=distribution,
        )
        gc.collect()
        gc.disable()

    def time_put_batch_construction(self, size, distribution):
        """Benchmark full tree construction by putting all keys."""
        BenchmarkUtils.create_tree(self.keys)


class AVLTreeGetBenchmarks(BaseBenchmark):
    """Benchmarks for AVLTree.get() with configurable hit ratio."""

    params = [
        [100, 1000, 10_000],  # tree size
        [0.0, 0.5, 1.0],      # hit ratios
    ]
    param_names = ['size', 'hit_ratio']

    min_run_count = 5

    # Class-level cache so every hit ratio reuses the same tree
    _tree_cache = {}

    def setup(self, size, hit_ratio):
        super().setup(size, hit_ratio)
        if size not in self._tree_cache:
            keys = BenchmarkUtils.generate_deterministic_keys(size=size, seed=42 + size)
            self._tree_cache[size] = (keys, BenchmarkUtils.create_tree(keys))
        keys, self.tree = self._tree_cache[size]
        self.lookup_keys = BenchmarkUtils.create_lookup_keys(keys, hit_ratio=hit_ratio)
        gc.collect()
        gc.disable()

    def time_get(self, size, hit_ratio):
        get = self.tree.get
        for key in self.lookup_keys:
            get(key)


class AVLTreeRemoveBenchmarks(BaseBenchmark):
    """Benchmarks for removing half of the stored keys."""

    params = [[100, 1000, 10_000]]
    param_names = ['size']

    # remove() mutates the tree, so every sample needs a fresh one
    number = 1
    repeat = 10

    def setup(self, size):
        super().setup(size)
        keys = BenchmarkUtils.generate_deterministic_keys(size=size, seed=42 + size)
        self.tree = BenchmarkUtils.create_tree(keys)
        self.victims = keys[::2]
        gc.collect()
        gc.disable()

    def time_remove_half(self, size):
        remove = self.tree.remove
        for key in self.victims:
            remove(key)


class AVLTreeOrderStatisticsBenchmarks(BaseBenchmark):
    """Benchmarks for select() and rank()."""

    params = [[1000, 10_000, 100_000]]
    param_names = ['size']

    _tree_cache = {}

    def setup(self, size):
        super().setup(size)
        if size not in self._tree_cache:
            keys = BenchmarkUtils.generate_deterministic_keys(size=size, seed=42 + size)
            self._tree_cache[size] = (keys, BenchmarkUtils.create_tree(keys))
        keys, self.tree = self._tree_cache[size]
        self.indices = list(range(0, size, max(1, size // 1000)))
        self.rank_keys = keys[:1000]
        gc.collect()
        gc.disable()

    def time_select(self, size):
        select = self.tree.select
        for i in self.indices:
            select(i)

    def time_rank(self, size):
        rank = self.tree.rank
        for key in self.rank_keys:
            rank(key)
