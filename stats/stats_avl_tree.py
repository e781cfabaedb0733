"""Statistics for AVL trees."""

import argparse
import logging
import os
import random
import time
from datetime import datetime
from statistics import mean

import numpy as np

from avl_trees.avl_tree_base import AVLTree
from avl_trees.invariants import assert_tree_invariants_raise, max_avl_height, perfect_height
from avl_trees.tree_stats import avl_stats_

logger = logging.getLogger(__name__)

DISTRIBUTIONS = ("uniform", "sequential", "reversed")


def create_avl_tree(items):
    """Build a tree by inserting each (key, value) pair in order."""
    tree = AVLTree()
    tree_put = tree.put
    for key, value in items:
        tree_put(key, value)
    return tree


def random_keys(n: int, distribution: str = "uniform") -> list:
    """Return n distinct integer keys in the insertion order given by distribution."""
    if distribution == "sequential":
        return list(range(1, n + 1))
    if distribution == "reversed":
        return list(range(n, 0, -1))
    if distribution != "uniform":
        raise ValueError(f"Unknown distribution: {distribution}")

    # we need at least n unique values; 2^24 = 16 777 216 > 1 000 000
    space = 1 << 24
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n}, Available: {space}")
    return random.sample(range(space), k=n)


def random_avl_tree(n: int, distribution: str = "uniform", delete_fraction: float = 0.0) -> AVLTree:
    """
    Build a random tree of n keys, then remove a random delete_fraction of them
    so that deletion rebalancing is part of the measured shape.
    """
    keys = random_keys(n, distribution)
    tree = create_avl_tree((k, "val") for k in keys)
    if delete_fraction > 0:
        victims = np.random.choice(len(keys), size=int(n * delete_fraction), replace=False)
        for idx in victims:
            tree.remove(keys[int(idx)])
    return tree


def repeated_experiment(
    size: int,
    repetitions: int,
    distribution: str = "uniform",
    delete_fraction: float = 0.0,
) -> None:
    """
    Repeatedly builds random AVL trees and aggregates height statistics and
    timings over all repetitions.
    """
    t_all_0 = time.perf_counter()

    results = []
    times_build = []
    times_stats = []

    for _ in range(repetitions):
        t0 = time.perf_counter()
        tree = random_avl_tree(size, distribution, delete_fraction)
        times_build.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        stats = avl_stats_(tree)
        times_stats.append(time.perf_counter() - t0)

        assert_tree_invariants_raise(tree, stats)
        results.append(stats)

    n_final = results[0].node_count
    best = perfect_height(n_final)
    bound = max_avl_height(n_final)

    heights = np.array([s.height for s in results], dtype=float)
    avg_height = float(heights.mean())
    var_height = float(heights.var())
    avg_height_amp = avg_height / best if best else 0
    avg_bound_use = avg_height / bound if bound else 0

    avg_build_time = mean(times_build)
    avg_stats_time = mean(times_stats)
    var_build_time = mean((t - avg_build_time) ** 2 for t in times_build)
    var_stats_time = mean((t - avg_stats_time) ** 2 for t in times_stats)

    rows = [
        ("Node count", n_final, None),
        ("Height", avg_height, var_height),
        ("Max height", float(heights.max()), None),
        ("Perfect height", best, None),
        ("AVL height bound", bound, None),
        ("Height amplification", avg_height_amp, None),
        ("Bound utilisation", avg_bound_use, None),
    ]

    header = f"{'Metric':<22} {'Avg':>15} {'(Var)':>15}"
    sep_line = "-" * len(header)

    logger.info(header)
    logger.info(sep_line)
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<22} {avg:>15}")
        else:
            var_str = f"({var:.2f})"
            avg_fmt = f"{avg:15.2f}"
            logger.info(f"{name:<22} {avg_fmt} {var_str:>15}")

    sum_build = sum(times_build)
    sum_stats = sum(times_stats)
    total_sum = sum_build + sum_stats

    pct_build = (sum_build / total_sum * 100) if total_sum else 0
    pct_stats = (sum_stats / total_sum * 100) if total_sum else 0

    perf_rows = [
        ("Build time (s)", avg_build_time, var_build_time, sum_build, pct_build),
        ("Stats time (s)", avg_stats_time, var_stats_time, sum_stats, pct_stats),
    ]

    header = f"{'Metric':<22}{'Avg(s)':>13}{'Var(s)':>13}{'Total(s)':>13}{'%Total':>10}"
    sep = "-" * len(header)

    logger.info("")
    logger.info("Performance summary:")
    logger.info(header)
    logger.info(sep)
    for name, avg, var, total, pct in perf_rows:
        logger.info(f"{name:<22}{avg:13.6f}{var:13.6f}{total:13.6f}{pct:10.2f}%")

    logger.info(sep)
    t_all_1 = time.perf_counter() - t_all_0
    logger.info("Execution time: %.3f seconds", t_all_1)


if __name__ == "__main__":
    # --- Argument Parsing ---
    parser = argparse.ArgumentParser(description="Run height statistics experiments for AVL trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 10_000, 100_000], help="List of tree sizes to test."
    )
    parser.add_argument("--repetitions", type=int, default=10, help="Number of repetitions for each experiment.")
    parser.add_argument(
        "--distribution", choices=DISTRIBUTIONS, default="uniform", help="Insertion order of the keys."
    )
    parser.add_argument(
        "--delete-fraction", type=float, default=0.0, help="Fraction of keys removed after building."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)
        np.random.seed(args.seed)

    log_dir = os.path.join(os.getcwd(), "stats/logs/avl_tree_logs")
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,  # Override any existing logging configuration
    )

    # Also apply the chosen level to the library logger so that
    # log records from avl_trees.* are emitted at the requested level.
    logging.getLogger("avl_trees").setLevel(log_level)

    for n in args.sizes:
        logger.info("")
        logger.info("")
        logger.info(
            f"---------------- NOW RUNNING EXPERIMENT: n = {n}, distribution = {args.distribution}, "
            f"repetitions = {args.repetitions} ----------------"
        )
        t0 = time.perf_counter()
        repeated_experiment(
            size=n,
            repetitions=args.repetitions,
            distribution=args.distribution,
            delete_fraction=args.delete_fraction,
        )
        elapsed = time.perf_counter() - t0
        logger.info(f"Total experiment time: {elapsed:.3f} seconds")
