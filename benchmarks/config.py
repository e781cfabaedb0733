"""Benchmark configuration."""

import os
from dataclasses import dataclass


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""

    # Reproducibility
    seed: int = 42

    # Benchmark parameters
    sizes: list[int] = None
    repetitions: int = 20

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.sizes is None:
            self.sizes = [100, 1000, 10_000]

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """Create config from environment variables."""
        return cls(
            seed=int(os.environ.get("BENCHMARK_SEED", "42")),
            repetitions=int(os.environ.get("BENCHMARK_REPETITIONS", "20")),
            log_level=os.environ.get("BENCHMARK_LOG_LEVEL", "INFO"),
        )
