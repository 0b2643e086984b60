# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Configuration for risk simulations."""

from dataclasses import dataclass
from typing import Optional

from .simulation import DEFAULT_ITERATIONS


@dataclass
class SimulationConfig:
    """Configuration for FAIR simulation runs.

    Attributes:
        iterations: Number of Monte Carlo trials per simulation. Default 100,000.
        random_seed: Optional seed for reproducible results. Default None.
    """
    iterations: int = DEFAULT_ITERATIONS
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.iterations < 1:
            raise ValueError("iterations must be at least 1")
        if self.random_seed is not None and (
                isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)):
            raise ValueError(f"random_seed must be an integer, got {self.random_seed!r}")
