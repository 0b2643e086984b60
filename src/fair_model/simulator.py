# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Risk simulation orchestrator.

This module provides the RiskSimulator class which turns a SimulationConfig
into simulation runs, creating a fresh random source for every run.
"""

import logging
from typing import Optional

from .config import SimulationConfig
from .distributions import RNG, default_rng, seeded_rng
from .inputs import AssessmentInputs
from .results import SimulationResults
from .scenario import ScenarioComparison, compare_scenarios
from .simulation import simulate

logger = logging.getLogger(__name__)


class RiskSimulator:
    """Runs FAIR simulations according to a SimulationConfig.

    With a random_seed configured every run starts from the same random
    sequence, so repeated runs of the same inputs give identical results.

    Example:
        >>> simulator = RiskSimulator(SimulationConfig(iterations=10_000, random_seed=42))
        >>> results = simulator.run(inputs)
        >>> print(f"Mean ALE: ${results.ale.mean:,.0f}")
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """Initialize the simulator.

        Args:
            config: Simulation configuration. If None, uses defaults.
        """
        self.config = config or SimulationConfig()

    def make_rng(self) -> RNG:
        """Create the random source for one run."""
        if self.config.random_seed is not None:
            return seeded_rng(self.config.random_seed)
        return default_rng()

    def run(self, inputs: AssessmentInputs) -> SimulationResults:
        """Simulate a single assessment.

        Args:
            inputs: Validated assessment inputs

        Returns:
            SimulationResults for the configured number of iterations
        """
        logger.info("Running %d iterations (seed=%s)",
                    self.config.iterations, self.config.random_seed)
        results = simulate(inputs, self.config.iterations, self.make_rng())
        logger.info("Mean ALE %.0f, rating %s", results.ale.mean, results.risk_rating)
        return results

    def compare(self,
                base: AssessmentInputs,
                modified: AssessmentInputs) -> ScenarioComparison:
        """Simulate a base and a modified scenario on one random source.

        Args:
            base: Current-state inputs
            modified: What-if inputs

        Returns:
            ScenarioComparison of the two runs
        """
        logger.info("Comparing scenarios with %d iterations each", self.config.iterations)
        return compare_scenarios(base, modified, self.config.iterations, self.make_rng())
