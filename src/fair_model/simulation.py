# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
FAIR Monte Carlo simulation driver.

Runs independent trials composing the risk-factor samplers, then hands the
raw losses to the aggregator, insight generator and Gordon-Loeb optimizer to
assemble the full SimulationResults.
"""

import logging
from typing import List, Optional, Tuple

from .aggregator import (
    build_distribution_buckets,
    build_exceedance_curve,
    compute_ale_statistics,
    compute_risk_rating,
)
from .benchmark import industry_benchmark
from .distributions import RNG, default_rng
from .gordon_loeb import optimal_spend
from .inputs import AssessmentInputs
from .insights import generate_recommendations, identify_key_drivers
from .results import SimulationResults
from .risk_factors import (
    sample_primary_loss,
    sample_secondary_loss,
    sample_tef,
    sample_vulnerability,
)

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 100_000


def run_trials(inputs: AssessmentInputs,
               iterations: int,
               rng: RNG) -> Tuple[List[float], float]:
    """Run the trial loop.

    Each trial draws, in order, TEF, vulnerability, primary loss and
    secondary loss; the annual loss is TEF * vulnerability * (primary +
    secondary).

    Args:
        inputs: Assessment inputs
        iterations: Number of trials
        rng: Uniform [0, 1) source

    Returns:
        Tuple of (per-trial annual losses in trial order, mean vulnerability)
    """
    losses = []
    vulnerability_sum = 0.0

    for _ in range(iterations):
        tef = sample_tef(inputs, rng)
        vulnerability = sample_vulnerability(inputs, rng)
        loss_event_frequency = tef * vulnerability

        primary = sample_primary_loss(inputs, rng)
        secondary = sample_secondary_loss(inputs, primary, rng)

        losses.append(loss_event_frequency * (primary + secondary))
        vulnerability_sum += vulnerability

    return losses, vulnerability_sum / iterations


def simulate(inputs: AssessmentInputs,
             iterations: int = DEFAULT_ITERATIONS,
             rng: Optional[RNG] = None) -> SimulationResults:
    """Run a FAIR Monte Carlo simulation.

    Args:
        inputs: Validated assessment inputs
        iterations: Number of independent trials
        rng: Uniform [0, 1) source. The same sequence reproduces the same
             results bit for bit. Defaults to a fresh unseeded source.

    Returns:
        SimulationResults; raw_losses are sorted ascending

    Raises:
        ValueError: If iterations is less than 1
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    if rng is None:
        rng = default_rng()

    logger.debug("Simulating %d trials for industry=%s",
                 iterations, inputs.company.industry)

    losses, mean_vulnerability = run_trials(inputs, iterations, rng)
    losses.sort()

    ale = compute_ale_statistics(losses)
    revenue = inputs.revenue
    spend = optimal_spend(mean_vulnerability, ale.mean, revenue)
    rating = compute_risk_rating(ale.mean, revenue)

    results = SimulationResults(
        ale=ale,
        gordon_loeb_spend=spend,
        risk_rating=rating,
        industry_benchmark=industry_benchmark(inputs.company.industry, ale.mean),
        distribution_buckets=build_distribution_buckets(losses),
        exceedance_curve=build_exceedance_curve(losses),
        key_drivers=identify_key_drivers(inputs),
        recommendations=generate_recommendations(inputs, ale.mean, spend),
        raw_losses=losses,
    )

    logger.debug("Simulation complete: mean ALE %.2f, p95 %.2f, rating %s",
                 ale.mean, ale.p95, rating)
    return results
