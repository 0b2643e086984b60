# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Scenario comparison.

Runs two simulations on one random source and reports how the modified
scenario differs from the base. With a seeded source the comparison is
reproducible.
"""

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .distributions import RNG, default_rng
from .inputs import AssessmentInputs
from .results import SimulationResults
from .simulation import DEFAULT_ITERATIONS, simulate


@dataclass(frozen=True)
class ScenarioDelta:
    """Differences in mean ALE, p95 ALE and Gordon-Loeb spend."""
    ale_mean: float
    ale_p95: float
    gordon_loeb: float


@dataclass
class ScenarioComparison:
    """Base and modified results with their differences.

    Attributes:
        base: Results of the base scenario
        modified: Results of the modified scenario
        delta: modified - base (negative means improvement)
        savings: base - modified (positive means improvement)
        risk_rating_changed: Whether the two ratings differ
    """
    base: SimulationResults
    modified: SimulationResults
    delta: ScenarioDelta
    savings: ScenarioDelta
    risk_rating_changed: bool

    def summary_df(self) -> pd.DataFrame:
        """Side-by-side headline figures indexed by metric."""
        rows = {
            "Mean ALE": (self.base.ale.mean, self.modified.ale.mean, self.delta.ale_mean),
            "P95 ALE": (self.base.ale.p95, self.modified.ale.p95, self.delta.ale_p95),
            "Gordon-Loeb Spend": (self.base.gordon_loeb_spend,
                                  self.modified.gordon_loeb_spend,
                                  self.delta.gordon_loeb),
        }
        return pd.DataFrame.from_dict(rows, orient="index",
                                      columns=["Base", "Modified", "Delta"])


def compare_scenarios(base: AssessmentInputs,
                      modified: AssessmentInputs,
                      iterations: int = DEFAULT_ITERATIONS,
                      rng: Optional[RNG] = None) -> ScenarioComparison:
    """Simulate two scenarios back to back and compare them.

    Args:
        base: Current-state inputs
        modified: What-if inputs (e.g., with additional controls)
        iterations: Trials per scenario
        rng: Uniform [0, 1) source shared by both runs, base first

    Returns:
        ScenarioComparison
    """
    if rng is None:
        rng = default_rng()

    base_results = simulate(base, iterations, rng)
    modified_results = simulate(modified, iterations, rng)

    delta = ScenarioDelta(
        ale_mean=modified_results.ale.mean - base_results.ale.mean,
        ale_p95=modified_results.ale.p95 - base_results.ale.p95,
        gordon_loeb=modified_results.gordon_loeb_spend - base_results.gordon_loeb_spend,
    )
    savings = ScenarioDelta(
        ale_mean=-delta.ale_mean,
        ale_p95=-delta.ale_p95,
        gordon_loeb=-delta.gordon_loeb,
    )

    return ScenarioComparison(
        base=base_results,
        modified=modified_results,
        delta=delta,
        savings=savings,
        risk_rating_changed=base_results.risk_rating != modified_results.risk_rating,
    )
