# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Integration tests for the simulation driver, orchestrator and scenario comparison.

These tests verify:
1. Seeded runs are reproducible bit for bit
2. Result invariants hold (percentile ordering, lengths, ranges)
3. Directional properties of the model (industry, controls, cloud)
"""

import unittest

from ..benchmark import sort_industries
from ..config import SimulationConfig
from ..distributions import seeded_rng
from ..inputs import apply_cloud_override
from ..scenario import compare_scenarios
from ..simulation import run_trials, simulate
from ..simulator import RiskSimulator
from .fixtures import (
    ALL_CONTROLS,
    NO_CONTROLS,
    sample_inputs,
    with_company,
    with_controls,
)

ITERATIONS = 1_000


class TestSimulate(unittest.TestCase):
    """Tests for simulate()."""

    @classmethod
    def setUpClass(cls):
        cls.results = simulate(sample_inputs(), ITERATIONS, seeded_rng(42))

    def test_deterministic_with_seed(self):
        again = simulate(sample_inputs(), ITERATIONS, seeded_rng(42))
        self.assertEqual(again.ale.mean, self.results.ale.mean)
        self.assertEqual(again.ale.p95, self.results.ale.p95)
        self.assertEqual(again.gordon_loeb_spend, self.results.gordon_loeb_spend)
        self.assertEqual(again.raw_losses, self.results.raw_losses)

    def test_different_seeds_differ(self):
        other = simulate(sample_inputs(), ITERATIONS, seeded_rng(43))
        self.assertNotEqual(other.ale.mean, self.results.ale.mean)

    def test_percentile_ordering(self):
        ale = self.results.ale
        self.assertGreaterEqual(ale.p10, 0)
        self.assertLessEqual(ale.p10, ale.median)
        self.assertLessEqual(ale.median, ale.p90)
        self.assertLessEqual(ale.p90, ale.p95)

    def test_raw_losses(self):
        losses = self.results.raw_losses
        self.assertEqual(len(losses), ITERATIONS)
        self.assertEqual(self.results.iterations, ITERATIONS)
        self.assertEqual(losses, sorted(losses))
        self.assertTrue(all(loss > 0 for loss in losses))

    def test_benchmark_and_rating(self):
        benchmark = self.results.industry_benchmark
        self.assertGreaterEqual(benchmark.percentile_rank, 0)
        self.assertLessEqual(benchmark.percentile_rank, 100)
        self.assertEqual(benchmark.your_ale, self.results.ale.mean)
        self.assertIn(self.results.risk_rating, ("LOW", "MODERATE", "HIGH", "CRITICAL"))

    def test_spend_within_revenue_cap(self):
        self.assertGreater(self.results.gordon_loeb_spend, 0)
        self.assertLessEqual(self.results.gordon_loeb_spend, 0.05 * sample_inputs().revenue)

    def test_distribution_and_curve(self):
        total = sum(b.probability for b in self.results.distribution_buckets)
        self.assertAlmostEqual(total, 1.0)
        curve = self.results.exceedance_curve
        self.assertGreater(curve[0].probability, 0.9)
        self.assertLess(curve[-1].probability, 0.1)

    def test_insights_present(self):
        self.assertGreaterEqual(len(self.results.key_drivers), 1)
        self.assertGreaterEqual(len(self.results.recommendations), 1)

    def test_invalid_iterations(self):
        with self.assertRaises(ValueError):
            simulate(sample_inputs(), 0, seeded_rng(1))

    def test_single_iteration(self):
        results = simulate(sample_inputs(), 1, seeded_rng(1))
        self.assertEqual(len(results.raw_losses), 1)
        self.assertEqual(len(results.distribution_buckets), 1)
        self.assertEqual(results.ale.p10, results.ale.p95)

    def test_to_dict(self):
        payload = self.results.to_dict()
        self.assertEqual(len(payload["rawLosses"]), ITERATIONS)
        self.assertIn("gordonLoebSpend", payload)
        self.assertEqual(set(payload["ale"]), {"mean", "median", "p10", "p90", "p95"})
        self.assertNotIn("rawLosses", self.results.to_dict(include_raw_losses=False))

    def test_dataframes(self):
        dist = self.results.distribution_df()
        self.assertEqual(list(dist.columns), ["Min", "Max", "Probability"])
        self.assertEqual(len(dist), len(self.results.distribution_buckets))
        curve = self.results.exceedance_df()
        self.assertEqual(len(curve), 50)
        self.assertTrue(curve["Probability"].is_monotonic_decreasing)


class TestDirectionalProperties(unittest.TestCase):
    """The model must move ALE in the expected direction."""

    def test_healthcare_costlier_than_hospitality(self):
        healthcare = simulate(with_company(sample_inputs(), industry="healthcare"),
                              2_000, seeded_rng(42))
        hospitality = simulate(with_company(sample_inputs(), industry="hospitality"),
                               2_000, seeded_rng(42))
        self.assertGreater(healthcare.ale.mean, hospitality.ale.mean)

    def test_mean_ale_follows_industry_cost_order(self):
        means = [
            (row.key, simulate(with_company(sample_inputs(), industry=row.key),
                               300, seeded_rng(42)).ale.mean)
            for row in sort_industries()
        ]
        for (costlier, high), (cheaper, low) in zip(means, means[1:]):
            with self.subTest(costlier=costlier, cheaper=cheaper):
                self.assertGreater(high, low)

    def test_controls_lower_ale(self):
        protected = simulate(with_controls(sample_inputs(), ALL_CONTROLS), ITERATIONS, seeded_rng(7))
        exposed = simulate(with_controls(sample_inputs(), NO_CONTROLS), ITERATIONS, seeded_rng(7))
        self.assertLess(protected.ale.mean, exposed.ale.mean)

    def test_cloud_raises_ale(self):
        cloud = simulate(apply_cloud_override(sample_inputs(), 100), ITERATIONS, seeded_rng(7))
        on_prem = simulate(apply_cloud_override(sample_inputs(), 0), ITERATIONS, seeded_rng(7))
        self.assertGreater(cloud.ale.mean, on_prem.ale.mean)

    def test_run_trials_reports_mean_vulnerability(self):
        losses, mean_vulnerability = run_trials(sample_inputs(), 200, seeded_rng(3))
        self.assertEqual(len(losses), 200)
        self.assertGreater(mean_vulnerability, 0)
        self.assertLess(mean_vulnerability, 1)


class TestSimulationConfig(unittest.TestCase):
    """Tests for SimulationConfig."""

    def test_default_values(self):
        config = SimulationConfig()
        self.assertEqual(config.iterations, 100_000)
        self.assertIsNone(config.random_seed)

    def test_invalid_iterations(self):
        with self.assertRaises(ValueError):
            SimulationConfig(iterations=0)
        with self.assertRaises(ValueError):
            SimulationConfig(iterations=-1)

    def test_invalid_seed(self):
        for seed in ("42", 4.2, True):
            with self.subTest(seed=seed):
                with self.assertRaises(ValueError):
                    SimulationConfig(random_seed=seed)


class TestRiskSimulator(unittest.TestCase):
    """Tests for the RiskSimulator orchestrator."""

    def test_seeded_runs_repeat(self):
        simulator = RiskSimulator(SimulationConfig(iterations=500, random_seed=11))
        first = simulator.run(sample_inputs())
        second = simulator.run(sample_inputs())
        self.assertEqual(first.raw_losses, second.raw_losses)

    def test_matches_simulate(self):
        simulator = RiskSimulator(SimulationConfig(iterations=300, random_seed=5))
        direct = simulate(sample_inputs(), 300, seeded_rng(5))
        self.assertEqual(simulator.run(sample_inputs()).ale.mean, direct.ale.mean)

    def test_unseeded_run(self):
        results = RiskSimulator(SimulationConfig(iterations=100)).run(sample_inputs())
        self.assertEqual(len(results.raw_losses), 100)


class TestScenarioComparison(unittest.TestCase):
    """Tests for compare_scenarios."""

    def test_adding_controls_saves_money(self):
        base = with_controls(sample_inputs(), NO_CONTROLS)
        modified = with_controls(sample_inputs(), ALL_CONTROLS)
        comparison = compare_scenarios(base, modified, ITERATIONS, seeded_rng(42))
        self.assertAlmostEqual(comparison.delta.ale_mean,
                               comparison.modified.ale.mean - comparison.base.ale.mean)
        self.assertEqual(comparison.savings.ale_mean, -comparison.delta.ale_mean)
        self.assertGreater(comparison.savings.ale_mean, 0)

    def test_identical_scenarios_reproducible(self):
        first = compare_scenarios(sample_inputs(), sample_inputs(), 300, seeded_rng(9))
        second = compare_scenarios(sample_inputs(), sample_inputs(), 300, seeded_rng(9))
        self.assertEqual(first.delta, second.delta)

    def test_summary_df(self):
        simulator = RiskSimulator(SimulationConfig(iterations=300, random_seed=2))
        comparison = simulator.compare(sample_inputs(), apply_cloud_override(sample_inputs(), 0))
        summary = comparison.summary_df()
        self.assertEqual(list(summary.columns), ["Base", "Modified", "Delta"])
        self.assertIn("Mean ALE", summary.index)
        self.assertIsInstance(comparison.risk_rating_changed, bool)


if __name__ == '__main__':
    unittest.main()
