# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Tests for the base distribution samplers.
"""

import math
import unittest

import numpy as np

from ..distributions import (
    beta,
    default_rng,
    gamma,
    log_normal,
    pert,
    seeded_rng,
    standard_normal,
)

SAMPLES = 10_000


class TestRandomSources(unittest.TestCase):
    """Tests for the uniform random sources."""

    def test_seeded_rng_is_reproducible(self):
        """Same seed yields the same sequence."""
        a = seeded_rng(7)
        b = seeded_rng(7)
        self.assertEqual([a() for _ in range(20)], [b() for _ in range(20)])

    def test_values_in_unit_interval(self):
        """Draws lie in [0, 1)."""
        rng = default_rng()
        for _ in range(1000):
            u = rng()
            self.assertGreaterEqual(u, 0.0)
            self.assertLess(u, 1.0)


class TestStandardNormal(unittest.TestCase):
    """Tests for the Box-Muller sampler."""

    def test_mean_near_zero(self):
        rng = seeded_rng(42)
        samples = np.array([standard_normal(rng) for _ in range(SAMPLES)])
        self.assertLess(abs(samples.mean()), 0.05)

    def test_stddev_near_one(self):
        rng = seeded_rng(42)
        samples = np.array([standard_normal(rng) for _ in range(SAMPLES)])
        self.assertLess(abs(samples.std() - 1.0), 0.1)

    def test_zero_uniform_is_redrawn(self):
        """A uniform of exactly 0 must not reach log()."""
        draws = iter([0.0, 0.5, 0.25])
        value = standard_normal(lambda: next(draws))
        expected = math.sqrt(-2.0 * math.log(0.5)) * math.cos(2.0 * math.pi * 0.25)
        self.assertAlmostEqual(value, expected)


class TestLogNormal(unittest.TestCase):
    """Tests for the log-normal sampler."""

    def test_always_positive(self):
        rng = seeded_rng(42)
        for _ in range(1000):
            self.assertGreater(log_normal(12, 2, rng), 0)

    def test_mean_approximates_expected(self):
        """Mean within 0.5x-2x of exp(mu + sigma^2 / 2); heavy tails need slack."""
        rng = seeded_rng(42)
        mu, sigma = 12.0, 1.5
        mean = np.mean([log_normal(mu, sigma, rng) for _ in range(SAMPLES)])
        expected = math.exp(mu + sigma ** 2 / 2)
        self.assertGreater(mean, expected * 0.5)
        self.assertLess(mean, expected * 2.0)


class TestBeta(unittest.TestCase):
    """Tests for the gamma-ratio beta sampler."""

    def test_values_in_unit_interval(self):
        rng = seeded_rng(42)
        for _ in range(1000):
            v = beta(2, 5, rng)
            self.assertGreaterEqual(v, 0.0)
            self.assertLessEqual(v, 1.0)

    def test_mean_approximates_alpha_over_sum(self):
        for alpha, beta_param in [(2, 5), (3, 7), (0.5, 0.5), (5, 1)]:
            with self.subTest(alpha=alpha, beta=beta_param):
                rng = seeded_rng(42)
                mean = np.mean([beta(alpha, beta_param, rng) for _ in range(SAMPLES)])
                self.assertLess(abs(mean - alpha / (alpha + beta_param)), 0.05)

    def test_tiny_shapes_stay_in_unit_interval(self):
        """Gamma draws for tiny shapes can both underflow to zero."""
        for alpha, beta_param in [(0.001, 0.001), (0.005, 0.005), (0.001, 0.003)]:
            with self.subTest(alpha=alpha, beta=beta_param):
                rng = seeded_rng(1)
                draws = [beta(alpha, beta_param, rng) for _ in range(2000)]
                self.assertTrue(all(0.0 <= v <= 1.0 for v in draws))
                self.assertLess(abs(np.mean(draws) - alpha / (alpha + beta_param)), 0.1)

    def test_non_positive_shape_raises(self):
        rng = seeded_rng(1)
        with self.assertRaises(ValueError):
            beta(0, 2, rng)
        with self.assertRaises(ValueError):
            beta(2, -1, rng)

    def test_gamma_mean_matches_shape(self):
        """Gamma(k, 1) has mean k, including the boosted shape < 1 branch."""
        for shape in (0.4, 1.0, 4.5):
            with self.subTest(shape=shape):
                rng = seeded_rng(3)
                mean = np.mean([gamma(shape, rng) for _ in range(SAMPLES)])
                self.assertLess(abs(mean - shape) / shape, 0.05)


class TestPert(unittest.TestCase):
    """Tests for the PERT sampler."""

    def test_values_within_bounds(self):
        rng = seeded_rng(42)
        for _ in range(1000):
            v = pert(1, 5, 10, rng)
            self.assertGreaterEqual(v, 1)
            self.assertLessEqual(v, 10)

    def test_mean_approximates_pert_mean(self):
        for low, mode, high in [(1, 5, 10), (0.1, 0.5, 3.0), (2, 3.5, 5)]:
            with self.subTest(low=low, mode=mode, high=high):
                rng = seeded_rng(42)
                mean = np.mean([pert(low, mode, high, rng) for _ in range(SAMPLES)])
                expected = (low + 4 * mode + high) / 6
                self.assertLess(abs(mean - expected), expected * 0.15)

    def test_mode_at_bound_is_allowed(self):
        rng = seeded_rng(42)
        for _ in range(100):
            v = pert(0, 0, 1, rng)
            self.assertGreaterEqual(v, 0)
            self.assertLessEqual(v, 1)

    def test_invalid_bounds_raise(self):
        rng = seeded_rng(42)
        with self.assertRaises(ValueError):
            pert(5, 5, 5, rng)
        with self.assertRaises(ValueError):
            pert(10, 5, 1, rng)
        with self.assertRaises(ValueError):
            pert(1, 20, 10, rng)


if __name__ == '__main__':
    unittest.main()
