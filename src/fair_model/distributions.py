# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Distribution samplers driven by an explicit uniform random source.

Every sampler takes ``rng``, a zero-argument callable returning a float in
[0, 1). Passing the same source sequence reproduces the same draws, which is
what makes simulations replayable and lets independent simulations run side
by side without sharing state.
"""

import math
import random
from typing import Callable

RNG = Callable[[], float]

# Standard PERT shape parameter
PERT_LAMBDA = 4.0


def seeded_rng(seed: int) -> RNG:
    """Return a reproducible uniform source for the given seed."""
    return random.Random(seed).random


def default_rng() -> RNG:
    """Return a fresh, unseeded uniform source."""
    return random.Random().random


def _nonzero_uniform(rng: RNG) -> float:
    u = rng()
    while u == 0.0:
        u = rng()
    return u


def standard_normal(rng: RNG) -> float:
    """Draw one standard normal variate using the Box-Muller transform.

    Args:
        rng: Uniform [0, 1) source. Two draws are consumed per call (more
             only when a draw is exactly zero).

    Returns:
        A sample from N(0, 1)
    """
    u1 = _nonzero_uniform(rng)
    u2 = _nonzero_uniform(rng)
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


def log_normal(mu: float, sigma: float, rng: RNG) -> float:
    """Draw exp(mu + sigma * Z); always strictly positive."""
    return math.exp(mu + sigma * standard_normal(rng))


def gamma(shape: float, rng: RNG) -> float:
    """Draw from Gamma(shape, 1) using Marsaglia and Tsang's method.

    Shapes below 1 are boosted: Gamma(a) = Gamma(a + 1) * U^(1/a).

    Raises:
        ValueError: If shape is not positive
    """
    if shape <= 0:
        raise ValueError(f"Gamma shape must be positive: {shape}")

    if shape < 1.0:
        u = _nonzero_uniform(rng)
        return gamma(shape + 1.0, rng) * u ** (1.0 / shape)

    d = shape - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)

    while True:
        x = standard_normal(rng)
        v = 1.0 + c * x
        while v <= 0:
            x = standard_normal(rng)
            v = 1.0 + c * x

        v = v * v * v
        u = _nonzero_uniform(rng)

        # Squeeze test avoids the logarithms most of the time
        if u < 1.0 - 0.0331 * (x * x) * (x * x):
            return d * v
        if math.log(u) < 0.5 * x * x + d * (1.0 - v + math.log(v)):
            return d * v


def beta(alpha: float, beta_: float, rng: RNG) -> float:
    """Draw from Beta(alpha, beta) as a ratio of gamma variates.

    Args:
        alpha: First shape parameter (> 0)
        beta_: Second shape parameter (> 0)
        rng: Uniform [0, 1) source

    Returns:
        A value in [0, 1] whose mean approximates alpha / (alpha + beta)

    Raises:
        ValueError: If either shape parameter is not positive
    """
    if alpha <= 0 or beta_ <= 0:
        raise ValueError(
            f"Beta shape parameters must be positive: alpha={alpha}, beta={beta_}"
        )
    ga = gamma(alpha, rng)
    gb = gamma(beta_, rng)
    total = ga + gb
    if total == 0.0:
        # Both draws underflowed; tiny shapes put the mass on the endpoints
        return 1.0 if rng() < alpha / (alpha + beta_) else 0.0
    return ga / total


def pert(minimum: float, mode: float, maximum: float, rng: RNG) -> float:
    """Draw from a PERT distribution over [minimum, maximum].

    The PERT distribution is a Beta reshaped by the most likely value:
    alpha = 1 + 4 * (mode - min) / (max - min) and
    beta = 1 + 4 * (max - mode) / (max - min). The beta draw is then
    rescaled onto [min, max], so the mean is (min + 4 * mode + max) / 6.

    Args:
        minimum: Lower bound
        mode: Most likely value, within [minimum, maximum]
        maximum: Upper bound, strictly greater than minimum
        rng: Uniform [0, 1) source

    Returns:
        A value in [minimum, maximum]

    Raises:
        ValueError: If minimum >= maximum or mode lies outside the bounds
    """
    if not minimum < maximum:
        raise ValueError(
            f"PERT requires min < max, got min={minimum}, max={maximum}"
        )
    if not minimum <= mode <= maximum:
        raise ValueError(
            f"PERT mode {mode} outside of [{minimum}, {maximum}]"
        )

    span = maximum - minimum
    alpha = 1.0 + PERT_LAMBDA * (mode - minimum) / span
    beta_param = 1.0 + PERT_LAMBDA * (maximum - mode) / span

    value = minimum + span * beta(alpha, beta_param, rng)
    return min(maximum, max(minimum, value))
