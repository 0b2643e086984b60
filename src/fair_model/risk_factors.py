# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
FAIR risk-factor samplers.

Each sampler is a pure function of the assessment inputs and a uniform
random source. The simulation driver composes them trial by trial:

    loss event frequency = TEF * vulnerability
    annual loss          = loss event frequency * (primary + secondary loss)
"""

import math
from typing import Iterable

from .distributions import RNG, beta, log_normal, pert
from .inputs import AssessmentInputs
from .lookup_tables import (
    ATTACK_PATTERN_FREQ,
    CLOUD_COST_UPLIFT,
    CONTROL_VULNERABILITY_REDUCTION,
    EMPLOYEE_MULTIPLIERS,
    INDUSTRY_AVG_COST,
    INDUSTRY_COST_MEAN,
    INSURED_SECONDARY_LOSS_SHARE,
    PER_RECORD_COST,
    PRIMARY_LOSS_REVENUE_CAP,
    RECORDS_COMPROMISED_FRACTION,
    RECORDS_COMPROMISED_SIGMA,
    TEF_BY_INDUSTRY,
    THREAT_BASELINE,
    THREAT_MULTIPLIER_BOUNDS,
    VULNERABILITY_BETA,
    get_regulatory_coverage,
)

VULNERABILITY_FLOOR = 0.001
VULNERABILITY_CEILING = 0.999

_MEAN_PER_RECORD_COST = sum(PER_RECORD_COST.values()) / len(PER_RECORD_COST)

# Secondary loss component ranges (PERT min, mode, max)
REGULATORY_FINE_SHARE = (0.01, 0.10, 0.50)
LITIGATION_SHARE = (0.15, 0.22, 0.30)
REPUTATION_SHARE = (0.20, 0.30, 0.40)
NOTIFICATION_COST_PER_RECORD = (2.0, 3.5, 5.0)


def threat_multiplier(top_concerns: Iterable[str]) -> float:
    """Scale factor on threat event frequency from the selected concerns.

    The mean DBIR weight of the selected concerns is compared to the
    baseline weight across all attack patterns, then clamped.

    Args:
        top_concerns: Selected threat types; may be empty

    Returns:
        Multiplier in [0.8, 1.5]; 1.0 when no concern is selected
    """
    weights = [ATTACK_PATTERN_FREQ[concern] for concern in top_concerns]
    if not weights:
        return 1.0
    low, high = THREAT_MULTIPLIER_BOUNDS
    ratio = (sum(weights) / len(weights)) / THREAT_BASELINE
    return min(high, max(low, ratio))


def sample_tef(inputs: AssessmentInputs, rng: RNG) -> float:
    """Sample threat event frequency (events per year)."""
    tef = TEF_BY_INDUSTRY[inputs.company.industry]
    base = pert(tef.min, tef.mode, tef.max, rng)
    return (base
            * EMPLOYEE_MULTIPLIERS[inputs.company.employees]
            * threat_multiplier(inputs.threats.top_concerns))


def control_reduction_factor(inputs: AssessmentInputs) -> float:
    """Product of (1 - weight) over the active preventive controls."""
    active = inputs.controls.as_dict()
    factor = 1.0
    for control, weight in CONTROL_VULNERABILITY_REDUCTION.items():
        if active[control]:
            factor *= 1.0 - weight
    return factor


def sample_vulnerability(inputs: AssessmentInputs, rng: RNG) -> float:
    """Sample the probability that a threat event becomes a loss event.

    A base rate is drawn from Beta(3, 7) (mean 0.3) and reduced
    multiplicatively by each active control. The result stays inside (0, 1).
    """
    alpha, beta_param = VULNERABILITY_BETA
    base = beta(alpha, beta_param, rng)
    adjusted = base * control_reduction_factor(inputs)
    return min(VULNERABILITY_CEILING, max(VULNERABILITY_FLOOR, adjusted))


def average_record_cost(data_types: Iterable[str]) -> float:
    """Average per-record breach cost of the held data types.

    Falls back to the average over every data type when none is held.
    """
    costs = [PER_RECORD_COST[data_type] for data_type in data_types]
    if not costs:
        return _MEAN_PER_RECORD_COST
    return sum(costs) / len(costs)


def cloud_modifier(cloud_percentage: float) -> float:
    """Linear cloud exposure uplift: 1.0x at 0% up to 1.12x at 100%."""
    share = max(0.0, min(100.0, cloud_percentage)) / 100.0
    return 1.0 + CLOUD_COST_UPLIFT * share


def sample_primary_loss(inputs: AssessmentInputs, rng: RNG) -> float:
    """Sample the primary (direct) loss magnitude of one loss event.

    Compromised records follow a log-normal centered on 10% of the records
    held and never exceed them. Records are priced at the average cost of
    the held data types, scaled by the industry's breach-cost index, capped
    at 10% of revenue, then uplifted by cloud exposure.

    Args:
        inputs: Assessment inputs
        rng: Uniform [0, 1) source

    Returns:
        Primary loss in USD, strictly positive
    """
    record_count = inputs.data.record_count
    mu = math.log(record_count * RECORDS_COMPROMISED_FRACTION)
    records = min(log_normal(mu, RECORDS_COMPROMISED_SIGMA, rng), float(record_count))

    industry_index = INDUSTRY_AVG_COST[inputs.company.industry] / INDUSTRY_COST_MEAN
    loss = records * average_record_cost(inputs.data.data_types) * industry_index
    loss = min(loss, inputs.revenue * PRIMARY_LOSS_REVENUE_CAP)

    return loss * cloud_modifier(inputs.data.cloud_percentage)


def sample_secondary_loss(inputs: AssessmentInputs, primary_loss: float, rng: RNG) -> float:
    """Sample the secondary loss that follows a primary loss.

    Secondary loss is the sum of regulatory fines, litigation, reputational
    damage and notification costs. Cyber insurance halves it.

    Args:
        inputs: Assessment inputs
        primary_loss: Primary loss of the same event (USD)
        rng: Uniform [0, 1) source

    Returns:
        Secondary loss in USD, strictly positive
    """
    coverage = get_regulatory_coverage(inputs.company.geography, inputs.company.industry)

    regulatory = coverage.max_pct_revenue * inputs.revenue * pert(*REGULATORY_FINE_SHARE, rng)
    litigation = primary_loss * pert(*LITIGATION_SHARE, rng)
    reputation = primary_loss * pert(*REPUTATION_SHARE, rng)
    notification = inputs.data.record_count * pert(*NOTIFICATION_COST_PER_RECORD, rng)

    total = regulatory + litigation + reputation + notification
    if inputs.controls.cyber_insurance:
        total *= INSURED_SECONDARY_LOSS_SHARE
    return total
