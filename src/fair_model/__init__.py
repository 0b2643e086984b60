# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
FAIR Cyber Risk Engine

Probabilistic cyber-risk quantification using the FAIR (Factor Analysis of
Information Risk) model. Monte Carlo trials sample threat event frequency,
vulnerability and loss magnitude; the trials are aggregated into an
annualized loss expectancy distribution, a risk rating, the Gordon-Loeb
optimal security spend, key drivers and recommendations.

Example usage:
    from fair_model import AssessmentInputs, simulate, seeded_rng

    inputs = AssessmentInputs.from_dict(payload)
    results = simulate(inputs, iterations=10_000, rng=seeded_rng(42))
    print(results.ale.mean, results.risk_rating)
"""

# Samplers
from .distributions import (
    RNG,
    seeded_rng,
    default_rng,
    standard_normal,
    log_normal,
    beta,
    pert,
)

# Inputs and reference data
from .inputs import (
    AssessmentInputs,
    AssessmentValidationError,
    CompanyProfile,
    DataProfile,
    SecurityControls,
    ThreatLandscape,
    apply_cloud_override,
)
from .lookup_tables import get_regulatory_coverage

# Risk factors
from .risk_factors import (
    threat_multiplier,
    sample_tef,
    sample_vulnerability,
    sample_primary_loss,
    sample_secondary_loss,
)

# Aggregation and insights
from .aggregator import (
    percentile,
    compute_ale_statistics,
    compute_risk_rating,
    build_distribution_buckets,
    build_exceedance_curve,
)
from .insights import identify_key_drivers, generate_recommendations
from .gordon_loeb import optimal_spend
from .benchmark import compute_percentile_rank, sort_industries, scale_bar

# Simulation
from .results import (
    AleSummary,
    IndustryBenchmark,
    DistributionBucket,
    ExceedancePoint,
    KeyDriver,
    SimulationResults,
)
from .simulation import simulate
from .config import SimulationConfig
from .simulator import RiskSimulator
from .scenario import ScenarioComparison, compare_scenarios

__version__ = "1.0.0"

__all__ = [
    'RNG',
    'seeded_rng',
    'default_rng',
    'standard_normal',
    'log_normal',
    'beta',
    'pert',
    'AssessmentInputs',
    'AssessmentValidationError',
    'CompanyProfile',
    'DataProfile',
    'SecurityControls',
    'ThreatLandscape',
    'apply_cloud_override',
    'get_regulatory_coverage',
    'threat_multiplier',
    'sample_tef',
    'sample_vulnerability',
    'sample_primary_loss',
    'sample_secondary_loss',
    'percentile',
    'compute_ale_statistics',
    'compute_risk_rating',
    'build_distribution_buckets',
    'build_exceedance_curve',
    'identify_key_drivers',
    'generate_recommendations',
    'optimal_spend',
    'compute_percentile_rank',
    'sort_industries',
    'scale_bar',
    'AleSummary',
    'IndustryBenchmark',
    'DistributionBucket',
    'ExceedancePoint',
    'KeyDriver',
    'SimulationResults',
    'simulate',
    'SimulationConfig',
    'RiskSimulator',
    'ScenarioComparison',
    'compare_scenarios',
]
