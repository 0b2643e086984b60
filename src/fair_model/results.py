# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Simulation result containers.

SimulationResults bundles everything derived from one simulation run: ALE
statistics, risk rating, Gordon-Loeb spend, benchmark, loss distribution,
exceedance curve, key drivers and recommendations. ``to_dict`` renders the
camelCase wire shape; the DataFrame views are convenient for analysis.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd

IMPACT_LEVELS = ("HIGH", "MEDIUM", "LOW")


@dataclass(frozen=True)
class AleSummary:
    """Annualized loss expectancy statistics (USD)."""
    mean: float
    median: float
    p10: float
    p90: float
    p95: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "mean": self.mean,
            "median": self.median,
            "p10": self.p10,
            "p90": self.p90,
            "p95": self.p95,
        }


@dataclass(frozen=True)
class IndustryBenchmark:
    """Where the simulated ALE sits relative to the industry median.

    Attributes:
        your_ale: Simulated mean ALE
        industry_median: Industry median ALE reference
        percentile_rank: 0-100, 50 when ALE equals the industry median
    """
    your_ale: float
    industry_median: float
    percentile_rank: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "yourAle": self.your_ale,
            "industryMedian": self.industry_median,
            "percentileRank": self.percentile_rank,
        }


@dataclass(frozen=True)
class DistributionBucket:
    range_label: str
    min_value: float
    max_value: float
    probability: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rangeLabel": self.range_label,
            "minValue": self.min_value,
            "maxValue": self.max_value,
            "probability": self.probability,
        }


@dataclass(frozen=True)
class ExceedancePoint:
    loss: float
    probability: float

    def to_dict(self) -> Dict[str, float]:
        return {"loss": self.loss, "probability": self.probability}


@dataclass(frozen=True)
class KeyDriver:
    """A factor that explains the risk profile.

    Attributes:
        factor: Short name (e.g., "Industry Risk")
        impact: "HIGH", "MEDIUM" or "LOW"
        description: Human-readable explanation
    """
    factor: str
    impact: str
    description: str

    def __post_init__(self):
        if self.impact not in IMPACT_LEVELS:
            raise ValueError(f"Unknown impact level: {self.impact}")

    def to_dict(self) -> Dict[str, str]:
        return {"factor": self.factor, "impact": self.impact, "description": self.description}


@dataclass
class SimulationResults:
    """Output of a FAIR Monte Carlo simulation.

    Example:
        >>> results = simulate(inputs, iterations=10_000, rng=seeded_rng(7))
        >>> print(f"Mean ALE: ${results.ale.mean:,.0f} ({results.risk_rating})")
        >>> results.exceedance_df().head()
    """
    ale: AleSummary
    gordon_loeb_spend: float
    risk_rating: str
    industry_benchmark: IndustryBenchmark
    distribution_buckets: List[DistributionBucket]
    exceedance_curve: List[ExceedancePoint]
    key_drivers: List[KeyDriver]
    recommendations: List[str]
    raw_losses: List[float] = field(default_factory=list, repr=False)

    @property
    def iterations(self) -> int:
        return len(self.raw_losses)

    def to_dict(self, include_raw_losses: bool = True) -> Dict[str, Any]:
        """Render results in the camelCase wire shape.

        Args:
            include_raw_losses: Raw per-trial losses can be large; callers
                                that only need summaries should drop them.
        """
        payload = {
            "ale": self.ale.to_dict(),
            "gordonLoebSpend": self.gordon_loeb_spend,
            "riskRating": self.risk_rating,
            "industryBenchmark": self.industry_benchmark.to_dict(),
            "distributionBuckets": [b.to_dict() for b in self.distribution_buckets],
            "exceedanceCurve": [p.to_dict() for p in self.exceedance_curve],
            "keyDrivers": [d.to_dict() for d in self.key_drivers],
            "recommendations": list(self.recommendations),
        }
        if include_raw_losses:
            payload["rawLosses"] = list(self.raw_losses)
        return payload

    def distribution_df(self) -> pd.DataFrame:
        """Distribution buckets as a DataFrame indexed by range label."""
        df = pd.DataFrame(
            [(b.range_label, b.min_value, b.max_value, b.probability)
             for b in self.distribution_buckets],
            columns=["Range", "Min", "Max", "Probability"],
        )
        return df.set_index("Range")

    def exceedance_df(self) -> pd.DataFrame:
        """Exceedance curve as a DataFrame with 'Loss' and 'Probability' columns."""
        return pd.DataFrame(
            [(p.loss, p.probability) for p in self.exceedance_curve],
            columns=["Loss", "Probability"],
        )

    def __repr__(self) -> str:
        return (f"SimulationResults(iterations={self.iterations}, "
                f"mean_ale={self.ale.mean:.2f}, risk_rating={self.risk_rating!r})")
