# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Statistics over simulated annual losses.

Percentiles, risk rating, histogram buckets and the exceedance curve are
computed from the raw per-trial losses produced by the simulation driver.
"""

from typing import List, Sequence

import numpy as np

from .formatting import format_compact
from .results import AleSummary, DistributionBucket, ExceedancePoint

NUM_BUCKETS = 10
NUM_EXCEEDANCE_POINTS = 50

# Upper bounds (exclusive) of the ALE / revenue ratio for each rating
RATING_THRESHOLDS = (
    (0.01, "LOW"),
    (0.03, "MODERATE"),
    (0.07, "HIGH"),
)


def percentile(sorted_losses: Sequence[float], p: float) -> float:
    """Linearly interpolated percentile of an ascending sequence.

    Args:
        sorted_losses: Losses sorted ascending
        p: Quantile in [0, 1]

    Returns:
        The interpolated value, or 0.0 for an empty sequence
    """
    if len(sorted_losses) == 0:
        return 0.0
    return float(np.percentile(np.asarray(sorted_losses, dtype=float), p * 100.0))


def compute_ale_statistics(losses: Sequence[float]) -> AleSummary:
    """Mean, median, p10, p90 and p95 of the simulated annual losses."""
    if len(losses) == 0:
        return AleSummary(mean=0.0, median=0.0, p10=0.0, p90=0.0, p95=0.0)

    values = np.sort(np.asarray(losses, dtype=float))
    return AleSummary(
        mean=float(values.mean()),
        median=percentile(values, 0.5),
        p10=percentile(values, 0.1),
        p90=percentile(values, 0.9),
        p95=percentile(values, 0.95),
    )


def compute_risk_rating(ale: float, revenue: float) -> str:
    """Classify ALE relative to revenue.

    Ratio < 1% is LOW, [1%, 3%) MODERATE, [3%, 7%) HIGH and >= 7% CRITICAL.

    Raises:
        ValueError: If revenue is not positive
    """
    if revenue <= 0:
        raise ValueError(f"Revenue must be positive to rate risk, got {revenue}")

    ratio = ale / revenue
    for upper, rating in RATING_THRESHOLDS:
        if ratio < upper:
            return rating
    return "CRITICAL"


def build_distribution_buckets(losses: Sequence[float],
                               num_buckets: int = NUM_BUCKETS) -> List[DistributionBucket]:
    """Partition the loss range into equal-width buckets.

    Buckets are contiguous and half-open except the last one, which also
    includes the maximum loss. Each probability is the fraction of trials
    falling in the bucket.

    Args:
        losses: Simulated annual losses, in any order
        num_buckets: Number of buckets to build

    Returns:
        Ordered list of buckets; a single bucket when every loss is equal and
        an empty list when there are no losses
    """
    if len(losses) == 0:
        return []

    values = np.asarray(losses, dtype=float)
    min_loss = float(values.min())
    max_loss = float(values.max())

    if max_loss == min_loss:
        return [DistributionBucket(
            range_label=format_compact(min_loss),
            min_value=min_loss,
            max_value=max_loss,
            probability=1.0,
        )]

    counts, edges = np.histogram(values, bins=num_buckets, range=(min_loss, max_loss))
    total = len(values)

    buckets = []
    for i, count in enumerate(counts):
        low, high = float(edges[i]), float(edges[i + 1])
        buckets.append(DistributionBucket(
            range_label=f"{format_compact(low)}-{format_compact(high)}",
            min_value=low,
            max_value=high,
            probability=int(count) / total,
        ))
    return buckets


def build_exceedance_curve(losses: Sequence[float],
                           num_points: int = NUM_EXCEEDANCE_POINTS) -> List[ExceedancePoint]:
    """Empirical exceedance curve P(loss >= threshold).

    Thresholds are evenly spaced from the smallest to the largest loss, so
    the first point has probability 1 and the curve never increases.
    """
    if len(losses) == 0:
        return []

    values = np.sort(np.asarray(losses, dtype=float))
    thresholds = np.linspace(values[0], values[-1], num_points)
    # Count of losses >= t is n minus the number strictly below t
    below = np.searchsorted(values, thresholds, side="left")
    total = len(values)

    return [
        ExceedancePoint(loss=float(t), probability=(total - int(b)) / total)
        for t, b in zip(thresholds, below)
    ]
