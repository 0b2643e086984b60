# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Industry benchmarking.

Places a simulated ALE against the industry median and ranks industries by
their average breach cost.
"""

from dataclasses import dataclass
from typing import List

from .lookup_tables import INDUSTRY_AVG_COST, INDUSTRY_MEDIAN_ALE
from .results import IndustryBenchmark


@dataclass(frozen=True)
class IndustryRow:
    """An industry and its average breach cost (USD millions)."""
    key: str
    cost: float


def compute_percentile_rank(ale: float, industry_median: float) -> float:
    """Rank an ALE on a 0-100 scale against the industry median.

    The scale is linear: an ALE of 0 ranks 0, the median ranks 50 and twice
    the median or more ranks 100. A zero median ranks 50.
    """
    if industry_median == 0:
        return 50.0
    rank = min(100.0, max(0.0, ale / industry_median * 50.0))
    return float(round(rank))


def industry_benchmark(industry: str, ale: float) -> IndustryBenchmark:
    median = INDUSTRY_MEDIAN_ALE[industry]
    return IndustryBenchmark(
        your_ale=ale,
        industry_median=median,
        percentile_rank=compute_percentile_rank(ale, median),
    )


def sort_industries() -> List[IndustryRow]:
    """All industries sorted by average breach cost, highest first."""
    rows = [IndustryRow(key, cost) for key, cost in INDUSTRY_AVG_COST.items()]
    return sorted(rows, key=lambda row: row.cost, reverse=True)


def scale_bar(cost: float, max_cost: float) -> float:
    """Scale a cost to a 0-100 bar width; 0 when max_cost is 0."""
    if max_cost == 0:
        return 0.0
    return cost / max_cost * 100.0
