# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Gordon-Loeb optimal security investment.

Gordon, L.A. & Loeb, M.P. (2002) "The Economics of Information Security
Investment", ACM TISSEC. A firm's optimal security investment never exceeds
(1/e) * v * L, where v is the vulnerability probability and L the expected
annual loss. 1/e ~= 0.3679 is rounded to 0.37.

A practical ceiling of 5% of annual revenue is applied on top, the common
board-level budget ceiling for cyber security spend.
"""

GL_COEFFICIENT = 0.37
REVENUE_CAP_PCT = 0.05


def optimal_spend(vulnerability: float, ale: float, revenue: float) -> float:
    """Optimal annual security spend: min(0.37 * v * ALE, 5% * revenue).

    Args:
        vulnerability: Probability a threat event becomes a loss event [0, 1]
        ale: Annualized loss expectancy in USD
        revenue: Annual revenue in USD

    Returns:
        Spend in USD; 0 when there is no vulnerability or no expected loss
    """
    if vulnerability <= 0 or ale <= 0:
        return 0.0
    return max(0.0, min(GL_COEFFICIENT * vulnerability * ale, REVENUE_CAP_PCT * revenue))
