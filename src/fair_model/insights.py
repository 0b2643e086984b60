# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Key risk drivers and recommendations.

Both are derived from the assessment profile alone (recommendations also
quote the simulated ALE and Gordon-Loeb spend), so they can be tested
without running the trial loop.
"""

from typing import List

from .formatting import format_compact
from .inputs import AssessmentInputs
from .lookup_tables import (
    CLOUD_COST_UPLIFT,
    EMPLOYEE_MULTIPLIERS,
    INDUSTRY_AVG_COST,
    get_regulatory_coverage,
)
from .results import KeyDriver
from .risk_factors import threat_multiplier

SENSITIVE_DATA_TYPES = ("health_records", "payment_card", "financial")
HIGH_CLOUD_PERCENTAGE = 70

_CONTROL_LABELS = {
    "ir_plan": "incident response plan",
    "ai_automation": "AI/automation",
    "security_team": "dedicated security team",
    "mfa": "MFA",
    "pentest": "penetration testing",
}


def _display_name(key: str) -> str:
    return key.replace("_", " ").capitalize()


def identify_key_drivers(inputs: AssessmentInputs) -> List[KeyDriver]:
    """Explain which parts of the profile drive the risk.

    The industry driver is always present, so the list is never empty.

    Args:
        inputs: Assessment inputs

    Returns:
        List of KeyDriver entries, industry first
    """
    company, data, threats = inputs.company, inputs.data, inputs.threats
    drivers = []

    industry_cost = INDUSTRY_AVG_COST[company.industry]
    sector = _display_name(company.industry)
    if industry_cost > 6:
        drivers.append(KeyDriver(
            "Industry Risk", "HIGH",
            f"{sector} sector has an average breach cost of ${industry_cost:.1f}M, "
            f"among the highest across industries.",
        ))
    elif industry_cost > 4:
        drivers.append(KeyDriver(
            "Industry Risk", "MEDIUM",
            f"{sector} sector has an above-average breach cost of ${industry_cost:.1f}M.",
        ))
    else:
        drivers.append(KeyDriver(
            "Industry Risk", "LOW",
            f"{sector} sector has a below-average breach cost of ${industry_cost:.1f}M.",
        ))

    if data.record_count > 1_000_000:
        drivers.append(KeyDriver(
            "Data Volume", "HIGH",
            f"{data.record_count / 1_000_000:.1f}M records at risk significantly "
            f"increases potential loss magnitude.",
        ))
    elif data.record_count > 100_000:
        drivers.append(KeyDriver(
            "Data Volume", "MEDIUM",
            f"{data.record_count / 1_000:.0f}K records at risk contributes to "
            f"moderate loss potential.",
        ))

    if any(data_type in SENSITIVE_DATA_TYPES for data_type in data.data_types):
        drivers.append(KeyDriver(
            "Data Sensitivity", "HIGH",
            "Regulated data types (health, payment, financial) increase per-record "
            "breach costs and regulatory exposure.",
        ))

    missing = [label for control, label in _CONTROL_LABELS.items()
               if control in inputs.controls.inactive()]
    if len(missing) >= 3:
        drivers.append(KeyDriver(
            "Security Controls Gap", "HIGH",
            f"Missing key controls: {', '.join(missing)}. "
            f"This significantly increases vulnerability.",
        ))
    elif missing:
        drivers.append(KeyDriver(
            "Security Controls Gap", "MEDIUM",
            f"Missing controls: {', '.join(missing)}. Addressing these would reduce exposure.",
        ))

    coverage = get_regulatory_coverage(company.geography, company.industry)
    if coverage.max_pct_revenue >= 0.04:
        drivers.append(KeyDriver(
            "Regulatory Exposure", "HIGH",
            f"{' + '.join(coverage.frameworks)} carry combined fines of up to "
            f"{coverage.max_pct_revenue * 100:.1f}% of revenue.",
        ))

    employee_multiplier = EMPLOYEE_MULTIPLIERS[company.employees]
    if employee_multiplier >= 1.6:
        drivers.append(KeyDriver(
            "Attack Surface", "HIGH",
            f"Large employee count ({company.employees.replace('_', '-')}) expands the "
            f"attack surface with a {employee_multiplier}x threat frequency multiplier.",
        ))

    if data.cloud_percentage >= HIGH_CLOUD_PERCENTAGE:
        uplift = CLOUD_COST_UPLIFT * data.cloud_percentage
        drivers.append(KeyDriver(
            "Cloud Exposure", "MEDIUM",
            f"{data.cloud_percentage:.0f}% of infrastructure in the cloud adds up to "
            f"{uplift:.1f}% to breach costs.",
        ))

    if "ransomware" in threats.top_concerns:
        drivers.append(KeyDriver(
            "Ransomware Risk", "HIGH",
            "Ransomware is a top concern and is involved in 39% of confirmed "
            "breaches (DBIR 2025).",
        ))

    multiplier = threat_multiplier(threats.top_concerns)
    if multiplier >= 1.2:
        drivers.append(KeyDriver(
            "Threat Concentration", "MEDIUM",
            f"Selected threat concerns raise expected event frequency by "
            f"{(multiplier - 1) * 100:.0f}% over the cross-industry baseline.",
        ))
    elif threats.top_concerns and multiplier < 1.0:
        drivers.append(KeyDriver(
            "Threat Concentration", "LOW",
            "Selected threat concerns occur less often than the average attack pattern.",
        ))

    if threats.previous_incidents in ("2_5", "5_plus"):
        drivers.append(KeyDriver(
            "Incident History", "HIGH",
            "Prior incidents indicate elevated risk: organisations with a breach "
            "history are statistically more likely to be breached again.",
        ))
    elif threats.previous_incidents == "1":
        drivers.append(KeyDriver(
            "Incident History", "MEDIUM",
            "A prior incident suggests attackers have already found a way in once.",
        ))

    return drivers


def generate_recommendations(inputs: AssessmentInputs,
                             ale: float,
                             gordon_loeb_spend: float) -> List[str]:
    """Actionable recommendations for the profile.

    There is one recommendation per inactive control, so the list grows as
    controls are removed.

    Args:
        inputs: Assessment inputs
        ale: Simulated mean ALE (USD)
        gordon_loeb_spend: Optimal security spend (USD)

    Returns:
        List of recommendation strings
    """
    controls, data = inputs.controls, inputs.data
    recs = []

    if not controls.ir_plan:
        recs.append(
            f"Implement a formal incident response plan. IBM data shows this reduces "
            f"breach costs by ~23% ({format_compact(ale * 0.23)} potential savings)."
        )
    if not controls.ai_automation:
        recs.append(
            "Deploy AI-powered security automation. Organisations using AI/ML detect "
            "breaches 30% faster and save ~$1.88M on average."
        )
    if not controls.security_team:
        recs.append(
            "Establish a dedicated security team or vCISO. This reduces breach "
            "probability by ~20% and signals governance maturity to regulators."
        )
    if not controls.mfa:
        recs.append(
            "Enable MFA on all critical systems. Phishing and credential theft account "
            "for 25%+ of breaches (DBIR 2025); MFA reduces this vector by ~15%."
        )
    if not controls.pentest:
        recs.append(
            "Conduct regular penetration testing. Proactive vulnerability discovery "
            "reduces exploit probability by ~10%."
        )
    if not controls.cyber_insurance:
        recs.append(
            f"Consider cyber insurance. Your estimated ALE of {format_compact(ale)} "
            f"suggests coverage would provide meaningful risk transfer, capping "
            f"secondary losses."
        )

    recs.append(
        f"Optimal security investment: {format_compact(gordon_loeb_spend)}/year "
        f"(Gordon-Loeb model). Spending beyond this point yields diminishing returns."
    )

    if "payment_card" in data.data_types:
        recs.append(
            "Ensure PCI DSS compliance for payment card data. Tokenisation and network "
            "segmentation are critical controls."
        )
    if "health_records" in data.data_types:
        recs.append(
            "Health records carry the highest per-record cost ($200+). Prioritise "
            "encryption at rest and in transit, and conduct regular HIPAA risk assessments."
        )
    if data.record_count > 1_000_000:
        recs.append(
            f"With {data.record_count / 1_000_000:.1f}M records, data minimisation should "
            f"be a priority: reduce what you store to reduce what can be breached."
        )

    return recs
