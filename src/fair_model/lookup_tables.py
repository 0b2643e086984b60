# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Actuarial reference tables for the FAIR model.

Sources:
- IBM Cost of a Data Breach Report 2025
- Verizon Data Breach Investigations Report (DBIR) 2025
- NetDiligence Cyber Claims Study 2025
- Regulatory frameworks (GDPR, UK GDPR, PDPO, PDPA, US state laws)

All tables are built once at import time and exposed as read-only mappings.
They are keyed by the closed enumerations accepted by ``AssessmentInputs``.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class FrequencyRange:
    """PERT parameters for threat events per year.

    Attributes:
        min: Lowest plausible annual event count
        mode: Most likely annual event count
        max: Highest plausible annual event count
    """
    min: float
    mode: float
    max: float

    def __post_init__(self):
        if not self.min <= self.mode <= self.max or self.min >= self.max:
            raise ValueError(f"Invalid frequency range: {self}")

    def scaled(self, factor: float) -> 'FrequencyRange':
        return FrequencyRange(self.min * factor, self.mode * factor, self.max * factor)


@dataclass(frozen=True)
class RegulatoryRegime:
    """Maximum regulatory fine exposure for a jurisdiction or sector."""
    max_pct_revenue: float
    framework: str


@dataclass(frozen=True)
class RegulatoryProfile:
    """Compound exposure: geography base regime plus sector overlays."""
    max_pct_revenue: float
    frameworks: Tuple[str, ...]


# IBM 2025 - per-record cost by data type (USD)
PER_RECORD_COST: Mapping[str, float] = MappingProxyType({
    "customer_pii": 175.0,
    "employee_pii": 189.0,
    "ip": 178.0,
    "payment_card": 172.0,
    "health_records": 200.0,
    "financial": 180.0,
})

# IBM 2025 - average total breach cost by industry (USD millions)
INDUSTRY_AVG_COST: Mapping[str, float] = MappingProxyType({
    "healthcare": 10.93,
    "financial": 6.08,
    "pharmaceuticals": 5.10,
    "technology": 5.45,
    "energy": 4.56,
    "industrial": 5.56,
    "services": 4.55,
    "retail": 3.48,
    "education": 3.50,
    "entertainment": 3.46,
    "communications": 3.44,
    "consumer": 3.40,
    "media": 3.39,
    "research": 3.28,
    "transportation": 4.30,
    "hospitality": 3.22,
    "public_sector": 2.60,
})

# Industry median ALE used as the benchmark reference (USD)
INDUSTRY_MEDIAN_ALE: Mapping[str, float] = MappingProxyType({
    industry: cost * 1_000_000 for industry, cost in INDUSTRY_AVG_COST.items()
})

# Fractional reduction in vulnerability per active preventive control.
# Cyber insurance transfers loss rather than preventing it, so it is absent.
CONTROL_VULNERABILITY_REDUCTION: Mapping[str, float] = MappingProxyType({
    "ir_plan": 0.23,
    "ai_automation": 0.30,
    "security_team": 0.20,
    "mfa": 0.15,
    "pentest": 0.10,
})

# Share of secondary loss retained when cyber insurance is in force
INSURED_SECONDARY_LOSS_SHARE = 0.5

# DBIR 2025 - proportion of confirmed breaches involving each attack pattern
ATTACK_PATTERN_FREQ: Mapping[str, float] = MappingProxyType({
    "ransomware": 0.39,
    "bec_phishing": 0.25,
    "web_app_attack": 0.15,
    "system_intrusion": 0.30,
    "insider_threat": 0.10,
    "third_party": 0.30,
    "lost_stolen": 0.05,
})

# Average pattern weight; a concern at this weight leaves TEF unchanged
THREAT_BASELINE = sum(ATTACK_PATTERN_FREQ.values()) / len(ATTACK_PATTERN_FREQ)

THREAT_MULTIPLIER_BOUNDS = (0.8, 1.5)

# Regulatory fine exposure by geography
REGULATORY_EXPOSURE: Mapping[str, RegulatoryRegime] = MappingProxyType({
    "eu": RegulatoryRegime(0.04, "GDPR"),
    "uk": RegulatoryRegime(0.04, "UK GDPR"),
    "us": RegulatoryRegime(0.01, "State breach notification"),
    "hk": RegulatoryRegime(0.005, "PDPO"),
    "sg": RegulatoryRegime(0.01, "PDPA"),
    "other": RegulatoryRegime(0.01, "Various"),
})

# Sector-specific overlays, additive on top of the geography base rate
_SECTOR_OVERLAYS: Dict[str, Dict[str, List[RegulatoryRegime]]] = {
    "healthcare": {
        "us": [RegulatoryRegime(0.015, "HIPAA")],
        "eu": [RegulatoryRegime(0.01, "NIS2 (essential entity)")],
        "uk": [RegulatoryRegime(0.005, "NHS DSPT / CQC")],
        "sg": [RegulatoryRegime(0.005, "MOH HCSA")],
    },
    "financial": {
        "eu": [RegulatoryRegime(0.015, "DORA"), RegulatoryRegime(0.005, "NIS2")],
        "uk": [RegulatoryRegime(0.015, "FCA / PRA")],
        "us": [RegulatoryRegime(0.01, "GLBA / SOX")],
        "sg": [RegulatoryRegime(0.01, "MAS TRM")],
        "hk": [RegulatoryRegime(0.005, "HKMA CFI")],
    },
    "energy": {
        "eu": [RegulatoryRegime(0.01, "NIS2 (essential entity)")],
        "uk": [RegulatoryRegime(0.005, "NIS Regulations")],
        "us": [RegulatoryRegime(0.005, "NERC CIP")],
    },
    "technology": {
        "eu": [
            RegulatoryRegime(0.005, "NIS2"),
            RegulatoryRegime(0.005, "EU Cyber Resilience Act"),
        ],
        "us": [RegulatoryRegime(0.005, "FTC Act / CCPA")],
    },
    "education": {"us": [RegulatoryRegime(0.005, "FERPA")]},
    "communications": {
        "eu": [RegulatoryRegime(0.005, "NIS2 / ePrivacy")],
        "us": [RegulatoryRegime(0.005, "FCC Rules")],
    },
    "public_sector": {
        "us": [RegulatoryRegime(0.005, "FISMA / FedRAMP")],
        "eu": [RegulatoryRegime(0.005, "NIS2")],
    },
    "transportation": {"eu": [RegulatoryRegime(0.005, "NIS2 (essential entity)")]},
    "retail": {"us": [RegulatoryRegime(0.005, "CCPA / CPRA")]},
    "consumer": {"us": [RegulatoryRegime(0.005, "CCPA / CPRA")]},
    "pharmaceuticals": {"eu": [RegulatoryRegime(0.005, "NIS2")]},
    "industrial": {"eu": [RegulatoryRegime(0.005, "NIS2")]},
}

SECTOR_OVERLAYS: Mapping[str, Mapping[str, Tuple[RegulatoryRegime, ...]]] = MappingProxyType({
    industry: MappingProxyType({geo: tuple(regimes) for geo, regimes in by_geo.items()})
    for industry, by_geo in _SECTOR_OVERLAYS.items()
})

# Cross-industry mean of INDUSTRY_AVG_COST
INDUSTRY_COST_MEAN = sum(INDUSTRY_AVG_COST.values()) / len(INDUSTRY_AVG_COST)

# DBIR cross-industry threat event frequency (events per year)
BASE_TEF = FrequencyRange(0.10, 0.40, 2.5)

# Industry TEF ranges scale the base range by the square root of the
# industry's breach-cost index, so frequency and magnitude both rise with
# breach cost and mean ALE stays ordered by it.
TEF_BY_INDUSTRY: Mapping[str, FrequencyRange] = MappingProxyType({
    industry: BASE_TEF.scaled(math.sqrt(cost / INDUSTRY_COST_MEAN))
    for industry, cost in INDUSTRY_AVG_COST.items()
})

# DBIR: share of threat events that become breaches. The beta shape
# parameters below put the mean of the base vulnerability draw here.
BASE_VULNERABILITY = 0.3
VULNERABILITY_BETA = (3.0, 7.0)

# Revenue band midpoints (USD)
REVENUE_MIDPOINTS: Mapping[str, float] = MappingProxyType({
    "under_50m": 25_000_000.0,
    "50m_250m": 150_000_000.0,
    "250m_1b": 625_000_000.0,
    "1b_5b": 3_000_000_000.0,
    "over_5b": 10_000_000_000.0,
})

# Attack surface multiplier on threat event frequency
EMPLOYEE_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "under_250": 0.7,
    "250_1000": 1.0,
    "1000_5000": 1.3,
    "5000_25000": 1.6,
    "over_25000": 2.0,
})

GEOGRAPHIES: Tuple[str, ...] = tuple(REGULATORY_EXPOSURE)
INCIDENT_HISTORY: Tuple[str, ...] = ("0", "1", "2_5", "5_plus")

# Primary loss modifiers
RECORDS_COMPROMISED_FRACTION = 0.1
RECORDS_COMPROMISED_SIGMA = 1.0
PRIMARY_LOSS_REVENUE_CAP = 0.1
# IBM 2025: breaches spanning cloud environments cost up to 12% more
CLOUD_COST_UPLIFT = 0.12


def get_regulatory_coverage(geography: str, industry: str) -> RegulatoryProfile:
    """Compound regulatory exposure for a geography and industry.

    Args:
        geography: Geography key (e.g., "eu")
        industry: Industry key (e.g., "financial")

    Returns:
        RegulatoryProfile whose max_pct_revenue is the geography base rate
        plus every sector overlay that applies there

    Raises:
        KeyError: If geography is not a known region
    """
    base = REGULATORY_EXPOSURE[geography]
    frameworks = [base.framework]
    total_pct = base.max_pct_revenue

    for overlay in SECTOR_OVERLAYS.get(industry, {}).get(geography, ()):
        total_pct += overlay.max_pct_revenue
        frameworks.append(overlay.framework)

    return RegulatoryProfile(max_pct_revenue=total_pct, frameworks=tuple(frameworks))
