# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Assessment inputs describing the organization being quantified.

AssessmentInputs is an immutable value object made of four sub-records
(company, data, controls, threats). Each sub-record checks its fields
against the closed enumerations of the lookup tables when constructed, so an
out-of-range key surfaces immediately as an AssessmentValidationError instead
of a KeyError deep inside a sampler.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from .lookup_tables import (
    ATTACK_PATTERN_FREQ,
    EMPLOYEE_MULTIPLIERS,
    GEOGRAPHIES,
    INCIDENT_HISTORY,
    INDUSTRY_AVG_COST,
    PER_RECORD_COST,
    REVENUE_MIDPOINTS,
)

INDUSTRIES: Tuple[str, ...] = tuple(INDUSTRY_AVG_COST)
REVENUE_BANDS: Tuple[str, ...] = tuple(REVENUE_MIDPOINTS)
EMPLOYEE_BANDS: Tuple[str, ...] = tuple(EMPLOYEE_MULTIPLIERS)
DATA_TYPES: Tuple[str, ...] = tuple(PER_RECORD_COST)
THREAT_TYPES: Tuple[str, ...] = tuple(ATTACK_PATTERN_FREQ)

MAX_TOP_CONCERNS = 3


class AssessmentValidationError(ValueError):
    """Raised when assessment inputs fall outside the accepted domain.

    Attributes:
        field: Dotted path of the offending field (e.g., "company.industry")
    """

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


def _check_choice(path: str, value: Any, choices: Tuple[str, ...]):
    if value not in choices:
        raise AssessmentValidationError(
            path, f"{value!r} is not one of {list(choices)}"
        )


def _check_bool(path: str, value: Any):
    if not isinstance(value, bool):
        raise AssessmentValidationError(path, f"expected a boolean, got {value!r}")


@dataclass(frozen=True)
class CompanyProfile:
    """Who the organization is.

    Attributes:
        industry: One of the 17 IBM industry sectors
        revenue_band: Annual revenue bucket (e.g., "50m_250m")
        employees: Headcount bucket (e.g., "1000_5000")
        geography: Primary regulatory region ("us", "uk", "eu", "hk", "sg", "other")
        organization_name: Optional display name
    """
    industry: str
    revenue_band: str
    employees: str
    geography: str
    organization_name: Optional[str] = None

    def __post_init__(self):
        _check_choice("company.industry", self.industry, INDUSTRIES)
        _check_choice("company.revenueBand", self.revenue_band, REVENUE_BANDS)
        _check_choice("company.employees", self.employees, EMPLOYEE_BANDS)
        _check_choice("company.geography", self.geography, GEOGRAPHIES)


@dataclass(frozen=True)
class DataProfile:
    """What data the organization holds.

    Attributes:
        data_types: Data categories held (any subset of DATA_TYPES)
        record_count: Number of records held, positive
        cloud_percentage: Share of infrastructure in the cloud, 0-100
    """
    data_types: Tuple[str, ...]
    record_count: int
    cloud_percentage: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "data_types", tuple(self.data_types))
        for data_type in self.data_types:
            _check_choice("data.dataTypes", data_type, DATA_TYPES)
        if isinstance(self.record_count, bool) or not isinstance(self.record_count, int):
            raise AssessmentValidationError(
                "data.recordCount", f"expected an integer, got {self.record_count!r}"
            )
        if self.record_count <= 0:
            raise AssessmentValidationError(
                "data.recordCount", f"must be positive, got {self.record_count}"
            )
        if not 0 <= self.cloud_percentage <= 100:
            raise AssessmentValidationError(
                "data.cloudPercentage", f"must be within [0, 100], got {self.cloud_percentage}"
            )


@dataclass(frozen=True)
class SecurityControls:
    """Which security controls are in place."""
    security_team: bool = False
    ir_plan: bool = False
    ai_automation: bool = False
    mfa: bool = False
    pentest: bool = False
    cyber_insurance: bool = False

    def __post_init__(self):
        for name, value in self.as_dict().items():
            _check_bool(f"controls.{name}", value)

    def as_dict(self) -> Dict[str, bool]:
        return {
            "security_team": self.security_team,
            "ir_plan": self.ir_plan,
            "ai_automation": self.ai_automation,
            "mfa": self.mfa,
            "pentest": self.pentest,
            "cyber_insurance": self.cyber_insurance,
        }

    def inactive(self) -> Tuple[str, ...]:
        """Names of the controls that are not in place."""
        return tuple(name for name, active in self.as_dict().items() if not active)


@dataclass(frozen=True)
class ThreatLandscape:
    """Which threats worry the organization and its incident history.

    Attributes:
        top_concerns: Up to three threat types, in priority order
        previous_incidents: Prior incident bucket ("0", "1", "2_5", "5_plus")
    """
    top_concerns: Tuple[str, ...] = field(default_factory=tuple)
    previous_incidents: str = "0"

    def __post_init__(self):
        object.__setattr__(self, "top_concerns", tuple(self.top_concerns))
        if len(self.top_concerns) > MAX_TOP_CONCERNS:
            raise AssessmentValidationError(
                "threats.topConcerns",
                f"at most {MAX_TOP_CONCERNS} concerns allowed, got {len(self.top_concerns)}",
            )
        for concern in self.top_concerns:
            _check_choice("threats.topConcerns", concern, THREAT_TYPES)
        _check_choice("threats.previousIncidents", self.previous_incidents, INCIDENT_HISTORY)


@dataclass(frozen=True)
class AssessmentInputs:
    """Complete description of an organization for a risk simulation.

    Example:
        >>> inputs = AssessmentInputs.from_dict(payload)
        >>> inputs.company.industry
        'financial'
    """
    company: CompanyProfile
    data: DataProfile
    controls: SecurityControls
    threats: ThreatLandscape

    @property
    def revenue(self) -> float:
        """Revenue band midpoint in USD."""
        return REVENUE_MIDPOINTS[self.company.revenue_band]

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'AssessmentInputs':
        """Build inputs from the camelCase wire shape.

        Args:
            payload: Dict with "company", "data", "controls" and "threats"
                     sections, keyed as the HTTP API documents them

        Returns:
            Validated AssessmentInputs

        Raises:
            AssessmentValidationError: If a section is missing or a field is
                                       outside its enumeration
        """
        company = _section(payload, "company")
        data = _section(payload, "data")
        controls = _section(payload, "controls")
        threats = _section(payload, "threats")

        return cls(
            company=CompanyProfile(
                industry=company.get("industry"),
                revenue_band=company.get("revenueBand"),
                employees=company.get("employees"),
                geography=company.get("geography"),
                organization_name=company.get("organizationName"),
            ),
            data=DataProfile(
                data_types=_sequence("data.dataTypes", data.get("dataTypes", [])),
                record_count=_integer("data.recordCount", data.get("recordCount")),
                cloud_percentage=_number("data.cloudPercentage", data.get("cloudPercentage", 0)),
            ),
            controls=SecurityControls(
                security_team=controls.get("securityTeam", False),
                ir_plan=controls.get("irPlan", False),
                ai_automation=controls.get("aiAutomation", False),
                mfa=controls.get("mfa", False),
                pentest=controls.get("pentest", False),
                cyber_insurance=controls.get("cyberInsurance", False),
            ),
            threats=ThreatLandscape(
                top_concerns=_sequence("threats.topConcerns", threats.get("topConcerns", [])),
                previous_incidents=str(threats.get("previousIncidents", "0")),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render inputs back into the camelCase wire shape."""
        controls = self.controls
        return {
            "company": {
                "industry": self.company.industry,
                "revenueBand": self.company.revenue_band,
                "employees": self.company.employees,
                "geography": self.company.geography,
                "organizationName": self.company.organization_name,
            },
            "data": {
                "dataTypes": list(self.data.data_types),
                "recordCount": self.data.record_count,
                "cloudPercentage": self.data.cloud_percentage,
            },
            "controls": {
                "securityTeam": controls.security_team,
                "irPlan": controls.ir_plan,
                "aiAutomation": controls.ai_automation,
                "mfa": controls.mfa,
                "pentest": controls.pentest,
                "cyberInsurance": controls.cyber_insurance,
            },
            "threats": {
                "topConcerns": list(self.threats.top_concerns),
                "previousIncidents": self.threats.previous_incidents,
            },
        }


def apply_cloud_override(inputs: AssessmentInputs, cloud_percentage: float) -> AssessmentInputs:
    """Return a copy of inputs with the cloud share replaced, clamped to [0, 100]."""
    clamped = max(0.0, min(100.0, float(cloud_percentage)))
    return replace(inputs, data=replace(inputs.data, cloud_percentage=clamped))


def _section(payload: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = payload.get(name)
    if not isinstance(section, dict):
        raise AssessmentValidationError(name, "section is required and must be an object")
    return section


def _sequence(path: str, value: Any) -> Tuple[Any, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise AssessmentValidationError(path, f"expected a list, got {value!r}")
    return tuple(value)


def _integer(path: str, value: Any) -> int:
    if isinstance(value, bool):
        raise AssessmentValidationError(path, f"expected an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise AssessmentValidationError(path, f"expected an integer, got {value!r}")
    return value


def _number(path: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AssessmentValidationError(path, f"expected a number, got {value!r}")
    return float(value)
