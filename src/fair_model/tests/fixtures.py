# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Shared assessment profiles for the test suite."""

from dataclasses import replace

from ..inputs import (
    AssessmentInputs,
    CompanyProfile,
    DataProfile,
    SecurityControls,
    ThreatLandscape,
)

SAMPLE_PAYLOAD = {
    "company": {
        "industry": "financial",
        "revenueBand": "50m_250m",
        "employees": "250_1000",
        "geography": "hk",
    },
    "data": {
        "dataTypes": ["customer_pii", "payment_card"],
        "recordCount": 500_000,
        "cloudPercentage": 70,
    },
    "controls": {
        "securityTeam": True,
        "irPlan": True,
        "aiAutomation": False,
        "mfa": True,
        "pentest": True,
        "cyberInsurance": False,
    },
    "threats": {
        "topConcerns": ["ransomware", "bec_phishing", "third_party"],
        "previousIncidents": "0",
    },
}

NO_CONTROLS = SecurityControls()
ALL_CONTROLS = SecurityControls(
    security_team=True,
    ir_plan=True,
    ai_automation=True,
    mfa=True,
    pentest=True,
    cyber_insurance=True,
)


def sample_inputs() -> AssessmentInputs:
    """Mid-sized financial services firm in Hong Kong."""
    return AssessmentInputs(
        company=CompanyProfile(
            industry="financial",
            revenue_band="50m_250m",
            employees="250_1000",
            geography="hk",
        ),
        data=DataProfile(
            data_types=("customer_pii", "payment_card"),
            record_count=500_000,
            cloud_percentage=70,
        ),
        controls=SecurityControls(
            security_team=True,
            ir_plan=True,
            ai_automation=False,
            mfa=True,
            pentest=True,
            cyber_insurance=False,
        ),
        threats=ThreatLandscape(
            top_concerns=("ransomware", "bec_phishing", "third_party"),
            previous_incidents="0",
        ),
    )


def with_company(inputs: AssessmentInputs, **changes) -> AssessmentInputs:
    return replace(inputs, company=replace(inputs.company, **changes))


def with_data(inputs: AssessmentInputs, **changes) -> AssessmentInputs:
    return replace(inputs, data=replace(inputs.data, **changes))


def with_controls(inputs: AssessmentInputs, controls: SecurityControls) -> AssessmentInputs:
    return replace(inputs, controls=controls)


def with_threats(inputs: AssessmentInputs, **changes) -> AssessmentInputs:
    return replace(inputs, threats=replace(inputs.threats, **changes))
