"""
Suggestion Schemas

Request and result models for the AI suggestion flows.  Wire names are
camelCase (``vulnerabilityDescription``), Python attributes are snake_case;
both are accepted on input and the wire names are used on output.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RiskLevel(str, Enum):
    """The four risk labels a vulnerability can carry."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


def _require_text(value: str, field: str) -> str:
    if not value.strip():
        raise ValueError(f"{field} must not be empty")
    return value


class SuggestionRequest(BaseModel):
    """
    Input accepted by both suggestion flows.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    vulnerability_description: str = Field(
        alias="vulnerabilityDescription",
        description="The description of the vulnerability to assess or remediate.",
    )

    @field_validator("vulnerability_description")
    @classmethod
    def _description_not_blank(cls, value: str) -> str:
        return _require_text(value, "vulnerabilityDescription")


class RemediationSuggestion(BaseModel):
    """Suggested remediation steps for a vulnerability."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    remediation_steps: str = Field(
        alias="remediationSteps",
        description="The suggested remediation steps for the vulnerability.",
    )

    @field_validator("remediation_steps")
    @classmethod
    def _steps_not_blank(cls, value: str) -> str:
        return _require_text(value, "remediationSteps")


class RiskSuggestion(BaseModel):
    """Suggested risk level for a vulnerability."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    suggested_risk_level: RiskLevel = Field(
        alias="suggestedRiskLevel",
        description="The suggested risk level for the vulnerability, based on its description.",
    )


class VulnerabilityAssessment(BaseModel):
    """Both suggestions for a single vulnerability description."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    suggested_risk_level: RiskLevel = Field(alias="suggestedRiskLevel")
    remediation_steps: str = Field(alias="remediationSteps")
