from typing import Annotated

from fastapi import APIRouter, Depends

from vulnassist.dependencies.llm import get_remediation_flow, get_risk_level_flow
from vulnassist.services.suggestions import (
    RemediationSuggestion,
    RemediationSuggestionFlow,
    RiskLevelSuggestionFlow,
    RiskSuggestion,
    SuggestionRequest,
    VulnerabilityAssessment,
    assess,
)

router = APIRouter()

RemediationFlowDep = Annotated[RemediationSuggestionFlow, Depends(get_remediation_flow)]
RiskLevelFlowDep = Annotated[RiskLevelSuggestionFlow, Depends(get_risk_level_flow)]


@router.post("/remediation", response_model=RemediationSuggestion)
async def suggest_remediation_steps(
    payload: SuggestionRequest, flow: RemediationFlowDep
):
    """
    Suggest remediation steps for a vulnerability description.
    """
    return await flow.suggest(payload)


@router.post("/risk-level", response_model=RiskSuggestion)
async def suggest_risk_level(payload: SuggestionRequest, flow: RiskLevelFlowDep):
    """
    Suggest a risk level (Low, Medium, High, Critical) for a vulnerability description.
    """
    return await flow.suggest(payload)


@router.post("/assessment", response_model=VulnerabilityAssessment)
async def suggest_assessment(
    payload: SuggestionRequest,
    risk_flow: RiskLevelFlowDep,
    remediation_flow: RemediationFlowDep,
):
    """
    Suggest both a risk level and remediation steps, running the two flows concurrently.
    """
    return await assess(payload, risk_flow, remediation_flow)
