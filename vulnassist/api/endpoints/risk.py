from typing import List

from fastapi import APIRouter

from vulnassist.services.risk import (
    RiskBreakdownEntry,
    RiskBreakdownRequest,
    summarize_risk_levels,
)

router = APIRouter()


@router.post("/breakdown", response_model=List[RiskBreakdownEntry])
def risk_breakdown(payload: RiskBreakdownRequest):
    """
    Distribution of vulnerabilities by risk level, in Low to Critical order.
    """
    return summarize_risk_levels(payload.risk_levels)
