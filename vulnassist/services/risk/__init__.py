"""
Risk distribution utilities for the dashboard.
"""

from vulnassist.services.risk.breakdown import (
    RiskBreakdownEntry,
    RiskBreakdownRequest,
    summarize_risk_levels,
)

__all__ = ["RiskBreakdownEntry", "RiskBreakdownRequest", "summarize_risk_levels"]
