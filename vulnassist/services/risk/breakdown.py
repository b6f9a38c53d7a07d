"""Risk level breakdown, as rendered by the dashboard's risk chart."""

from collections import Counter
from typing import Iterable, List, Union

from pydantic import BaseModel, ConfigDict, Field

from vulnassist.services.suggestions.schemas import RiskLevel


class RiskBreakdownRequest(BaseModel):
    """Risk labels of the vulnerabilities to summarize."""

    model_config = ConfigDict(populate_by_name=True)

    risk_levels: List[RiskLevel] = Field(
        default_factory=list,
        alias="riskLevels",
        description="One risk label per vulnerability.",
    )


class RiskBreakdownEntry(BaseModel):
    """One slice of the risk distribution."""

    name: RiskLevel = Field(description="The risk level of this slice.")
    value: int = Field(ge=0, description="Number of vulnerabilities at this level.")
    percentage: float = Field(
        ge=0.0, le=100.0, description="Share of all vulnerabilities, 1 decimal."
    )


def summarize_risk_levels(
    levels: Iterable[Union[RiskLevel, str]],
) -> List[RiskBreakdownEntry]:
    """
    Count vulnerabilities per risk level.

    Every level is present in the result, ordered Low, Medium, High, Critical,
    so the chart keeps a stable legend even when a level has no entries.

    Raises:
        ValueError: A label is not one of the four risk levels.
    """
    counts = Counter(RiskLevel(level) for level in levels)
    total = sum(counts.values())

    return [
        RiskBreakdownEntry(
            name=level,
            value=counts[level],
            percentage=round(counts[level] * 100 / total, 1) if total else 0.0,
        )
        for level in RiskLevel
    ]
