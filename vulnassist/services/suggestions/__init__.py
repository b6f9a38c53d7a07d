"""
AI suggestion flows for vulnerability triage.
"""

from vulnassist.services.suggestions.errors import (
    ModelInvocationError,
    SchemaViolationError,
    SuggestionError,
    ValidationError,
)
from vulnassist.services.suggestions.flows import (
    RemediationSuggestionFlow,
    RiskLevelSuggestionFlow,
    assess,
    validate_request,
)
from vulnassist.services.suggestions.runner import ChatModelRunner, PromptRunner
from vulnassist.services.suggestions.schemas import (
    RemediationSuggestion,
    RiskLevel,
    RiskSuggestion,
    SuggestionRequest,
    VulnerabilityAssessment,
)

__all__ = [
    "SuggestionError",
    "ValidationError",
    "ModelInvocationError",
    "SchemaViolationError",
    "RemediationSuggestionFlow",
    "RiskLevelSuggestionFlow",
    "assess",
    "validate_request",
    "ChatModelRunner",
    "PromptRunner",
    "RiskLevel",
    "SuggestionRequest",
    "RemediationSuggestion",
    "RiskSuggestion",
    "VulnerabilityAssessment",
]
