import pytest
from pydantic import ValidationError as PydanticValidationError

from vulnassist.services.suggestions import (
    RemediationSuggestion,
    RiskLevel,
    RiskSuggestion,
    SuggestionRequest,
)


def test_request_accepts_wire_and_python_names():
    by_alias = SuggestionRequest.model_validate({"vulnerabilityDescription": "XSS"})
    by_name = SuggestionRequest(vulnerability_description="XSS")

    assert by_alias == by_name
    assert by_name.model_dump(by_alias=True) == {"vulnerabilityDescription": "XSS"}


def test_request_keeps_description_verbatim():
    request = SuggestionRequest(vulnerability_description="  padded  ")
    assert request.vulnerability_description == "  padded  "


@pytest.mark.parametrize("description", ["", " ", "\n\t "])
def test_request_rejects_blank_description(description):
    with pytest.raises(PydanticValidationError):
        SuggestionRequest(vulnerability_description=description)


def test_results_are_frozen():
    result = RemediationSuggestion(remediation_steps="Upgrade OpenSSL.")
    with pytest.raises(PydanticValidationError):
        result.remediation_steps = "Something else"


def test_risk_level_is_closed():
    assert [level.value for level in RiskLevel] == ["Low", "Medium", "High", "Critical"]
    with pytest.raises(ValueError):
        RiskLevel("Severe")


def test_risk_suggestion_serializes_literal():
    suggestion = RiskSuggestion(suggested_risk_level=RiskLevel.CRITICAL)
    assert suggestion.model_dump(by_alias=True, mode="json") == {
        "suggestedRiskLevel": "Critical"
    }


def test_request_description_covers_both_flows():
    schema = SuggestionRequest.model_json_schema()
    description = schema["properties"]["vulnerabilityDescription"]["description"]
    assert description == "The description of the vulnerability to assess or remediate."
