import pytest
from fastapi.testclient import TestClient

from vulnassist.core.config import settings
from vulnassist.dependencies.llm import get_prompt_runner
from vulnassist.main import app
from vulnassist.services.suggestions import ModelInvocationError


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_runner():
    def install(runner):
        app.dependency_overrides[get_prompt_runner] = lambda: runner
        return runner

    return install


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert settings.PROJECT_NAME in response.json()["message"]


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_suggest_risk_level(client, use_runner, make_runner):
    runner = use_runner(make_runner(result={"suggestedRiskLevel": "High"}))

    response = client.post(
        "/api/v1/suggestions/risk-level",
        json={"vulnerabilityDescription": "Reflected XSS in search parameter"},
    )

    assert response.status_code == 200
    assert response.json() == {"suggestedRiskLevel": "High"}
    assert len(runner.calls) == 1


def test_suggest_remediation(client, use_runner, make_runner):
    steps = "Disable weak ciphers; enforce TLS 1.2+."
    use_runner(make_runner(result={"remediationSteps": steps}))

    response = client.post(
        "/api/v1/suggestions/remediation",
        json={"vulnerabilityDescription": "Outdated TLS cipher suite"},
    )

    assert response.status_code == 200
    assert response.json() == {"remediationSteps": steps}


def test_suggest_assessment(client, use_runner, make_runner):
    async def answer(variables):
        return {"suggestedRiskLevel": "Medium", "remediationSteps": "Set SameSite=Strict."}

    runner = use_runner(make_runner(result=answer))

    response = client.post(
        "/api/v1/suggestions/assessment",
        json={"vulnerabilityDescription": "CSRF on profile update"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "suggestedRiskLevel": "Medium",
        "remediationSteps": "Set SameSite=Strict.",
    }
    assert len(runner.calls) == 2


@pytest.mark.parametrize("body", [{"vulnerabilityDescription": "  "}, {}])
def test_invalid_description_is_422(client, use_runner, make_runner, body):
    runner = use_runner(make_runner(result={"suggestedRiskLevel": "High"}))

    response = client.post("/api/v1/suggestions/risk-level", json=body)

    assert response.status_code == 422
    payload = response.json()
    assert payload["error"] == "validation"
    assert payload["errors"][0]["loc"] == ["body", "vulnerabilityDescription"]
    assert runner.calls == []


def test_description_over_configured_bound_is_422(
    client, use_runner, make_runner, monkeypatch
):
    monkeypatch.setattr(settings, "MAX_DESCRIPTION_LENGTH", 5)
    runner = use_runner(make_runner(result={"remediationSteps": "Patch."}))

    response = client.post(
        "/api/v1/suggestions/remediation",
        json={"vulnerabilityDescription": "Outdated TLS cipher suite"},
    )

    assert response.status_code == 422
    assert response.json()["error"] == "validation"
    assert runner.calls == []


def test_unknown_risk_label_is_schema_violation(client, use_runner, make_runner):
    use_runner(make_runner(result={"suggestedRiskLevel": "Severe"}))

    response = client.post(
        "/api/v1/suggestions/risk-level",
        json={"vulnerabilityDescription": "Reflected XSS in search parameter"},
    )

    assert response.status_code == 502
    assert response.json()["error"] == "schema_violation"


def test_model_failure_is_invocation_error(client, use_runner, make_runner):
    runner = use_runner(make_runner(error=ModelInvocationError("upstream unavailable")))

    response = client.post(
        "/api/v1/suggestions/remediation",
        json={"vulnerabilityDescription": "Outdated TLS cipher suite"},
    )

    assert response.status_code == 502
    assert response.json() == {
        "detail": "upstream unavailable",
        "error": "model_invocation",
    }
    assert len(runner.calls) == 1


def test_risk_breakdown(client):
    response = client.post(
        "/api/v1/risk/breakdown",
        json={"riskLevels": ["Low", "High", "High", "Critical"]},
    )

    assert response.status_code == 200
    assert response.json() == [
        {"name": "Low", "value": 1, "percentage": 25.0},
        {"name": "Medium", "value": 0, "percentage": 0.0},
        {"name": "High", "value": 2, "percentage": 50.0},
        {"name": "Critical", "value": 1, "percentage": 25.0},
    ]


def test_risk_breakdown_rejects_unknown_label(client):
    response = client.post(
        "/api/v1/risk/breakdown", json={"riskLevels": ["Low", "Severe"]}
    )
    assert response.status_code == 422
    assert response.json()["error"] == "validation"


def test_validation_bodies_share_one_shape(client, use_runner, make_runner, monkeypatch):
    use_runner(make_runner(result={"remediationSteps": "Patch."}))

    blank = client.post(
        "/api/v1/suggestions/remediation", json={"vulnerabilityDescription": " "}
    )
    monkeypatch.setattr(settings, "MAX_DESCRIPTION_LENGTH", 3)
    too_long = client.post(
        "/api/v1/suggestions/remediation", json={"vulnerabilityDescription": "SSRF"}
    )

    assert blank.status_code == too_long.status_code == 422
    assert set(blank.json()) == set(too_long.json()) == {"detail", "errors", "error"}
    assert blank.json()["errors"][0]["loc"] == ["body", "vulnerabilityDescription"]
