"""
Suggestion flows.

Each flow is a single request/response: validate the request, fill the
prompt template, invoke the model once through the injected runner, and
validate the answer against the output schema before returning it.
"""

import asyncio
from typing import Any, Generic, Mapping, Optional, Type, TypeVar, Union

from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from vulnassist.core.logging import get_logger
from vulnassist.services.suggestions.errors import (
    SchemaViolationError,
    ValidationError,
)
from vulnassist.services.suggestions.prompts import (
    REMEDIATION_STEPS_PROMPT,
    RISK_LEVEL_PROMPT,
)
from vulnassist.services.suggestions.runner import PromptRunner
from vulnassist.services.suggestions.schemas import (
    RemediationSuggestion,
    RiskSuggestion,
    SuggestionRequest,
    VulnerabilityAssessment,
)

logger = get_logger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)

RequestLike = Union[SuggestionRequest, Mapping[str, Any]]


def validate_request(
    request: RequestLike, max_description_length: Optional[int] = None
) -> SuggestionRequest:
    """
    Validate a suggestion request.

    Accepts a ``SuggestionRequest`` or a JSON-shaped mapping such as
    ``{"vulnerabilityDescription": "..."}``. Models are re-validated, so a
    request built with ``model_construct`` cannot skip the checks.

    Raises:
        ValidationError: The description is missing, empty, not text, or
            longer than ``max_description_length``.
    """
    if isinstance(request, BaseModel):
        request = request.model_dump(by_alias=True)
    if not isinstance(request, Mapping):
        raise ValidationError(
            f"Expected a mapping with vulnerabilityDescription, got {type(request).__name__}."
        )

    try:
        validated = SuggestionRequest.model_validate(request)
    except PydanticValidationError as e:
        logger.warning(
            "Rejected suggestion request: %d validation error(s)", e.error_count()
        )
        raise ValidationError(
            "Invalid suggestion request.",
            errors=e.errors(
                include_url=False, include_context=False, include_input=False
            ),
        ) from e

    length = len(validated.vulnerability_description)
    if max_description_length is not None and length > max_description_length:
        logger.warning(
            "Rejected suggestion request: description length %d exceeds %d",
            length,
            max_description_length,
        )
        raise ValidationError(
            f"vulnerabilityDescription exceeds {max_description_length} characters."
        )

    return validated


class SuggestionFlow(Generic[OutputT]):
    """
    Base class for a schema-validated prompt flow.

    Subclasses set ``name``, ``prompt`` and ``output_schema``.
    Instances hold no per-call state and may be shared across concurrent calls.
    """

    name: str
    prompt: PromptTemplate
    output_schema: Type[OutputT]

    def __init__(
        self, runner: PromptRunner, max_description_length: Optional[int] = None
    ):
        self.runner = runner
        self.max_description_length = max_description_length

    async def suggest(self, request: RequestLike) -> OutputT:
        """
        Run the flow for one vulnerability description.

        Raises:
            ValidationError: Invalid request; the runner is not called.
            ModelInvocationError: The runner failed.
            SchemaViolationError: The runner answered with a non-conformant result.
        """
        validated = validate_request(request, self.max_description_length)

        logger.info(
            "Invoking %s (description_length=%d)",
            self.name,
            len(validated.vulnerability_description),
        )
        raw = await self.runner.run(
            self.prompt,
            {"vulnerability_description": validated.vulnerability_description},
            self.output_schema,
        )
        return self._validate_output(raw)

    def _validate_output(self, raw: Any) -> OutputT:
        payload = raw.model_dump(by_alias=True) if isinstance(raw, BaseModel) else raw
        if not isinstance(payload, Mapping):
            logger.warning(
                "%s returned %s instead of an object", self.name, type(raw).__name__
            )
            raise SchemaViolationError(
                f"{self.name} expected an object, got {type(raw).__name__}.",
                raw_output=raw,
            )

        try:
            return self.output_schema.model_validate(payload)
        except PydanticValidationError as e:
            logger.warning("%s returned non-conformant output: %s", self.name, raw)
            raise SchemaViolationError(
                f"{self.name} output does not match {self.output_schema.__name__}: "
                f"{e.error_count()} error(s).",
                raw_output=raw,
            ) from e


class RemediationSuggestionFlow(SuggestionFlow[RemediationSuggestion]):
    """Suggest remediation steps for a vulnerability description."""

    name = "suggest_remediation_steps"
    prompt = REMEDIATION_STEPS_PROMPT
    output_schema = RemediationSuggestion


class RiskLevelSuggestionFlow(SuggestionFlow[RiskSuggestion]):
    """Suggest a risk level (Low, Medium, High, Critical) for a vulnerability description."""

    name = "suggest_risk_level"
    prompt = RISK_LEVEL_PROMPT
    output_schema = RiskSuggestion


async def assess(
    request: RequestLike,
    risk_flow: RiskLevelSuggestionFlow,
    remediation_flow: RemediationSuggestionFlow,
) -> VulnerabilityAssessment:
    """
    Run both flows concurrently for the same description.

    The request is validated once up front, so an invalid request never
    reaches either runner. The first flow failure (or cancellation of the
    caller) cancels the other flow's model call before propagating.
    """
    validated = validate_request(
        request,
        _tightest_bound(
            risk_flow.max_description_length, remediation_flow.max_description_length
        ),
    )
    tasks = [
        asyncio.ensure_future(risk_flow.suggest(validated)),
        asyncio.ensure_future(remediation_flow.suggest(validated)),
    ]
    try:
        risk, remediation = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return VulnerabilityAssessment(
        suggested_risk_level=risk.suggested_risk_level,
        remediation_steps=remediation.remediation_steps,
    )


def _tightest_bound(*bounds: Optional[int]) -> Optional[int]:
    present = [b for b in bounds if b is not None]
    return min(present) if present else None
