"""
Vulnerability Assist LLM Dependencies
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from langchain_core.language_models.chat_models import BaseChatModel

from vulnassist.core.config import settings
from vulnassist.core.llm import build_llm
from vulnassist.services.suggestions import (
    ChatModelRunner,
    PromptRunner,
    RemediationSuggestionFlow,
    RiskLevelSuggestionFlow,
)


@lru_cache(maxsize=1)
def get_chat_model() -> BaseChatModel:
    """Get the chat model, built once on first use"""
    return build_llm(settings)


def get_prompt_runner(
    llm: Annotated[BaseChatModel, Depends(get_chat_model)],
) -> PromptRunner:
    """Get the prompt runner (Dependency Injection)."""
    return ChatModelRunner(llm, timeout=settings.LLM_TIMEOUT_SECONDS)


RunnerDep = Annotated[PromptRunner, Depends(get_prompt_runner)]


def get_remediation_flow(runner: RunnerDep) -> RemediationSuggestionFlow:
    """Get the remediation suggestion flow."""
    return RemediationSuggestionFlow(
        runner, max_description_length=settings.MAX_DESCRIPTION_LENGTH
    )


def get_risk_level_flow(runner: RunnerDep) -> RiskLevelSuggestionFlow:
    """Get the risk level suggestion flow."""
    return RiskLevelSuggestionFlow(
        runner, max_description_length=settings.MAX_DESCRIPTION_LENGTH
    )
