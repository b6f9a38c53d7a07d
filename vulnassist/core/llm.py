"""
LLM Client Construction.

Builds the chat model used by the suggestion flows.  The model is created
on demand and handed to the flows as a dependency rather than living as a
module-level instance, so tests can swap in a fake runner.
"""

from langchain_openai import ChatOpenAI
from pydantic import SecretStr

from vulnassist.core.config import Settings, settings as default_settings


def build_llm(settings: Settings = default_settings) -> ChatOpenAI:
    """
    Build the LLM instance.
    """
    return ChatOpenAI(
        api_key=SecretStr(settings.OPENAI_API_KEY),
        model=settings.LLM_MODEL,
        temperature=settings.LLM_TEMPERATURE,
        max_completion_tokens=settings.LLM_MAX_COMPLETION_TOKENS,
        max_retries=settings.LLM_MAX_RETRIES,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )
