"""
Prompt execution capability used by the suggestion flows.

A runner takes a prompt template, its variables and the pydantic output
model, and returns the model's raw structured answer or raises.  The flows
depend only on the ``PromptRunner`` protocol; ``ChatModelRunner`` is the
LangChain-backed implementation wired in by the API layer.
"""

import asyncio
from typing import Any, Dict, Optional, Protocol, Type

from langchain_core.exceptions import OutputParserException
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.prompts import BasePromptTemplate
from pydantic import BaseModel

from vulnassist.core.logging import get_logger
from vulnassist.services.suggestions.errors import (
    ModelInvocationError,
    SchemaViolationError,
)

logger = get_logger(__name__)


class PromptRunner(Protocol):
    """Anything that can fill a template and return a structured answer."""

    async def run(
        self,
        prompt: BasePromptTemplate,
        variables: Dict[str, Any],
        output_schema: Type[BaseModel],
    ) -> Any: ...


class ChatModelRunner:
    """
    Run a prompt against a LangChain chat model with structured output.

    The output model's JSON schema constrains the chat model, and the parsed
    answer is returned as-is; conformance is checked by the calling flow.
    Exactly one call is made per ``run``.
    """

    def __init__(self, llm: BaseChatModel, timeout: Optional[float] = None):
        self.llm = llm
        self.timeout = timeout

    async def run(
        self,
        prompt: BasePromptTemplate,
        variables: Dict[str, Any],
        output_schema: Type[BaseModel],
    ) -> Any:
        structured_llm = self.llm.with_structured_output(
            output_schema.model_json_schema()
        )
        chain = prompt | structured_llm

        try:
            return await asyncio.wait_for(chain.ainvoke(variables), timeout=self.timeout)
        except OutputParserException as e:
            logger.error(
                "Model output for %s could not be parsed: %s",
                output_schema.__name__,
                e,
                exc_info=True,
            )
            raise SchemaViolationError(
                f"Model output could not be parsed as {output_schema.__name__}.",
                raw_output=getattr(e, "llm_output", None),
            ) from e
        except asyncio.TimeoutError as e:
            logger.error(
                "Model invocation for %s timed out after %ss",
                output_schema.__name__,
                self.timeout,
                exc_info=True,
            )
            raise ModelInvocationError(
                f"Model invocation timed out after {self.timeout}s."
            ) from e
        except Exception as e:
            logger.error("Model invocation failed: %s", e, exc_info=True)
            raise ModelInvocationError(f"Model invocation failed: {e}") from e
