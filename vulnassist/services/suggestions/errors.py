"""
Error taxonomy for the suggestion flows.
"""

from typing import Any, List, Optional


class SuggestionError(Exception):
    """Base class for every failure raised by a suggestion flow."""


class ValidationError(SuggestionError):
    """
    The request was malformed or missing.

    Raised before the model is ever invoked.
    """

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


class ModelInvocationError(SuggestionError):
    """The model capability failed to produce a result (transport, timeout, internal)."""


class SchemaViolationError(ModelInvocationError):
    """
    The model answered, but the answer does not conform to the output schema.

    Attributes:
        raw_output: The unmodified value the model returned.
    """

    def __init__(self, message: str, raw_output: Any = None):
        super().__init__(message)
        self.raw_output = raw_output
