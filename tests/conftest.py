import os

# Settings are read at import time; provide a dummy key before vulnassist is imported.
os.environ.setdefault("OPENAI_API_KEY", "sk-test-key")

import pytest


class FakeRunner:
    """Stands in for the model capability and records every call."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def run(self, prompt, variables, output_schema):
        self.calls.append(
            {"prompt": prompt, "variables": variables, "output_schema": output_schema}
        )
        if self.error is not None:
            raise self.error
        if callable(self.result):
            return await self.result(variables)
        return self.result


@pytest.fixture
def make_runner():
    return FakeRunner
