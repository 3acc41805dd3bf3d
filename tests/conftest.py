"""Shared fixtures and fakes."""

from typing import Optional

import pytest

from cta_rewriter.adapters.base import AdapterResponse, BaseAdapter
from cta_rewriter.utils.metrics import TokenUsage


class FakeAdapter(BaseAdapter):
    """Adapter returning a canned reply or raising a canned error."""

    provider_name = "fake"
    uses_token_ceilings = True

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        super().__init__(model_name="fake-model")
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> AdapterResponse:
        self.calls.append({
            "prompt": prompt,
            "system_prompt": system_prompt,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.error is not None:
            raise self.error
        return AdapterResponse(
            content=self.reply,
            usage=TokenUsage(model=self.model_name, input_tokens=10, output_tokens=20),
            model_used=self.model_name,
        )


@pytest.fixture
def fake_adapter_factory():
    """Build fake adapters with a given reply or error."""
    return FakeAdapter
