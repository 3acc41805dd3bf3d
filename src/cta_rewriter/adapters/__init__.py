"""LLM provider adapters for the CTA rewriter."""

from cta_rewriter.adapters.base import AdapterResponse, BaseAdapter
from cta_rewriter.adapters.openai_adapter import OpenAIAdapter
from cta_rewriter.adapters.anthropic_adapter import AnthropicAdapter
from cta_rewriter.adapters.google_adapter import GoogleAdapter

__all__ = [
    "AdapterResponse",
    "BaseAdapter",
    "OpenAIAdapter",
    "AnthropicAdapter",
    "GoogleAdapter",
]
