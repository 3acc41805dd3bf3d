"""Token usage tracking for provider calls."""

from dataclasses import dataclass


@dataclass
class TokenUsage:
    """Token usage for a single API call."""

    input_tokens: int = 0
    output_tokens: int = 0
    model: str = ""
