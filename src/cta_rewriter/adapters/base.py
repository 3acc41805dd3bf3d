"""Base adapter for LLM providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from cta_rewriter.models.request import LengthHint
from cta_rewriter.prompts.templates import SYSTEM_LABEL, USER_LABEL
from cta_rewriter.utils.logger import get_logger
from cta_rewriter.utils.metrics import TokenUsage

# max_tokens per length hint for adapters with uses_token_ceilings
TOKEN_CEILINGS: dict[LengthHint, int] = {
    LengthHint.SHORT: 70,
    LengthHint.DEFAULT: 150,
    LengthHint.LONG: 250,
}


@dataclass
class AdapterResponse:
    """Response from an adapter including content and usage metrics."""

    content: str
    usage: TokenUsage
    model_used: str


def content_to_text(content: Any) -> str:
    """Flatten LangChain message content into plain text.

    Some providers return a list of content blocks instead of a string.
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type", "text") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)


class BaseAdapter(ABC):
    """Abstract base class for LLM provider adapters."""

    provider_name: str = "base"
    # Whether the provider accepts a separate system message
    supports_system_role: bool = True
    # Whether max_tokens follows the request's length hint
    uses_token_ceilings: bool = False

    def __init__(
        self,
        model_name: str,
        api_key: Optional[str] = None,
        temperature: float = 0.7,
        default_max_tokens: int = 1024,
        timeout: Optional[float] = None,
    ):
        """Initialize the adapter.

        Args:
            model_name: Name of the model to use.
            api_key: API key for authentication (if not using env var).
            temperature: Sampling temperature.
            default_max_tokens: Output limit when token ceilings don't apply.
            timeout: Seconds allowed per call, or None for no bound.
        """
        self.model_name = model_name
        self.api_key = api_key
        self.temperature = temperature
        self.default_max_tokens = default_max_tokens
        self.timeout = timeout
        self.logger = get_logger()

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> AdapterResponse:
        """Generate a response from the model.

        Args:
            prompt: The user prompt.
            system_prompt: Optional system prompt.
            temperature: Sampling temperature.
            max_tokens: Maximum tokens to generate.

        Returns:
            AdapterResponse with content and usage metrics.

        Raises:
            ProviderError: If the call fails or times out.
        """
        pass

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        length_hint: LengthHint = LengthHint.DEFAULT,
    ) -> AdapterResponse:
        """Complete a rewrite prompt for one user message."""
        return await self.generate(
            user_message,
            system_prompt=system_prompt,
            temperature=self.temperature,
            max_tokens=self.max_tokens_for(length_hint),
        )

    def max_tokens_for(self, length_hint: LengthHint) -> int:
        """Get the output token limit for a length hint."""
        if self.uses_token_ceilings:
            return TOKEN_CEILINGS[length_hint]
        return self.default_max_tokens

    def build_messages(
        self, prompt: str, system_prompt: Optional[str] = None
    ) -> list[BaseMessage]:
        """Build the chat messages for a call.

        Providers without a system role get one human message carrying
        both parts under role labels.
        """
        if not system_prompt:
            return [HumanMessage(content=prompt)]
        if self.supports_system_role:
            return [SystemMessage(content=system_prompt), HumanMessage(content=prompt)]
        combined = f"{SYSTEM_LABEL}\n{system_prompt}\n\n{USER_LABEL}\n{prompt}"
        return [HumanMessage(content=combined)]

    def _log_request(self, prompt: str, system_prompt: Optional[str] = None) -> None:
        """Log an API request."""
        self.logger.debug(
            f"[{self.__class__.__name__}] Request to {self.model_name}: "
            f"prompt_len={len(prompt)}, system_len={len(system_prompt or '')}"
        )

    def _log_response(
        self,
        response: Any,
        usage: Optional[TokenUsage] = None,
    ) -> None:
        """Log an API response with usage metrics."""
        response_len = len(str(response)) if response else 0
        usage_info = ""
        if usage:
            usage_info = (
                f", tokens_in={usage.input_tokens}, "
                f"tokens_out={usage.output_tokens}"
            )
        self.logger.debug(
            f"[{self.__class__.__name__}] Response from {self.model_name}: "
            f"response_len={response_len}{usage_info}"
        )
