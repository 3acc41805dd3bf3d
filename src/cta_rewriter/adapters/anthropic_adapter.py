"""Anthropic adapter for Claude models."""

from typing import Optional

from langchain_anthropic import ChatAnthropic

from cta_rewriter.adapters.base import AdapterResponse, BaseAdapter, content_to_text
from cta_rewriter.utils.config import get_settings
from cta_rewriter.utils.metrics import TokenUsage
from cta_rewriter.utils.resilience import with_timeout


class AnthropicAdapter(BaseAdapter):
    """Adapter for Anthropic Claude models, served on /claude-chat.

    Claude tends to overrun length directives, so output is capped with
    the tiered token ceilings.
    """

    provider_name = "anthropic"
    uses_token_ceilings = True

    def __init__(
        self,
        model_name: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the Anthropic adapter.

        Args:
            model_name: Model name (defaults to settings).
            api_key: API key (defaults to settings).
            timeout: Per-call timeout in seconds (defaults to settings).
        """
        settings = get_settings()

        super().__init__(
            model_name=model_name or settings.anthropic_model,
            api_key=api_key or settings.anthropic_api_key,
            temperature=settings.temperature,
            default_max_tokens=settings.default_max_tokens,
            timeout=timeout if timeout is not None else settings.model_timeout,
        )
        self._clients: dict[str, ChatAnthropic] = {}

    def _get_client(self, model: str, temperature: float, max_tokens: int) -> ChatAnthropic:
        """Get or create a ChatAnthropic client for a model."""
        key = f"{model}_{temperature}_{max_tokens}"
        if key not in self._clients:
            self._clients[key] = ChatAnthropic(
                model=model,
                api_key=self.api_key,
                temperature=temperature,
                max_tokens=max_tokens,
                max_retries=0,
            )
        return self._clients[key]

    def _extract_usage(self, response, model: str) -> TokenUsage:
        """Extract token usage from Anthropic response."""
        usage = TokenUsage(model=model)

        if hasattr(response, "response_metadata"):
            metadata = response.response_metadata
            if "usage" in metadata:
                token_usage = metadata["usage"] or {}
                usage.input_tokens = token_usage.get("input_tokens", 0)
                usage.output_tokens = token_usage.get("output_tokens", 0)

        return usage

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> AdapterResponse:
        """Generate a response from Claude."""
        self._log_request(prompt, system_prompt)

        @with_timeout(self.timeout, provider=self.provider_name)
        async def _generate() -> AdapterResponse:
            client = self._get_client(self.model_name, temperature, max_tokens)
            response = await client.ainvoke(self.build_messages(prompt, system_prompt))
            usage = self._extract_usage(response, self.model_name)
            return AdapterResponse(
                content=content_to_text(response.content),
                usage=usage,
                model_used=self.model_name,
            )

        result = await _generate()
        self._log_response(result.content, result.usage)
        return result
