"""Google adapter for Gemini models."""

from typing import Optional

from langchain_google_genai import ChatGoogleGenerativeAI

from cta_rewriter.adapters.base import AdapterResponse, BaseAdapter, content_to_text
from cta_rewriter.utils.config import get_settings
from cta_rewriter.utils.metrics import TokenUsage
from cta_rewriter.utils.resilience import with_timeout


class GoogleAdapter(BaseAdapter):
    """Adapter for Google Gemini models, served on /gemini-chat.

    The instruction and the user text are sent together as a single
    labelled message.
    """

    provider_name = "google"
    supports_system_role = False

    def __init__(
        self,
        model_name: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the Google adapter.

        Args:
            model_name: Model name (defaults to settings).
            api_key: API key (defaults to settings).
            timeout: Per-call timeout in seconds (defaults to settings).
        """
        settings = get_settings()

        super().__init__(
            model_name=model_name or settings.google_model,
            api_key=api_key or settings.google_api_key,
            temperature=settings.temperature,
            default_max_tokens=settings.default_max_tokens,
            timeout=timeout if timeout is not None else settings.model_timeout,
        )
        self._clients: dict[str, ChatGoogleGenerativeAI] = {}

    def _get_client(
        self, model: str, temperature: float, max_tokens: int
    ) -> ChatGoogleGenerativeAI:
        """Get or create a ChatGoogleGenerativeAI client for a model."""
        key = f"{model}_{temperature}_{max_tokens}"
        if key not in self._clients:
            self._clients[key] = ChatGoogleGenerativeAI(
                model=model,
                google_api_key=self.api_key,
                temperature=temperature,
                max_output_tokens=max_tokens,
                max_retries=0,
            )
        return self._clients[key]

    def _extract_usage(self, response, model: str) -> TokenUsage:
        """Extract token usage from Google response."""
        usage = TokenUsage(model=model)

        usage_metadata = getattr(response, "usage_metadata", None)
        if usage_metadata:
            usage.input_tokens = usage_metadata.get("input_tokens", 0)
            usage.output_tokens = usage_metadata.get("output_tokens", 0)

        return usage

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> AdapterResponse:
        """Generate a response from Gemini."""
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
