"""Per-request pipeline: validate, build prompt, call provider, parse."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union
from uuid import uuid4

from cta_rewriter.adapters.base import BaseAdapter
from cta_rewriter.models import ErrorResponse, GenerationRequest, SuggestionResponse
from cta_rewriter.parsing import parse_reply
from cta_rewriter.prompts import KeepWordsPolicy, build_system_prompt
from cta_rewriter.utils.logger import RequestLogger, get_logger
from cta_rewriter.utils.resilience import ProviderError
from cta_rewriter.utils.sanitization import MessageValidationError, require_message

logger = get_logger()

GENERIC_FAILURE = "Something went wrong."


class RequestStage(str, Enum):
    """Lifecycle stages of a suggestion request."""

    RECEIVED = "received"
    VALIDATED = "validated"
    PROMPT_BUILT = "prompt_built"
    PROVIDER_CALLED = "provider_called"
    PARSED = "parsed"
    RESPONDED = "responded"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass
class HandlerOutcome:
    """Final status code and JSON body for a request."""

    status_code: int
    body: dict[str, Any]
    stage: RequestStage
    stages: list[RequestStage] = field(default_factory=list)


class SuggestionHandler:
    """Runs one generation request against a single provider adapter."""

    def __init__(
        self,
        adapter: BaseAdapter,
        keep_words_policy: Union[KeepWordsPolicy, str] = KeepWordsPolicy.HARD,
        link_href: str = "#",
    ):
        """Initialize the handler.

        Args:
            adapter: Provider adapter that completes prompts.
            keep_words_policy: Placement of the keep-words constraint.
            link_href: Target used for generated anchors.
        """
        self.adapter = adapter
        self.keep_words_policy = KeepWordsPolicy(keep_words_policy)
        self.link_href = link_href

    async def handle(self, request: Optional[GenerationRequest]) -> HandlerOutcome:
        """Process a request and convert every failure into an error body.

        Returns:
            HandlerOutcome with 200 and a suggestion body, 400 when the
            message is missing, or 500 when the provider call fails.
        """
        request_log = RequestLogger(uuid4().hex[:8], self.adapter.provider_name)
        request_log.log_stage(RequestStage.RECEIVED.value)

        def advance(stage: RequestStage, message: str = "") -> None:
            request_log.log_stage(stage.value, message)

        try:
            message = require_message(request.message if request else None)
        except MessageValidationError as e:
            request_log.log_rejected(str(e))
            return self._error(400, str(e), RequestStage.REJECTED, request_log)
        advance(RequestStage.VALIDATED, f"message_len={len(message)}")

        try:
            system_prompt = build_system_prompt(request, self.keep_words_policy)
            advance(RequestStage.PROMPT_BUILT, f"system_len={len(system_prompt)}")

            reply = await self.adapter.complete(system_prompt, message, request.length_hint)
            advance(
                RequestStage.PROVIDER_CALLED,
                f"model={reply.model_used}, tokens_out={reply.usage.output_tokens}",
            )

            result = parse_reply(
                reply.content,
                num_suggestions=request.requested_count,
                link_href=self.link_href,
            )
            advance(RequestStage.PARSED, f"suggestions={len(result.suggestions)}")
        except ProviderError as e:
            request_log.log_failed(str(e) or GENERIC_FAILURE)
            return self._error(
                500, e.message or GENERIC_FAILURE, RequestStage.FAILED, request_log
            )
        except Exception as e:
            logger.exception(f"Unexpected error handling {self.adapter.provider_name} request")
            request_log.log_failed(str(e) or GENERIC_FAILURE)
            return self._error(500, str(e) or GENERIC_FAILURE, RequestStage.FAILED, request_log)

        advance(RequestStage.RESPONDED)
        body = SuggestionResponse.from_result(result).model_dump()
        return HandlerOutcome(
            status_code=200,
            body=body,
            stage=RequestStage.RESPONDED,
            stages=self._stages(request_log),
        )

    @staticmethod
    def _error(
        status_code: int,
        message: str,
        stage: RequestStage,
        request_log: RequestLogger,
    ) -> HandlerOutcome:
        """Build an error outcome."""
        body = ErrorResponse(error=message).model_dump()
        return HandlerOutcome(
            status_code=status_code,
            body=body,
            stage=stage,
            stages=SuggestionHandler._stages(request_log),
        )

    @staticmethod
    def _stages(request_log: RequestLogger) -> list[RequestStage]:
        """Read the stage history recorded by the request logger."""
        return [RequestStage(stage) for stage in request_log.get_stages()]
