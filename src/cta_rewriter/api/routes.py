"""API routes: one suggestion endpoint per provider."""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from cta_rewriter.adapters import AnthropicAdapter, BaseAdapter, GoogleAdapter, OpenAIAdapter
from cta_rewriter.api.handlers import SuggestionHandler
from cta_rewriter.models import ErrorResponse, GenerationRequest, SuggestionResponse
from cta_rewriter.utils.config import get_settings
from cta_rewriter.utils.logger import get_logger

logger = get_logger()

router = APIRouter(tags=["cta-rewriter"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "No message provided"},
    500: {"model": ErrorResponse, "description": "Provider or internal failure"},
}


def build_adapters() -> dict[str, BaseAdapter]:
    """Construct one adapter per provider from settings."""
    return {
        OpenAIAdapter.provider_name: OpenAIAdapter(),
        AnthropicAdapter.provider_name: AnthropicAdapter(),
        GoogleAdapter.provider_name: GoogleAdapter(),
    }


def _adapter(request: Request, provider: str) -> BaseAdapter:
    """Look up a provider adapter on the application state."""
    adapters = getattr(request.app.state, "adapters", None)
    if adapters is None:
        adapters = build_adapters()
        request.app.state.adapters = adapters
    return adapters[provider]


def get_openai_adapter(request: Request) -> BaseAdapter:
    """Get the OpenAI adapter."""
    return _adapter(request, OpenAIAdapter.provider_name)


def get_anthropic_adapter(request: Request) -> BaseAdapter:
    """Get the Anthropic adapter."""
    return _adapter(request, AnthropicAdapter.provider_name)


def get_google_adapter(request: Request) -> BaseAdapter:
    """Get the Google adapter."""
    return _adapter(request, GoogleAdapter.provider_name)


async def _respond(
    payload: Optional[GenerationRequest], adapter: BaseAdapter
) -> JSONResponse:
    """Run the handler and wrap its outcome in a JSON response."""
    settings = get_settings()
    handler = SuggestionHandler(
        adapter,
        keep_words_policy=settings.keep_words_policy,
        link_href=settings.cta_link_href,
    )
    outcome = await handler.handle(payload)
    return JSONResponse(status_code=outcome.status_code, content=outcome.body)


@router.post("/chat", response_model=SuggestionResponse, responses=ERROR_RESPONSES)
async def chat(
    payload: Optional[GenerationRequest] = Body(default=None),
    adapter: BaseAdapter = Depends(get_openai_adapter),
) -> JSONResponse:
    """Generate suggestions with OpenAI."""
    return await _respond(payload, adapter)


@router.post("/claude-chat", response_model=SuggestionResponse, responses=ERROR_RESPONSES)
async def claude_chat(
    payload: Optional[GenerationRequest] = Body(default=None),
    adapter: BaseAdapter = Depends(get_anthropic_adapter),
) -> JSONResponse:
    """Generate suggestions with Claude."""
    return await _respond(payload, adapter)


@router.post("/gemini-chat", response_model=SuggestionResponse, responses=ERROR_RESPONSES)
async def gemini_chat(
    payload: Optional[GenerationRequest] = Body(default=None),
    adapter: BaseAdapter = Depends(get_google_adapter),
) -> JSONResponse:
    """Generate suggestions with Gemini."""
    return await _respond(payload, adapter)
