"""Request and response models for the CTA rewriter."""

from cta_rewriter.models.request import GenerationRequest, LengthHint
from cta_rewriter.models.response import ErrorResponse, ParsedResult, SuggestionResponse

__all__ = [
    "ErrorResponse",
    "GenerationRequest",
    "LengthHint",
    "ParsedResult",
    "SuggestionResponse",
]
