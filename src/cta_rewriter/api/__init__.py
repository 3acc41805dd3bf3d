"""FastAPI backend for the CTA rewriter."""

from cta_rewriter.api.main import app
from cta_rewriter.api.routes import router
from cta_rewriter.api.handlers import SuggestionHandler

__all__ = [
    "app",
    "router",
    "SuggestionHandler",
]
