"""Utility modules for the CTA rewriter."""

from cta_rewriter.utils.config import Settings, get_settings
from cta_rewriter.utils.logger import RequestLogger, get_logger, setup_logging
from cta_rewriter.utils.metrics import TokenUsage
from cta_rewriter.utils.resilience import (
    ProviderError,
    ProviderTimeoutError,
    with_timeout,
)
from cta_rewriter.utils.sanitization import (
    NO_MESSAGE_ERROR,
    MessageValidationError,
    require_message,
    validate_message,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "RequestLogger",
    "get_logger",
    "setup_logging",
    # Metrics
    "TokenUsage",
    # Resilience
    "ProviderError",
    "ProviderTimeoutError",
    "with_timeout",
    # Sanitization
    "NO_MESSAGE_ERROR",
    "MessageValidationError",
    "require_message",
    "validate_message",
]
