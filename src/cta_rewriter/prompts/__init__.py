"""Prompt assembly for the call-to-action rewrite."""

from cta_rewriter.prompts.builder import (
    KeepWordsPolicy,
    build_directives,
    build_system_prompt,
)
from cta_rewriter.prompts.templates import BASE_INSTRUCTION, EXPLANATION_MARKER

__all__ = [
    "BASE_INSTRUCTION",
    "EXPLANATION_MARKER",
    "KeepWordsPolicy",
    "build_directives",
    "build_system_prompt",
]
