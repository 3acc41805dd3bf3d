"""Provider reply parsing."""

from cta_rewriter.parsing.suggestions import (
    linkify,
    parse_reply,
    segment_numbered,
    split_explanation,
    strip_em_dashes,
)

__all__ = [
    "linkify",
    "parse_reply",
    "segment_numbered",
    "split_explanation",
    "strip_em_dashes",
]
