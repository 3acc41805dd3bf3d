"""Parse a provider reply into linkified suggestions."""

import re
from typing import Optional

from cta_rewriter.models.response import ParsedResult
from cta_rewriter.prompts.templates import EXPLANATION_MARKER

EM_DASH = "—"

# "<digits>. " at the start of the text or after whitespace
NUMBER_MARKER_PATTERN = re.compile(r"(?<!\S)\d+\.\s+")
# Outermost [...] pair, allowing one nested pair inside; "[]" matches too
BRACKET_PATTERN = re.compile(r"\[((?:[^\[\]]|\[[^\[\]]*\])*)\]")
EM_DASH_PATTERN = re.compile(rf"[ \t]*{EM_DASH}[ \t]*")


def split_explanation(text: str) -> tuple[str, str]:
    """Split a reply at the first explanation marker.

    Returns:
        Tuple of (suggestion_text, explanation), both trimmed. The
        explanation is empty when the marker is absent.
    """
    head, marker, tail = text.partition(EXPLANATION_MARKER)
    if not marker:
        return text.strip(), ""
    return head.strip(), tail.strip()


def strip_em_dashes(text: str) -> str:
    """Remove every em dash, leaving a single space where one stood."""
    return EM_DASH_PATTERN.sub(" ", text)


def linkify(text: str, href: str = "#") -> str:
    """Convert each [phrase] into an anchor wrapping the phrase."""
    return BRACKET_PATTERN.sub(lambda m: f'<a href="{href}">{m.group(1)}</a>', text)


def segment_numbered(text: str) -> list[str]:
    """Split text into numbered items with their markers removed.

    Each item runs from its marker to the next marker or the end of the
    text. Anything before the first marker is dropped.

    Returns:
        Trimmed item bodies in order, or an empty list if no marker exists.
    """
    markers = list(NUMBER_MARKER_PATTERN.finditer(text))
    items = []
    for i, marker in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(text)
        items.append(text[marker.end():end].strip())
    return items


def parse_reply(
    raw: str,
    num_suggestions: Optional[int] = None,
    link_href: str = "#",
) -> ParsedResult:
    """Turn a raw provider reply into a ParsedResult.

    Args:
        raw: Reply text from the provider.
        num_suggestions: Requested count; extra items are dropped.
        link_href: Target used for generated anchors.

    Returns:
        ParsedResult with ordered suggestions and the explanation, if any.
    """
    suggestion_text, explanation = split_explanation(raw or "")
    suggestion_text = strip_em_dashes(suggestion_text)
    explanation = strip_em_dashes(explanation).strip()

    segments = segment_numbered(suggestion_text)
    if segments:
        suggestions = [linkify(s, link_href) for s in segments if s]
    else:
        # Unstructured reply: keep it whole
        single = suggestion_text.strip()
        suggestions = [linkify(single, link_href)] if single else []

    if num_suggestions and num_suggestions > 0:
        suggestions = suggestions[:num_suggestions]

    return ParsedResult(suggestions=suggestions, explanation=explanation)
