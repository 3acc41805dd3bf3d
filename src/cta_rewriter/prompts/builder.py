"""Assemble the system instruction for a generation request.

The prompt is a fold over an ordered chain of directives. Each directive
looks at the request and returns an instruction fragment, or None when the
field it covers is unset. Providers are sensitive to instruction order, so
the chain order is fixed:

    [hard keep-words] base, em dash rule, explanation, count, tone axes,
    length, business context, ban words, [soft keep-words]
"""

from enum import Enum
from typing import Callable, Optional, Union

from cta_rewriter.models.request import GenerationRequest
from cta_rewriter.prompts import templates

Directive = Callable[[GenerationRequest], Optional[str]]


class KeepWordsPolicy(str, Enum):
    """Where keep-words are placed in the prompt."""

    HARD = "hard"  # prepended as an absolute requirement
    SOFT = "soft"  # appended as a trailing inclusion directive


def _text(value: Optional[str]) -> Optional[str]:
    """Return stripped text, or None for missing or blank values."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def keep_words_hard(request: GenerationRequest) -> Optional[str]:
    keep_words = _text(request.keep_words)
    if keep_words is None:
        return None
    return templates.KEEP_WORDS_HARD.format(keep_words=keep_words)


def base_instruction(request: GenerationRequest) -> Optional[str]:
    return templates.BASE_INSTRUCTION


def no_em_dash(request: GenerationRequest) -> Optional[str]:
    return templates.NO_EM_DASH


def explanation(request: GenerationRequest) -> Optional[str]:
    if not request.include_explanation:
        return None
    return templates.EXPLANATION_INSTRUCTION


def suggestion_count(request: GenerationRequest) -> Optional[str]:
    count = request.requested_count
    if count is None:
        return None
    clause = (
        templates.NUM_SUGGESTIONS_EXPLANATION_CLAUSE if request.include_explanation else ""
    )
    return templates.NUM_SUGGESTIONS.format(count=count, explanation_clause=clause)


def tone_directive(attribute: str, negative_pole: str, positive_pole: str) -> Directive:
    """Build the directive for one bipolar tone axis."""

    def directive(request: GenerationRequest) -> Optional[str]:
        value = getattr(request, attribute)
        if value is None:
            return None
        if value == 0:
            return templates.TONE_BALANCED.format(first=negative_pole, second=positive_pole)
        pole = negative_pole if value < 0 else positive_pole
        return templates.TONE_ADJUST.format(pole=pole)

    directive.__name__ = f"tone_{attribute}"
    return directive


def length(request: GenerationRequest) -> Optional[str]:
    if not request.length:
        return None
    return templates.LENGTH_SHORT if request.length < 0 else templates.LENGTH_LONG


def company_type(request: GenerationRequest) -> Optional[str]:
    value = _text(request.company_type)
    return templates.COMPANY_TYPE.format(value=value) if value else None


def what_company_does(request: GenerationRequest) -> Optional[str]:
    value = _text(request.what_company_does)
    return templates.WHAT_COMPANY_DOES.format(value=value) if value else None


def target_audience(request: GenerationRequest) -> Optional[str]:
    value = _text(request.target_audience)
    return templates.TARGET_AUDIENCE.format(value=value) if value else None


def ban_words(request: GenerationRequest) -> Optional[str]:
    value = _text(request.ban_words)
    return templates.BAN_WORDS.format(ban_words=value) if value else None


def keep_words_soft(request: GenerationRequest) -> Optional[str]:
    keep_words = _text(request.keep_words)
    if keep_words is None:
        return None
    return templates.KEEP_WORDS_SOFT.format(keep_words=keep_words)


CORE_DIRECTIVES: tuple[Directive, ...] = (
    base_instruction,
    no_em_dash,
    explanation,
    suggestion_count,
    *(tone_directive(*axis) for axis in templates.TONE_AXES),
    length,
    company_type,
    what_company_does,
    target_audience,
    ban_words,
)


def build_directives(
    keep_words_policy: Union[KeepWordsPolicy, str] = KeepWordsPolicy.HARD,
) -> tuple[Directive, ...]:
    """Return the ordered directive chain for a keep-words policy."""
    policy = KeepWordsPolicy(keep_words_policy)
    if policy is KeepWordsPolicy.HARD:
        return (keep_words_hard, *CORE_DIRECTIVES)
    return (*CORE_DIRECTIVES, keep_words_soft)


def build_system_prompt(
    request: GenerationRequest,
    keep_words_policy: Union[KeepWordsPolicy, str] = KeepWordsPolicy.HARD,
) -> str:
    """Build the system instruction for a request.

    Args:
        request: The generation request.
        keep_words_policy: Placement of the keep-words constraint.

    Returns:
        The instruction string. Identical inputs give identical output.
    """
    fragments = (directive(request) for directive in build_directives(keep_words_policy))
    return " ".join(fragment for fragment in fragments if fragment)
