"""Inbound generation request model."""

import math
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

FALSE_STRINGS = {"", "false", "0", "no", "off"}


def _to_number(value: Any) -> Optional[float]:
    """Read a slider or count value, or None when it is blank or not numeric."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    try:
        return value if math.isfinite(value) else None
    except OverflowError:
        return None


class LengthHint(str, Enum):
    """Coarse output length derived from the signed length slider."""

    SHORT = "short"
    DEFAULT = "default"
    LONG = "long"


class GenerationRequest(BaseModel):
    """A request to rewrite text with better calls to action.

    Field names accept both snake_case and the camelCase used by the
    browser frontend.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message: Optional[str] = Field(default=None, description="Text to rewrite")
    num_suggestions: Optional[int] = Field(
        default=None, alias="numSuggestions", description="Number of suggestions to return"
    )

    # Tone sliders: negative leans to the first pole, positive to the second,
    # zero asks for balance, None leaves tone alone.
    playful_professional: Optional[float] = Field(
        default=None, alias="playfulProfessional", description="Playful (<0) vs professional (>0)"
    )
    casual_formal: Optional[float] = Field(
        default=None, alias="casualFormal", description="Casual (<0) vs formal (>0)"
    )
    friendly_authoritative: Optional[float] = Field(
        default=None,
        alias="friendlyAuthoritative",
        description="Friendly (<0) vs authoritative (>0)",
    )
    length: Optional[float] = Field(
        default=None, description="Short (<0) vs long (>0) output"
    )

    # Business context
    company_type: Optional[str] = Field(
        default=None, alias="companyType", description="Kind of company"
    )
    what_company_does: Optional[str] = Field(
        default=None, alias="whatCompanyDoes", description="What the company does"
    )
    target_audience: Optional[str] = Field(
        default=None, alias="targetAudience", description="Who the copy is for"
    )

    ban_words: Optional[str] = Field(
        default=None, alias="banWords", description="Words the suggestions must not use"
    )
    keep_words: Optional[str] = Field(
        default=None, alias="keepWords", description="Words the suggestions must include"
    )
    include_explanation: Optional[bool] = Field(
        default=False, alias="includeExplanation", description="Ask for a short rationale"
    )

    @field_validator(
        "playful_professional", "casual_formal", "friendly_authoritative", "length", mode="before"
    )
    @classmethod
    def parse_slider(cls, v: Any) -> Optional[float]:
        """Treat blank or non-numeric slider values as unset."""
        return _to_number(v)

    @field_validator("num_suggestions", mode="before")
    @classmethod
    def parse_count(cls, v: Any) -> Optional[int]:
        """Treat blank or non-numeric counts as unset; drop any fraction."""
        number = _to_number(v)
        return int(number) if number is not None else None

    @field_validator(
        "message",
        "company_type",
        "what_company_does",
        "target_audience",
        "ban_words",
        "keep_words",
        mode="before",
    )
    @classmethod
    def parse_text(cls, v: Any) -> Optional[str]:
        """Keep string values only; anything else counts as absent."""
        return v if isinstance(v, str) else None

    @field_validator("include_explanation", mode="before")
    @classmethod
    def parse_flag(cls, v: Any) -> bool:
        """Read the explanation flag from booleans, numbers or form strings."""
        if isinstance(v, str):
            return v.strip().lower() not in FALSE_STRINGS
        if isinstance(v, (bool, int, float)):
            return bool(v)
        return False

    @property
    def requested_count(self) -> Optional[int]:
        """Requested number of suggestions, or None when unset or non-positive."""
        if self.num_suggestions and self.num_suggestions > 0:
            return self.num_suggestions
        return None

    @property
    def length_hint(self) -> LengthHint:
        """Map the signed length slider onto a LengthHint."""
        if self.length is None or self.length == 0:
            return LengthHint.DEFAULT
        return LengthHint.SHORT if self.length < 0 else LengthHint.LONG
