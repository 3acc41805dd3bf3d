"""Parsed suggestion results and HTTP response bodies."""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field


@dataclass
class ParsedResult:
    """Suggestions extracted from a provider reply."""

    suggestions: list[str] = field(default_factory=list)
    explanation: str = ""


class SuggestionResponse(BaseModel):
    """Successful response body."""

    response: list[str] = Field(
        default_factory=list, description="Suggestions, possibly containing link markup"
    )
    explanation: str = Field(default="", description="Optional rationale for the suggestions")

    @classmethod
    def from_result(cls, result: ParsedResult) -> "SuggestionResponse":
        """Build a response body from a parsed result."""
        return cls(response=result.suggestions, explanation=result.explanation)


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str = Field(..., description="Human-readable error message")
