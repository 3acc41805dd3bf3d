"""Input validation for incoming generation requests."""

from typing import Optional

NO_MESSAGE_ERROR = "No message provided"


class MessageValidationError(Exception):
    """Raised when a request carries no usable message."""

    pass


def validate_message(text: Optional[str]) -> tuple[bool, Optional[str]]:
    """Validate that a message is present.

    Only presence is checked; content and length are passed through.

    Args:
        text: The raw message field.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if text is None or not text.strip():
        return False, NO_MESSAGE_ERROR
    return True, None


def require_message(text: Optional[str]) -> str:
    """Return the message unchanged, raising if it is missing.

    Raises:
        MessageValidationError: If the message is absent or blank.
    """
    is_valid, error = validate_message(text)
    if not is_valid:
        raise MessageValidationError(error)
    return text
