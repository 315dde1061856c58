"""
Error Types
===========

Exceptions raised by the marquee engine and its input layer.

Hierarchy:
    InvalidSpec (ValueError)
        RecordDecodeError    - input line is not valid JSON
    SequenceExhausted (RuntimeError)
"""

from typing import Any, Optional


class InvalidSpec(ValueError):
    """
    A marquee specification could not be built from its input.

    Raised when content is missing or empty where the input mode
    requires it, or when a decoded record fails validation.

    Attributes:
        errors: Structured validation errors (pydantic error dicts)
    """

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class RecordDecodeError(InvalidSpec):
    """An input record is not valid JSON."""


class SequenceExhausted(RuntimeError):
    """A single-pass marquee has already produced its last frame."""
