"""
Data Models
===========

Pydantic models and error types for the marquee engine.

Models:
    - MarqueeSpec: Immutable description of one marquee
    - MarqueeRecord: Schema of a JSON input record

Errors:
    - InvalidSpec: A spec could not be built from its input
    - RecordDecodeError: An input record is not valid JSON
    - SequenceExhausted: A single-pass marquee has finished
"""

from marquee_engine.models.errors import InvalidSpec, RecordDecodeError, SequenceExhausted
from marquee_engine.models.spec import MarqueeRecord, MarqueeSpec

__all__ = [
    # Specs
    "MarqueeSpec",
    "MarqueeRecord",
    # Errors
    "InvalidSpec",
    "RecordDecodeError",
    "SequenceExhausted",
]
