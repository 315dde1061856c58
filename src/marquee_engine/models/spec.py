"""
Marquee Specification Models
============================

This module defines the immutable description of one marquee and the
schema of JSON input records.

JSON Record Contract (one object per input line in --json mode):
    {
        "content": "Now playing: ...",
        "prefix": "[",
        "suffix": "]",
        "rotate": true
    }

Only "content" is required. Unknown keys are ignored.

Example:
    from marquee_engine.models import MarqueeRecord, MarqueeSpec

    record = MarqueeRecord.model_validate_json('{"content": "HELLO"}')
    spec = record.to_spec(separator=" | ")

    spec = MarqueeSpec.from_text("HELLO", prefix="> ")
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from marquee_engine.models.errors import InvalidSpec


class MarqueeSpec(BaseModel):
    """
    Immutable description of one marquee.

    Empty content is allowed here and renders as empty frames; the
    constructors used by input modes that need text reject it.

    Attributes:
        content: Text scrolled through the window
        prefix: Static text before the window
        suffix: Static text after the window
        rotate: Whether the window moves between frames
        separator: Text between the end of the content and its restart
        loop: Loop forever (False = stop after one pass)
        reverse: Move the window backwards through the content
    """

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Text scrolled through the window")
    prefix: str = Field(default="", description="Static text before the window")
    suffix: str = Field(default="", description="Static text after the window")
    rotate: bool = Field(default=True, description="Advance the window on every frame")
    separator: str = Field(
        default="",
        description="Inserted between the end of the content and its restart",
    )
    loop: bool = Field(default=True, description="Loop forever instead of a single pass")
    reverse: bool = Field(default=False, description="Scroll in the opposite direction")

    @property
    def loop_content(self) -> str:
        """Circular text the window travels over."""
        if not self.loop:
            return self.content
        return self.content + self.separator

    @classmethod
    def from_text(
        cls,
        content: str,
        *,
        require_content: bool = True,
        **options: Any,
    ) -> "MarqueeSpec":
        """
        Build a spec from a plain text line.

        Args:
            content: The line to scroll
            require_content: Reject empty content
            **options: Remaining MarqueeSpec fields

        Raises:
            InvalidSpec: If content is empty and required, or options are invalid
        """
        if require_content and not content:
            raise InvalidSpec("content must not be empty")
        try:
            return cls(content=content, **options)
        except ValidationError as e:
            raise InvalidSpec(f"invalid marquee options: {e}", errors=e.errors()) from e


class MarqueeRecord(BaseModel):
    """
    Schema for a JSON marquee record.

    Fields are strictly typed: "rotate": "yes" is rejected rather
    than coerced.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    content: str = Field(..., description="The text to scroll")
    prefix: str = Field(default="", description="Text placed before the window")
    suffix: str = Field(default="", description="Text placed after the window")
    rotate: bool = Field(default=True, description="If the line should rotate")

    def to_spec(self, *, require_content: bool = True, **options: Any) -> MarqueeSpec:
        """Combine this record with render options into a MarqueeSpec."""
        return MarqueeSpec.from_text(
            self.content,
            require_content=require_content,
            prefix=self.prefix,
            suffix=self.suffix,
            rotate=self.rotate,
            **options,
        )
