"""
Input Records
=============

Turns raw input lines into MarqueeSpec values.

Two input modes:
    - text: the whole line is the content
    - json: the line is a MarqueeRecord object

Decode and validation failures are raised as InvalidSpec before any
sequencer exists, so a bad record never renders partially.
"""

import json
from typing import Any

from pydantic import ValidationError

from marquee_engine.models.errors import InvalidSpec, RecordDecodeError
from marquee_engine.models.spec import MarqueeRecord, MarqueeSpec


def parse_record(line: str, json_mode: bool = False, **options: Any) -> MarqueeSpec:
    """
    Build a MarqueeSpec from one input line.

    Args:
        line: Raw input line, trailing newline allowed
        json_mode: Decode the line as a JSON record
        **options: Render options (separator, loop, reverse)

    Returns:
        MarqueeSpec for the line

    Raises:
        RecordDecodeError: If json_mode is set and the line is not JSON
        InvalidSpec: If content is empty or the record is invalid
    """
    line = line.rstrip("\r\n")

    if not json_mode:
        return MarqueeSpec.from_text(line, **options)

    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise RecordDecodeError(f"Error parsing JSON: {e}") from e

    try:
        record = MarqueeRecord.model_validate(data)
    except ValidationError as e:
        raise InvalidSpec(f"Invalid marquee record: {e}", errors=e.errors()) from e

    return record.to_spec(**options)
