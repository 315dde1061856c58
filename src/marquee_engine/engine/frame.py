"""
Frame Generator
===============

Pure functions computing the visible window of a marquee.

Content is treated as circular: a window running past the end
re-enters from the start, and content shorter than the window
repeats itself until the window is full.

    window("HELLO", 3, 3)  -> "LOH"
    window("A", 0, 5)      -> "AAAAA"
    window("", 0, 5)       -> ""

Positions are measured in characters (code points), not bytes.
"""


def window(content: str, cursor: int, width: int) -> str:
    """
    Return exactly `width` characters of circular `content` from `cursor`.

    Args:
        content: Text to window over
        cursor: Start offset, taken modulo len(content)
        width: Number of characters to return

    Returns:
        The window, or "" when content is empty or width is 0

    Raises:
        ValueError: If width is negative
    """
    if width < 0:
        raise ValueError("width must be >= 0")

    length = len(content)
    if length == 0 or width == 0:
        return ""

    start = cursor % length
    # Enough copies to cover the start offset plus the full width
    repeats = (start + width) // length + 1
    return (content * repeats)[start:start + width]


def advance(cursor: int, content_length: int) -> int:
    """Next cursor moving forward; 0 for empty content."""
    if content_length == 0:
        return 0
    return (cursor + 1) % content_length


def retreat(cursor: int, content_length: int) -> int:
    """Next cursor moving backward; 0 for empty content."""
    if content_length == 0:
        return 0
    return (cursor - 1) % content_length
