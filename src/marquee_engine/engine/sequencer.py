"""
Marquee Sequencer
=================

Produces the decorated frames of one marquee.

The sequencer owns the only mutable state of a marquee, its cursor.
Everything else (content, decoration, policy) comes from an immutable
MarqueeSpec, so a fresh sequencer built from the same spec restarts
the animation from the beginning.

Frame layout:
    {global_prefix}{spec.prefix}{window}{spec.suffix}{global_suffix}

Policies:
    rotate=True,  loop=True   - infinite, cursor wraps around content + separator
    rotate=True,  loop=False  - one pass, ends once the end of the content is visible
    rotate=False              - static, the full content unwindowed on every call
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from marquee_engine.engine.frame import advance, retreat, window
from marquee_engine.models.errors import SequenceExhausted
from marquee_engine.models.spec import MarqueeSpec


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Decoration:
    """
    Global static text wrapped around every frame.

    Applied outside the per-spec prefix and suffix.
    """

    prefix: str = ""
    suffix: str = ""

    def wrap(self, text: str) -> str:
        return f"{self.prefix}{text}{self.suffix}"


class MarqueeSequencer:
    """
    Frame producer for a single marquee.

    Attributes:
        spec: The marquee being rendered
        cursor: Start offset of the next window
        frames_emitted: Number of frames produced so far
        exhausted: True once a single pass has produced its last frame

    Example:
        sequencer = MarqueeSequencer(MarqueeSpec(content="HELLO"), width=3)

        sequencer.next_frame()  # "HEL"
        sequencer.next_frame()  # "ELL"
        sequencer.next_frame(width=4)  # "LLOH"
    """

    def __init__(
        self,
        spec: MarqueeSpec,
        width: Optional[int] = None,
        decoration: Optional[Decoration] = None,
    ) -> None:
        """
        Initialize sequencer at cursor 0.

        Args:
            spec: Marquee to render
            width: Default window width, used when next_frame gets none
            decoration: Global prefix/suffix around every frame
        """
        if width is not None and width < 0:
            raise ValueError("width must be >= 0")

        self._spec = spec
        self._width = width
        self._decoration = decoration or Decoration()
        self._loop_content = spec.loop_content

        self._cursor: int = 0
        self._frames_emitted: int = 0
        self._exhausted: bool = False

        logger.debug(
            f"MarqueeSequencer created: length={len(self._loop_content)}, "
            f"rotate={spec.rotate}, loop={spec.loop}, reverse={spec.reverse}"
        )

    @property
    def spec(self) -> MarqueeSpec:
        return self._spec

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def frames_emitted(self) -> int:
        return self._frames_emitted

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def is_static(self) -> bool:
        """Whether every frame is identical."""
        return not self._spec.rotate

    def next_frame(self, width: Optional[int] = None) -> str:
        """
        Produce the next decorated frame and move the cursor.

        Args:
            width: Window width for this frame. Defaults to the
                width given at construction.

        Returns:
            The decorated frame

        Raises:
            ValueError: If no width is available or it is negative
            SequenceExhausted: If a single pass has already finished
        """
        if self._exhausted:
            raise SequenceExhausted("marquee has finished its single pass")

        spec = self._spec
        if not spec.rotate:
            self._frames_emitted += 1
            if not spec.loop:
                self._exhausted = True
            return self._decorate(spec.content)

        width = self._resolve_width(width)
        if not spec.loop:
            inner = self._single_pass_window(width)
        else:
            length = len(self._loop_content)
            if spec.reverse and self._frames_emitted == 0 and length:
                # Reverse scrolling starts with the end of the content in view
                self._cursor = (length - width) % length
            inner = window(self._loop_content, self._cursor, width)
            if spec.reverse:
                self._cursor = retreat(self._cursor, len(self._loop_content))
            else:
                self._cursor = advance(self._cursor, len(self._loop_content))

        self._frames_emitted += 1
        return self._decorate(inner)

    def frames(self, width: Optional[int] = None) -> Iterator[str]:
        """
        Lazily yield frames.

        Infinite for looping marquees, a single element for static
        ones, and one pass for non-looping ones.
        """
        if self.is_static:
            if not self._exhausted:
                yield self.next_frame(width)
            return

        while not self._exhausted:
            yield self.next_frame(width)

    def __iter__(self) -> Iterator[str]:
        return self.frames()

    def _resolve_width(self, width: Optional[int]) -> int:
        if width is None:
            width = self._width
        if width is None:
            raise ValueError("no width given for this marquee")
        if width < 0:
            raise ValueError("width must be >= 0")
        return width

    def _single_pass_window(self, width: int) -> str:
        """Window for a non-looping pass; marks the pass finished at its end."""
        last_start = max(0, len(self._loop_content) - width)

        if self._spec.reverse:
            # Reverse pass starts with the end of the content in view
            if self._frames_emitted == 0:
                self._cursor = last_start
            self._cursor = min(self._cursor, last_start)
            inner = window(self._loop_content, self._cursor, width)
            if self._cursor == 0:
                self._exhausted = True
            else:
                self._cursor -= 1
            return inner

        self._cursor = min(self._cursor, last_start)
        inner = window(self._loop_content, self._cursor, width)
        if self._cursor >= last_start:
            self._exhausted = True
        else:
            self._cursor = advance(self._cursor, len(self._loop_content))
        return inner

    def _decorate(self, inner: str) -> str:
        return self._decoration.wrap(f"{self._spec.prefix}{inner}{self._spec.suffix}")
