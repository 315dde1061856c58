"""
Frame Writer
============

Writes rendered frames to a text stream (stdout by default).

Two modes:
    - one frame per line (pipeline friendly)
    - same line: each frame is redrawn after a carriage return, padded
      with spaces when it is shorter than the previous one
"""

import sys
from typing import Optional, TextIO


class FrameWriter:
    """
    Terminal output for marquee frames.

    Attributes:
        same_line: Redraw frames in place using \\r
        frames_written: Number of write() calls so far
    """

    def __init__(self, stream: Optional[TextIO] = None, same_line: bool = False) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self.same_line = same_line
        self.frames_written: int = 0
        self._previous: str = ""

    def write(self, frame: str) -> None:
        """Write one frame and flush."""
        if self.same_line:
            padding = " " * max(0, len(self._previous) - len(frame))
            self._stream.write(f"\r{frame}{padding}")
            self._previous = frame
        else:
            self._stream.write(f"{frame}\n")
        self._stream.flush()
        self.frames_written += 1

    def write_all(self, frames: list[str]) -> None:
        """Write one tick of frames as a single block."""
        if not frames:
            return
        self.write("\n".join(frames))

    def finish(self) -> None:
        """Terminate a same-line display with a newline."""
        if self.same_line and self.frames_written:
            self._stream.write("\n")
            self._stream.flush()
