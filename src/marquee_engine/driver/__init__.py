"""
Driver Module
=============

Input decoding, pacing and terminal output around the engine.

This module provides the I/O layer of the marquee tool:
    - parse_record: input line -> MarqueeSpec (text or JSON)
    - FrameWriter: writes frames one per line or redrawn in place
    - MarqueeRunner: asyncio loop ticking a LineRegistry at a fixed delay
    - stdin_lines / iter_lines: async line sources

Example:
    from marquee_engine.driver import FrameWriter, MarqueeRunner, stdin_lines

    runner = MarqueeRunner.from_settings(settings, FrameWriter(same_line=True))
    asyncio.run(runner.run(stdin_lines()))
"""

from marquee_engine.driver.records import parse_record
from marquee_engine.driver.writer import FrameWriter
from marquee_engine.driver.runner import MarqueeRunner, MarqueeRunnerMetrics
from marquee_engine.driver.source import iter_lines, stdin_lines


__all__ = [
    "parse_record",
    "FrameWriter",
    "MarqueeRunner",
    "MarqueeRunnerMetrics",
    "iter_lines",
    "stdin_lines",
]
