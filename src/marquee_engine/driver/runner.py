"""
Marquee Runner
==============

Asyncio driver pacing the marquee engine.

This module provides the MarqueeRunner class which:
    - Reads input lines and turns them into MarqueeSpecs
    - Registers them in a LineRegistry (replacing or stacking)
    - Ticks the registry at a fixed cadence and writes the frames
    - Stops once input is closed and nothing is left to render

Design Rules:
    - Bad records are logged and counted, never rendered
    - Blank lines are ignored while waiting for more input
    - The delay is measured from the start of a tick, so rendering
      time does not slow the cadence
"""

import asyncio
import logging
from typing import Any, AsyncIterator, Optional

from marquee_engine.config import Settings
from marquee_engine.driver.records import parse_record
from marquee_engine.driver.writer import FrameWriter
from marquee_engine.engine.registry import LineRegistry, SequencerHandle
from marquee_engine.engine.sequencer import Decoration
from marquee_engine.models.errors import InvalidSpec, RecordDecodeError


logger = logging.getLogger(__name__)


class MarqueeRunnerMetrics:
    """Metrics for MarqueeRunner observability."""

    __slots__ = (
        "records_received",
        "records_skipped",
        "records_rejected",
        "decode_errors",
        "ticks",
    )

    def __init__(self) -> None:
        self.records_received: int = 0
        self.records_skipped: int = 0
        self.records_rejected: int = 0
        self.decode_errors: int = 0
        self.ticks: int = 0

    def to_dict(self) -> dict:
        """Export metrics as dict."""
        return {
            "records_received": self.records_received,
            "records_skipped": self.records_skipped,
            "records_rejected": self.records_rejected,
            "decode_errors": self.decode_errors,
            "ticks": self.ticks,
        }


class MarqueeRunner:
    """
    Drives a LineRegistry from a line source.

    Attributes:
        registry: Marquees being rendered
        writer: Output for rendered frames
        delay: Seconds between ticks
        json_mode: Decode input lines as JSON records
        multi_line: Keep every line (False = a new line replaces the old)
        metrics: Operational metrics

    Example:
        runner = MarqueeRunner.from_settings(load_config(), FrameWriter())
        asyncio.run(runner.run(stdin_lines()))
    """

    def __init__(
        self,
        registry: LineRegistry,
        writer: FrameWriter,
        delay: float = 1.0,
        json_mode: bool = False,
        multi_line: bool = False,
        render_options: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize runner.

        Args:
            registry: Registry that owns the sequencers
            writer: Where frames are written
            delay: Seconds between ticks, >= 0
            json_mode: Decode lines as JSON records
            multi_line: Stack lines instead of replacing
            render_options: separator/loop/reverse applied to every spec
        """
        if delay < 0:
            raise ValueError("delay must be >= 0")

        self.registry = registry
        self.writer = writer
        self.delay = delay
        self.json_mode = json_mode
        self.multi_line = multi_line
        self.render_options = dict(render_options or {})

        self.metrics = MarqueeRunnerMetrics()

        self._running: bool = False
        self._input_closed: bool = False
        self._wake: asyncio.Event = asyncio.Event()
        self._stop_event: asyncio.Event = asyncio.Event()

    @classmethod
    def from_settings(cls, settings: Settings, writer: FrameWriter) -> "MarqueeRunner":
        """Build a runner and its registry from loaded settings."""
        render = settings.render
        registry = LineRegistry(
            width=render.width,
            decoration=Decoration(
                prefix=settings.decoration.prefix,
                suffix=settings.decoration.suffix,
            ),
        )
        return cls(
            registry=registry,
            writer=writer,
            delay=render.delay_ms / 1000.0,
            json_mode=settings.input.json_records,
            multi_line=render.multi_line,
            render_options={
                "separator": render.separator,
                "loop": render.loop,
                "reverse": render.reverse,
            },
        )

    @property
    def running(self) -> bool:
        return self._running

    def submit(self, line: str) -> Optional[SequencerHandle]:
        """
        Register the marquee described by one input line.

        Returns:
            Handle of the new marquee, or None if the line was skipped
            or rejected.
        """
        self.metrics.records_received += 1

        if not line.strip("\r\n"):
            self.metrics.records_skipped += 1
            logger.debug("Skipping blank input line")
            return None

        try:
            spec = parse_record(line, json_mode=self.json_mode, **self.render_options)
        except RecordDecodeError as e:
            self.metrics.decode_errors += 1
            logger.error(str(e))
            return None
        except InvalidSpec as e:
            self.metrics.records_rejected += 1
            logger.error(f"Rejected input record: {e}")
            return None

        if self.multi_line:
            handle = self.registry.add(spec)
        else:
            handle = self.registry.replace(spec)

        self._wake.set()
        return handle

    async def run(self, lines: AsyncIterator[str]) -> None:
        """
        Render until input is closed and no marquee remains, or stop()
        is called.
        """
        self._running = True
        self._input_closed = False
        # Events bind to the running loop on first use, so each run gets its own
        self._wake = asyncio.Event()
        self._stop_event = asyncio.Event()

        reader = asyncio.create_task(self._read(lines), name="marquee_reader")
        logger.info(f"MarqueeRunner started: delay={self.delay}s")

        try:
            await self._tick_loop()
        finally:
            self._running = False
            reader.cancel()
            try:
                await reader
            except asyncio.CancelledError:
                pass
            self.writer.finish()
            logger.info(f"MarqueeRunner stopped: {self.metrics.to_dict()}")

    def stop(self) -> None:
        """Signal the run loop to exit after the current tick."""
        self._running = False
        self._wake.set()
        self._stop_event.set()

    async def _read(self, lines: AsyncIterator[str]) -> None:
        async for line in lines:
            if not self._running:
                break
            self.submit(line)
        self._input_closed = True
        self._wake.set()

    async def _tick_loop(self) -> None:
        loop = asyncio.get_running_loop()

        while self._running:
            if self._input_closed and len(self.registry) == 0:
                logger.debug("Input closed and no marquee left to render")
                break

            start = loop.time()
            self._wake.clear()

            if len(self.registry) == 0:
                # Nothing to render: wait for input, EOF or stop()
                await self._wake.wait()
                continue

            frames = self.registry.tick_all()
            self.metrics.ticks += 1
            self.writer.write_all(frames)

            # Sleep out the rest of the delay, waking early only on stop()
            remaining = self.delay - (loop.time() - start)
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=max(remaining, 0.0))
            except asyncio.TimeoutError:
                pass
