"""
Marquee Runner Tests
====================

The runner is driven with delay=0 and in-memory line sources.
"""

import asyncio

import pytest

from marquee_engine.config import DecorationConfig, InputConfig, RenderConfig, Settings
from marquee_engine.driver.runner import MarqueeRunner
from marquee_engine.driver.source import iter_lines
from marquee_engine.driver.writer import FrameWriter
from marquee_engine.engine.registry import LineRegistry


async def _lines(*items):
    for item in items:
        yield item


class StoppingWriter(FrameWriter):
    """FrameWriter that stops its runner after a number of writes."""

    def __init__(self, stream, limit):
        super().__init__(stream)
        self.limit = limit
        self.runner = None

    def write(self, frame):
        super().write(frame)
        if self.frames_written >= self.limit:
            self.runner.stop()


def _runner(output_stream, width=3, **kwargs):
    return MarqueeRunner(
        registry=LineRegistry(width=width),
        writer=FrameWriter(output_stream),
        delay=0,
        **kwargs,
    )


class TestSubmit:
    """Tests for MarqueeRunner.submit()."""

    def test_replaces_previous_line(self, output_stream):
        runner = _runner(output_stream)
        first = runner.submit("HELLO\n")
        second = runner.submit("WORLD\n")

        assert runner.registry.active_handles == [second]
        assert not runner.registry.is_active(first)

    def test_multi_line_stacks(self, output_stream):
        runner = _runner(output_stream, multi_line=True)
        first = runner.submit("HELLO\n")
        second = runner.submit("WORLD\n")

        assert runner.registry.active_handles == [first, second]

    def test_blank_line_skipped(self, output_stream):
        runner = _runner(output_stream)
        runner.submit("HELLO\n")

        assert runner.submit("\n") is None
        assert len(runner.registry) == 1
        assert runner.metrics.records_skipped == 1

    def test_bad_json_does_not_replace(self, output_stream):
        runner = _runner(output_stream, json_mode=True)
        handle = runner.submit('{"content": "HELLO"}')

        assert runner.submit("{broken") is None
        assert runner.submit('{"content": 5}') is None
        assert runner.registry.active_handles == [handle]
        assert runner.metrics.decode_errors == 1
        assert runner.metrics.records_rejected == 1
        assert runner.metrics.records_received == 3

    def test_render_options_applied(self, output_stream):
        runner = _runner(output_stream, render_options={"separator": "--", "reverse": True})
        handle = runner.submit("AB")
        spec = runner.registry.get(handle).spec

        assert spec.separator == "--"
        assert spec.reverse is True

    def test_negative_delay(self, output_stream):
        with pytest.raises(ValueError):
            MarqueeRunner(LineRegistry(width=3), FrameWriter(output_stream), delay=-1)


class TestRun:
    """Tests for MarqueeRunner.run()."""

    def test_single_pass_then_exit(self, output_stream):
        runner = _runner(output_stream, render_options={"loop": False})
        asyncio.run(runner.run(_lines("HELLO\n")))

        assert output_stream.getvalue() == "HEL\nELL\nLLO\n"
        assert runner.metrics.ticks == 3
        assert not runner.running

    def test_multi_line_single_pass(self, output_stream):
        runner = _runner(output_stream, multi_line=True, render_options={"loop": False})
        asyncio.run(runner.run(_lines("HELLO\n", "ABCD\n")))

        assert output_stream.getvalue() == "HEL\nABC\nELL\nBCD\nLLO\n"

    def test_no_input(self, output_stream):
        runner = _runner(output_stream)
        asyncio.run(runner.run(_lines()))

        assert output_stream.getvalue() == ""
        assert runner.metrics.ticks == 0

    def test_only_bad_input(self, output_stream):
        runner = _runner(output_stream, json_mode=True)
        asyncio.run(runner.run(_lines("nope\n", "\n")))

        assert output_stream.getvalue() == ""
        assert runner.metrics.decode_errors == 1

    def test_stop_ends_looping_marquee(self, output_stream):
        writer = StoppingWriter(output_stream, limit=6)
        runner = MarqueeRunner(LineRegistry(width=3), writer, delay=0)
        writer.runner = runner

        asyncio.run(runner.run(_lines("HELLO\n")))

        assert output_stream.getvalue().splitlines() == [
            "HEL", "ELL", "LLO", "LOH", "OHE", "HEL",
        ]

    def test_iter_lines_source(self, output_stream):
        runner = _runner(output_stream, render_options={"loop": False})
        asyncio.run(runner.run(iter_lines(["HELLO\n"])))

        assert output_stream.getvalue() == "HEL\nELL\nLLO\n"

    def test_from_settings(self, output_stream):
        settings = Settings(
            render=RenderConfig(width=3, delay_ms=0, loop=False),
            decoration=DecorationConfig(prefix=">", suffix="<"),
            input=InputConfig(json_records=True),
        )
        runner = MarqueeRunner.from_settings(settings, FrameWriter(output_stream))
        asyncio.run(runner.run(_lines('{"content": "HELLO", "prefix": "[", "suffix": "]"}\n')))

        assert output_stream.getvalue() == ">[HEL]<\n>[ELL]<\n>[LLO]<\n"
        assert runner.delay == 0

    def test_run_twice(self, output_stream):
        runner = _runner(output_stream, render_options={"loop": False})
        asyncio.run(runner.run(_lines("HELLO\n")))
        asyncio.run(runner.run(_lines("ABCD\n")))

        assert output_stream.getvalue() == "HEL\nELL\nLLO\nABC\nBCD\n"
