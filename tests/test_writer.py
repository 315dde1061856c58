"""
Frame Writer Tests
==================
"""

from marquee_engine.driver.writer import FrameWriter


class TestFrameWriter:
    """Tests for FrameWriter output modes."""

    def test_one_frame_per_line(self, output_stream):
        writer = FrameWriter(output_stream)
        writer.write("HEL")
        writer.write("ELL")
        writer.finish()
        assert output_stream.getvalue() == "HEL\nELL\n"
        assert writer.frames_written == 2

    def test_same_line(self, output_stream):
        writer = FrameWriter(output_stream, same_line=True)
        writer.write("HEL")
        writer.write("ELL")
        assert output_stream.getvalue() == "\rHEL\rELL"

    def test_same_line_pads_shorter_frame(self, output_stream):
        writer = FrameWriter(output_stream, same_line=True)
        writer.write("longer frame")
        writer.write("short")
        assert output_stream.getvalue() == "\rlonger frame\rshort       "

    def test_same_line_finish(self, output_stream):
        writer = FrameWriter(output_stream, same_line=True)
        writer.write("HEL")
        writer.finish()
        assert output_stream.getvalue() == "\rHEL\n"

    def test_finish_without_frames(self, output_stream):
        writer = FrameWriter(output_stream, same_line=True)
        writer.finish()
        assert output_stream.getvalue() == ""

    def test_write_all(self, output_stream):
        writer = FrameWriter(output_stream)
        writer.write_all(["HEL", "WOR"])
        writer.write_all([])
        assert output_stream.getvalue() == "HEL\nWOR\n"
        assert writer.frames_written == 1
