"""
Engine Module
=============

The marquee rendering engine.

This module provides three layers, leaf first:
    - frame: window()/advance()/retreat() pure functions
    - MarqueeSequencer: decorated frames for one marquee
    - LineRegistry: one sequencer per input record, ticked together

Example:
    from marquee_engine.engine import LineRegistry
    from marquee_engine.models import MarqueeSpec

    registry = LineRegistry(width=20)
    registry.add(MarqueeSpec(content="Hello, world!", separator=" * "))

    while True:
        for frame in registry.tick_all():
            print(frame)
"""

from marquee_engine.engine.frame import advance, retreat, window
from marquee_engine.engine.sequencer import Decoration, MarqueeSequencer
from marquee_engine.engine.registry import LineRegistry, SequencerHandle


__all__ = [
    "window",
    "advance",
    "retreat",
    "Decoration",
    "MarqueeSequencer",
    "LineRegistry",
    "SequencerHandle",
]
