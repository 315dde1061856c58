"""
marquee-engine
==============

Scrolling-text marquee for the terminal.

Reads lines (plain text or JSON records) and prints a fixed-width window
sliding over each of them, optionally wrapped in a static prefix and
suffix.

Components:
    - engine: window computation, per-marquee sequencer, line registry
    - models: MarqueeSpec / MarqueeRecord and error types
    - driver: input decoding, pacing and terminal output
    - config: YAML + environment configuration and logging setup
    - cli: the `marquee` command

Example:
    from marquee_engine.engine import MarqueeSequencer
    from marquee_engine.models import MarqueeSpec

    sequencer = MarqueeSequencer(MarqueeSpec(content="HELLO"), width=3)
    print(sequencer.next_frame())  # HEL
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
