"""
Line Sources
============

Async iterators over input lines.

Standard input is read by a daemon thread so that a blocked read
never keeps the process alive after the marquee stops.
"""

import asyncio
import logging
import sys
import threading
from typing import AsyncIterator, Iterable, Optional, TextIO


logger = logging.getLogger(__name__)


async def stdin_lines(stream: Optional[TextIO] = None) -> AsyncIterator[str]:
    """
    Yield lines from a blocking text stream (stdin by default).

    Ends when the stream reaches EOF.
    """
    stream = stream if stream is not None else sys.stdin
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[Optional[str]] = asyncio.Queue()

    def _put(item: Optional[str]) -> bool:
        try:
            loop.call_soon_threadsafe(queue.put_nowait, item)
        except RuntimeError:
            # Event loop already closed, nobody is listening
            return False
        return True

    def _pump() -> None:
        try:
            for line in stream:
                if not _put(line):
                    return
        except (OSError, ValueError) as e:
            logger.error(f"Failed while reading input: {e}")
        _put(None)

    threading.Thread(target=_pump, name="stdin_reader", daemon=True).start()

    while True:
        line = await queue.get()
        if line is None:
            logger.debug("Input closed")
            return
        yield line


async def iter_lines(lines: Iterable[str]) -> AsyncIterator[str]:
    """Yield lines from an in-memory iterable, letting the loop run between them."""
    for line in lines:
        yield line
        await asyncio.sleep(0)
