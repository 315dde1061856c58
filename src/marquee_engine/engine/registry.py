"""
Line Registry
=============

Holds one MarqueeSequencer per input record and ticks them together.

Design Rules:
    - Sequencers advance independently; no state is shared between them
    - tick_all() returns frames in registration order
    - Deactivated handles are skipped without disturbing the others
    - A single-pass marquee is deactivated after its last frame
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Optional

from marquee_engine.engine.sequencer import Decoration, MarqueeSequencer
from marquee_engine.models.spec import MarqueeSpec


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SequencerHandle:
    """
    Opaque reference to a registered sequencer.

    Attributes:
        id: Registration number, increasing in registration order
    """

    id: int


class LineRegistry:
    """
    Ordered collection of independently advancing marquees.

    Attributes:
        width: Default window width handed to every sequencer
        decoration: Global prefix/suffix applied to every frame

    Example:
        registry = LineRegistry(width=10)
        first = registry.add(MarqueeSpec(content="first line"))
        second = registry.add(MarqueeSpec(content="second line"))

        frames = registry.tick_all()  # [frame of first, frame of second]

        registry.deactivate(first)
        frames = registry.tick_all()  # [frame of second]
    """

    def __init__(
        self,
        width: Optional[int] = None,
        decoration: Optional[Decoration] = None,
    ) -> None:
        self.width = width
        self.decoration = decoration or Decoration()

        self._sequencers: dict[SequencerHandle, MarqueeSequencer] = {}
        self._active: list[SequencerHandle] = []
        self._ids = itertools.count()
        self._total_added: int = 0
        self._total_ticks: int = 0

    def __len__(self) -> int:
        """Number of active sequencers."""
        return len(self._active)

    @property
    def active_handles(self) -> list[SequencerHandle]:
        return list(self._active)

    def add(self, spec: MarqueeSpec) -> SequencerHandle:
        """
        Register a new sequencer for spec, starting at cursor 0.

        Returns:
            Handle identifying the new sequencer
        """
        handle = SequencerHandle(id=next(self._ids))
        self._sequencers[handle] = MarqueeSequencer(
            spec,
            width=self.width,
            decoration=self.decoration,
        )
        self._active.append(handle)
        self._total_added += 1
        logger.debug(f"Registered marquee {handle.id} ({len(self._active)} active)")
        return handle

    def get(self, handle: SequencerHandle) -> MarqueeSequencer:
        """
        Look up the sequencer for a handle.

        Raises:
            KeyError: If the handle was never registered here
        """
        return self._sequencers[handle]

    def is_active(self, handle: SequencerHandle) -> bool:
        return handle in self._active

    def deactivate(self, handle: SequencerHandle) -> bool:
        """
        Exclude a handle from subsequent ticks and release its sequencer.

        Returns:
            True if the handle was active, False otherwise.
        """
        if handle not in self._active:
            return False
        self._active.remove(handle)
        del self._sequencers[handle]
        logger.debug(f"Deactivated marquee {handle.id} ({len(self._active)} active)")
        return True

    def replace(self, spec: MarqueeSpec) -> SequencerHandle:
        """Deactivate every active marquee and register spec in their place."""
        for handle in list(self._active):
            self.deactivate(handle)
        return self.add(spec)

    def tick_all(self, width: Optional[int] = None) -> list[str]:
        """
        Advance every active sequencer once.

        Args:
            width: Window width for this tick. Defaults to the
                registry width.

        Returns:
            One frame per active sequencer, in registration order

        Raises:
            ValueError: If a rotating marquee has no width or the width
                is negative. No sequencer is advanced in that case.
        """
        if width is None:
            width = self.width
        if width is not None and width < 0:
            raise ValueError("width must be >= 0")
        if width is None and any(
            not self._sequencers[handle].is_static for handle in self._active
        ):
            raise ValueError("no width given for this tick")

        self._total_ticks += 1
        frames = []
        finished = []
        for handle in self._active:
            sequencer = self._sequencers[handle]
            frames.append(sequencer.next_frame(width))
            if sequencer.exhausted:
                finished.append(handle)

        for handle in finished:
            self.deactivate(handle)

        return frames

    def metrics(self) -> dict:
        """
        Get registry metrics for observability.

        Returns:
            Dict with active, total_added, total_ticks
        """
        return {
            "active": len(self._active),
            "total_added": self._total_added,
            "total_ticks": self._total_ticks,
        }
