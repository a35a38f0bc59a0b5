"""
Scheduled events consumed by the tick loop.

Timers in the wave engine (periodic re-targeting) are queue entries rather
than background callbacks. The driver drains due entries once per tick, so
cancelling a timer is just removing its entries from the queue.
"""

import heapq
import itertools
import time
from typing import Any, Callable, List, Optional, Tuple


Effect = Callable[[Any, float], None]


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.monotonic() * 1000.0


class EventScheduler:
    """Priority queue of ``(fire_at, handle, effect)`` entries.

    Effects are called as ``effect(obj, now)`` where ``obj`` is what the
    handle resolves to at fire time. Entries whose handle no longer
    resolves are dropped silently.

    Examples:
        >>> fired = []
        >>> scheduler = EventScheduler()
        >>> scheduler.schedule(100.0, 7, lambda obj, now: fired.append((obj, now)))
        >>> scheduler.run_due(50.0, {7: "alien"}.get)
        0
        >>> scheduler.run_due(120.0, {7: "alien"}.get)
        1
        >>> fired
        [('alien', 120.0)]
    """

    def __init__(self):
        self._queue: List[Tuple[float, int, int, Effect]] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def next_fire_at(self) -> Optional[float]:
        """Time of the earliest pending entry, or None when empty."""
        return self._queue[0][0] if self._queue else None

    def schedule(self, fire_at: float, handle: int, effect: Effect) -> None:
        """Queue ``effect`` for ``handle`` at time ``fire_at``.

        Entries with equal fire times run in scheduling order.
        """
        heapq.heappush(self._queue, (fire_at, next(self._sequence), handle, effect))

    def cancel(self, handle: int) -> int:
        """Drop every pending entry for ``handle``.

        Returns:
            Number of entries removed
        """
        before = len(self._queue)
        self._queue = [entry for entry in self._queue if entry[2] != handle]
        heapq.heapify(self._queue)
        return before - len(self._queue)

    def pending_for(self, handle: int) -> int:
        """Count pending entries for ``handle``."""
        return sum(1 for entry in self._queue if entry[2] == handle)

    def run_due(self, now: float, lookup: Callable[[int], Any]) -> int:
        """Fire every entry due at or before ``now``, earliest first.

        Effects may schedule new entries; those run in this call only if
        they are already due.

        Args:
            now: Current time
            lookup: Resolves a handle to its owner, returning None if gone

        Returns:
            Number of effects fired
        """
        fired = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, handle, effect = heapq.heappop(self._queue)
            owner = lookup(handle)
            if owner is None:
                continue
            effect(owner, now)
            fired += 1
        return fired

    def shift(self, delta: float) -> None:
        """Move every pending entry ``delta`` later (relative order is kept)."""
        self._queue = [
            (fire_at + delta, seq, handle, effect)
            for fire_at, seq, handle, effect in self._queue
        ]

    def clear(self) -> None:
        self._queue.clear()

