"""Default clock for the external address cache."""

from __future__ import annotations

import time


class MonotonicClock:
    """Reads ``time.monotonic``; immune to wall-clock adjustments."""

    def now(self) -> float:
        return time.monotonic()
