"""Time sources implementing the DurationSinceEpoch protocol."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True, slots=True)
class SystemDuration:
    """Duration since the epoch captured from the system clock.

    The value is taken once by ``now()``; repeated ``as_secs()`` calls on the
    same instance always agree.
    """

    since_epoch: timedelta

    @classmethod
    def now(cls) -> SystemDuration:
        return cls(timedelta(microseconds=time.time_ns() // 1_000))

    def as_secs(self) -> int:
        return self.since_epoch // timedelta(seconds=1)

    def as_millis(self) -> int:
        return self.as_secs() * 1000 + self.since_epoch.microseconds // 1000


@dataclass(frozen=True, slots=True)
class FixedDuration:
    """A fixed point in time, for tests and replayed requests.

    Attributes:
        secs: Whole seconds since the Unix epoch.
        millis: Sub-second milliseconds (0-999).
    """

    secs: int
    millis: int = 0

    def __post_init__(self) -> None:
        if self.secs < 0:
            raise ValueError(f"secs must not be negative, got {self.secs}")
        if not 0 <= self.millis < 1000:
            raise ValueError(f"millis must be in [0, 1000), got {self.millis}")

    @classmethod
    def from_millis(cls, millis: int) -> FixedDuration:
        secs, rem = divmod(millis, 1000)
        return cls(secs=secs, millis=rem)

    def as_secs(self) -> int:
        return self.secs

    def as_millis(self) -> int:
        return self.secs * 1000 + self.millis
