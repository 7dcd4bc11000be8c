"""Summary of the data event mixed into a simulated one."""

from __future__ import annotations

from dataclasses import dataclass

_UINT32_MAX = 2**32 - 1
_UINT64_MAX = 2**64 - 1


@dataclass(frozen=True)
class EventMixingSummary:
    """Identity and time stamp of the event used for overlay."""

    event: int = 0
    subrun: int = 0
    run: int = 0
    timestamp: int = 0

    def __post_init__(self) -> None:
        for name in ("event", "subrun", "run"):
            value = getattr(self, name)
            if not 0 <= value <= _UINT32_MAX:
                raise ValueError(f"{name} must fit in 32 unsigned bits, got {value}")
        if not 0 <= self.timestamp <= _UINT64_MAX:
            raise ValueError(
                f"timestamp must fit in 64 unsigned bits, got {self.timestamp}"
            )