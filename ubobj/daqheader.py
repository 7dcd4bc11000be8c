"""Extended DAQ header: GPS and host event times, PPS and trigger clocks."""

from __future__ import annotations

from dataclasses import dataclass

_UINT16_BITS = 16
_UINT32_BITS = 32

_FIELD_BITS = {
    "pps_sec": _UINT32_BITS,
    "pps_micro": _UINT32_BITS,
    "pps_nano": _UINT32_BITS,
    "trig_frame": _UINT32_BITS,
    "trig_sample": _UINT16_BITS,
    "trig_div": _UINT16_BITS,
    "trig_pps_frame": _UINT32_BITS,
    "trig_pps_sample": _UINT16_BITS,
    "trig_pps_div": _UINT16_BITS,
}


def _check(name: str, value: int) -> int:
    bits = _FIELD_BITS[name]
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{name} must fit in {bits} unsigned bits, got {value}")
    return value


@dataclass
class DAQHeaderTime:
    """Event time stamps from the DAQ.

    gps_time and ntp_time pack (seconds, nanoseconds) into their high and low
    halves. Frames last 1.6 ms, samples run at 2 MHz and divisions at 16 MHz.
    """

    gps_time: int = 0
    ntp_time: int = 0
    pps_sec: int = 0
    pps_micro: int = 0
    pps_nano: int = 0
    trig_frame: int = 0
    trig_sample: int = 0
    trig_div: int = 0
    trig_pps_frame: int = 0
    trig_pps_sample: int = 0
    trig_pps_div: int = 0

    def __post_init__(self) -> None:
        for name in _FIELD_BITS:
            _check(name, getattr(self, name))

    def set_pps_time(self, sec: int, micro: int, nano: int) -> None:
        """Set the GPS pulse-per-second time."""
        self.pps_sec = _check("pps_sec", sec)
        self.pps_micro = _check("pps_micro", micro)
        self.pps_nano = _check("pps_nano", nano)

    def set_trig_time(self, frame: int, sample: int, div: int) -> None:
        """Set the trigger time of the event."""
        self.trig_frame = _check("trig_frame", frame)
        self.trig_sample = _check("trig_sample", sample)
        self.trig_div = _check("trig_div", div)

    def set_trig_pps_time(self, frame: int, sample: int, div: int) -> None:
        """Set the trigger-clock time of the pulse-per-second."""
        self.trig_pps_frame = _check("trig_pps_frame", frame)
        self.trig_pps_sample = _check("trig_pps_sample", sample)
        self.trig_pps_div = _check("trig_pps_div", div)