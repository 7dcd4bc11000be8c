"""Optical reconstruction records: PMT flashes, sub-events and filter results."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, Sequence, TypeVar


class SortMethod(IntEnum):
    """Order in which a flash or sub-event list was last sorted."""

    UNSORTED = -1
    BY_TIME = 0
    BY_CHARGE = 1
    BY_AMP = 2


@dataclass
class Flash:
    """A flash seen on one PMT channel, with its waveform and expected shape."""

    ch: int = 0
    tstart: int = 0
    tend: int = 0
    tmax: int = 0
    maxamp: float = 0.0
    expectation: list[float] = field(default_factory=list)
    waveform: list[float] = field(default_factory=list)
    area: float = 0.0
    area30: float = 0.0
    fcomp_gausintegral: float = 0.0
    claimed: bool = False

    def __post_init__(self) -> None:
        self.store_waveform(self.waveform)
        self.store_expectation(self.expectation)

    def store_waveform(self, waveform: Iterable[float]) -> None:
        """Replace the stored waveform with a copy of the given samples."""
        self.waveform = [float(sample) for sample in waveform]

    def store_expectation(self, expectation: Iterable[float]) -> None:
        """Replace the stored expected shape with a copy of the given values."""
        self.expectation = [float(value) for value in expectation]

    def copy(self) -> Flash:
        """Return an independent copy of this flash."""
        return _copy.deepcopy(self)


_Item = TypeVar("_Item")


def _checked_get(items: Sequence[_Item], index: int) -> _Item:
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"index must be an integer, got {type(index).__name__}")
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range for {len(items)} items")
    return items[index]


class FlashList:
    """An ordered collection of flashes that remembers how it was last sorted."""

    def __init__(self) -> None:
        self._flashes: list[Flash] = []
        self.sort_method = SortMethod.UNSORTED

    def add(self, flash: Flash) -> int:
        """Append a flash and return the new number of flashes."""
        self._flashes.append(flash)
        return len(self._flashes)

    def transfer_flash(self, flash: Flash) -> None:
        """Take ownership of a flash by appending it."""
        self.add(flash)

    def clear(self) -> None:
        """Remove all flashes."""
        self._flashes.clear()

    def sort_by_time(self) -> None:
        """Sort in increasing start time."""
        self._flashes.sort(key=lambda flash: flash.tstart)
        self.sort_method = SortMethod.BY_TIME

    def sort_by_charge(self) -> None:
        """Sort in increasing area."""
        self._flashes.sort(key=lambda flash: flash.area)
        self.sort_method = SortMethod.BY_CHARGE

    def sort_by_amp(self) -> None:
        """Sort in increasing peak amplitude."""
        self._flashes.sort(key=lambda flash: flash.maxamp)
        self.sort_method = SortMethod.BY_AMP

    def sorted_by_time(self) -> bool:
        return self.sort_method is SortMethod.BY_TIME

    def sorted_by_charge(self) -> bool:
        return self.sort_method is SortMethod.BY_CHARGE

    def sorted_by_amp(self) -> bool:
        return self.sort_method is SortMethod.BY_AMP

    def __len__(self) -> int:
        return len(self._flashes)

    def __iter__(self) -> Iterator[Flash]:
        return iter(self._flashes)

    def __getitem__(self, index: int) -> Flash:
        return _checked_get(self._flashes, index)


@dataclass
class SubEvent:
    """A group of flashes forming one optical sub-event."""

    tstart_sample: int = -1
    tend_sample: int = -1
    tmax_sample: int = 0
    tstart_ns: float = 0.0
    tend_ns: float = 0.0
    tmax_ns: float = 0.0
    maxamp: float = 0.0
    totpe: float = 0.0
    pe30: float = 0.0
    totpe_1: float = 0.0
    pe30_1: float = 0.0
    sumflash30: float = 0.0
    sumfcomp_gausintegral: float = 0.0
    runid: int = 0
    subrunid: int = 0
    eventid: int = 0
    flashes: FlashList = field(default_factory=FlashList)
    flashes_pass2: FlashList = field(default_factory=FlashList)

    def transfer_flashes(self, flashes: FlashList) -> None:
        """Move every flash of the given list into this sub-event's first-pass flashes."""
        if flashes is self.flashes:
            return
        for flash in flashes:
            self.flashes.add(flash)
        flashes.clear()


class SubEventList:
    """An ordered collection of sub-events that remembers how it was last sorted."""

    def __init__(self) -> None:
        self._subevents: list[SubEvent] = []
        self.sort_method = SortMethod.UNSORTED

    def add(self, subevent: SubEvent) -> int:
        """Append a sub-event and return the new number of sub-events."""
        self._subevents.append(subevent)
        return len(self._subevents)

    def clear(self) -> None:
        """Remove all sub-events."""
        self._subevents.clear()

    def sort_by_time(self) -> None:
        """Sort in increasing start time."""
        self._subevents.sort(key=lambda subevent: subevent.tstart_ns)
        self.sort_method = SortMethod.BY_TIME

    def sort_by_charge(self) -> None:
        """Sort in increasing total photoelectrons."""
        self._subevents.sort(key=lambda subevent: subevent.totpe)
        self.sort_method = SortMethod.BY_CHARGE

    def sort_by_amp(self) -> None:
        """Sort in increasing peak amplitude."""
        self._subevents.sort(key=lambda subevent: subevent.maxamp)
        self.sort_method = SortMethod.BY_AMP

    def sorted_by_time(self) -> bool:
        return self.sort_method is SortMethod.BY_TIME

    def sorted_by_charge(self) -> bool:
        return self.sort_method is SortMethod.BY_CHARGE

    def sorted_by_amp(self) -> bool:
        return self.sort_method is SortMethod.BY_AMP

    def __len__(self) -> int:
        return len(self._subevents)

    def __iter__(self) -> Iterator[SubEvent]:
        return iter(self._subevents)

    def __getitem__(self, index: int) -> SubEvent:
        return _checked_get(self._subevents, index)


@dataclass(frozen=True)
class UbooneOpticalFilter:
    """Summary of the common optical filter.

    pe_beam and pe_veto integrate photoelectrons in bins above threshold in the
    beam and veto windows; the *_total values integrate all bins;
    pmt_max_fraction is the largest share of photoelectrons in a single PMT.
    """

    pe_beam: float = -999.0
    pe_veto: float = -999.0
    pmt_max_fraction: float = -999.0
    pe_beam_total: float = -999.0
    pe_veto_total: float = -999.0