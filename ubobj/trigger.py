"""Hardware trigger bits and the results of the software trigger algorithms."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Union

NOT_FOUND = -999
"""Index reported for an algorithm that is not present."""

_MISSING_MESSAGE = "asked for information on a trigger algorithm that isn't present"


class UBTrigger(IntEnum):
    """Bit positions in the detector trigger word."""

    PMT_TRIGGER_BEAM = 0
    PMT_TRIGGER_COSMIC = 1
    PMT_TRIGGER = 7
    TRIGGER_PC = 8
    TRIGGER_EXT = 9
    ACTIVE = 10
    TRIGGER_BNB = 11
    TRIGGER_NUMI = 12
    VETO = 13
    TRIGGER_CALIB = 14
    FAKE_GATE = 17
    FAKE_BEAM = 18
    SPARE = 19


class MissingAlgorithmWarning(UserWarning):
    """Issued when a trigger algorithm is asked for that is not present."""


@dataclass(frozen=True)
class _Algorithm:
    name: str
    passed: bool
    passed_prescale: bool
    phmax: int
    multiplicity: int
    trigger_tick: int
    trigger_time: float
    prescale: float


Algo = Union[str, int]


class SoftwareTriggerData:
    """Per-algorithm outcome of the software trigger for one event.

    Algorithms are addressed either by name or by their position in the order
    they were added. Asking for an algorithm that is not present issues a
    MissingAlgorithmWarning and yields the default value of the quantity.
    """

    def __init__(self) -> None:
        self._algorithms: list[_Algorithm] = []

    def add_algorithm(
        self,
        name: str,
        passed: bool,
        passed_prescale: bool,
        phmax: int,
        multiplicity: int,
        trigger_tick: int,
        trigger_time: float,
        prescale: float,
    ) -> None:
        """Record the result of one algorithm.

        phmax is the largest ADC sum and multiplicity the PMT multiplicity at
        the firing time; trigger_tick counts ticks since the beam gate opened;
        trigger_time is the time since the hardware trigger in microseconds;
        1/prescale is the fraction of events let through.
        """
        self._algorithms.append(
            _Algorithm(
                name=name,
                passed=bool(passed),
                passed_prescale=bool(passed_prescale),
                phmax=int(phmax),
                multiplicity=int(multiplicity),
                trigger_tick=int(trigger_tick),
                trigger_time=float(trigger_time),
                prescale=float(prescale),
            )
        )

    def algorithm_names(self) -> list[str]:
        """Names of the recorded algorithms, in the order they were added."""
        return [algorithm.name for algorithm in self._algorithms]

    def __len__(self) -> int:
        return len(self._algorithms)

    def index_of(self, name: str) -> int:
        """Position of the named algorithm, or NOT_FOUND with a warning."""
        for index, algorithm in enumerate(self._algorithms):
            if algorithm.name == name:
                return index
        warnings.warn(_MISSING_MESSAGE, MissingAlgorithmWarning, stacklevel=2)
        return NOT_FOUND

    def _entry(self, algo: Algo) -> _Algorithm | None:
        index = self.index_of(algo) if isinstance(algo, str) else algo
        if 0 <= index < len(self._algorithms):
            return self._algorithms[index]
        warnings.warn(_MISSING_MESSAGE, MissingAlgorithmWarning, stacklevel=3)
        return None

    def passed(self, algo: Algo) -> bool:
        """Whether the algorithm passed."""
        entry = self._entry(algo)
        return entry.passed if entry else False

    def passed_prescale(self, algo: Algo) -> bool:
        """Whether the algorithm passed its prescale."""
        entry = self._entry(algo)
        return entry.passed_prescale if entry else False

    def vetoed(self, algo: Algo) -> bool:
        """Whether the algorithm did not pass."""
        return not self.passed(algo)

    def passed_any(self, algos: Iterable[Algo]) -> bool:
        """Whether any of the algorithms passed; true for an empty list."""
        algos = list(algos)
        return any(self.passed(algo) for algo in algos) or not algos

    def passed_prescale_any(self, algos: Iterable[Algo]) -> bool:
        """Whether any of the algorithms passed its prescale; true for an empty list."""
        algos = list(algos)
        return any(self.passed_prescale(algo) for algo in algos) or not algos

    def vetoed_all(self, algos: Iterable[Algo]) -> bool:
        """The negation of passed_any."""
        return not self.passed_any(algos)

    def phmax(self, algo: Algo) -> int:
        """Largest ADC sum at the software trigger firing time."""
        entry = self._entry(algo)
        return entry.phmax if entry else 0

    def multiplicity(self, algo: Algo) -> int:
        """Multiplicity at the software trigger firing time."""
        entry = self._entry(algo)
        return entry.multiplicity if entry else 0

    def trigger_tick(self, algo: Algo) -> int:
        """Ticks since the beam gate opened."""
        entry = self._entry(algo)
        return entry.trigger_tick if entry else 0

    def time_since_trigger(self, algo: Algo) -> float:
        """Time since the hardware trigger, in microseconds."""
        entry = self._entry(algo)
        return entry.trigger_time if entry else -999.0

    def algorithm_name(self, index: int) -> str:
        """Name of the algorithm at the given position, or an empty string."""
        entry = self._entry(index)
        return entry.name if entry else ""

    def prescale(self, algo: Algo) -> float:
        """Prescale weight of the algorithm."""
        entry = self._entry(algo)
        return entry.prescale if entry else 1.0