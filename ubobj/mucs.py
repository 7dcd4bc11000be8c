"""Records of the muon counter system (MuCS)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

ADC_CHANNELS = 24


@dataclass
class MuCSDTOffset:
    """Time offset between the muon counter system and the detector."""

    offset: float = 0.0


def _adc_field() -> list[float]:
    return field(default_factory=lambda: [0.0] * ADC_CHANNELS)


@dataclass
class MuCSData:
    """Raw readout of the four MuCS groups: event time, ADC values and hits."""

    t0: float = 0.0
    adc1: list[float] = _adc_field()
    adc2: list[float] = _adc_field()
    adc3: list[float] = _adc_field()
    adc7: list[float] = _adc_field()
    hits1: list[int] = field(default_factory=list)
    hits2: list[int] = field(default_factory=list)
    hits3: list[int] = field(default_factory=list)
    hits7: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        for name in ("adc1", "adc2", "adc3", "adc7"):
            values = list(getattr(self, name))
            if len(values) != ADC_CHANNELS:
                raise ValueError(
                    f"{name} must hold {ADC_CHANNELS} values, got {len(values)}"
                )
            setattr(self, name, values)
        for name in ("hits1", "hits2", "hits3", "hits7"):
            setattr(self, name, list(getattr(self, name)))


def _inverse_square(value: float) -> float:
    return math.inf if value == 0 else value ** -2


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass
class MuCSRecoData:
    """Reconstructed MuCS track: projected angles, positions and match counts."""

    theta_xy: float = 0.0
    theta_xy_rms: float = 0.0
    x: float = 0.0
    x_rms: float = 0.0
    theta_yz: float = 0.0
    theta_yz_rms: float = 0.0
    z: float = 0.0
    z_rms: float = 0.0
    y: float = 0.0
    xmatches: int = 0
    zmatches: int = 0

    def theta(self) -> float:
        """Polar angle computed from the two projected angles."""
        total = (
            1
            + _inverse_square(math.tan(self.theta_xy))
            + _inverse_square(math.tan(self.theta_yz))
        )
        return -math.pi / 2 + math.acos(total ** -0.5)

    def phi(self) -> float:
        """Azimuthal angle computed from the two projected angles."""
        sin_theta = math.sin(self.theta())
        return math.atan2(
            _divide(sin_theta, math.tan(self.theta_yz)),
            _divide(sin_theta, math.tan(self.theta_xy)),
        )