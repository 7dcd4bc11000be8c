"""Cross-section analysis records: flash matches, MC labels, selection results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

UNSET = -8888.0
"""Value of a flash-match quantity that was never filled."""


class TPCObjectOrigin(IntEnum):
    """Origin of a TPC object (simulation only)."""

    UNKNOWN = -1
    BEAM_NEUTRINO = 0
    COSMIC_RAY = 1
    MIXED = 2


class TPCObjectOriginExtra(IntEnum):
    """Finer classification of a TPC object's origin."""

    NOT_SET = -1
    STOPPING_MUON = 0
    ACPT = 1
    NC_PION = 2
    NC_PROTON = 3


@dataclass
class FlashMatch:
    """Result of matching a TPC object to an optical flash."""

    score: float = UNSET
    tpc_x: float = UNSET
    estimated_x: float = UNSET
    t0: float = UNSET
    hypo_flash_spec: list[float] = field(default_factory=list)
    reco_flash_spec: list[float] = field(default_factory=list)
    mc_flash_spec: list[float] = field(default_factory=list)
    xfixed_hypo_flash_spec: list[float] = field(default_factory=list)
    xfixed_chi2: float = UNSET
    xfixed_ll: float = UNSET

    def __post_init__(self) -> None:
        for name in (
            "hypo_flash_spec",
            "reco_flash_spec",
            "mc_flash_spec",
            "xfixed_hypo_flash_spec",
        ):
            setattr(self, name, [float(v) for v in getattr(self, name)])


@dataclass
class MCGhost:
    """Label carrying how a particle was matched in simulation."""

    mode: str = "unknown"


@dataclass
class SelectionResult:
    """Outcome of an event selection and the effect of each of its cuts."""

    selection_type: str = ""
    selection_status: bool = False
    failure_reason: str = ""
    cut_flow_status: dict[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.cut_flow_status = dict(self.cut_flow_status)