"""Records produced by the cosmic-ray tagger (CRT)."""

from __future__ import annotations

from dataclasses import dataclass, field

N_PLANES = 4


@dataclass
class CRTSimData:
    """Simulated or measured response of one CRT channel."""

    channel: int = 0
    t0: int = 0
    t1: int = 0
    adc: int = 0
    track_id: int = -1


@dataclass
class CRTHit:
    """A reconstructed hit in one CRT plane."""

    feb_id: list[int] = field(default_factory=list)
    pesmap: dict[int, list[tuple[int, float]]] = field(default_factory=dict)
    peshit: float = 0.0
    ts0_s: int = 0
    ts0_s_corr: int = 0
    ts0_ns: int = 0
    ts0_ns_corr: int = 0
    ts1_ns: int = 0
    plane: int = 0
    x_pos: float = 0.0
    x_err: float = 0.0
    y_pos: float = 0.0
    y_err: float = 0.0
    z_pos: float = 0.0
    z_err: float = 0.0


@dataclass
class CRTTrack:
    """A track built from two CRT hits in different planes."""

    feb_id: list[int] = field(default_factory=list)
    pesmap: dict[int, list[tuple[int, float]]] = field(default_factory=dict)
    peshit: float = 0.0
    ts0_s: int = 0
    ts0_s_err: int = 0
    ts0_ns: int = 0
    ts0_ns_err: int = 0
    ts1_ns: int = 0
    ts1_ns_err: int = 0
    plane1: int = 0
    plane2: int = 0
    x1_pos: float = 0.0
    x1_err: float = 0.0
    y1_pos: float = 0.0
    y1_err: float = 0.0
    z1_pos: float = 0.0
    z1_err: float = 0.0
    x2_pos: float = 0.0
    x2_err: float = 0.0
    y2_pos: float = 0.0
    y2_err: float = 0.0
    z2_pos: float = 0.0
    z2_err: float = 0.0
    length: float = 0.0
    thetaxy: float = 0.0
    phizy: float = 0.0
    ts0_ns_h1: int = 0
    ts0_ns_err_h1: int = 0
    ts0_ns_h2: int = 0
    ts0_ns_err_h2: int = 0


@dataclass
class CRTTzero:
    """An event time found from CRT hits, with per-plane hit counts and charge."""

    ts0_s: int = 0
    ts0_s_err: int = 0
    ts0_ns: int = 0
    ts0_ns_err: int = 0
    ts1_ns: int = 0
    ts1_ns_err: int = 0
    nhits: list[int] = field(default_factory=lambda: [0] * N_PLANES)
    pes: list[float] = field(default_factory=lambda: [0.0] * N_PLANES)

    def __post_init__(self) -> None:
        self.nhits = list(self.nhits)
        self.pes = list(self.pes)
        if len(self.nhits) != N_PLANES:
            raise ValueError(f"nhits must hold {N_PLANES} values, got {len(self.nhits)}")
        if len(self.pes) != N_PLANES:
            raise ValueError(f"pes must hold {N_PLANES} values, got {len(self.pes)}")